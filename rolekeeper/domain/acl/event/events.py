"""Audit events emitted by ACL mutations.

Events follow the NEP-297 layout: a namespaced, versioned envelope with an
event name and a ``data`` payload. Records are serialized once and appended
to the audit log; they are never mutated afterwards.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class AclEventKind(StrEnum):
    """State transitions that produce an audit record."""

    ADMIN_ADDED = "admin_added"
    ADMIN_REVOKED = "admin_revoked"
    ROLE_GRANTED = "role_granted"
    ROLE_REVOKED = "role_revoked"

    def event_name(self, prefix: str = "acl_") -> str:
        """Name used in the ``event`` field, e.g. ``acl_role_granted``."""
        return f"{prefix}{self.value}"


class AclEventMetadata(BaseModel):
    """Payload of the ``data`` field."""

    model_config = ConfigDict(frozen=True)

    role: str  # Role name
    account_id: str  # Account whose permissions changed
    predecessor: str  # Account that originated the call


class AclEvent(BaseModel):
    """Immutable audit record of an ACL state change."""

    model_config = ConfigDict(frozen=True)

    standard: str
    version: str
    event: str
    data: AclEventMetadata

    def to_json(self) -> str:
        """Compact JSON with fields in declaration order."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, raw: str) -> "AclEvent":
        return cls.model_validate_json(raw)
