"""EventEmitter: builds audit records and appends them to the audit log."""

import logging
from enum import Enum

from rolekeeper.domain.acl.event.events import AclEvent, AclEventKind, AclEventMetadata
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.shared.service import Service

logger = logging.getLogger(__name__)

EVENT_STANDARD = "nep297"
EVENT_VERSION = "1.0.0"
EVENT_PREFIX = "acl_"


class EventEmitter(Service):
    """Emits one AclEvent per actual bit transition.

    Only the unchecked mutation paths call ``emit``, and only on the branch
    where a bit changed.
    """

    _audit_log: AuditLog
    _standard: str = EVENT_STANDARD
    _version: str = EVENT_VERSION
    _prefix: str = EVENT_PREFIX

    def build(
        self,
        kind: AclEventKind,
        role: Enum,
        account_id: AccountId,
        ctx: CallContext,
    ) -> AclEvent:
        return AclEvent(
            standard=self._standard,
            version=self._version,
            event=kind.event_name(self._prefix),
            data=AclEventMetadata(
                role=role.name,
                account_id=str(account_id),
                predecessor=str(ctx.predecessor),
            ),
        )

    def emit(
        self,
        kind: AclEventKind,
        role: Enum,
        account_id: AccountId,
        ctx: CallContext,
    ) -> AclEvent:
        """Serialize the event and append it to the audit log."""
        event = self.build(kind, role, account_id, ctx)
        record = event.to_json()
        self._audit_log.append(record)
        logger.debug("ACL event emitted: %s", record)
        return event
