"""ACL domain events."""

from .events import AclEvent, AclEventKind, AclEventMetadata

__all__ = ["AclEvent", "AclEventKind", "AclEventMetadata"]
