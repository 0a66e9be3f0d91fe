"""ACL domain ports."""

from .audit_log import AuditLog
from .permission_store import PermissionStore

__all__ = ["AuditLog", "PermissionStore"]
