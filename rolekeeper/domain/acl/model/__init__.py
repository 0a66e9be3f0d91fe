"""ACL domain models."""

from .outcome import UNAUTHORIZED, Applied, Outcome, Unauthorized
from .permission import MAX_BIT_INDEX, SUPER_ADMIN_BIT, PermissionKind, PermissionSet
from .role import RoleCatalog
from .value import AccountId, CallContext

__all__ = [
    "MAX_BIT_INDEX",
    "SUPER_ADMIN_BIT",
    "UNAUTHORIZED",
    "AccountId",
    "Applied",
    "CallContext",
    "Outcome",
    "PermissionKind",
    "PermissionSet",
    "RoleCatalog",
    "Unauthorized",
]
