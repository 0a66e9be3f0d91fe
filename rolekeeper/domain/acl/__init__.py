"""ACL domain: role catalog, permission masks, registries and guards."""

from rolekeeper.domain.acl.model import (
    UNAUTHORIZED,
    AccountId,
    Applied,
    CallContext,
    Outcome,
    PermissionSet,
    RoleCatalog,
    Unauthorized,
)
from rolekeeper.domain.acl.service import Acl

__all__ = [
    "UNAUTHORIZED",
    "AccountId",
    "Acl",
    "Applied",
    "CallContext",
    "Outcome",
    "PermissionSet",
    "RoleCatalog",
    "Unauthorized",
]
