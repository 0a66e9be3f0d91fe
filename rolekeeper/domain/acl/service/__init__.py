"""ACL domain services."""

from .acl import Acl
from .admin import AdminRegistry
from .emitter import EventEmitter
from .grant import GrantRegistry
from .guard import EnforcementGuard

__all__ = ["Acl", "AdminRegistry", "EnforcementGuard", "EventEmitter", "GrantRegistry"]
