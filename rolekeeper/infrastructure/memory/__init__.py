"""In-memory adapters (tests, embedding without a database)."""

from .store import InMemoryAuditLog, InMemoryPermissionStore
from .uow import InMemoryUnitOfWork

__all__ = ["InMemoryAuditLog", "InMemoryPermissionStore", "InMemoryUnitOfWork"]
