"""SQLAlchemy persistence adapters."""

from .database import create_db_engine, create_session_factory
from .di import PersistenceProvider
from .repository.audit_log import SQLAlchemyAuditLog
from .repository.permission import SQLAlchemyPermissionStore
from .tables import metadata
from .uow import SQLAlchemyUnitOfWork

__all__ = [
    "PersistenceProvider",
    "SQLAlchemyAuditLog",
    "SQLAlchemyPermissionStore",
    "SQLAlchemyUnitOfWork",
    "create_db_engine",
    "create_session_factory",
    "metadata",
]
