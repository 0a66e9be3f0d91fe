"""Journaling unit of work for the in-memory adapters."""

import logging

from rolekeeper.domain.shared.uow import UnitOfWork
from rolekeeper.infrastructure.memory.store import InMemoryAuditLog, InMemoryPermissionStore

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """Snapshots the store and the audit log on entry; restores them on rollback."""

    def __init__(self, store: InMemoryPermissionStore, audit_log: InMemoryAuditLog) -> None:
        self._store = store
        self._audit_log = audit_log
        self._journal: tuple[dict, int] | None = None

    def begin(self) -> None:
        self._journal = (self._store.snapshot(), self._audit_log.snapshot())

    def commit(self) -> None:
        self._journal = None

    def rollback(self) -> None:
        if self._journal is None:
            return
        entries, record_count = self._journal
        self._store.restore(entries)
        self._audit_log.restore(record_count)
        self._journal = None
        logger.info("Unit of work rolled back")
