"""Unit of work bound to a SQLAlchemy session."""

import logging

from sqlalchemy.orm import Session

from rolekeeper.domain.shared.uow import UnitOfWork
from rolekeeper.infrastructure.persistence.database import storage_errors

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the session shared by the store and the audit log."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def commit(self) -> None:
        with storage_errors():
            self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
        logger.info("Unit of work rolled back")
