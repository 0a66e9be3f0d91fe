"""SQLAlchemy implementation of AuditLog."""

from datetime import UTC, datetime

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from rolekeeper.domain.acl.event.events import AclEvent
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.infrastructure.persistence.database import storage_errors
from rolekeeper.infrastructure.persistence.tables import acl_events_table


class SQLAlchemyAuditLog(AuditLog):
    """Append-only ``acl_events`` table.

    The raw record is kept verbatim in ``payload``; the other columns are
    denormalized from it for querying.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def append(self, record: str) -> None:
        event = AclEvent.from_json(record)
        stmt = insert(acl_events_table).values(
            standard=event.standard,
            version=event.version,
            event=event.event,
            role=event.data.role,
            account_id=event.data.account_id,
            predecessor=event.data.predecessor,
            payload=record,
            created_at=datetime.now(UTC),
        )
        with storage_errors():
            self._session.execute(stmt)
            self._session.flush()

    def records(self) -> list[str]:
        stmt = select(acl_events_table.c.payload).order_by(acl_events_table.c.seq)
        with storage_errors():
            return list(self._session.execute(stmt).scalars().all())
