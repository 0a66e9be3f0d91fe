"""SQLAlchemy implementation of PermissionStore."""

import logging
from datetime import UTC, datetime

from sqlalchemy import insert, select, update
from sqlalchemy.orm import Session

from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.value import AccountId
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.infrastructure.persistence.database import storage_errors
from rolekeeper.infrastructure.persistence.tables import acl_permissions_table

logger = logging.getLogger(__name__)


class SQLAlchemyPermissionStore(PermissionStore):
    """One ``acl_permissions`` row per principal, keyed under a storage prefix.

    Writes are flushed but not committed; the surrounding unit of work owns
    the transaction.
    """

    def __init__(self, session: Session, prefix: str = "_aclp") -> None:
        self._session = session
        self._prefix = prefix

    def _key(self, account_id: AccountId) -> str:
        return f"{self._prefix}:{account_id}"

    def _load(self, account_id: AccountId) -> PermissionSet | None:
        stmt = select(acl_permissions_table.c.bits).where(
            acl_permissions_table.c.key == self._key(account_id)
        )
        with storage_errors():
            bits = self._session.execute(stmt).scalar_one_or_none()
        return PermissionSet(int(bits)) if bits is not None else None

    def peek(self, account_id: AccountId) -> PermissionSet:
        permissions = self._load(account_id)
        return permissions if permissions is not None else PermissionSet.empty()

    def get_for_mutation(self, account_id: AccountId) -> PermissionSet:
        permissions = self._load(account_id)
        if permissions is not None:
            return permissions
        permissions = PermissionSet.empty()
        self._insert(account_id, permissions)
        return permissions

    def store(self, account_id: AccountId, permissions: PermissionSet) -> None:
        stmt = (
            update(acl_permissions_table)
            .where(acl_permissions_table.c.key == self._key(account_id))
            .values(bits=str(permissions.bits), updated_at=datetime.now(UTC))
        )
        with storage_errors():
            result = self._session.execute(stmt)
            if result.rowcount == 0:
                self._insert(account_id, permissions)
            else:
                self._session.flush()

    def _insert(self, account_id: AccountId, permissions: PermissionSet) -> None:
        stmt = insert(acl_permissions_table).values(
            key=self._key(account_id),
            account_id=str(account_id),
            bits=str(permissions.bits),
            updated_at=datetime.now(UTC),
        )
        with storage_errors():
            self._session.execute(stmt)
            self._session.flush()
        logger.debug("Permission entry created: key=%s", self._key(account_id))
