"""EnforcementGuard: abort a call unless the caller holds the required roles."""

import logging

from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.shared.error import EnforcementError
from rolekeeper.domain.shared.service import Service

logger = logging.getLogger(__name__)


class EnforcementGuard(Service):
    """Pure guards over the PermissionStore: no writes, no events.

    A failed check raises EnforcementError. Run the surrounding call inside a
    UnitOfWork so that effects made earlier in the same call are rolled back.
    """

    _catalog: RoleCatalog
    _store: PermissionStore

    def check_any(self, required: PermissionSet, account_id: AccountId) -> None:
        """Raise EnforcementError unless ``account_id`` holds at least one bit of ``required``."""
        if self._store.peek(account_id).intersects(required):
            return
        names = self._catalog.describe(required)
        logger.warning(
            "Enforcement denied (any): account=%s required=%s", account_id, names
        )
        raise EnforcementError(
            f"Account {account_id} must have at least one role of {names}",
            account_id=str(account_id),
            required=names,
        )

    def check_all(self, required: PermissionSet, account_id: AccountId) -> None:
        """Raise EnforcementError unless ``account_id`` holds every bit of ``required``."""
        if self._store.peek(account_id).contains(required):
            return
        names = self._catalog.describe(required)
        logger.warning(
            "Enforcement denied (all): account=%s required=%s", account_id, names
        )
        raise EnforcementError(
            f"Account {account_id} must have all roles in {names}",
            account_id=str(account_id),
            required=names,
        )
