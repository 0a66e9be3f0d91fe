"""GrantRegistry: which accounts currently hold each role."""

import logging
from enum import Enum

from rolekeeper.domain.acl.event.events import AclEventKind
from rolekeeper.domain.acl.model.outcome import UNAUTHORIZED, Outcome, applied
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.admin import AdminRegistry
from rolekeeper.domain.acl.service.emitter import EventEmitter
from rolekeeper.domain.shared.service import Service

logger = logging.getLogger(__name__)


class GrantRegistry(Service):
    """Grant bookkeeping. Checked operations require admin rights for the role."""

    _catalog: RoleCatalog
    _store: PermissionStore
    _emitter: EventEmitter
    _admins: AdminRegistry

    def has_role(self, role: Enum, account_id: AccountId) -> bool:
        return self._store.peek(account_id).contains(self._catalog.grant_flag(role))

    def grant_role(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        """Grant ``role`` to ``account_id`` if the caller is admin of ``role``.

        Applied(changed) tells whether the role was newly granted.
        """
        if not self._admins.is_admin(role, ctx.predecessor):
            logger.warning(
                "Unauthorized grant_role: role=%s account=%s predecessor=%s",
                role.name,
                account_id,
                ctx.predecessor,
            )
            return UNAUTHORIZED
        return applied(self.grant_role_unchecked(role, account_id, ctx))

    def grant_role_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        flag = self._catalog.grant_flag(role)
        permissions = self._store.get_for_mutation(account_id)
        if permissions.contains(flag):
            return False

        self._store.store(account_id, permissions.insert(flag))
        self._emitter.emit(AclEventKind.ROLE_GRANTED, role, account_id, ctx)
        logger.info(
            "Role granted: role=%s account=%s predecessor=%s",
            role.name,
            account_id,
            ctx.predecessor,
        )
        return True

    def revoke_role(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        """Revoke ``role`` from ``account_id`` if the caller is admin of ``role``.

        Applied(changed) tells whether ``account_id`` held the role before.
        """
        if not self._admins.is_admin(role, ctx.predecessor):
            logger.warning(
                "Unauthorized revoke_role: role=%s account=%s predecessor=%s",
                role.name,
                account_id,
                ctx.predecessor,
            )
            return UNAUTHORIZED
        return applied(self.revoke_role_unchecked(role, account_id, ctx))

    def renounce_role(self, role: Enum, ctx: CallContext) -> bool:
        """Drop ``role`` from the caller. Always permitted."""
        return self.revoke_role_unchecked(role, ctx.predecessor, ctx)

    def revoke_role_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        flag = self._catalog.grant_flag(role)
        permissions = self._store.get_for_mutation(account_id)
        if not permissions.contains(flag):
            return False

        self._store.store(account_id, permissions.remove(flag))
        self._emitter.emit(AclEventKind.ROLE_REVOKED, role, account_id, ctx)
        logger.info(
            "Role revoked: role=%s account=%s predecessor=%s",
            role.name,
            account_id,
            ctx.predecessor,
        )
        return True
