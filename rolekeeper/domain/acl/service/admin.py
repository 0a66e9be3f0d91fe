"""AdminRegistry: who may grant and revoke each role."""

import logging
from enum import Enum

from rolekeeper.domain.acl.event.events import AclEventKind
from rolekeeper.domain.acl.model.outcome import UNAUTHORIZED, Outcome, applied
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.emitter import EventEmitter
from rolekeeper.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AdminRegistry(Service):
    """Admin bookkeeping on top of the PermissionStore.

    Holding the super-admin bit makes an account admin of every role, but
    the explicit per-role admin bits are tracked independently of it.
    """

    _catalog: RoleCatalog
    _store: PermissionStore
    _emitter: EventEmitter

    def is_admin(self, role: Enum, account_id: AccountId) -> bool:
        """Whether ``account_id`` is admin of ``role`` (explicitly or as super-admin)."""
        permissions = self._store.peek(account_id)
        return permissions.has_super_admin() or permissions.contains(
            self._catalog.admin_flag(role)
        )

    def add_admin(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        """Make ``account_id`` admin of ``role`` if the caller is admin of ``role``.

        Returns UNAUTHORIZED without touching any state if the caller is not
        an admin; otherwise Applied(changed) where ``changed`` tells whether
        ``account_id`` newly gained admin rights.
        """
        if not self.is_admin(role, ctx.predecessor):
            logger.warning(
                "Unauthorized add_admin: role=%s account=%s predecessor=%s",
                role.name,
                account_id,
                ctx.predecessor,
            )
            return UNAUTHORIZED
        return applied(self.add_admin_unchecked(role, account_id, ctx))

    def add_admin_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        """Set the admin bit of ``role`` for ``account_id`` without checking the caller.

        Returns whether the bit was newly set.
        """
        flag = self._catalog.admin_flag(role)
        permissions = self._store.get_for_mutation(account_id)
        if permissions.contains(flag):
            return False

        self._store.store(account_id, permissions.insert(flag))
        self._emitter.emit(AclEventKind.ADMIN_ADDED, role, account_id, ctx)
        logger.info(
            "Admin added: role=%s account=%s predecessor=%s",
            role.name,
            account_id,
            ctx.predecessor,
        )
        return True

    def revoke_admin(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        """Revoke admin rights for ``role`` from ``account_id``.

        Requires the caller to be admin of ``role``; Applied(changed) tells
        whether ``account_id`` was an admin before the call.
        """
        if not self.is_admin(role, ctx.predecessor):
            logger.warning(
                "Unauthorized revoke_admin: role=%s account=%s predecessor=%s",
                role.name,
                account_id,
                ctx.predecessor,
            )
            return UNAUTHORIZED
        return applied(self.revoke_admin_unchecked(role, account_id, ctx))

    def renounce_admin(self, role: Enum, ctx: CallContext) -> bool:
        """Drop the caller's own admin rights for ``role``. Always permitted."""
        return self.revoke_admin_unchecked(role, ctx.predecessor, ctx)

    def revoke_admin_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        """Clear the admin bit of ``role`` without checking the caller.

        Returns whether the bit was set beforehand. The super-admin bit is
        left untouched.
        """
        flag = self._catalog.admin_flag(role)
        permissions = self._store.get_for_mutation(account_id)
        if not permissions.contains(flag):
            return False

        self._store.store(account_id, permissions.remove(flag))
        self._emitter.emit(AclEventKind.ADMIN_REVOKED, role, account_id, ctx)
        logger.info(
            "Admin revoked: role=%s account=%s predecessor=%s",
            role.name,
            account_id,
            ctx.predecessor,
        )
        return True

