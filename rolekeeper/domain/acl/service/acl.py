"""Acl: the engine facade exposed to business code."""

from __future__ import annotations

import logging
from enum import Enum

from rolekeeper.domain.acl.model.outcome import Outcome
from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.admin import AdminRegistry
from rolekeeper.domain.acl.service.emitter import (
    EVENT_PREFIX,
    EVENT_STANDARD,
    EVENT_VERSION,
    EventEmitter,
)
from rolekeeper.domain.acl.service.grant import GrantRegistry
from rolekeeper.domain.acl.service.guard import EnforcementGuard

logger = logging.getLogger(__name__)


class Acl:
    """Role-based access control over a fixed role catalog.

    Wires the registries, the guard and the emitter around one
    PermissionStore and one AuditLog. ``Acl(...)`` attaches to existing
    state; ``Acl.new(...)`` additionally bootstraps the creating account as
    admin of every role.

    The engine has no operation that grants the super-admin bit. Deployments
    that need a super-admin write ``PermissionSet.super_admin()`` to the store
    out of band.
    """

    def __init__(
        self,
        catalog: RoleCatalog,
        store: PermissionStore,
        audit_log: AuditLog,
        *,
        event_standard: str = EVENT_STANDARD,
        event_version: str = EVENT_VERSION,
        event_prefix: str = EVENT_PREFIX,
    ) -> None:
        self.catalog = catalog
        self._store = store
        self._emitter = EventEmitter(
            _audit_log=audit_log,
            _standard=event_standard,
            _version=event_version,
            _prefix=event_prefix,
        )
        self.admins = AdminRegistry(_catalog=catalog, _store=store, _emitter=self._emitter)
        self.grants = GrantRegistry(
            _catalog=catalog,
            _store=store,
            _emitter=self._emitter,
            _admins=self.admins,
        )
        self.guard = EnforcementGuard(_catalog=catalog, _store=store)

    @classmethod
    def new(
        cls,
        catalog: RoleCatalog,
        store: PermissionStore,
        audit_log: AuditLog,
        ctx: CallContext,
        **event_options: str,
    ) -> Acl:
        """Create the engine and make ``ctx.predecessor`` admin of every role."""
        acl = cls(catalog, store, audit_log, **event_options)
        acl.bootstrap(ctx)
        return acl

    def bootstrap(self, ctx: CallContext) -> None:
        """Seed the caller as admin of every catalog role (unchecked path)."""
        for role in self.catalog:
            self.admins.add_admin_unchecked(role, ctx.predecessor, ctx)
        logger.info(
            "ACL bootstrapped: admin=%s roles=%s",
            ctx.predecessor,
            [role.name for role in self.catalog],
        )

    # --- Admins ---

    def is_admin(self, role: Enum, account_id: AccountId) -> bool:
        return self.admins.is_admin(role, account_id)

    def add_admin(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        return self.admins.add_admin(role, account_id, ctx)

    def add_admin_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        return self.admins.add_admin_unchecked(role, account_id, ctx)

    def revoke_admin(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        return self.admins.revoke_admin(role, account_id, ctx)

    def revoke_admin_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        return self.admins.revoke_admin_unchecked(role, account_id, ctx)

    def renounce_admin(self, role: Enum, ctx: CallContext) -> bool:
        return self.admins.renounce_admin(role, ctx)

    # --- Grants ---

    def has_role(self, role: Enum, account_id: AccountId) -> bool:
        return self.grants.has_role(role, account_id)

    def grant_role(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        return self.grants.grant_role(role, account_id, ctx)

    def grant_role_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        return self.grants.grant_role_unchecked(role, account_id, ctx)

    def revoke_role(self, role: Enum, account_id: AccountId, ctx: CallContext) -> Outcome:
        return self.grants.revoke_role(role, account_id, ctx)

    def revoke_role_unchecked(self, role: Enum, account_id: AccountId, ctx: CallContext) -> bool:
        return self.grants.revoke_role_unchecked(role, account_id, ctx)

    def renounce_role(self, role: Enum, ctx: CallContext) -> bool:
        return self.grants.renounce_role(role, ctx)

    # --- Enforcement ---

    def check_any(self, required: PermissionSet, account_id: AccountId) -> None:
        self.guard.check_any(required, account_id)

    def check_all(self, required: PermissionSet, account_id: AccountId) -> None:
        self.guard.check_all(required, account_id)
