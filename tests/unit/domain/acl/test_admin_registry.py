"""Tests for AdminRegistry."""

from enum import Enum

from rolekeeper.domain.acl.event.events import AclEvent
from rolekeeper.domain.acl.model.outcome import UNAUTHORIZED, Applied
from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.service.admin import AdminRegistry
from rolekeeper.domain.acl.service.emitter import EventEmitter
from rolekeeper.infrastructure.memory import InMemoryAuditLog, InMemoryPermissionStore


class Role(Enum):
    L1 = "l1"
    L2 = "l2"


ALICE = AccountId("alice.near")
BOB = AccountId("bob.near")


def _make_registry() -> tuple[AdminRegistry, InMemoryPermissionStore, InMemoryAuditLog]:
    store = InMemoryPermissionStore()
    audit_log = InMemoryAuditLog()
    registry = AdminRegistry(
        _catalog=RoleCatalog(Role),
        _store=store,
        _emitter=EventEmitter(_audit_log=audit_log),
    )
    return registry, store, audit_log


class TestIsAdmin:
    def test_unknown_account_is_not_admin(self) -> None:
        registry, store, _ = _make_registry()
        assert not registry.is_admin(Role.L1, BOB)
        # Reads never create entries
        assert BOB not in store

    def test_super_admin_is_admin_of_every_role(self) -> None:
        registry, store, _ = _make_registry()
        store.store(ALICE, PermissionSet.super_admin())
        assert registry.is_admin(Role.L1, ALICE)
        assert registry.is_admin(Role.L2, ALICE)

    def test_admin_of_one_role_only(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        assert registry.is_admin(Role.L1, ALICE)
        assert not registry.is_admin(Role.L2, ALICE)


class TestAddAdmin:
    def test_unchecked_sets_bit_and_emits_once(self) -> None:
        registry, store, audit_log = _make_registry()
        assert registry.add_admin_unchecked(Role.L2, BOB, CallContext(ALICE)) is True
        assert store.peek(BOB) == PermissionSet.from_bit(4)

        events = [AclEvent.from_json(r) for r in audit_log.records()]
        assert [e.event for e in events] == ["acl_admin_added"]
        assert events[0].data.role == "L2"
        assert events[0].data.account_id == "bob.near"
        assert events[0].data.predecessor == "alice.near"

    def test_unchecked_is_idempotent(self) -> None:
        registry, _, audit_log = _make_registry()
        registry.add_admin_unchecked(Role.L1, BOB, CallContext(ALICE))
        assert registry.add_admin_unchecked(Role.L1, BOB, CallContext(ALICE)) is False
        assert len(audit_log.records()) == 1

    def test_checked_requires_admin(self) -> None:
        registry, store, audit_log = _make_registry()
        outcome = registry.add_admin(Role.L1, BOB, CallContext(ALICE))
        assert outcome is UNAUTHORIZED
        assert BOB not in store
        assert audit_log.records() == []

    def test_checked_by_admin(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        assert registry.add_admin(Role.L1, BOB, CallContext(ALICE)) == Applied(changed=True)
        assert registry.add_admin(Role.L1, BOB, CallContext(ALICE)) == Applied(changed=False)
        assert registry.is_admin(Role.L1, BOB)

    def test_admin_of_other_role_is_unauthorized(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        assert registry.add_admin(Role.L2, BOB, CallContext(ALICE)) is UNAUTHORIZED

    def test_super_admin_may_add_admins(self) -> None:
        registry, store, _ = _make_registry()
        store.store(ALICE, PermissionSet.super_admin())
        assert registry.add_admin(Role.L2, BOB, CallContext(ALICE)) == Applied(changed=True)


class TestRevokeAdmin:
    def test_unchecked_clears_bit(self) -> None:
        registry, store, audit_log = _make_registry()
        registry.add_admin_unchecked(Role.L1, BOB, CallContext(ALICE))
        assert registry.revoke_admin_unchecked(Role.L1, BOB, CallContext(ALICE)) is True
        assert store.peek(BOB).is_empty()
        assert AclEvent.from_json(audit_log.records()[-1]).event == "acl_admin_revoked"

    def test_unchecked_on_non_admin_returns_false(self) -> None:
        registry, _, audit_log = _make_registry()
        assert registry.revoke_admin_unchecked(Role.L1, BOB, CallContext(ALICE)) is False
        assert audit_log.records() == []

    def test_checked_requires_admin(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, BOB, CallContext(BOB))
        assert registry.revoke_admin(Role.L1, BOB, CallContext(ALICE)) is UNAUTHORIZED
        assert registry.is_admin(Role.L1, BOB)

    def test_checked_by_admin(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        registry.add_admin_unchecked(Role.L1, BOB, CallContext(ALICE))
        assert registry.revoke_admin(Role.L1, BOB, CallContext(ALICE)) == Applied(changed=True)
        assert registry.revoke_admin(Role.L1, BOB, CallContext(ALICE)) == Applied(changed=False)

    def test_revoke_keeps_super_admin_bit(self) -> None:
        registry, store, _ = _make_registry()
        store.store(ALICE, PermissionSet.super_admin())
        registry.add_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        registry.revoke_admin_unchecked(Role.L1, ALICE, CallContext(ALICE))
        assert store.peek(ALICE) == PermissionSet.super_admin()
        assert registry.is_admin(Role.L1, ALICE)

    def test_renounce(self) -> None:
        registry, _, _ = _make_registry()
        registry.add_admin_unchecked(Role.L1, BOB, CallContext(ALICE))
        assert registry.renounce_admin(Role.L1, CallContext(BOB)) is True
        assert not registry.is_admin(Role.L1, BOB)
        assert registry.renounce_admin(Role.L1, CallContext(BOB)) is False
