"""Tests for EnforcementGuard."""

from enum import Enum

import pytest

from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId
from rolekeeper.domain.acl.service.guard import EnforcementGuard
from rolekeeper.domain.shared.error import EnforcementError
from rolekeeper.infrastructure.memory import InMemoryPermissionStore


class Role(Enum):
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"


BOB = AccountId("bob.near")


def _make_guard(*held: Role) -> tuple[EnforcementGuard, RoleCatalog, InMemoryPermissionStore]:
    catalog = RoleCatalog(Role)
    store = InMemoryPermissionStore()
    if held:
        store.store(BOB, catalog.flags(*held))
    return EnforcementGuard(_catalog=catalog, _store=store), catalog, store


class TestCheckAny:
    def test_passes_with_one_matching_role(self) -> None:
        guard, catalog, _ = _make_guard(Role.L2)
        guard.check_any(catalog.flags(Role.L1, Role.L2), BOB)

    def test_fails_without_matching_role(self) -> None:
        guard, catalog, _ = _make_guard(Role.L3)
        with pytest.raises(EnforcementError) as exc_info:
            guard.check_any(catalog.flags(Role.L1, Role.L2), BOB)
        assert exc_info.value.code == "enforcement_failed"
        assert exc_info.value.account_id == "bob.near"
        assert exc_info.value.required == ["L1", "L2"]
        assert "at least one role" in exc_info.value.message

    def test_unknown_account_fails_and_is_not_stored(self) -> None:
        guard, catalog, store = _make_guard()
        with pytest.raises(EnforcementError):
            guard.check_any(catalog.flags(Role.L1), BOB)
        assert BOB not in store

    def test_empty_requirement_fails(self) -> None:
        guard, _, _ = _make_guard(Role.L1)
        with pytest.raises(EnforcementError):
            guard.check_any(PermissionSet.empty(), BOB)

    def test_admin_bit_does_not_satisfy_grant_requirement(self) -> None:
        guard, catalog, store = _make_guard()
        store.store(BOB, catalog.admin_flag(Role.L1))
        with pytest.raises(EnforcementError):
            guard.check_any(catalog.flags(Role.L1), BOB)


class TestCheckAll:
    def test_passes_with_every_role(self) -> None:
        guard, catalog, _ = _make_guard(Role.L1, Role.L3)
        guard.check_all(catalog.flags(Role.L1, Role.L3), BOB)

    def test_fails_with_subset(self) -> None:
        guard, catalog, _ = _make_guard(Role.L1)
        with pytest.raises(EnforcementError) as exc_info:
            guard.check_all(catalog.flags(Role.L1, Role.L3), BOB)
        assert exc_info.value.required == ["L1", "L3"]
        assert "must have all roles" in exc_info.value.message

    def test_empty_requirement_passes(self) -> None:
        guard, _, _ = _make_guard()
        guard.check_all(PermissionSet.empty(), BOB)
