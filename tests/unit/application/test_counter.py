"""Tests for the Counter sample service."""

import pytest

from rolekeeper.application.counter import Counter, CounterRole
from rolekeeper.domain.acl.event.events import AclEvent
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.shared.error import EnforcementError
from rolekeeper.infrastructure.memory import (
    InMemoryAuditLog,
    InMemoryPermissionStore,
    InMemoryUnitOfWork,
)

ALICE = CallContext.of("alice.near")
BOB = CallContext.of("bob.near")


def _make_counter() -> tuple[Counter, InMemoryPermissionStore, InMemoryAuditLog]:
    store = InMemoryPermissionStore()
    audit_log = InMemoryAuditLog()
    counter = Counter.new(ALICE, store, audit_log, InMemoryUnitOfWork(store, audit_log))
    return counter, store, audit_log


class TestCounter:
    def test_new_makes_creator_admin(self) -> None:
        counter, _, audit_log = _make_counter()
        assert counter.value == 0
        for role in CounterRole:
            assert counter.acl.is_admin(role, ALICE.predecessor)
        assert len(audit_log.records()) == 3

    def test_increase_requires_l2(self) -> None:
        counter, _, _ = _make_counter()
        with pytest.raises(EnforcementError):
            counter.increase(BOB)
        assert counter.value == 0

        counter.acl.grant_role(CounterRole.L2, BOB.predecessor, ALICE)
        assert counter.increase(BOB) == 1

    def test_increase_any_accepts_l1_or_l2(self) -> None:
        counter, _, _ = _make_counter()
        counter.acl.grant_role(CounterRole.L1, BOB.predecessor, ALICE)
        assert counter.increase_any(BOB) == 1
        with pytest.raises(EnforcementError):
            counter.increase(BOB)
        assert counter.value == 1

    def test_reset_requires_l1_and_l3(self) -> None:
        counter, _, _ = _make_counter()
        counter.acl.grant_role(CounterRole.L1, BOB.predecessor, ALICE)
        counter.increase_any(BOB)

        with pytest.raises(EnforcementError) as exc_info:
            counter.reset(BOB)
        assert exc_info.value.required == ["L1", "L3"]
        assert counter.value == 1

        counter.acl.grant_role(CounterRole.L3, BOB.predecessor, ALICE)
        assert counter.reset(BOB) == 0

    def test_admin_without_grant_is_denied(self) -> None:
        counter, _, _ = _make_counter()
        with pytest.raises(EnforcementError):
            counter.increase_any(ALICE)

    def test_denied_call_leaves_acl_untouched(self) -> None:
        counter, store, audit_log = _make_counter()
        records = audit_log.records()
        with pytest.raises(EnforcementError):
            counter.reset(BOB)
        assert AccountId("bob.near") not in store
        assert [AclEvent.from_json(r) for r in audit_log.records()] == [
            AclEvent.from_json(r) for r in records
        ]

    def test_guarded_call_inside_caller_unit_of_work(self) -> None:
        store = InMemoryPermissionStore()
        audit_log = InMemoryAuditLog()
        uow = InMemoryUnitOfWork(store, audit_log)
        counter = Counter.new(ALICE, store, audit_log, uow)
        records = audit_log.records()

        with pytest.raises(EnforcementError), uow:
            counter.acl.grant_role(CounterRole.L1, BOB.predecessor, ALICE)
            counter.acl.grant_role(CounterRole.L2, BOB.predecessor, ALICE)
            assert counter.increase(BOB) == 1
            counter.reset(BOB)

        assert not counter.acl.has_role(CounterRole.L1, BOB.predecessor)
        assert not counter.acl.has_role(CounterRole.L2, BOB.predecessor)
        assert audit_log.records() == records
