"""Tests for the dishka container wiring."""

from rolekeeper.application.di import create_container
from rolekeeper.config import AclConfig, Config, DatabaseConfig
from rolekeeper.domain.acl.event.events import AclEvent
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.acl import Acl
from rolekeeper.domain.shared.uow import UnitOfWork
from rolekeeper.infrastructure.persistence import (
    SQLAlchemyAuditLog,
    SQLAlchemyPermissionStore,
    SQLAlchemyUnitOfWork,
)


def _make_config(**acl: object) -> Config:
    return Config(
        database=DatabaseConfig(url="sqlite://"),
        acl=AclConfig(**acl),  # type: ignore[arg-type]
    )


class TestPersistenceProvider:
    def test_app_scope_catalog_from_config(self) -> None:
        container = create_container(_make_config(roles=["Reader", "Writer"]))
        try:
            catalog = container.get(RoleCatalog)
            assert [r.name for r in catalog] == ["Reader", "Writer"]
            assert container.get(RoleCatalog) is catalog
        finally:
            container.close()

    def test_uow_scope_adapters(self) -> None:
        container = create_container(_make_config())
        try:
            with container() as uow_container:
                assert isinstance(uow_container.get(PermissionStore), SQLAlchemyPermissionStore)
                assert isinstance(uow_container.get(AuditLog), SQLAlchemyAuditLog)
                assert isinstance(uow_container.get(UnitOfWork), SQLAlchemyUnitOfWork)
                assert isinstance(uow_container.get(Acl), Acl)
        finally:
            container.close()

    def test_state_survives_across_units_of_work(self) -> None:
        container = create_container(_make_config(event_prefix="perm_"))
        alice = AccountId("alice.near")
        try:
            with container() as uow_container:
                acl = uow_container.get(Acl)
                with uow_container.get(UnitOfWork):
                    acl.bootstrap(CallContext(alice))

            with container() as uow_container:
                acl = uow_container.get(Acl)
                role = acl.catalog.role("L1")
                assert acl.is_admin(role, alice)
                records = uow_container.get(AuditLog).records()
                assert AclEvent.from_json(records[0]).event == "perm_admin_added"
        finally:
            container.close()
