from collections.abc import Iterable

from dishka import Provider, from_context, provide
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from rolekeeper.config import Config
from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.acl import Acl
from rolekeeper.domain.shared.uow import UnitOfWork
from rolekeeper.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from rolekeeper.infrastructure.persistence.repository.audit_log import SQLAlchemyAuditLog
from rolekeeper.infrastructure.persistence.repository.permission import (
    SQLAlchemyPermissionStore,
)
from rolekeeper.infrastructure.persistence.tables import metadata
from rolekeeper.infrastructure.persistence.uow import SQLAlchemyUnitOfWork
from rolekeeper.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped factories
    @provide(scope=Scope.APP)
    def get_catalog(self, config: Config) -> RoleCatalog:
        return config.acl.build_catalog()

    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> Iterable[Engine]:
        engine = create_db_engine(config)
        metadata.create_all(engine)
        yield engine
        engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: Engine) -> sessionmaker[Session]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    def get_session(self, session_factory: sessionmaker[Session]) -> Iterable[Session]:
        with session_factory() as session:
            yield session

    # UOW-scoped adapters
    audit_log = provide(SQLAlchemyAuditLog, scope=Scope.UOW, provides=AuditLog)
    uow = provide(SQLAlchemyUnitOfWork, scope=Scope.UOW, provides=UnitOfWork)

    @provide(scope=Scope.UOW)
    def get_permission_store(self, session: Session, config: Config) -> PermissionStore:
        return SQLAlchemyPermissionStore(session, prefix=config.acl.storage_prefix)

    @provide(scope=Scope.UOW)
    def get_acl(
        self,
        catalog: RoleCatalog,
        store: PermissionStore,
        audit_log: AuditLog,
        config: Config,
    ) -> Acl:
        """Attach to the persisted ACL state. Bootstrapping is done once by `init`."""
        return Acl(
            catalog,
            store,
            audit_log,
            event_standard=config.acl.event_standard,
            event_version=config.acl.event_version,
            event_prefix=config.acl.event_prefix,
        )
