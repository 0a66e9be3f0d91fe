from dishka import Container, make_container

from rolekeeper.config import Config
from rolekeeper.infrastructure.persistence import PersistenceProvider
from rolekeeper.util.di.scope import Scope


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    return make_container(
        PersistenceProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
