"""Database engine and session factory creation."""

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rolekeeper.config import Config
from rolekeeper.domain.shared.error import StorageUnavailableError


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or url.endswith(":memory:")


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists."""
    if not url.startswith("sqlite") or _is_memory_sqlite(url) or "///" not in url:
        return url

    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]

    # Expand ~ and make absolute
    abs_path = os.path.abspath(os.path.expanduser(path))
    Path(abs_path).parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def create_db_engine(config: Config) -> Engine:
    """Create database engine.

    Handles SQLite and PostgreSQL with appropriate settings.
    """
    url = _expand_sqlite_path(config.database.url)

    if url.startswith("sqlite"):
        engine_kwargs: dict[str, Any] = {
            "echo": config.database.echo,
            "connect_args": {"check_same_thread": False},
        }
        # In-memory SQLite lives in a single connection; share it across sessions
        if _is_memory_sqlite(url):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs = {
            "echo": config.database.echo,
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
        }

    return create_engine(url, **engine_kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create session factory for dependency injection."""
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def storage_errors() -> Iterator[None]:
    """Translate backend connectivity failures into StorageUnavailableError."""
    try:
        yield
    except OperationalError as e:
        raise StorageUnavailableError(f"Storage backend unavailable: {e.orig}") from e
