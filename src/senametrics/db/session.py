"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from senametrics.config import DEFAULT_DB_PATH
from senametrics.db.schema import Base

# Module-level engine cache, keyed by resolved database path
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def _cache_key(db_path: Path | None) -> tuple[Path, str]:
    path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
    return path, str(path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path. Uses StaticPool and
    check_same_thread=False so one SQLite connection can be shared by
    FastAPI worker threads.

    Args:
        db_path: Path to SQLite database file. Defaults to data/senametrics.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    path, key = _cache_key(db_path)

    if key in _engine_cache:
        return _engine_cache[key]

    path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Get cached session factory for the database."""
    _, key = _cache_key(db_path)

    if key not in _session_factory_cache:
        _session_factory_cache[key] = sessionmaker(bind=get_engine(db_path))

    return _session_factory_cache[key]


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() instead.
    """
    factory = _get_session_factory(db_path)
    return factory()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Args:
        db_path: Path to SQLite database file.

    Yields:
        SQLAlchemy Session instance.
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create tables. Call once during application startup."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
