"""Database infrastructure for the net worth dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine holding accounts, observations and snapshots. It belongs to the
infrastructure layer because it deals with external systems (SQLite by
default, any SQLAlchemy-supported server otherwise).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import NetWorthSettings


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: For server databases, an engine with a small connection pool
        and health checks enabled; a plain engine for SQLite files.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        _ensure_sqlite_directory(db_url)
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Returns:
        Engine: Lazily initialized engine connected to NETWORTH_DB_URL.
    """
    global _ledger_engine
    if _ledger_engine is None:
        settings = NetWorthSettings.from_env()
        _ledger_engine = _create_engine(settings.db_url)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine holding the ledger and snapshots.
        """
        return get_ledger_engine()


class StaticEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort wrapping an engine created elsewhere."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_ledger_engine(self) -> Engine:
        return self._engine


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
    "StaticEngineAdapter",
]
