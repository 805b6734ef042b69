"""Database ports for the net worth dashboard.

This module defines the application-layer protocol for accessing the ledger
database engine. Infrastructure implementations provide concrete adapters
that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding ledger and snapshots.

    Repositories depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine holding accounts, observations and
            snapshots.
        """


__all__ = ["DatabaseEnginePort"]
