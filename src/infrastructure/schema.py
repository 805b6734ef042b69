"""DDL for the ledger and snapshot tables.

Amounts are stored as TEXT holding the exact decimal representation,
timestamps as ISO-8601 strings with microseconds and snapshot days as
``YYYY-MM-DD``. Insertion order is the ``id`` order.
"""

from src.application.ports.database import DatabaseEnginePort

_ID_COLUMNS = {
    "sqlite": "INTEGER PRIMARY KEY AUTOINCREMENT",
    "postgresql": "SERIAL PRIMARY KEY",
}

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id {id_column},
    category TEXT NOT NULL,
    provider TEXT NOT NULL
)
"""

CREATE_OBSERVATIONS_SQL = """
CREATE TABLE IF NOT EXISTS observations (
    id {id_column},
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount TEXT NOT NULL,
    observed_at TEXT NOT NULL
)
"""

CREATE_OBSERVATIONS_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_observations_account_id
ON observations (account_id)
"""

CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS snapshots (
    day TEXT PRIMARY KEY,
    net_worth TEXT NOT NULL
)
"""


def ensure_schema(db_port: DatabaseEnginePort) -> None:
    """Create the ledger and snapshot tables when missing.

    Args:
        db_port: Port providing access to the ledger engine.
    """
    engine = db_port.get_ledger_engine()
    id_column = _ID_COLUMNS.get(engine.dialect.name, _ID_COLUMNS["sqlite"])
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_ACCOUNTS_SQL.format(id_column=id_column))
        conn.exec_driver_sql(
            CREATE_OBSERVATIONS_SQL.format(id_column=id_column)
        )
        conn.exec_driver_sql(CREATE_OBSERVATIONS_INDEX_SQL)
        conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)


__all__ = [
    "CREATE_ACCOUNTS_SQL",
    "CREATE_OBSERVATIONS_SQL",
    "CREATE_SNAPSHOTS_SQL",
    "ensure_schema",
]
