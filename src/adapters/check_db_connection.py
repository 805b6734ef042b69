"""Simple CLI to validate the ledger database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check
and reports how many rows each ledger table holds.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger

_TABLES = ("accounts", "observations", "snapshots")


def main() -> None:
    """Run basic connectivity checks against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        for table in _TABLES:
            count = conn.exec_driver_sql(
                f"SELECT COUNT(*) FROM {table}"
            ).scalar()
            logger.info(f"{table}: {count} rows")

    logger.info("Connection is working.")


if __name__ == "__main__":
    main()
