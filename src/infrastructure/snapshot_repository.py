"""SQLAlchemy-backed repository for daily net worth snapshots."""

from datetime import date

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.errors import PersistenceError
from src.domain.models import Snapshot
from src.utils.decimal_utils import coerce_decimal, decimal_to_storage

SELECT_SNAPSHOTS_SQL = text(
    """
    SELECT day, net_worth
    FROM snapshots
    ORDER BY day
    """
)

SELECT_SNAPSHOTS_SINCE_SQL = text(
    """
    SELECT day, net_worth
    FROM snapshots
    WHERE day >= :since
    ORDER BY day
    """
)

SELECT_SNAPSHOT_SQL = text(
    "SELECT day, net_worth FROM snapshots WHERE day = :day"
)

COUNT_SNAPSHOTS_SQL = text("SELECT COUNT(*) FROM snapshots")

DELETE_SNAPSHOTS_SQL = text("DELETE FROM snapshots")

DELETE_SNAPSHOTS_SINCE_SQL = text("DELETE FROM snapshots WHERE day >= :since")

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO snapshots (day, net_worth)
    VALUES (:day, :net_worth)
    """
)

UPDATE_SNAPSHOT_SQL = text(
    "UPDATE snapshots SET net_worth = :net_worth WHERE day = :day"
)


def _to_snapshot(row) -> Snapshot:
    day = row.day if isinstance(row.day, date) else date.fromisoformat(row.day)
    return Snapshot(day=day, net_worth=coerce_decimal(row.net_worth))


def _to_params(snapshot: Snapshot) -> dict[str, str]:
    return {
        "day": snapshot.day.isoformat(),
        "net_worth": decimal_to_storage(snapshot.net_worth),
    }


class SqlAlchemySnapshotRepository(SnapshotRepositoryPort):
    """Snapshot repository keyed by ISO calendar day."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_snapshots(self, since: date | None = None) -> list[Snapshot]:
        """Return snapshots ordered by day.

        Args:
            since: Optional first day, inclusive.

        Returns:
            list[Snapshot]: Stored snapshots.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                if since is None:
                    rows = conn.execute(SELECT_SNAPSHOTS_SQL).all()
                else:
                    rows = conn.execute(
                        SELECT_SNAPSHOTS_SINCE_SQL,
                        {"since": since.isoformat()},
                    ).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to fetch snapshots: {exc}") from exc
        return [_to_snapshot(row) for row in rows]

    def fetch_snapshot(self, day: date) -> Snapshot | None:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_SNAPSHOT_SQL,
                    {"day": day.isoformat()},
                ).first()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to fetch snapshot for {day.isoformat()}: {exc}"
            ) from exc
        return _to_snapshot(row) if row is not None else None

    def count_snapshots(self) -> int:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(COUNT_SNAPSHOTS_SQL).scalar_one()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to count snapshots: {exc}") from exc

    def delete_snapshots(self, since: date | None = None) -> int:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                if since is None:
                    result = conn.execute(DELETE_SNAPSHOTS_SQL)
                else:
                    result = conn.execute(
                        DELETE_SNAPSHOTS_SINCE_SQL,
                        {"since": since.isoformat()},
                    )
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to delete snapshots: {exc}"
            ) from exc
        return result.rowcount

    def insert_snapshots(self, snapshots: list[Snapshot]) -> int:
        payload = [_to_params(snapshot) for snapshot in snapshots]
        if not payload:
            return 0
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.execute(INSERT_SNAPSHOT_SQL, payload)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to insert snapshots: {exc}"
            ) from exc
        return len(payload)

    def upsert_snapshot(self, snapshot: Snapshot) -> bool:
        """Insert or overwrite the snapshot for its day.

        Args:
            snapshot: Snapshot to store.

        Returns:
            bool: True when a snapshot already existed for the day.
        """
        params = _to_params(snapshot)
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                existed = conn.execute(UPDATE_SNAPSHOT_SQL, params).rowcount > 0
                if not existed:
                    conn.execute(INSERT_SNAPSHOT_SQL, params)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to save snapshot for {params['day']}: {exc}"
            ) from exc
        return existed


__all__ = ["SqlAlchemySnapshotRepository"]
