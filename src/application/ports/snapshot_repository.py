"""Port for the derived daily net worth snapshot store."""

from datetime import date
from typing import Protocol

from src.domain.models import Snapshot


class SnapshotRepositoryPort(Protocol):
    """Port exposing storage for one-row-per-day snapshots.

    Implementations raise ``PersistenceError`` when the store fails.
    """

    def fetch_snapshots(self, since: date | None = None) -> list[Snapshot]:
        """Return snapshots ordered by day, optionally from ``since`` on."""

    def fetch_snapshot(self, day: date) -> Snapshot | None:
        """Return the snapshot stored for ``day``, if any."""

    def count_snapshots(self) -> int:
        """Return how many snapshots are stored."""

    def delete_snapshots(self, since: date | None = None) -> int:
        """Delete snapshots with day >= ``since`` (all when None)."""

    def insert_snapshots(self, snapshots: list[Snapshot]) -> int:
        """Insert new snapshots and return how many were written."""

    def upsert_snapshot(self, snapshot: Snapshot) -> bool:
        """Insert or overwrite the day's snapshot; True when it existed."""


__all__ = ["SnapshotRepositoryPort"]
