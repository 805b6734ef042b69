"""Use case maintaining the derived one-row-per-day net worth snapshots.

Each stored day is either absent or valid: affected snapshots are always
deleted before their replacements are written, so a failure part way
through leaves gaps that the next build or regeneration fills, never stale
values.
"""

from dataclasses import dataclass
from datetime import date

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.constants import MIN_BUILT_SNAPSHOTS
from src.domain.errors import NetWorthError
from src.domain.models import Account, InclusionPolicy, Snapshot
from src.domain.services.finance import compute_snapshot
from src.domain.services.ledger import observation_days
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SnapshotRebuildResult:
    """Result of a snapshot build or regeneration.

    Attributes:
        from_day: First day affected, None for a full build.
        deleted_count: Snapshots removed before rebuilding.
        written_count: Snapshots written.
        skipped: True when an existing store was kept as is.
        error: Failure reported by the store, if any.
    """

    from_day: date | None
    deleted_count: int = 0
    written_count: int = 0
    skipped: bool = False
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the operation completed."""
        return self.error is None


@dataclass(frozen=True)
class SnapshotUpsertResult:
    """Result of refreshing today's snapshot.

    Attributes:
        snapshot: Snapshot written for today, None on failure.
        replaced: True when an existing snapshot was overwritten.
        error: Failure reported by the store, if any.
    """

    snapshot: Snapshot | None
    replaced: bool = False
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the operation completed."""
        return self.error is None


class SnapshotStoreManager:
    """Build, extend and repair the daily net worth snapshot store."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        snapshot_repository: SnapshotRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the manager.

        Args:
            ledger_repository: Port reading accounts and observations.
            snapshot_repository: Port owning the snapshot rows.
            clock: Port providing today's date.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._snapshot_repository = snapshot_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def build_all(
        self,
        policy: InclusionPolicy,
        force: bool = False,
    ) -> SnapshotRebuildResult:
        """Rebuild every snapshot when the store is empty or degenerate.

        A store holding a single snapshot (typically today's, written before
        any history existed) is treated as unbuilt.

        Args:
            policy: Inclusion policy the snapshots are valued under.
            force: Rebuild even when the store already looks complete.

        Returns:
            SnapshotRebuildResult: Counts of deleted and written rows.
        """
        deleted_count = 0
        written_count = 0
        try:
            existing = self._snapshot_repository.count_snapshots()
            if existing >= MIN_BUILT_SNAPSHOTS and not force:
                self._logger.info(
                    f"Found {existing} existing snapshots - keeping them"
                )
                return SnapshotRebuildResult(from_day=None, skipped=True)

            deleted_count = self._snapshot_repository.delete_snapshots()
            accounts = self._ledger_repository.fetch_accounts()
            days = observation_days(accounts)
            self._logger.info(
                f"Creating snapshots for {len(days)} unique dates "
                "from balance history"
            )
            written_count = self._write_days(accounts, days, policy)
        except NetWorthError as exc:
            self._logger.error(f"Failed to build snapshots: {exc}")
            return SnapshotRebuildResult(
                from_day=None,
                deleted_count=deleted_count,
                written_count=written_count,
                error=exc,
            )

        self._logger.info(
            f"Built {written_count} snapshots (removed {deleted_count})"
        )
        return SnapshotRebuildResult(
            from_day=None,
            deleted_count=deleted_count,
            written_count=written_count,
        )

    def upsert_today(self, policy: InclusionPolicy) -> SnapshotUpsertResult:
        """Write today's snapshot, overwriting any existing one.

        Args:
            policy: Inclusion policy the snapshot is valued under.

        Returns:
            SnapshotUpsertResult: The snapshot written for today.
        """
        today = self._clock.today()
        try:
            accounts = self._ledger_repository.fetch_accounts()
            snapshot = compute_snapshot(accounts, today, policy)
            replaced = self._snapshot_repository.upsert_snapshot(snapshot)
        except NetWorthError as exc:
            self._logger.error(
                f"Failed to save snapshot for {today.isoformat()}: {exc}"
            )
            return SnapshotUpsertResult(snapshot=None, error=exc)

        action = "Updated" if replaced else "Created"
        self._logger.info(
            f"{action} snapshot for {today.isoformat()}: {snapshot.net_worth}"
        )
        return SnapshotUpsertResult(snapshot=snapshot, replaced=replaced)

    def regenerate_from(
        self,
        day: date,
        policy: InclusionPolicy,
    ) -> SnapshotRebuildResult:
        """Replace snapshots from ``day`` onwards, leaving earlier days alone.

        Args:
            day: First calendar day to regenerate.
            policy: Inclusion policy the snapshots are valued under.

        Returns:
            SnapshotRebuildResult: Counts of deleted and written rows.
        """
        deleted_count = 0
        written_count = 0
        try:
            deleted_count = self._snapshot_repository.delete_snapshots(
                since=day
            )
            accounts = self._ledger_repository.fetch_accounts()
            days = observation_days(accounts, since=day)
            written_count = self._write_days(accounts, days, policy)
        except NetWorthError as exc:
            self._logger.error(
                f"Failed to regenerate snapshots from {day.isoformat()}: {exc}"
            )
            return SnapshotRebuildResult(
                from_day=day,
                deleted_count=deleted_count,
                written_count=written_count,
                error=exc,
            )

        self._logger.info(
            f"Regenerated {written_count} snapshots from {day.isoformat()} "
            f"(removed {deleted_count})"
        )
        return SnapshotRebuildResult(
            from_day=day,
            deleted_count=deleted_count,
            written_count=written_count,
        )

    def _write_days(
        self,
        accounts: list[Account],
        days: list[date],
        policy: InclusionPolicy,
    ) -> int:
        snapshots = [compute_snapshot(accounts, day, policy) for day in days]
        if not snapshots:
            return 0
        return self._snapshot_repository.insert_snapshots(snapshots)


__all__ = [
    "SnapshotStoreManager",
    "SnapshotRebuildResult",
    "SnapshotUpsertResult",
]
