"""Use case appending a balance observation to an account."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.manage_snapshots import (
    SnapshotRebuildResult,
    SnapshotStoreManager,
    SnapshotUpsertResult,
)
from src.domain.errors import (
    AccountNotFoundError,
    InvalidAmountError,
    NetWorthError,
)
from src.domain.models import InclusionPolicy, Observation
from src.domain.services.series import ChartSeriesBuilder
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class RecordObservationResult:
    """Result of recording a balance observation.

    Attributes:
        observation: Stored observation, None on failure.
        snapshot: Outcome of refreshing today's snapshot.
        regeneration: Outcome of repairing snapshots for a backdated entry.
        error: Failure that stopped the operation, if any.
    """

    observation: Observation | None
    snapshot: SnapshotUpsertResult | None = None
    regeneration: SnapshotRebuildResult | None = None
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the observation and snapshots were saved."""
        if self.error is not None:
            return False
        if self.regeneration is not None and not self.regeneration.ok:
            return False
        return self.snapshot is None or self.snapshot.ok


class RecordObservationUseCase:
    """Append an observation and keep today's snapshot current."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        snapshot_manager: SnapshotStoreManager,
        series_builder: ChartSeriesBuilder,
        clock: ClockPort,
        snapshot_policy: InclusionPolicy,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port writing observations.
            snapshot_manager: Manager owning the snapshot store.
            series_builder: Chart series cache to invalidate.
            clock: Port providing the current moment.
            snapshot_policy: Policy snapshots are valued under.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._snapshot_manager = snapshot_manager
        self._series_builder = series_builder
        self._clock = clock
        self._snapshot_policy = snapshot_policy
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: int,
        amount: Decimal | str,
        observed_at: datetime | None = None,
    ) -> RecordObservationResult:
        """Record a balance for an account.

        Backdated observations also regenerate snapshots from their day,
        since those days were valued without them.

        Args:
            account_id: Account receiving the observation.
            amount: Signed balance; negative for liabilities.
            observed_at: Observation timestamp, now when omitted.

        Returns:
            RecordObservationResult: Stored observation and snapshot outcome.
        """
        timestamp = observed_at or self._clock.now()
        try:
            try:
                balance = coerce_decimal(amount)
            except ValueError as exc:
                raise InvalidAmountError(str(exc)) from exc
            if self._ledger_repository.fetch_account(account_id) is None:
                raise AccountNotFoundError(account_id)
            observation = self._ledger_repository.add_observation(
                account_id,
                balance,
                timestamp,
            )
        except NetWorthError as exc:
            self._logger.error(f"Failed to save balance update: {exc}")
            return RecordObservationResult(observation=None, error=exc)

        self._series_builder.invalidate()
        self._logger.info(
            f"Recorded balance {balance} for account {account_id} "
            f"at {timestamp.isoformat()}"
        )

        regeneration = None
        day = self._clock.day_of(timestamp)
        if day < self._clock.today():
            regeneration = self._snapshot_manager.regenerate_from(
                day,
                self._snapshot_policy,
            )
        snapshot = self._snapshot_manager.upsert_today(self._snapshot_policy)
        return RecordObservationResult(
            observation=observation,
            snapshot=snapshot,
            regeneration=regeneration,
        )


__all__ = ["RecordObservationUseCase", "RecordObservationResult"]
