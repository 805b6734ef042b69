"""Use case deleting a balance observation and repairing snapshots.

This is the mutating entry point into the derived data: the deleted
observation's day and every later day are regenerated, earlier snapshots
are left untouched.
"""

from dataclasses import dataclass

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.manage_snapshots import (
    SnapshotRebuildResult,
    SnapshotStoreManager,
)
from src.domain.errors import (
    AccountNotFoundError,
    LastObservationError,
    NetWorthError,
    ObservationNotFoundError,
)
from src.domain.models import InclusionPolicy, Observation
from src.domain.services.series import ChartSeriesBuilder
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DeleteObservationResult:
    """Result of deleting an observation.

    Attributes:
        observation: Deleted observation, None when refused or failed.
        regeneration: Outcome of the snapshot repair.
        error: Reason the deletion was refused or failed, if any.
    """

    observation: Observation | None
    regeneration: SnapshotRebuildResult | None = None
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        """Return True when deletion and snapshot repair both succeeded."""
        return self.error is None and (
            self.regeneration is None or self.regeneration.ok
        )


class DeleteObservationUseCase:
    """Delete an observation unless it is the account's last one."""

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
            ledger_repository: Port reading and deleting observations.
            snapshot_manager: Manager owning the snapshot store.
            series_builder: Chart series cache to invalidate.
            clock: Port deciding which calendar day an observation falls on.
            snapshot_policy: Policy snapshots are valued under.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._snapshot_manager = snapshot_manager
        self._series_builder = series_builder
        self._clock = clock
        self._snapshot_policy = snapshot_policy
        self._logger = logger or get_app_logger()

    def execute(self, observation_id: int) -> DeleteObservationResult:
        """Delete an observation and regenerate snapshots from its day.

        Args:
            observation_id: Identifier of the observation to delete.

        Returns:
            DeleteObservationResult: Deleted observation and repair outcome.
        """
        try:
            observation = self._ledger_repository.fetch_observation(
                observation_id
            )
            if observation is None:
                raise ObservationNotFoundError(observation_id)
            account = self._ledger_repository.fetch_account(
                observation.account_id
            )
            if account is None:
                raise AccountNotFoundError(observation.account_id)
            if len(account.observations) <= 1:
                raise LastObservationError(account.account_id)
            self._ledger_repository.delete_observation(observation_id)
        except LastObservationError as exc:
            self._logger.warning(
                f"Refused to delete observation {observation_id}: {exc}"
            )
            return DeleteObservationResult(observation=None, error=exc)
        except NetWorthError as exc:
            self._logger.error(
                f"Failed to delete observation {observation_id}: {exc}"
            )
            return DeleteObservationResult(observation=None, error=exc)

        self._series_builder.invalidate()
        self._logger.info(
            f"Deleted balance update {observation.amount} from "
            f"{observation.observed_at.isoformat()}"
        )
        regeneration = self._snapshot_manager.regenerate_from(
            self._clock.day_of(observation.observed_at),
            self._snapshot_policy,
        )
        return DeleteObservationResult(
            observation=observation,
            regeneration=regeneration,
        )


__all__ = ["DeleteObservationUseCase", "DeleteObservationResult"]
