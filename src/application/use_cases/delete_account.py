"""Use case deleting an account together with its observations."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.manage_snapshots import (
    SnapshotRebuildResult,
    SnapshotStoreManager,
)
from src.domain.errors import AccountNotFoundError, NetWorthError
from src.domain.models import InclusionPolicy
from src.domain.services.ledger import observation_days
from src.domain.services.series import ChartSeriesBuilder
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DeleteAccountResult:
    """Result of deleting an account."""

    account_id: int
    observations_removed: int = 0
    regeneration: SnapshotRebuildResult | None = None
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and (
            self.regeneration is None or self.regeneration.ok
        )


class DeleteAccountUseCase:
    """Cascade-delete an account and repair the snapshots it fed."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        snapshot_manager: SnapshotStoreManager,
        series_builder: ChartSeriesBuilder,
        snapshot_policy: InclusionPolicy,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._snapshot_manager = snapshot_manager
        self._series_builder = series_builder
        self._snapshot_policy = snapshot_policy
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int) -> DeleteAccountResult:
        """Delete the account, then regenerate from its first observed day.

        Args:
            account_id: Identifier of the account to delete.

        Returns:
            DeleteAccountResult: Removed row count and repair outcome.
        """
        try:
            account = self._ledger_repository.fetch_account(account_id)
            if account is None:
                raise AccountNotFoundError(account_id)
            days = observation_days([account])
            removed = self._ledger_repository.delete_account(account_id)
        except NetWorthError as exc:
            self._logger.error(f"Failed to delete account {account_id}: {exc}")
            return DeleteAccountResult(account_id=account_id, error=exc)

        self._series_builder.invalidate()
        self._logger.info(
            f"Deleted account {account_id} and {removed} balance updates"
        )
        regeneration = None
        if days:
            regeneration = self._snapshot_manager.regenerate_from(
                days[0],
                self._snapshot_policy,
            )
        return DeleteAccountResult(
            account_id=account_id,
            observations_removed=removed,
            regeneration=regeneration,
        )


__all__ = ["DeleteAccountUseCase", "DeleteAccountResult"]
