"""Use case creating an account with its opening balance."""

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
from src.domain.errors import InvalidAmountError, NetWorthError
from src.domain.models import Account, AccountCategory, InclusionPolicy
from src.domain.services.series import ChartSeriesBuilder
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class AddAccountResult:
    """Result of creating an account."""

    account: Account | None
    snapshot: SnapshotUpsertResult | None = None
    regeneration: SnapshotRebuildResult | None = None
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        if self.error is not None:
            return False
        if self.regeneration is not None and not self.regeneration.ok:
            return False
        return self.snapshot is None or self.snapshot.ok


class AddAccountUseCase:
    """Create an account; an account never exists without a balance."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        snapshot_manager: SnapshotStoreManager,
        series_builder: ChartSeriesBuilder,
        clock: ClockPort,
        snapshot_policy: InclusionPolicy,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._snapshot_manager = snapshot_manager
        self._series_builder = series_builder
        self._clock = clock
        self._snapshot_policy = snapshot_policy
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category: AccountCategory,
        provider: str,
        opening_balance: Decimal | str,
        opened_at: datetime | None = None,
    ) -> AddAccountResult:
        """Create the account and its first observation in one write.

        Args:
            category: Account category.
            provider: Display name of the provider.
            opening_balance: Signed opening balance.
            opened_at: Timestamp of the opening balance, now when omitted.

        Returns:
            AddAccountResult: Created account and snapshot outcome.
        """
        timestamp = opened_at or self._clock.now()
        try:
            try:
                balance = coerce_decimal(opening_balance)
            except ValueError as exc:
                raise InvalidAmountError(str(exc)) from exc
            account = self._ledger_repository.add_account(
                category,
                provider.strip(),
                balance,
                timestamp,
            )
        except NetWorthError as exc:
            self._logger.error(f"Failed to add account {provider}: {exc}")
            return AddAccountResult(account=None, error=exc)

        self._series_builder.invalidate()
        self._logger.info(
            f"Added {category.value} account {account.account_id} "
            f"({account.provider}) with balance {balance}"
        )
        regeneration = None
        day = self._clock.day_of(timestamp)
        if day < self._clock.today():
            regeneration = self._snapshot_manager.regenerate_from(
                day,
                self._snapshot_policy,
            )
        snapshot = self._snapshot_manager.upsert_today(self._snapshot_policy)
        return AddAccountResult(
            account=account,
            snapshot=snapshot,
            regeneration=regeneration,
        )


__all__ = ["AddAccountUseCase", "AddAccountResult"]
