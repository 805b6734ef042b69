"""Use cases producing chart series from the ledger."""

from dataclasses import dataclass, field

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import AccountNotFoundError, NetWorthError
from src.domain.models import ChartPeriod, InclusionPolicy, SeriesPoint
from src.domain.services.series import (
    ChartSeriesBuilder,
    build_account_series,
    windowed,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeriesResult:
    """Chart-ready points, or the error that prevented building them."""

    points: list[SeriesPoint] = field(default_factory=list)
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GetHistorySeriesUseCase:
    """Return the cumulative asset series clipped to a period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        series_builder: ChartSeriesBuilder,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port reading accounts and observations.
            series_builder: Shared cache of the cumulative series.
            clock: Port providing today's date for the window.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._series_builder = series_builder
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(
        self,
        policy: InclusionPolicy,
        period: ChartPeriod,
    ) -> SeriesResult:
        """Return the windowed history series.

        Args:
            policy: Inclusion toggles; debt is never charted here.
            period: Look-back period.

        Returns:
            SeriesResult: Points for the chart.
        """
        try:
            accounts = self._ledger_repository.fetch_accounts()
        except NetWorthError as exc:
            self._logger.error(f"Failed to fetch accounts for chart: {exc}")
            return SeriesResult(error=exc)
        series = self._series_builder.series(accounts, policy)
        return SeriesResult(
            points=windowed(series, period, self._clock.today())
        )


class GetAccountHistoryUseCase:
    """Return one account's balance series clipped to a period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int, period: ChartPeriod) -> SeriesResult:
        try:
            account = self._ledger_repository.fetch_account(account_id)
            if account is None:
                raise AccountNotFoundError(account_id)
        except NetWorthError as exc:
            self._logger.error(
                f"Failed to load history for account {account_id}: {exc}"
            )
            return SeriesResult(error=exc)
        return SeriesResult(
            points=windowed(
                build_account_series(account),
                period,
                self._clock.today(),
            )
        )


__all__ = ["SeriesResult", "GetHistorySeriesUseCase", "GetAccountHistoryUseCase"]
