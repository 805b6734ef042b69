"""Use case to compute the net worth summary from the ledger."""

from dataclasses import dataclass
from datetime import date, datetime

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import IntegrityWarning, NetWorthError
from src.domain.models import InclusionPolicy, NetWorthChange, NetWorthSummary
from src.domain.services.finance import (
    compute_net_worth_change,
    compute_net_worth_summary,
)
from src.domain.services.ledger import find_integrity_warnings
from src.domain.services.validation import validate_ledger
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class NetWorthSummaryResult:
    """Summary figures for the dashboard header.

    Attributes:
        summary: Net worth, assets and debt; None on failure.
        change: Movement since the previous update, when one exists.
        warnings: Non-fatal integrity issues met while valuing.
        error: Failure reported by the store, if any.
    """

    summary: NetWorthSummary | None
    change: NetWorthChange | None = None
    warnings: tuple[IntegrityWarning, ...] = ()
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GetNetWorthSummaryUseCase:
    """Compute net worth, assets and debt under an inclusion policy."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port reading accounts and observations.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        policy: InclusionPolicy,
        as_of: date | datetime | None = None,
    ) -> NetWorthSummaryResult:
        """Return the net worth summary.

        Args:
            policy: Inclusion toggles chosen by the viewer.
            as_of: Optional valuation day; current balances when omitted.

        Returns:
            NetWorthSummaryResult: Totals, change and integrity warnings.
        """
        try:
            accounts = self._ledger_repository.fetch_accounts()
        except NetWorthError as exc:
            self._logger.error(f"Failed to fetch accounts: {exc}")
            return NetWorthSummaryResult(summary=None, error=exc)

        warnings = tuple(find_integrity_warnings(accounts))
        for warning in warnings:
            self._logger.warning(warning.message)
        validate_ledger(accounts, self._logger)

        summary = compute_net_worth_summary(accounts, policy, as_of=as_of)
        change = (
            compute_net_worth_change(accounts, policy) if as_of is None else None
        )
        self._logger.info(
            f"Net worth computed: assets={summary.total_assets}, "
            f"debt={summary.total_debt}, net_worth={summary.net_worth}"
        )
        return NetWorthSummaryResult(
            summary=summary,
            change=change,
            warnings=warnings,
        )


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummaryResult"]
