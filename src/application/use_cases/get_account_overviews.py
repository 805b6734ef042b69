"""Use case building the per-account cards shown under the summary."""

from dataclasses import dataclass, field

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import NetWorthError
from src.domain.models import AccountOverview
from src.domain.policies import is_debt
from src.domain.services.ledger import (
    current_value,
    is_positive_trend,
    last_update,
    prior_value,
    update_change,
    update_change_percentage,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountOverviewsResult:
    """Account cards sorted by current value, largest first."""

    overviews: list[AccountOverview] = field(default_factory=list)
    error: NetWorthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GetAccountOverviewsUseCase:
    """Summarize every account's balance and latest movement."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountOverviewsResult:
        """Return account overviews sorted by current value descending."""
        try:
            accounts = self._ledger_repository.fetch_accounts()
        except NetWorthError as exc:
            self._logger.error(f"Failed to fetch accounts: {exc}")
            return AccountOverviewsResult(error=exc)

        overviews = [
            AccountOverview(
                account_id=account.account_id,
                category=account.category.value,
                provider=account.provider,
                current_value=current_value(account),
                prior_value=prior_value(account),
                change=update_change(account),
                change_percentage=update_change_percentage(account),
                last_updated=last_update(account),
                is_debt=is_debt(account.category),
                is_positive_trend=is_positive_trend(account),
            )
            for account in accounts
        ]
        overviews.sort(key=lambda item: item.current_value, reverse=True)
        self._logger.info(f"Fetched {len(overviews)} account overviews")
        return AccountOverviewsResult(overviews=overviews)


__all__ = ["GetAccountOverviewsUseCase", "AccountOverviewsResult"]
