"""Domain models for valuation aggregates."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class InclusionPolicy:
    """Which optional account groups count towards aggregates.

    Attributes:
        include_retirement: Count pension-like accounts as assets.
        include_mortgage_debt: Count mortgage-type debt as debt.
    """

    include_retirement: bool = True
    include_mortgage_debt: bool = True


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        net_worth: Assets plus (negative) debt.
        total_assets: Sum of included asset balances.
        total_debt: Sum of included debt balances, zero or negative.
    """

    net_worth: Decimal
    total_assets: Decimal
    total_debt: Decimal


@dataclass(frozen=True)
class NetWorthChange:
    """Movement between the latest and the previous update moment."""

    previous_at: datetime
    net_worth: Decimal
    total_assets: Decimal
    total_debt: Decimal


@dataclass(frozen=True)
class AccountOverview:
    """Per-account figures for account cards."""

    account_id: int | None
    category: str
    provider: str
    current_value: Decimal
    prior_value: Decimal | None
    change: Decimal
    change_percentage: Decimal
    last_updated: datetime | None
    is_debt: bool
    is_positive_trend: bool


__all__ = [
    "InclusionPolicy",
    "NetWorthSummary",
    "NetWorthChange",
    "AccountOverview",
]
