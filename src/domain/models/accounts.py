"""Domain models for accounts and their balance observations."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class AccountCategory(str, Enum):
    """Fixed set of account categories, valued by their display name."""

    CURRENT_ACCOUNT = "Current Account"
    SAVINGS_ACCOUNT = "Savings Account"
    CASH_ISA = "Cash ISA"
    STOCKS_AND_SHARES_ISA = "Stocks & Shares ISA"
    LIFETIME_ISA = "Lifetime ISA"
    GENERAL_INVESTMENT_ACCOUNT = "General Investment Account"
    PENSION = "Pension"
    JUNIOR_ISA = "Junior ISA"
    JUNIOR_SIPP = "Junior SIPP"
    MORTGAGE = "Mortgage"
    LOAN = "Loan"
    CREDIT_CARD = "Credit Card"
    CRYPTO = "Cryptocurrency Wallet"
    FOREIGN_CURRENCY = "Foreign Currency Account"
    CASH = "Cash"

    @classmethod
    def parse(cls, raw: str) -> "AccountCategory":
        """Resolve a category from its display value or member name.

        Args:
            raw: Stored or user-provided category label.

        Returns:
            AccountCategory: Matching category.

        Raises:
            ValueError: If no category matches.
        """
        cleaned = raw.strip()
        for category in cls:
            if cleaned in (category.value, category.name):
                return category
        raise ValueError(f"Unknown account category: {raw}")


@dataclass(frozen=True)
class Observation:
    """A balance observed for an account at a point in time.

    Attributes:
        amount: Signed balance; negative for liabilities.
        observed_at: Timestamp of the observation.
        account_id: Identifier of the owning account (back-reference only).
        observation_id: Storage identifier, None until persisted.
    """

    amount: Decimal
    observed_at: datetime
    account_id: int | None = None
    observation_id: int | None = None


@dataclass
class Account:
    """A financial account owning its observations in insertion order."""

    category: AccountCategory
    provider: str
    account_id: int | None = None
    observations: list[Observation] = field(default_factory=list)


__all__ = ["AccountCategory", "Observation", "Account"]
