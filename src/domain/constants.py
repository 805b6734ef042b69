"""Domain constants for account classification."""

from src.domain.models.accounts import AccountCategory

DEBT_CATEGORIES = (
    AccountCategory.MORTGAGE,
    AccountCategory.LOAN,
    AccountCategory.CREDIT_CARD,
)

RETIREMENT_CATEGORIES = (
    AccountCategory.PENSION,
    AccountCategory.JUNIOR_SIPP,
)

MORTGAGE_CATEGORIES = (AccountCategory.MORTGAGE,)

# Minimum number of stored snapshots for the store to count as built.
MIN_BUILT_SNAPSHOTS = 2


__all__ = [
    "DEBT_CATEGORIES",
    "RETIREMENT_CATEGORIES",
    "MORTGAGE_CATEGORIES",
    "MIN_BUILT_SNAPSHOTS",
]
