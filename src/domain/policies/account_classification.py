"""Single source of truth for what counts as asset, debt or pension."""

from src.domain.constants import (
    DEBT_CATEGORIES,
    MORTGAGE_CATEGORIES,
    RETIREMENT_CATEGORIES,
)
from src.domain.models import AccountCategory, InclusionPolicy


def is_debt(category: AccountCategory) -> bool:
    """Return True for debt instruments (mortgage, loan, credit card)."""
    return category in DEBT_CATEGORIES


def is_retirement(category: AccountCategory) -> bool:
    """Return True for pension-like accounts."""
    return category in RETIREMENT_CATEGORIES


def is_mortgage(category: AccountCategory) -> bool:
    """Return True for mortgage-type debt."""
    return category in MORTGAGE_CATEGORIES


def included_as_asset(
    category: AccountCategory,
    policy: InclusionPolicy,
) -> bool:
    """Return True when the category counts towards total assets.

    Args:
        category: Account category to classify.
        policy: Inclusion toggles in force.

    Returns:
        bool: True for non-debt accounts, pensions only when enabled.
    """
    if is_debt(category):
        return False
    return not is_retirement(category) or policy.include_retirement


def included_as_debt(
    category: AccountCategory,
    policy: InclusionPolicy,
) -> bool:
    """Return True when the category counts towards total debt.

    Args:
        category: Account category to classify.
        policy: Inclusion toggles in force.

    Returns:
        bool: True for debt accounts, mortgages only when enabled.
    """
    if not is_debt(category):
        return False
    return not is_mortgage(category) or policy.include_mortgage_debt


def included_in_net_worth(
    category: AccountCategory,
    policy: InclusionPolicy,
) -> bool:
    """Return True when the category contributes to net worth."""
    return included_as_asset(category, policy) or included_as_debt(
        category, policy
    )


__all__ = [
    "is_debt",
    "is_retirement",
    "is_mortgage",
    "included_as_asset",
    "included_as_debt",
    "included_in_net_worth",
]
