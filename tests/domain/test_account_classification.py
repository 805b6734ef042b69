"""Tests for account classification policies."""

import pytest

from src.domain.models import AccountCategory, InclusionPolicy
from src.domain.policies import (
    included_as_asset,
    included_as_debt,
    included_in_net_worth,
    is_debt,
    is_mortgage,
    is_retirement,
)


def test_debt_categories() -> None:
    assert is_debt(AccountCategory.MORTGAGE)
    assert is_debt(AccountCategory.LOAN)
    assert is_debt(AccountCategory.CREDIT_CARD)
    assert not is_debt(AccountCategory.CURRENT_ACCOUNT)
    assert not is_debt(AccountCategory.PENSION)


def test_retirement_and_mortgage_roles() -> None:
    assert is_retirement(AccountCategory.PENSION)
    assert is_retirement(AccountCategory.JUNIOR_SIPP)
    assert not is_retirement(AccountCategory.JUNIOR_ISA)
    assert is_mortgage(AccountCategory.MORTGAGE)
    assert not is_mortgage(AccountCategory.LOAN)


def test_pension_follows_retirement_toggle() -> None:
    """Pensions count as assets only when retirement is included."""
    excluded = InclusionPolicy(include_retirement=False)

    assert included_as_asset(AccountCategory.PENSION, InclusionPolicy())
    assert not included_as_asset(AccountCategory.PENSION, excluded)
    assert not included_in_net_worth(AccountCategory.JUNIOR_SIPP, excluded)
    assert included_as_asset(AccountCategory.CASH_ISA, excluded)


def test_mortgage_follows_mortgage_toggle() -> None:
    """Only mortgage-type debt is affected by the mortgage toggle."""
    excluded = InclusionPolicy(include_mortgage_debt=False)

    assert included_as_debt(AccountCategory.MORTGAGE, InclusionPolicy())
    assert not included_as_debt(AccountCategory.MORTGAGE, excluded)
    assert included_as_debt(AccountCategory.CREDIT_CARD, excluded)
    assert included_as_debt(AccountCategory.LOAN, excluded)


@pytest.mark.parametrize("category", list(AccountCategory))
def test_every_category_is_asset_or_debt_never_both(category) -> None:
    policy = InclusionPolicy()

    assert included_as_asset(category, policy) != included_as_debt(
        category, policy
    )
