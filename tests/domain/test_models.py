"""Tests for domain value types."""

import pytest

from src.domain.models import AccountCategory, ChartPeriod


def test_account_category_parses_display_name_and_member_name() -> None:
    assert AccountCategory.parse("Stocks & Shares ISA") is (
        AccountCategory.STOCKS_AND_SHARES_ISA
    )
    assert AccountCategory.parse(" CRYPTO ") is AccountCategory.CRYPTO


def test_account_category_rejects_unknown_value() -> None:
    with pytest.raises(ValueError):
        AccountCategory.parse("Premium Bonds")


def test_chart_period_lengths() -> None:
    assert [period.days for period in ChartPeriod] == [
        1,
        7,
        30,
        90,
        365,
        1825,
        None,
    ]
    assert ChartPeriod.MAX.display_name == "All Time"
