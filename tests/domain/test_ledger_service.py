"""Tests for ledger accessors."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models import Account, AccountCategory, Observation
from src.domain.services.ledger import (
    current_value,
    find_integrity_warnings,
    is_positive_trend,
    last_update,
    observation_days,
    ordered_observations,
    prior_value,
    signed_balance,
    update_change,
    update_change_percentage,
    value_as_of,
)


def _account(category=AccountCategory.SAVINGS_ACCOUNT, *entries):
    return Account(
        category=category,
        provider="Bank",
        account_id=1,
        observations=[
            Observation(amount=Decimal(amount), observed_at=observed_at)
            for observed_at, amount in entries
        ],
    )


def test_current_value_uses_latest_timestamp_not_insertion_order() -> None:
    account = _account(
        AccountCategory.SAVINGS_ACCOUNT,
        (datetime(2024, 2, 1), "1200"),
        (datetime(2024, 1, 1), "1000"),
    )

    assert current_value(account) == Decimal("1200")
    assert prior_value(account) == Decimal("1000")
    assert last_update(account) == datetime(2024, 2, 1)


def test_equal_timestamps_resolve_to_later_insertion() -> None:
    moment = datetime(2024, 1, 1, 12)
    account = _account(
        AccountCategory.SAVINGS_ACCOUNT,
        (moment, "10"),
        (moment, "20"),
    )

    assert current_value(account) == Decimal("20")
    assert [item.amount for item in ordered_observations(account)] == [
        Decimal("20"),
        Decimal("10"),
    ]


def test_empty_account_is_valued_as_zero() -> None:
    account = _account()

    assert current_value(account) == Decimal("0")
    assert value_as_of(account, date(2024, 1, 1)) == Decimal("0")
    assert prior_value(account) is None
    assert last_update(account) is None
    assert update_change(account) == Decimal("0")


def test_value_as_of_never_looks_ahead() -> None:
    account = _account(
        AccountCategory.SAVINGS_ACCOUNT,
        (datetime(2024, 1, 1, 9), "1000"),
        (datetime(2024, 2, 1, 9), "1200"),
    )

    assert value_as_of(account, date(2023, 12, 31)) == Decimal("0")
    assert value_as_of(account, date(2024, 1, 15)) == Decimal("1000")
    # A plain date includes observations made later that day.
    assert value_as_of(account, date(2024, 2, 1)) == Decimal("1200")
    assert value_as_of(account, datetime(2024, 2, 1, 8)) == Decimal("1000")


def test_value_as_of_matches_current_after_last_observation() -> None:
    account = _account(
        AccountCategory.CASH,
        (datetime(2024, 1, 1), "5"),
        (datetime(2024, 3, 1), "7.25"),
        (datetime(2024, 2, 1), "6"),
    )

    for day in (date(2024, 3, 1), date(2024, 3, 2), date(2030, 1, 1)):
        assert value_as_of(account, day) == current_value(account)


def test_change_and_percentage() -> None:
    account = _account(
        AccountCategory.GENERAL_INVESTMENT_ACCOUNT,
        (datetime(2024, 1, 1), "200"),
        (datetime(2024, 2, 1), "250"),
    )

    assert update_change(account) == Decimal("50")
    assert update_change_percentage(account) == Decimal("25")
    assert is_positive_trend(account)


def test_percentage_is_zero_when_prior_is_zero() -> None:
    account = _account(
        AccountCategory.CASH,
        (datetime(2024, 1, 1), "0"),
        (datetime(2024, 2, 1), "10"),
    )

    assert update_change_percentage(account) == Decimal("0")


def test_debt_paid_down_is_positive_trend() -> None:
    account = _account(
        AccountCategory.CREDIT_CARD,
        (datetime(2024, 1, 1), "-500"),
        (datetime(2024, 2, 1), "-300"),
    )

    assert is_positive_trend(account)
    assert update_change(account) == Decimal("200")


def test_signed_balance_negates_debt_only() -> None:
    assert signed_balance(AccountCategory.LOAN, Decimal("500")) == Decimal(
        "-500"
    )
    assert signed_balance(AccountCategory.LOAN, Decimal("-500")) == Decimal(
        "-500"
    )
    assert signed_balance(AccountCategory.CASH, Decimal("-5")) == Decimal("-5")


def test_observation_days_are_distinct_and_sorted() -> None:
    first = _account(
        AccountCategory.CASH,
        (datetime(2024, 2, 1, 8), "1"),
        (datetime(2024, 1, 1, 8), "1"),
        (datetime(2024, 2, 1, 18), "2"),
    )
    second = _account(AccountCategory.CASH, (datetime(2024, 1, 15), "3"))

    assert observation_days([first, second]) == [
        date(2024, 1, 1),
        date(2024, 1, 15),
        date(2024, 2, 1),
    ]
    assert observation_days([first, second], since=date(2024, 1, 15)) == [
        date(2024, 1, 15),
        date(2024, 2, 1),
    ]


def test_integrity_warnings_flag_empty_accounts() -> None:
    empty = _account()
    filled = _account(AccountCategory.CASH, (datetime(2024, 1, 1), "1"))

    warnings = find_integrity_warnings([empty, filled])

    assert len(warnings) == 1
    assert warnings[0].account_id == 1
    assert "no balance observations" in warnings[0].message
