"""Tests for net worth aggregation."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models import Account, AccountCategory, InclusionPolicy, Observation
from src.domain.services.finance import (
    compute_net_worth,
    compute_net_worth_change,
    compute_net_worth_summary,
    compute_snapshot,
    compute_total_assets,
    compute_total_debt,
    previous_update_moment,
)


def _account(category, account_id, *entries):
    return Account(
        category=category,
        provider=f"Provider {account_id}",
        account_id=account_id,
        observations=[
            Observation(
                amount=Decimal(amount),
                observed_at=observed_at,
                account_id=account_id,
            )
            for observed_at, amount in entries
        ],
    )


def _mixed_ledger():
    return [
        _account(
            AccountCategory.CURRENT_ACCOUNT,
            1,
            (datetime(2024, 1, 1), "1000.10"),
            (datetime(2024, 2, 1), "1200.20"),
        ),
        _account(
            AccountCategory.PENSION,
            2,
            (datetime(2024, 1, 5), "30000.01"),
        ),
        _account(
            AccountCategory.MORTGAGE,
            3,
            (datetime(2024, 1, 3), "-150000.33"),
        ),
        _account(
            AccountCategory.CREDIT_CARD,
            4,
            (datetime(2024, 1, 20), "-420.07"),
        ),
    ]


def test_debt_and_asset_scenario() -> None:
    accounts = [
        _account(AccountCategory.LOAN, 1, (datetime(2024, 1, 1), "-500")),
        _account(AccountCategory.SAVINGS_ACCOUNT, 2, (datetime(2024, 1, 1), "2000")),
    ]

    summary = compute_net_worth_summary(accounts, InclusionPolicy())

    assert summary.net_worth == Decimal("1500")
    assert summary.total_assets == Decimal("2000")
    assert summary.total_debt == Decimal("-500")


def test_net_worth_equals_assets_plus_debt_for_every_policy() -> None:
    accounts = _mixed_ledger()
    for include_retirement in (True, False):
        for include_mortgage_debt in (True, False):
            policy = InclusionPolicy(include_retirement, include_mortgage_debt)
            for as_of in (None, date(2024, 1, 4), date(2024, 1, 31)):
                summary = compute_net_worth_summary(
                    accounts,
                    policy,
                    as_of=as_of,
                )
                assert summary.net_worth == (
                    summary.total_assets + summary.total_debt
                )


def test_toggles_remove_pension_and_mortgage() -> None:
    accounts = _mixed_ledger()
    policy = InclusionPolicy(
        include_retirement=False,
        include_mortgage_debt=False,
    )

    assert compute_total_assets(accounts, policy) == Decimal("1200.20")
    assert compute_total_debt(accounts, policy) == Decimal("-420.07")
    assert compute_net_worth(accounts, policy) == Decimal("780.13")


def test_as_of_january_scenario() -> None:
    accounts = [
        _account(
            AccountCategory.CURRENT_ACCOUNT,
            1,
            (datetime(2024, 1, 1), "1000"),
            (datetime(2024, 2, 1), "1200"),
        )
    ]

    assert compute_net_worth(
        accounts,
        InclusionPolicy(),
        as_of=date(2024, 1, 15),
    ) == Decimal("1000")


def test_previous_update_moment_skips_latest() -> None:
    accounts = _mixed_ledger()

    assert previous_update_moment(accounts) == datetime(2024, 1, 20)
    assert previous_update_moment(accounts[1:2]) is None


def test_change_compares_with_previous_update() -> None:
    accounts = _mixed_ledger()

    change = compute_net_worth_change(accounts, InclusionPolicy())

    assert change is not None
    assert change.previous_at == datetime(2024, 1, 20)
    assert change.total_assets == Decimal("200.10")
    assert change.total_debt == Decimal("0")
    assert change.net_worth == Decimal("200.10")


def test_change_is_none_without_history() -> None:
    accounts = [
        _account(AccountCategory.CASH, 1, (datetime(2024, 1, 1), "5")),
    ]

    assert compute_net_worth_change(accounts, InclusionPolicy()) is None


def test_compute_snapshot_values_the_day() -> None:
    accounts = _mixed_ledger()

    snapshot = compute_snapshot(accounts, date(2024, 1, 4), InclusionPolicy())

    assert snapshot.day == date(2024, 1, 4)
    assert snapshot.net_worth == Decimal("1000.10") + Decimal("-150000.33")
