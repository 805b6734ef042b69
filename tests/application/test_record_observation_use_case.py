"""Tests for the RecordObservationUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.manage_snapshots import SnapshotStoreManager
from src.application.use_cases.record_observation import (
    RecordObservationUseCase,
)
from src.domain.errors import AccountNotFoundError, InvalidAmountError
from src.domain.models import AccountCategory, InclusionPolicy
from src.domain.services.series import ChartSeriesBuilder


def _use_case(ledger_repository, snapshot_repository, clock, builder=None):
    manager = SnapshotStoreManager(
        ledger_repository=ledger_repository,
        snapshot_repository=snapshot_repository,
        clock=clock,
        logger=MagicMock(),
    )
    return RecordObservationUseCase(
        ledger_repository=ledger_repository,
        snapshot_manager=manager,
        series_builder=builder or ChartSeriesBuilder(),
        clock=clock,
        snapshot_policy=InclusionPolicy(),
        logger=MagicMock(),
    )


def test_execute_appends_and_refreshes_today(
    ledger_repository,
    snapshot_repository,
    clock,
) -> None:
    account = ledger_repository.seed(
        AccountCategory.SAVINGS_ACCOUNT,
        "Bank",
        (datetime(2024, 1, 1), "100"),
    )
    builder = ChartSeriesBuilder()
    builder.series(ledger_repository.fetch_accounts(), InclusionPolicy())

    result = _use_case(
        ledger_repository,
        snapshot_repository,
        clock,
        builder,
    ).execute(account.account_id, "1,250.50")

    assert result.ok
    assert result.observation.amount == Decimal("1250.50")
    assert result.observation.observed_at == clock.now()
    assert result.regeneration is None
    assert not builder.is_cached
    assert snapshot_repository.fetch_snapshot(date(2024, 3, 10)).net_worth == (
        Decimal("1250.50")
    )


def test_backdated_observation_regenerates_from_its_day(
    ledger_repository,
    snapshot_repository,
    clock,
) -> None:
    account = ledger_repository.seed(
        AccountCategory.SAVINGS_ACCOUNT,
        "Bank",
        (datetime(2024, 1, 1), "100"),
        (datetime(2024, 2, 1), "300"),
    )
    use_case = _use_case(ledger_repository, snapshot_repository, clock)

    result = use_case.execute(
        account.account_id,
        Decimal("200"),
        observed_at=datetime(2024, 1, 15, 12),
    )

    assert result.ok
    assert result.regeneration.from_day == date(2024, 1, 15)
    assert snapshot_repository.fetch_snapshot(date(2024, 1, 15)).net_worth == (
        Decimal("200")
    )
    assert snapshot_repository.fetch_snapshot(date(2024, 2, 1)).net_worth == (
        Decimal("300")
    )


def test_invalid_amount_is_reported(
    ledger_repository,
    snapshot_repository,
    clock,
) -> None:
    account = ledger_repository.seed(
        AccountCategory.CASH,
        "Wallet",
        (datetime(2024, 1, 1), "1"),
    )

    result = _use_case(ledger_repository, snapshot_repository, clock).execute(
        account.account_id,
        "twelve",
    )

    assert not result.ok
    assert isinstance(result.error, InvalidAmountError)
    assert len(ledger_repository.fetch_account(account.account_id).observations) == 1
    assert snapshot_repository.count_snapshots() == 0


def test_unknown_account_is_reported(
    ledger_repository,
    snapshot_repository,
    clock,
) -> None:
    result = _use_case(ledger_repository, snapshot_repository, clock).execute(
        99,
        "10",
    )

    assert isinstance(result.error, AccountNotFoundError)
    assert result.observation is None


def test_non_finite_amount_is_rejected(
    ledger_repository,
    snapshot_repository,
    clock,
) -> None:
    account = ledger_repository.seed(
        AccountCategory.SAVINGS_ACCOUNT,
        "Bank",
        (datetime(2024, 1, 1), "100"),
    )
    use_case = _use_case(ledger_repository, snapshot_repository, clock)

    for raw in ("NaN", "inf", "-Infinity", Decimal("NaN")):
        result = use_case.execute(account.account_id, raw)

        assert not result.ok
        assert isinstance(result.error, InvalidAmountError)
        assert result.observation is None
    assert len(ledger_repository.fetch_account(account.account_id).observations) == 1
    assert snapshot_repository.count_snapshots() == 0
