"""Tests for the composition root."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import create_engine

from src.domain.models import AccountCategory, ChartPeriod, InclusionPolicy
from src.infrastructure import container
from src.infrastructure.db import StaticEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import NetWorthSettings
from src.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)


class _Clock:
    def now(self) -> datetime:
        return datetime(2024, 3, 10, 9, 30)

    def today(self) -> date:
        return date(2024, 3, 10)

    def day_of(self, timestamp: datetime) -> date:
        return timestamp.date()


def test_builders_return_sqlalchemy_repositories() -> None:
    db_port = StaticEngineAdapter(create_engine("sqlite://"))

    assert isinstance(
        container.build_ledger_repository(db_port),
        SqlAlchemyLedgerRepository,
    )
    assert isinstance(
        container.build_snapshot_repository(db_port),
        SqlAlchemySnapshotRepository,
    )


def test_series_builder_is_shared() -> None:
    assert container.get_series_builder() is container.get_series_builder()


def test_wired_use_cases_against_sqlite(tmp_path) -> None:
    """Account creation, updates and reads share one store and cache."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}", future=True)
    db_port = StaticEngineAdapter(engine)
    settings = NetWorthSettings(db_url=str(engine.url))
    clock = _Clock()
    container.prepare_storage(db_port)

    added = container.build_add_account_use_case(
        db_port,
        settings=settings,
        clock=clock,
    ).execute(
        AccountCategory.CURRENT_ACCOUNT,
        "Bank",
        "1000",
        opened_at=datetime(2024, 1, 1, 9),
    )
    recorded = container.build_record_observation_use_case(
        db_port,
        settings=settings,
        clock=clock,
    ).execute(added.account.account_id, "1200", datetime(2024, 2, 1, 9))

    assert added.ok
    assert recorded.ok
    summary = container.build_net_worth_summary_use_case(db_port).execute(
        InclusionPolicy()
    )
    assert summary.summary.net_worth == Decimal("1200")

    deleted = container.build_delete_observation_use_case(
        db_port,
        settings=settings,
        clock=clock,
    ).execute(recorded.observation.observation_id)

    assert deleted.ok
    snapshots = container.build_snapshot_series_use_case(
        db_port,
        clock=clock,
    ).execute(ChartPeriod.MAX)
    assert [point.at.date() for point in snapshots.points] == [
        date(2024, 1, 1),
    ]
    history = container.build_history_series_use_case(
        db_port,
        clock=clock,
    ).execute(InclusionPolicy(), ChartPeriod.MAX)
    assert [point.value for point in history.points] == [Decimal("1000")]
    overviews = container.build_account_overviews_use_case(db_port).execute()
    assert overviews.overviews[0].current_value == Decimal("1000")
