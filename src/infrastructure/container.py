"""Composition root for wiring infrastructure adapters."""

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.add_account import AddAccountUseCase
from src.application.use_cases.delete_account import DeleteAccountUseCase
from src.application.use_cases.delete_observation import (
    DeleteObservationUseCase,
)
from src.application.use_cases.get_account_overviews import (
    GetAccountOverviewsUseCase,
)
from src.application.use_cases.get_history_series import (
    GetAccountHistoryUseCase,
    GetHistorySeriesUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_snapshot_series import (
    GetSnapshotSeriesUseCase,
)
from src.application.use_cases.manage_snapshots import SnapshotStoreManager
from src.application.use_cases.record_observation import (
    RecordObservationUseCase,
)
from src.domain.services.series import ChartSeriesBuilder
from src.infrastructure.clock import SystemClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema
from src.infrastructure.settings import NetWorthSettings
from src.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)

_series_builder = ChartSeriesBuilder()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def prepare_storage(db_port: DatabaseEnginePort | None = None) -> None:
    """Create the ledger tables when they do not exist yet."""
    resolved_db = db_port or build_database_adapter()
    ensure_schema(resolved_db)
    get_app_logger().info("Ledger storage ready")


def get_series_builder() -> ChartSeriesBuilder:
    """Return the process-wide chart series cache."""
    return _series_builder


def build_clock() -> ClockPort:
    return SystemClock()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the SQL-backed ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SnapshotRepositoryPort:
    """Return the SQL-backed snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySnapshotRepository(resolved_db)


def build_snapshot_manager(
    db_port: DatabaseEnginePort | None = None,
    clock: ClockPort | None = None,
) -> SnapshotStoreManager:
    """Return the snapshot store manager."""
    resolved_db = db_port or build_database_adapter()
    return SnapshotStoreManager(
        ledger_repository=build_ledger_repository(resolved_db),
        snapshot_repository=build_snapshot_repository(resolved_db),
        clock=clock or build_clock(),
    )


def build_record_observation_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: NetWorthSettings | None = None,
    clock: ClockPort | None = None,
) -> RecordObservationUseCase:
    """Return the use case appending balance observations."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or NetWorthSettings.from_env()
    resolved_clock = clock or build_clock()
    return RecordObservationUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        snapshot_manager=build_snapshot_manager(resolved_db, resolved_clock),
        series_builder=get_series_builder(),
        clock=resolved_clock,
        snapshot_policy=resolved_settings.snapshot_policy,
    )


def build_add_account_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: NetWorthSettings | None = None,
    clock: ClockPort | None = None,
) -> AddAccountUseCase:
    """Return the use case creating accounts with an opening balance."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or NetWorthSettings.from_env()
    resolved_clock = clock or build_clock()
    return AddAccountUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        snapshot_manager=build_snapshot_manager(resolved_db, resolved_clock),
        series_builder=get_series_builder(),
        clock=resolved_clock,
        snapshot_policy=resolved_settings.snapshot_policy,
    )


def build_delete_observation_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: NetWorthSettings | None = None,
    clock: ClockPort | None = None,
) -> DeleteObservationUseCase:
    """Return the use case deleting single observations."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or NetWorthSettings.from_env()
    resolved_clock = clock or build_clock()
    return DeleteObservationUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        snapshot_manager=build_snapshot_manager(resolved_db, resolved_clock),
        series_builder=get_series_builder(),
        clock=resolved_clock,
        snapshot_policy=resolved_settings.snapshot_policy,
    )


def build_delete_account_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: NetWorthSettings | None = None,
) -> DeleteAccountUseCase:
    """Return the use case deleting accounts and their history."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or NetWorthSettings.from_env()
    return DeleteAccountUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        snapshot_manager=build_snapshot_manager(resolved_db),
        series_builder=get_series_builder(),
        snapshot_policy=resolved_settings.snapshot_policy,
    )


def build_net_worth_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetNetWorthSummaryUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetNetWorthSummaryUseCase(build_ledger_repository(resolved_db))


def build_history_series_use_case(
    db_port: DatabaseEnginePort | None = None,
    clock: ClockPort | None = None,
) -> GetHistorySeriesUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetHistorySeriesUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        series_builder=get_series_builder(),
        clock=clock or build_clock(),
    )


def build_snapshot_series_use_case(
    db_port: DatabaseEnginePort | None = None,
    clock: ClockPort | None = None,
) -> GetSnapshotSeriesUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetSnapshotSeriesUseCase(
        snapshot_repository=build_snapshot_repository(resolved_db),
        clock=clock or build_clock(),
    )


def build_account_overviews_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountOverviewsUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetAccountOverviewsUseCase(build_ledger_repository(resolved_db))


def build_account_history_use_case(
    db_port: DatabaseEnginePort | None = None,
    clock: ClockPort | None = None,
) -> GetAccountHistoryUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetAccountHistoryUseCase(
        ledger_repository=build_ledger_repository(resolved_db),
        clock=clock or build_clock(),
    )


__all__ = [
    "build_database_adapter",
    "prepare_storage",
    "get_series_builder",
    "build_clock",
    "build_ledger_repository",
    "build_snapshot_repository",
    "build_snapshot_manager",
    "build_record_observation_use_case",
    "build_add_account_use_case",
    "build_delete_observation_use_case",
    "build_delete_account_use_case",
    "build_net_worth_summary_use_case",
    "build_history_series_use_case",
    "build_snapshot_series_use_case",
    "build_account_overviews_use_case",
    "build_account_history_use_case",
]
