"""Application use cases package."""

from .add_account import AddAccountResult, AddAccountUseCase
from .delete_account import DeleteAccountResult, DeleteAccountUseCase
from .delete_observation import (
    DeleteObservationResult,
    DeleteObservationUseCase,
)
from .get_account_overviews import (
    AccountOverviewsResult,
    GetAccountOverviewsUseCase,
)
from .get_history_series import (
    GetAccountHistoryUseCase,
    GetHistorySeriesUseCase,
    SeriesResult,
)
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummaryResult,
)
from .get_snapshot_series import GetSnapshotSeriesUseCase
from .manage_snapshots import (
    SnapshotRebuildResult,
    SnapshotStoreManager,
    SnapshotUpsertResult,
)
from .record_observation import (
    RecordObservationResult,
    RecordObservationUseCase,
)

__all__ = [
    "AddAccountResult",
    "AddAccountUseCase",
    "DeleteAccountResult",
    "DeleteAccountUseCase",
    "DeleteObservationResult",
    "DeleteObservationUseCase",
    "AccountOverviewsResult",
    "GetAccountOverviewsUseCase",
    "GetAccountHistoryUseCase",
    "GetHistorySeriesUseCase",
    "SeriesResult",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummaryResult",
    "GetSnapshotSeriesUseCase",
    "SnapshotRebuildResult",
    "SnapshotStoreManager",
    "SnapshotUpsertResult",
    "RecordObservationResult",
    "RecordObservationUseCase",
]
