"""Domain package for valuation rules and core models."""

from .constants import DEBT_CATEGORIES, RETIREMENT_CATEGORIES
from .errors import (
    IntegrityWarning,
    LastObservationError,
    NetWorthError,
    PersistenceError,
)
from .models import (
    Account,
    AccountCategory,
    ChartPeriod,
    InclusionPolicy,
    NetWorthSummary,
    Observation,
    SeriesPoint,
    Snapshot,
)
from .policies import included_as_asset, is_debt, is_retirement
from .services import (
    compute_net_worth,
    compute_net_worth_summary,
    thin,
    windowed,
)

__all__ = [
    "DEBT_CATEGORIES",
    "RETIREMENT_CATEGORIES",
    "IntegrityWarning",
    "LastObservationError",
    "NetWorthError",
    "PersistenceError",
    "Account",
    "AccountCategory",
    "ChartPeriod",
    "InclusionPolicy",
    "NetWorthSummary",
    "Observation",
    "SeriesPoint",
    "Snapshot",
    "included_as_asset",
    "is_debt",
    "is_retirement",
    "compute_net_worth",
    "compute_net_worth_summary",
    "thin",
    "windowed",
]
