"""Domain services package."""

from .finance import (
    compute_net_worth,
    compute_net_worth_change,
    compute_net_worth_summary,
    compute_snapshot,
    compute_total_assets,
    compute_total_debt,
)
from .ledger import (
    current_value,
    find_integrity_warnings,
    observation_days,
    prior_value,
    value_as_of,
)
from .series import (
    ChartSeriesBuilder,
    build_account_series,
    build_cumulative_series,
    thin,
    windowed,
)
from .validation import validate_balance_sign, validate_ledger

__all__ = [
    "compute_net_worth",
    "compute_net_worth_change",
    "compute_net_worth_summary",
    "compute_snapshot",
    "compute_total_assets",
    "compute_total_debt",
    "current_value",
    "find_integrity_warnings",
    "observation_days",
    "prior_value",
    "value_as_of",
    "ChartSeriesBuilder",
    "build_account_series",
    "build_cumulative_series",
    "thin",
    "windowed",
    "validate_balance_sign",
    "validate_ledger",
]
