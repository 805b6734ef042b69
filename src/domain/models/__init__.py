"""Domain models package."""

from .accounts import Account, AccountCategory, Observation
from .finance import (
    AccountOverview,
    InclusionPolicy,
    NetWorthChange,
    NetWorthSummary,
)
from .series import ChartPeriod, SeriesPoint, Snapshot

__all__ = [
    "Account",
    "AccountCategory",
    "Observation",
    "AccountOverview",
    "InclusionPolicy",
    "NetWorthChange",
    "NetWorthSummary",
    "ChartPeriod",
    "SeriesPoint",
    "Snapshot",
]
