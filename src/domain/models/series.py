"""Domain models for snapshots and chart series."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class Snapshot:
    """Cached net worth for one calendar day."""

    day: date
    net_worth: Decimal


@dataclass(frozen=True)
class SeriesPoint:
    """A single chart point."""

    at: datetime
    value: Decimal


class ChartPeriod(str, Enum):
    """Look-back windows offered by the charts."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    FIVE_YEARS = "5Y"
    MAX = "Max"

    @property
    def days(self) -> int | None:
        """Window length in days, None for all time."""
        return _PERIOD_DAYS[self]

    @property
    def display_name(self) -> str:
        return _PERIOD_NAMES[self]


_PERIOD_DAYS = {
    ChartPeriod.ONE_DAY: 1,
    ChartPeriod.ONE_WEEK: 7,
    ChartPeriod.ONE_MONTH: 30,
    ChartPeriod.THREE_MONTHS: 90,
    ChartPeriod.ONE_YEAR: 365,
    ChartPeriod.FIVE_YEARS: 1825,
    ChartPeriod.MAX: None,
}

_PERIOD_NAMES = {
    ChartPeriod.ONE_DAY: "1 Day",
    ChartPeriod.ONE_WEEK: "1 Week",
    ChartPeriod.ONE_MONTH: "1 Month",
    ChartPeriod.THREE_MONTHS: "3 Months",
    ChartPeriod.ONE_YEAR: "1 Year",
    ChartPeriod.FIVE_YEARS: "5 Years",
    ChartPeriod.MAX: "All Time",
}


__all__ = ["Snapshot", "SeriesPoint", "ChartPeriod"]
