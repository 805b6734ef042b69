"""Port for reading the current time."""

from datetime import date, datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port injecting "now" so that tests can fix it."""

    def now(self) -> datetime:
        """Return the current moment."""

    def today(self) -> date:
        """Return the current calendar day."""

    def day_of(self, timestamp: datetime) -> date:
        """Return the calendar day containing ``timestamp``."""


__all__ = ["ClockPort"]
