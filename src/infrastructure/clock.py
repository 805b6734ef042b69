"""System clock adapter."""

from datetime import date, datetime

from src.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """ClockPort reading the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return date.today()

    def day_of(self, timestamp: datetime) -> date:
        return timestamp.date()


__all__ = ["SystemClock"]
