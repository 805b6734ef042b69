"""Use case reading the stored daily snapshots as a chart series."""

from src.application.ports.clock import ClockPort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.get_history_series import SeriesResult
from src.domain.errors import NetWorthError
from src.domain.models import ChartPeriod
from src.domain.services.series import snapshots_to_series, windowed
from src.infrastructure.logging.logger import get_app_logger


class GetSnapshotSeriesUseCase:
    """Return stored snapshots as a windowed series."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port reading snapshot rows.
            clock: Port providing today's date for the window.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_repository = snapshot_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, period: ChartPeriod) -> SeriesResult:
        """Return snapshot points for the period.

        Args:
            period: Look-back period.

        Returns:
            SeriesResult: One point per stored day, gap-filled at the start.
        """
        try:
            snapshots = self._snapshot_repository.fetch_snapshots()
        except NetWorthError as exc:
            self._logger.error(f"Failed to fetch snapshots: {exc}")
            return SeriesResult(error=exc)
        return SeriesResult(
            points=windowed(
                snapshots_to_series(snapshots),
                period,
                self._clock.today(),
            )
        )


__all__ = ["GetSnapshotSeriesUseCase"]
