"""Chart series construction, period windowing and axis thinning."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import TypeVar

from src.domain.models import (
    Account,
    ChartPeriod,
    InclusionPolicy,
    SeriesPoint,
    Snapshot,
)
from src.domain.policies import included_as_asset
from src.domain.services.ledger import ordered_observations

T = TypeVar("T")

# (upper bound on point count, keep every n-th point)
_THINNING_BUCKETS = (
    (6, 1),
    (12, 2),
    (24, 3),
    (60, 6),
)
_THINNING_MAX_STEP = 12


def build_cumulative_series(
    accounts: Sequence[Account],
    policy: InclusionPolicy,
) -> list[SeriesPoint]:
    """Build the cumulative asset series from raw observations.

    Observations of asset-eligible accounts are swept in timestamp order
    while a table keeps each account's latest known balance. One point is
    emitted per distinct timestamp, carrying the fully updated total.

    Args:
        accounts: Accounts to chart; debt accounts are always skipped.
        policy: Inclusion toggles, used for pension accounts.

    Returns:
        list[SeriesPoint]: Step series ordered by timestamp.
    """
    updates: list[tuple[datetime, int, Decimal]] = []
    for index, account in enumerate(accounts):
        if not included_as_asset(account.category, policy):
            continue
        for observation in account.observations:
            updates.append((observation.observed_at, index, observation.amount))
    # Stable sort keeps insertion order for equal timestamps.
    updates.sort(key=lambda update: update[0])

    balances: dict[int, Decimal] = {}
    points: list[SeriesPoint] = []
    for observed_at, index, amount in updates:
        balances[index] = amount
        point = SeriesPoint(
            at=observed_at,
            value=sum(balances.values(), Decimal("0")),
        )
        if points and points[-1].at == observed_at:
            points[-1] = point
        else:
            points.append(point)
    return points


def build_account_series(account: Account) -> list[SeriesPoint]:
    """Return one account's observations as an ascending series."""
    return [
        SeriesPoint(at=observation.observed_at, value=observation.amount)
        for observation in reversed(ordered_observations(account))
    ]


def snapshots_to_series(snapshots: Iterable[Snapshot]) -> list[SeriesPoint]:
    """Convert stored snapshots into series points at start of day."""
    return [
        SeriesPoint(
            at=datetime.combine(snapshot.day, time.min),
            value=snapshot.net_worth,
        )
        for snapshot in sorted(snapshots, key=lambda item: item.day)
    ]


def windowed(
    series: Sequence[SeriesPoint],
    period: ChartPeriod,
    today: date,
) -> list[SeriesPoint]:
    """Clip a series to a look-back period, filling a gap at its start.

    When the window opens before its first point, a synthetic point is
    placed at the cutoff carrying the last value known before it, or the
    first value in the window when nothing precedes it.

    Args:
        series: Points to window.
        period: Requested look-back period.
        today: Reference day for the window end.

    Returns:
        list[SeriesPoint]: Windowed series.
    """
    ordered = sorted(series, key=lambda point: point.at)
    if period.days is None or not ordered:
        return ordered

    cutoff = datetime.combine(
        today - timedelta(days=period.days),
        time.min,
        tzinfo=ordered[0].at.tzinfo,
    )
    kept = [point for point in ordered if point.at >= cutoff]
    if kept and kept[0].at == cutoff:
        return kept

    before = [point for point in ordered if point.at < cutoff]
    carried = before[-1].value if before else kept[0].value
    return [SeriesPoint(at=cutoff, value=carried), *kept]


def thinning_step(count: int) -> int:
    """Return the label stride for a series of ``count`` points."""
    for upper, step in _THINNING_BUCKETS:
        if count <= upper:
            return step
    return _THINNING_MAX_STEP


def thin(items: Sequence[T], count: int | None = None) -> list[T]:
    """Keep indices 0, k, 2k, ... with k chosen from the point count.

    Args:
        items: Dates (or points) to thin.
        count: Point count driving the stride; defaults to ``len(items)``.

    Returns:
        list: Thinned subsequence.
    """
    step = thinning_step(len(items) if count is None else count)
    return list(items[::step])


class ChartSeriesBuilder:
    """Cache the cumulative series per account-set size and policy."""

    def __init__(self) -> None:
        self._cache_key: tuple[int, InclusionPolicy] | None = None
        self._cached: list[SeriesPoint] | None = None

    def series(
        self,
        accounts: Sequence[Account],
        policy: InclusionPolicy,
    ) -> list[SeriesPoint]:
        """Return the cumulative series, rebuilding when the key changes."""
        key = (len(accounts), policy)
        if self._cached is None or self._cache_key != key:
            self._cached = build_cumulative_series(accounts, policy)
            self._cache_key = key
        return list(self._cached)

    def invalidate(self) -> None:
        """Drop the cached series after a ledger mutation."""
        self._cache_key = None
        self._cached = None

    @property
    def is_cached(self) -> bool:
        return self._cached is not None


__all__ = [
    "build_cumulative_series",
    "build_account_series",
    "snapshots_to_series",
    "windowed",
    "thinning_step",
    "thin",
    "ChartSeriesBuilder",
]
