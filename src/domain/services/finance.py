"""Domain services for net worth aggregates."""

from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal

from src.domain.models import (
    Account,
    AccountCategory,
    InclusionPolicy,
    NetWorthChange,
    NetWorthSummary,
    Snapshot,
)
from src.domain.policies import (
    included_as_asset,
    included_as_debt,
    included_in_net_worth,
)
from src.domain.services.ledger import current_value, value_as_of


def _sum_balances(
    accounts: Iterable[Account],
    include: Callable[[AccountCategory, InclusionPolicy], bool],
    policy: InclusionPolicy,
    as_of: date | datetime | None,
) -> Decimal:
    total = Decimal("0")
    for account in accounts:
        if not include(account.category, policy):
            continue
        if as_of is None:
            total += current_value(account)
        else:
            total += value_as_of(account, as_of)
    return total


def compute_net_worth(
    accounts: Iterable[Account],
    policy: InclusionPolicy,
    *,
    as_of: date | datetime | None = None,
) -> Decimal:
    """Return net worth over the included accounts.

    Args:
        accounts: Accounts to aggregate.
        policy: Inclusion toggles for pensions and mortgage debt.
        as_of: Optional day or moment; current balances when omitted.

    Returns:
        Decimal: Sum of included balances, debt already negative.
    """
    return _sum_balances(accounts, included_in_net_worth, policy, as_of)


def compute_total_assets(
    accounts: Iterable[Account],
    policy: InclusionPolicy,
    *,
    as_of: date | datetime | None = None,
) -> Decimal:
    """Return the asset side of net worth."""
    return _sum_balances(accounts, included_as_asset, policy, as_of)


def compute_total_debt(
    accounts: Iterable[Account],
    policy: InclusionPolicy,
    *,
    as_of: date | datetime | None = None,
) -> Decimal:
    """Return the debt side of net worth (zero or negative)."""
    return _sum_balances(accounts, included_as_debt, policy, as_of)


def compute_net_worth_summary(
    accounts: Sequence[Account],
    policy: InclusionPolicy,
    *,
    as_of: date | datetime | None = None,
) -> NetWorthSummary:
    """Compute net worth, assets and debt in one pass over the ledger.

    Args:
        accounts: Accounts to aggregate.
        policy: Inclusion toggles for pensions and mortgage debt.
        as_of: Optional day or moment; current balances when omitted.

    Returns:
        NetWorthSummary: Totals where net_worth == total_assets + total_debt.
    """
    return NetWorthSummary(
        net_worth=compute_net_worth(accounts, policy, as_of=as_of),
        total_assets=compute_total_assets(accounts, policy, as_of=as_of),
        total_debt=compute_total_debt(accounts, policy, as_of=as_of),
    )


def previous_update_moment(accounts: Iterable[Account]) -> datetime | None:
    """Return the latest observation timestamp before the most recent one.

    Args:
        accounts: Accounts whose observations are scanned.

    Returns:
        datetime | None: Previous distinct update moment, if any.
    """
    moments = {
        observation.observed_at
        for account in accounts
        for observation in account.observations
    }
    if len(moments) < 2:
        return None
    latest = max(moments)
    return max(moment for moment in moments if moment != latest)


def compute_net_worth_change(
    accounts: Sequence[Account],
    policy: InclusionPolicy,
) -> NetWorthChange | None:
    """Compare current totals with totals at the previous update moment.

    Args:
        accounts: Accounts to aggregate.
        policy: Inclusion toggles for pensions and mortgage debt.

    Returns:
        NetWorthChange | None: Deltas, or None without an earlier update.
    """
    previous_at = previous_update_moment(accounts)
    if previous_at is None:
        return None
    current = compute_net_worth_summary(accounts, policy)
    previous = compute_net_worth_summary(accounts, policy, as_of=previous_at)
    return NetWorthChange(
        previous_at=previous_at,
        net_worth=current.net_worth - previous.net_worth,
        total_assets=current.total_assets - previous.total_assets,
        total_debt=current.total_debt - previous.total_debt,
    )


def compute_snapshot(
    accounts: Iterable[Account],
    day: date,
    policy: InclusionPolicy,
) -> Snapshot:
    """Return the snapshot for ``day`` valued from the ledger as of that day."""
    return Snapshot(
        day=day,
        net_worth=compute_net_worth(accounts, policy, as_of=day),
    )


__all__ = [
    "compute_net_worth",
    "compute_total_assets",
    "compute_total_debt",
    "compute_net_worth_summary",
    "previous_update_moment",
    "compute_net_worth_change",
    "compute_snapshot",
]
