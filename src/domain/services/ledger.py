"""Read-only accessors over an account's balance observations."""

from collections.abc import Callable, Iterable
from datetime import date, datetime
from decimal import Decimal

from src.domain.errors import IntegrityWarning
from src.domain.models import Account, AccountCategory, Observation
from src.domain.policies import is_debt


def latest_observation(
    account: Account,
    predicate: Callable[[Observation], bool] | None = None,
) -> Observation | None:
    """Return the max-timestamp observation, later insertion winning ties.

    Args:
        account: Account whose observations are scanned.
        predicate: Optional filter applied before comparison.

    Returns:
        Observation | None: Latest matching observation, if any.
    """
    latest = None
    for observation in account.observations:
        if predicate is not None and not predicate(observation):
            continue
        if latest is None or observation.observed_at >= latest.observed_at:
            latest = observation
    return latest


def current_value(account: Account) -> Decimal:
    """Return the most recent balance, zero when there is none."""
    latest = latest_observation(account)
    return latest.amount if latest is not None else Decimal("0")


def value_as_of(account: Account, when: date | datetime) -> Decimal:
    """Return the balance known at ``when``, never looking ahead.

    A plain ``date`` is treated as the end of that day: observations
    timestamped on it count. A ``datetime`` is compared exactly.

    Args:
        account: Account to value.
        when: Day or moment of the valuation.

    Returns:
        Decimal: Latest balance at or before ``when``, else zero.
    """
    if isinstance(when, datetime):
        latest = latest_observation(
            account,
            lambda observation: observation.observed_at <= when,
        )
    else:
        latest = latest_observation(
            account,
            lambda observation: observation.observed_at.date() <= when,
        )
    return latest.amount if latest is not None else Decimal("0")


def ordered_observations(account: Account) -> list[Observation]:
    """Return observations newest first, later insertion first on ties."""
    indexed = sorted(
        enumerate(account.observations),
        key=lambda item: (item[1].observed_at, item[0]),
        reverse=True,
    )
    return [observation for _, observation in indexed]


def prior_value(account: Account) -> Decimal | None:
    """Return the second most recent balance, None with fewer than two."""
    ordered = ordered_observations(account)
    if len(ordered) < 2:
        return None
    return ordered[1].amount


def last_update(account: Account) -> datetime | None:
    latest = latest_observation(account)
    return latest.observed_at if latest is not None else None


def update_change(account: Account) -> Decimal:
    """Return current minus prior balance, zero without a prior."""
    previous = prior_value(account)
    if previous is None:
        return Decimal("0")
    return current_value(account) - previous


def update_change_percentage(account: Account) -> Decimal:
    """Return the last change as a percentage of the prior balance."""
    previous = prior_value(account)
    if previous is None or previous == 0:
        return Decimal("0")
    return update_change(account) / previous * Decimal("100")


def is_positive_trend(account: Account) -> bool:
    # A debt moving towards zero is an increase, which is also good.
    return update_change(account) > 0


def observation_days(
    accounts: Iterable[Account],
    since: date | None = None,
) -> list[date]:
    """Return sorted distinct calendar days that carry observations.

    Args:
        accounts: Accounts whose observations are scanned.
        since: Optional lower bound, inclusive.

    Returns:
        list[date]: Distinct observation days in ascending order.
    """
    days = {
        observation.observed_at.date()
        for account in accounts
        for observation in account.observations
    }
    if since is not None:
        days = {day for day in days if day >= since}
    return sorted(days)


def find_integrity_warnings(
    accounts: Iterable[Account],
) -> list[IntegrityWarning]:
    """Return a warning for every account holding no observation."""
    return [
        IntegrityWarning(
            account_id=account.account_id,
            message=(
                f"Account {account.account_id} ({account.provider}) "
                "has no balance observations; valued as zero"
            ),
        )
        for account in accounts
        if not account.observations
    ]


def signed_balance(category: AccountCategory, amount: Decimal) -> Decimal:
    """Apply the sign convention to an amount entered as a magnitude.

    Args:
        category: Category of the account being updated.
        amount: Entered balance or amount owed.

    Returns:
        Decimal: Negative for debt accounts, unchanged otherwise.
    """
    if is_debt(category):
        return -abs(amount)
    return amount


__all__ = [
    "latest_observation",
    "current_value",
    "value_as_of",
    "ordered_observations",
    "prior_value",
    "last_update",
    "update_change",
    "update_change_percentage",
    "is_positive_trend",
    "observation_days",
    "find_integrity_warnings",
    "signed_balance",
]
