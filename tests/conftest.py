"""Shared in-memory doubles for the ledger, snapshot store and clock."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.errors import AccountNotFoundError, ObservationNotFoundError
from src.domain.models import Account, AccountCategory, Observation, Snapshot


class InMemoryLedgerRepository:
    """LedgerRepositoryPort double keeping accounts in insertion order."""

    def __init__(self) -> None:
        self.accounts: dict[int, Account] = {}
        self._next_account_id = 1
        self._next_observation_id = 1

    def seed(
        self,
        category: AccountCategory,
        provider: str,
        *entries: tuple[datetime, str],
    ) -> Account:
        account = Account(
            category=category,
            provider=provider,
            account_id=self._next_account_id,
        )
        self._next_account_id += 1
        self.accounts[account.account_id] = account
        for observed_at, amount in entries:
            self.add_observation(account.account_id, Decimal(amount), observed_at)
        return self.fetch_account(account.account_id)

    def fetch_accounts(self) -> list[Account]:
        return [self._copy(account) for account in self.accounts.values()]

    def fetch_account(self, account_id: int) -> Account | None:
        account = self.accounts.get(account_id)
        return self._copy(account) if account is not None else None

    def fetch_observation(self, observation_id: int) -> Observation | None:
        for account in self.accounts.values():
            for observation in account.observations:
                if observation.observation_id == observation_id:
                    return observation
        return None

    def add_account(
        self,
        category: AccountCategory,
        provider: str,
        opening_balance: Decimal,
        opened_at: datetime,
    ) -> Account:
        return self.seed(category, provider, (opened_at, str(opening_balance)))

    def add_observation(
        self,
        account_id: int,
        amount: Decimal,
        observed_at: datetime,
    ) -> Observation:
        account = self.accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        observation = Observation(
            amount=amount,
            observed_at=observed_at,
            account_id=account_id,
            observation_id=self._next_observation_id,
        )
        self._next_observation_id += 1
        account.observations.append(observation)
        return observation

    def delete_observation(self, observation_id: int) -> None:
        for account in self.accounts.values():
            for observation in account.observations:
                if observation.observation_id == observation_id:
                    account.observations.remove(observation)
                    return
        raise ObservationNotFoundError(observation_id)

    def delete_account(self, account_id: int) -> int:
        account = self.accounts.pop(account_id, None)
        if account is None:
            raise AccountNotFoundError(account_id)
        return len(account.observations)

    @staticmethod
    def _copy(account: Account) -> Account:
        return replace(account, observations=list(account.observations))


class InMemorySnapshotRepository:
    """SnapshotRepositoryPort double keyed by day."""

    def __init__(self) -> None:
        self.rows: dict[date, Snapshot] = {}

    def fetch_snapshots(self, since: date | None = None) -> list[Snapshot]:
        return [
            self.rows[day]
            for day in sorted(self.rows)
            if since is None or day >= since
        ]

    def fetch_snapshot(self, day: date) -> Snapshot | None:
        return self.rows.get(day)

    def count_snapshots(self) -> int:
        return len(self.rows)

    def delete_snapshots(self, since: date | None = None) -> int:
        doomed = [day for day in self.rows if since is None or day >= since]
        for day in doomed:
            del self.rows[day]
        return len(doomed)

    def insert_snapshots(self, snapshots: list[Snapshot]) -> int:
        for snapshot in snapshots:
            assert snapshot.day not in self.rows
            self.rows[snapshot.day] = snapshot
        return len(snapshots)

    def upsert_snapshot(self, snapshot: Snapshot) -> bool:
        existed = snapshot.day in self.rows
        self.rows[snapshot.day] = snapshot
        return existed


class FixedClock:
    """ClockPort double frozen at a given moment."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def today(self) -> date:
        return self.moment.date()

    def day_of(self, timestamp: datetime) -> date:
        return timestamp.date()


@pytest.fixture
def ledger_repository() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository()


@pytest.fixture
def snapshot_repository() -> InMemorySnapshotRepository:
    return InMemorySnapshotRepository()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 10, 9, 30))
