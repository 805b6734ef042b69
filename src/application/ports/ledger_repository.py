"""Port for reading and writing accounts and balance observations."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models import Account, AccountCategory, Observation


class LedgerRepositoryPort(Protocol):
    """Port exposing durable storage for the balance ledger.

    Implementations raise ``PersistenceError`` when the store fails.
    """

    def fetch_accounts(self) -> list[Account]:
        """Return every account with its observations in insertion order."""

    def fetch_account(self, account_id: int) -> Account | None:
        """Return one account with its observations, if it exists."""

    def fetch_observation(self, observation_id: int) -> Observation | None:
        """Return one observation, if it exists."""

    def add_account(
        self,
        category: AccountCategory,
        provider: str,
        opening_balance: Decimal,
        opened_at: datetime,
    ) -> Account:
        """Insert an account together with its opening observation."""

    def add_observation(
        self,
        account_id: int,
        amount: Decimal,
        observed_at: datetime,
    ) -> Observation:
        """Append an observation to an account and return it."""

    def delete_observation(self, observation_id: int) -> None:
        """Delete one observation."""

    def delete_account(self, account_id: int) -> int:
        """Delete an account and its observations; return observations removed."""


__all__ = ["LedgerRepositoryPort"]
