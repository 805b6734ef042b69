"""SQLAlchemy-backed repository for accounts and balance observations."""

from collections import defaultdict
from datetime import datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import (
    AccountNotFoundError,
    ObservationNotFoundError,
    PersistenceError,
)
from src.domain.models import Account, AccountCategory, Observation
from src.utils.decimal_utils import coerce_decimal, decimal_to_storage

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, category, provider
    FROM accounts
    ORDER BY id
    """
)

SELECT_ACCOUNT_SQL = text(
    """
    SELECT id, category, provider
    FROM accounts
    WHERE id = :account_id
    """
)

SELECT_OBSERVATIONS_SQL = text(
    """
    SELECT id, account_id, amount, observed_at
    FROM observations
    ORDER BY id
    """
)

SELECT_ACCOUNT_OBSERVATIONS_SQL = text(
    """
    SELECT id, account_id, amount, observed_at
    FROM observations
    WHERE account_id = :account_id
    ORDER BY id
    """
)

SELECT_OBSERVATION_SQL = text(
    """
    SELECT id, account_id, amount, observed_at
    FROM observations
    WHERE id = :observation_id
    """
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (category, provider)
    VALUES (:category, :provider)
    RETURNING id
    """
)

INSERT_OBSERVATION_SQL = text(
    """
    INSERT INTO observations (account_id, amount, observed_at)
    VALUES (:account_id, :amount, :observed_at)
    RETURNING id
    """
)

DELETE_OBSERVATION_SQL = text(
    "DELETE FROM observations WHERE id = :observation_id"
)

DELETE_ACCOUNT_OBSERVATIONS_SQL = text(
    "DELETE FROM observations WHERE account_id = :account_id"
)

DELETE_ACCOUNT_SQL = text("DELETE FROM accounts WHERE id = :account_id")


def timestamp_to_storage(value: datetime) -> str:
    """Serialize a timestamp as ISO-8601 with microseconds."""
    return value.isoformat(timespec="microseconds")


def timestamp_from_storage(value) -> datetime:
    """Read a stored timestamp back into a datetime."""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _to_observation(row) -> Observation:
    return Observation(
        amount=coerce_decimal(row.amount),
        observed_at=timestamp_from_storage(row.observed_at),
        account_id=row.account_id,
        observation_id=row.id,
    )


def _to_account(row, observations: list[Observation]) -> Account:
    return Account(
        category=AccountCategory.parse(row.category),
        provider=row.provider,
        account_id=row.id,
        observations=observations,
    )


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger repository backed by SQLAlchemy ``text()`` queries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[Account]:
        """Return every account with its observations in insertion order."""
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                account_rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
                observation_rows = conn.execute(SELECT_OBSERVATIONS_SQL).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to fetch accounts: {exc}") from exc

        grouped: dict[int, list[Observation]] = defaultdict(list)
        for row in observation_rows:
            grouped[row.account_id].append(_to_observation(row))
        return [
            _to_account(row, grouped.get(row.id, []))
            for row in account_rows
        ]

    def fetch_account(self, account_id: int) -> Account | None:
        params = {"account_id": account_id}
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(SELECT_ACCOUNT_SQL, params).first()
                if row is None:
                    return None
                observation_rows = conn.execute(
                    SELECT_ACCOUNT_OBSERVATIONS_SQL,
                    params,
                ).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to fetch account {account_id}: {exc}"
            ) from exc
        return _to_account(
            row,
            [_to_observation(item) for item in observation_rows],
        )

    def fetch_observation(self, observation_id: int) -> Observation | None:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_OBSERVATION_SQL,
                    {"observation_id": observation_id},
                ).first()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to fetch observation {observation_id}: {exc}"
            ) from exc
        return _to_observation(row) if row is not None else None

    def add_account(
        self,
        category: AccountCategory,
        provider: str,
        opening_balance: Decimal,
        opened_at: datetime,
    ) -> Account:
        """Insert an account and its opening observation in one transaction.

        Args:
            category: Account category.
            provider: Provider display name.
            opening_balance: First balance, already signed.
            opened_at: Timestamp of the opening balance.

        Returns:
            Account: Stored account holding its opening observation.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                account_id = conn.execute(
                    INSERT_ACCOUNT_SQL,
                    {"category": category.value, "provider": provider},
                ).scalar_one()
                observation_id = conn.execute(
                    INSERT_OBSERVATION_SQL,
                    {
                        "account_id": account_id,
                        "amount": decimal_to_storage(opening_balance),
                        "observed_at": timestamp_to_storage(opened_at),
                    },
                ).scalar_one()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to add account: {exc}") from exc
        opening = Observation(
            amount=coerce_decimal(opening_balance),
            observed_at=opened_at,
            account_id=account_id,
            observation_id=observation_id,
        )
        return Account(
            category=category,
            provider=provider,
            account_id=account_id,
            observations=[opening],
        )

    def add_observation(
        self,
        account_id: int,
        amount: Decimal,
        observed_at: datetime,
    ) -> Observation:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                if conn.execute(
                    SELECT_ACCOUNT_SQL,
                    {"account_id": account_id},
                ).first() is None:
                    raise AccountNotFoundError(account_id)
                observation_id = conn.execute(
                    INSERT_OBSERVATION_SQL,
                    {
                        "account_id": account_id,
                        "amount": decimal_to_storage(amount),
                        "observed_at": timestamp_to_storage(observed_at),
                    },
                ).scalar_one()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to add observation to account {account_id}: {exc}"
            ) from exc
        return Observation(
            amount=coerce_decimal(amount),
            observed_at=observed_at,
            account_id=account_id,
            observation_id=observation_id,
        )

    def delete_observation(self, observation_id: int) -> None:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_OBSERVATION_SQL,
                    {"observation_id": observation_id},
                )
                if result.rowcount == 0:
                    raise ObservationNotFoundError(observation_id)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to delete observation {observation_id}: {exc}"
            ) from exc

    def delete_account(self, account_id: int) -> int:
        """Delete an account and all of its observations atomically.

        Args:
            account_id: Account to remove.

        Returns:
            int: Number of observations removed with the account.
        """
        params = {"account_id": account_id}
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                removed = conn.execute(
                    DELETE_ACCOUNT_OBSERVATIONS_SQL,
                    params,
                ).rowcount
                if conn.execute(DELETE_ACCOUNT_SQL, params).rowcount == 0:
                    raise AccountNotFoundError(account_id)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to delete account {account_id}: {exc}"
            ) from exc
        return removed


__all__ = [
    "SqlAlchemyLedgerRepository",
    "timestamp_to_storage",
    "timestamp_from_storage",
]
