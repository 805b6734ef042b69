"""Error taxonomy for the valuation engine."""

from dataclasses import dataclass


class NetWorthError(Exception):
    """Base class for errors reported by net worth operations."""


class LastObservationError(NetWorthError):
    """Raised when deleting the only observation of an account."""

    def __init__(self, account_id: int | None) -> None:
        super().__init__(
            "Cannot delete the only balance update for this account. "
            "An account must have at least one balance entry."
        )
        self.account_id = account_id


class ObservationNotFoundError(NetWorthError):
    """Raised when an observation id does not exist."""

    def __init__(self, observation_id: int) -> None:
        super().__init__(f"Observation not found: {observation_id}")
        self.observation_id = observation_id


class AccountNotFoundError(NetWorthError):
    """Raised when an account id does not exist."""

    def __init__(self, account_id: int) -> None:
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


class InvalidAmountError(NetWorthError):
    """Raised when a balance cannot be read as an exact decimal."""


class PersistenceError(NetWorthError):
    """Wraps a failure of the underlying store."""


@dataclass(frozen=True)
class IntegrityWarning:
    """Non-fatal data issue found during valuation.

    Attributes:
        account_id: Account the warning refers to.
        message: Human-readable description.
    """

    account_id: int | None
    message: str


__all__ = [
    "NetWorthError",
    "LastObservationError",
    "ObservationNotFoundError",
    "AccountNotFoundError",
    "InvalidAmountError",
    "PersistenceError",
    "IntegrityWarning",
]
