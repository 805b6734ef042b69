"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from src.domain.models import Account
from src.domain.policies import is_debt
from src.domain.services.ledger import current_value


def validate_balance_sign(account: Account, logger: Logger) -> bool:
    """Warn when a balance violates the sign convention.

    Assets are expected to be zero or positive, debts zero or negative.

    Args:
        account: Account whose current balance is checked.
        logger: Logger used for warnings.

    Returns:
        bool: True when the sign matches the convention.
    """
    balance = current_value(account)
    if is_debt(account.category) and balance > 0:
        logger.warning(
            f"Debt balance is positive for account {account.account_id} "
            f"({account.category.value}): {balance}"
        )
        return False
    if not is_debt(account.category) and balance < 0:
        logger.warning(
            f"Asset balance is negative for account {account.account_id} "
            f"({account.category.value}): {balance}"
        )
        return False
    return True


def validate_ledger(accounts: Iterable[Account], logger: Logger) -> int:
    """Check every account and return how many break the convention."""
    return sum(
        1 for account in accounts
        if not validate_balance_sign(account, logger)
    )


__all__ = ["validate_balance_sign", "validate_ledger"]
