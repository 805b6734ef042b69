"""Domain policies package."""

from .account_classification import (
    included_as_asset,
    included_as_debt,
    included_in_net_worth,
    is_debt,
    is_mortgage,
    is_retirement,
)

__all__ = [
    "included_as_asset",
    "included_as_debt",
    "included_in_net_worth",
    "is_debt",
    "is_mortgage",
    "is_retirement",
]
