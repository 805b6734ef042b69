"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os

import dotenv

from src.domain.models import InclusionPolicy
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_db_url() -> str:
    """Return the SQLite URL used when NETWORTH_DB_URL is unset."""
    return f"sqlite:///{get_project_root() / 'data' / 'networth.db'}"


@dataclass(frozen=True)
class NetWorthSettings:
    """Settings for the ledger store and snapshot valuation.

    Attributes:
        db_url: SQLAlchemy URL of the database holding the ledger.
        snapshot_policy: Inclusion policy snapshots are always valued under,
            independent of the toggles chosen in the dashboard.
        currency: Display currency code.
    """

    db_url: str = field(default_factory=default_db_url)
    snapshot_policy: InclusionPolicy = InclusionPolicy()
    currency: str = "GBP"

    @classmethod
    def from_env(cls) -> "NetWorthSettings":
        """Build settings from environment variables.

        Returns:
            NetWorthSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("NETWORTH_DB_URL", "").strip() or default_db_url()
        snapshot_policy = InclusionPolicy(
            include_retirement=cls._parse_bool(
                "NETWORTH_SNAPSHOT_INCLUDE_RETIREMENT",
                default=True,
                logger=logger,
            ),
            include_mortgage_debt=cls._parse_bool(
                "NETWORTH_SNAPSHOT_INCLUDE_MORTGAGE",
                default=True,
                logger=logger,
            ),
        )
        currency = os.getenv("NETWORTH_CURRENCY", "").strip().upper() or "GBP"
        return cls(
            db_url=db_url,
            snapshot_policy=snapshot_policy,
            currency=currency,
        )

    @staticmethod
    def _parse_bool(name: str, default: bool, logger) -> bool:
        """Read a boolean flag, warning and keeping the default when invalid.

        Args:
            name: Environment variable name.
            default: Value used when unset or unreadable.
            logger: Logger used for warnings.

        Returns:
            bool: Parsed flag.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid boolean for {name}: {raw!r}; using default {default}"
        )
        return default


__all__ = ["NetWorthSettings", "default_db_url"]
