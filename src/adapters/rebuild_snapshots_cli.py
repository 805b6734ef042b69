"""CLI adapter to build or repair the daily net worth snapshots.

Without arguments the store is built from the full observation history when
it is empty or degenerate. ``REBUILD_FORCE=1`` rebuilds unconditionally and
``REBUILD_FROM=YYYY-MM-DD`` regenerates only the days from that date on.
"""

from datetime import date
import os

from src.infrastructure.container import (
    build_database_adapter,
    build_snapshot_manager,
    prepare_storage,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import NetWorthSettings


def _read_force_flag() -> bool:
    return os.getenv("REBUILD_FORCE", "").strip().lower() in {
        "1",
        "true",
        "yes",
    }


def _read_from_day() -> date | None:
    raw = os.getenv("REBUILD_FROM", "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise SystemExit(f"REBUILD_FROM must be an ISO date: {raw!r}") from exc


def main() -> None:
    """Run the snapshot build or regeneration."""
    logger = get_app_logger()
    settings = NetWorthSettings.from_env()
    adapter = build_database_adapter()
    prepare_storage(adapter)
    manager = build_snapshot_manager(adapter)

    from_day = _read_from_day()
    if from_day is None:
        result = manager.build_all(
            settings.snapshot_policy,
            force=_read_force_flag(),
        )
    else:
        result = manager.regenerate_from(from_day, settings.snapshot_policy)

    if not result.ok:
        logger.error(f"Snapshot rebuild failed: {result.error}")
        raise SystemExit(1)
    if result.skipped:
        print("Snapshots already built; set REBUILD_FORCE=1 to rebuild.")
        return
    print(
        f"Wrote {result.written_count} snapshots "
        f"(removed {result.deleted_count})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
