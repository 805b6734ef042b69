"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .snapshot_repository import SnapshotRepositoryPort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "SnapshotRepositoryPort",
]
