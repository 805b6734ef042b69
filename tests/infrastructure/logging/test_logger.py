"""Tests for the networth application and usage loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import manage_snapshots
from src.infrastructure.logging import logger as logger_module


def _reset_logger(name: str) -> None:
    named = logging.getLogger(name)
    for handler in list(named.handlers):
        handler.close()
        named.removeHandler(handler)


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    """Point log files at a temporary project root with a fixed date."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240310"),
    )
    for name in ("networth", "networth.usage"):
        _reset_logger(name)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
    yield tmp_path
    for name in ("networth", "networth.usage"):
        _reset_logger(name)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None


def _flush(wrapper) -> None:
    for handler in wrapper.logger.handlers:
        handler.flush()


def test_app_logger_writes_daily_networth_file_and_console(log_root):
    app_logger = logger_module.get_app_logger()
    app_logger.warning("Account 3 (Bank) has no balance observations")
    _flush(app_logger)

    log_path = log_root / "logs" / "app" / "20240310_networth.log"
    content = log_path.read_text(encoding="utf-8")
    assert "| networth | WARNING |" in content
    assert content.strip().endswith("has no balance observations")
    assert any(
        not isinstance(handler, logging.FileHandler)
        for handler in app_logger.logger.handlers
    )
    assert app_logger.logger.propagate is False


def test_usage_logger_writes_to_usage_directory_only(log_root):
    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("Balance update: account=1 amount=10")
    _flush(usage_logger)

    log_path = log_root / "logs" / "usage" / "20240310_usage.log"
    assert log_path.read_text(encoding="utf-8").strip().endswith(
        "Balance update: account=1 amount=10"
    )
    assert all(
        isinstance(handler, logging.FileHandler)
        for handler in usage_logger.logger.handlers
    )
    assert not (log_root / "logs" / "app").exists()


def test_accessors_return_singletons_without_duplicate_handlers(log_root):
    first = logger_module.get_app_logger()
    handler_count = len(first.logger.handlers)
    logger_module.AppLogger._instance = None

    second = logger_module.get_app_logger()

    assert second.logger is first.logger
    assert len(second.logger.handlers) == handler_count
    assert logger_module.get_app_logger() is second
    assert logger_module.get_usage_logger() is logger_module.get_usage_logger()


def test_wrapper_forwards_levels_to_underlying_logger(log_root):
    app_logger = logger_module.get_app_logger()
    app_logger.logger = MagicMock()

    app_logger.debug("dbg")
    app_logger.error("err")
    app_logger.critical("crit")

    app_logger.logger.debug.assert_called_once_with("dbg")
    app_logger.logger.error.assert_called_once_with("err")
    app_logger.logger.critical.assert_called_once_with("crit")


def test_use_cases_default_to_app_logger(monkeypatch):
    fallback = MagicMock()
    monkeypatch.setattr(manage_snapshots, "get_app_logger", lambda: fallback)

    manager = manage_snapshots.SnapshotStoreManager(
        ledger_repository=MagicMock(),
        snapshot_repository=MagicMock(),
        clock=MagicMock(),
    )

    assert manager._logger is fallback
