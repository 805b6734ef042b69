"""Checks for the adapter entry points wired in pyproject scripts."""

from importlib import import_module


def test_command_line_adapters_expose_main() -> None:
    for name in (
        "src.adapters.rebuild_snapshots_cli",
        "src.adapters.check_db_connection",
        "src.adapters.interface.streamlit.app",
    ):
        module = import_module(name)
        assert callable(module.main), name


def test_adapter_packages_export_nothing() -> None:
    for name in (
        "src.adapters",
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ):
        assert import_module(name).__all__ == [], name
