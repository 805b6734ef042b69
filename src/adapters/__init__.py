"""Entry points driving the application: CLIs and the dashboard."""

__all__ = []
