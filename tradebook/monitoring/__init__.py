"""Monitoring utilities."""

from tradebook.monitoring.logging import configure_logging

__all__ = ["configure_logging"]
