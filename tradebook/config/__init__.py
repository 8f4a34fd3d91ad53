"""Configuration management module."""

from tradebook.config.settings import LedgerConfig, MonitoringConfig, Settings, load_settings

__all__ = ["Settings", "LedgerConfig", "MonitoringConfig", "load_settings"]
