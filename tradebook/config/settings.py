"""
Configuration management with Pydantic validation.

Loads settings from YAML config file and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class LedgerConfig(BaseModel):
    """Transaction ledger behaviour."""

    # Empty by default: trader names are concatenated without a delimiter.
    trader_name_separator: str = ""


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    logs_path: str | None = None
    error_log_max_bytes: int = Field(default=5_000_000, ge=100_000, le=50_000_000)
    error_log_backup_count: int = Field(default=3, ge=1, le=20)


class Settings(BaseSettings):
    """Root settings object."""

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = {
        "env_prefix": "TRADEBOOK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "env_nested_delimiter": "__",
        "populate_by_name": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Config file values arrive as init kwargs; the environment wins over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Load settings from YAML config file and environment variables.

    Priority (highest to lowest):
    1. TRADEBOOK_* environment variables (nested keys use ``__``)
    2. .env next to the config file
    3. TRADEBOOK_LOG_LEVEL shorthand for monitoring.log_level
    4. Config file values
    5. Default values
    """
    config_data = {}

    if config_path is None:
        config_path = os.environ.get("TRADEBOOK_CONFIG", "config.yaml")

    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}
    # An empty YAML section (`monitoring:`) loads as None.
    config_data = {key: value for key, value in config_data.items() if value is not None}

    env_log_level = os.environ.get("TRADEBOOK_LOG_LEVEL")
    if env_log_level:
        config_data["monitoring"] = {
            **config_data.get("monitoring", {}),
            "log_level": env_log_level.upper(),
        }

    env_path = config_file.parent / ".env"
    return Settings(**config_data, _env_file=env_path)


def create_default_config(path: str | Path = "config.yaml") -> None:
    """Create a default configuration file."""
    default_config = {
        "ledger": {
            "trader_name_separator": "",
        },
        "monitoring": {
            "log_level": "INFO",
            "logs_path": None,
            "error_log_max_bytes": 5000000,
            "error_log_backup_count": 3,
        },
    }

    with open(path, "w") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)
