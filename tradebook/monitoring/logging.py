"""Structured logging for ledger events."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

import structlog

from tradebook.config.settings import MonitoringConfig

ERROR_LOG_NAME = "ledger-errors.log"


def _error_file_handler(monitoring: MonitoringConfig) -> RotatingFileHandler:
    log_dir = Path(monitoring.logs_path)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / ERROR_LOG_NAME,
        maxBytes=monitoring.error_log_max_bytes,
        backupCount=monitoring.error_log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(monitoring: MonitoringConfig | None = None) -> None:
    """Route structlog events as JSON lines to stdout.

    With ``logs_path`` set, errors are also kept in a rotating file there.
    """
    monitoring = monitoring or MonitoringConfig()
    level = getattr(logging, monitoring.log_level)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if monitoring.logs_path:
        handlers.append(_error_file_handler(monitoring))
    logging.basicConfig(format="%(message)s", level=level, handlers=handlers, force=True)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # stdlib loggers, so the error file sees ledger events too.
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
