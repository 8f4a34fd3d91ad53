"""Wire settings, logging and an empty ledger together."""

from __future__ import annotations

from pathlib import Path

import structlog

from tradebook.config.settings import load_settings
from tradebook.ledger import TransactionList
from tradebook.monitoring import configure_logging

log = structlog.get_logger(__name__)


def create_ledger(config_path: str | Path | None = None) -> TransactionList:
    """Load settings, configure logging and return a ledger built from them."""
    settings = load_settings(config_path)
    configure_logging(settings.monitoring)
    log.info(
        "ledger_created",
        log_level=settings.monitoring.log_level,
        trader_name_separator=settings.ledger.trader_name_separator,
    )
    return TransactionList(config=settings.ledger)
