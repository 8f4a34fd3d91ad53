"""Trader and transaction records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Trader:
    """A trader and the city they currently work from.

    Traders are shared by reference between transactions, so changing
    ``city`` is seen through every transaction holding this trader.
    """

    name: str
    city: str

    def relocate(self, city: str) -> None:
        self.city = city


@dataclass(frozen=True, eq=False)
class Transaction:
    """Immutable trade record: who traded, in which year, for what value.

    Compared and hashed by identity; the same trade can be recorded twice.
    """

    trader: Trader
    year: int
    value: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize transaction to a JSON-compatible dict."""
        return {
            "trader": {"name": self.trader.name, "city": self.trader.city},
            "year": self.year,
            "value": self.value,
        }
