"""In-memory transaction ledger and its queries."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable, Iterator

import structlog

from tradebook.config.settings import LedgerConfig
from tradebook.ledger.models import Trader, Transaction


class EmptyLedgerError(LookupError):
    """Raised when an aggregate is undefined because the ledger is empty."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is undefined on an empty ledger")
        self.operation = operation


class TransactionList:
    """Append-only ordered collection of transactions."""

    def __init__(
        self,
        transactions: Iterable[Transaction] | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self._transactions: list[Transaction] = []
        self.config = config or LedgerConfig()
        self._log = structlog.get_logger(__name__)
        for transaction in transactions or ():
            self.add_transaction(transaction)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        self._log.debug(
            "transaction_added",
            trader=transaction.trader.name,
            year=transaction.year,
            value=transaction.value,
            size=len(self._transactions),
        )

    def size(self) -> int:
        return len(self._transactions)

    def all_traders(self) -> list[Trader]:
        """Return the trader of every transaction, duplicates included."""
        return [t.trader for t in self._transactions]

    def transactions_in_year(self, year: int) -> list[Transaction]:
        """Return the transactions of ``year`` ordered by ascending value."""
        matches = [t for t in self._transactions if t.year == year]
        return sorted(matches, key=lambda t: t.value)

    def cities(self) -> list[str]:
        """Return distinct trader cities in first-seen order."""
        return list(dict.fromkeys(trader.city for trader in self.all_traders()))

    def traders(self, city: str) -> list[Trader]:
        """Return distinct traders based in ``city`` sorted by name."""
        distinct: list[Trader] = []
        for trader in self.all_traders():
            # Trader is unhashable; compare by value.
            if trader.city == city and trader not in distinct:
                distinct.append(trader)
        return sorted(distinct, key=lambda t: t.name)

    def transactions_by_year(self) -> dict[int, list[Transaction]]:
        """Group all transactions by year.

        Within a year, transactions keep their insertion order.
        """
        ordered = sorted(self._transactions, key=lambda t: t.year)
        return {year: list(group) for year, group in groupby(ordered, key=lambda t: t.year)}

    def trader_in_city(self, city: str) -> bool:
        return city in self.cities()

    def relocate_traders(self, from_city: str, to_city: str) -> int:
        """Move every trader based in ``from_city`` to ``to_city``.

        Returns the number of distinct traders moved.
        """
        moved = self.traders(from_city)
        if not moved:
            return 0
        # Equal traders can be separate objects; move all of them.
        for trader in self.all_traders():
            if trader.city == from_city:
                trader.relocate(to_city)
        self._log.info(
            "traders_relocated",
            from_city=from_city,
            to_city=to_city,
            traders=[t.name for t in moved],
        )
        return len(moved)

    def highest_value(self) -> int:
        if not self._transactions:
            raise EmptyLedgerError("highest_value")
        return max(t.value for t in self._transactions)

    def total_value(self) -> int:
        return sum(t.value for t in self._transactions)

    def lowest_value_transaction(self) -> Transaction:
        """Return the transaction with the lowest value.

        Ties resolve to the earliest inserted transaction.
        """
        if not self._transactions:
            raise EmptyLedgerError("lowest_value_transaction")
        return min(self._transactions, key=lambda t: t.value)

    def trader_names(self) -> str:
        """Return distinct trader names, sorted and joined.

        The separator defaults to the empty string, so names run together.
        """
        names = sorted({trader.name for trader in self.all_traders()})
        return self.config.trader_name_separator.join(names)
