"""In-memory transaction ledger with analytical queries."""

from tradebook.bootstrap import create_ledger
from tradebook.ledger import EmptyLedgerError, Trader, Transaction, TransactionList

__all__ = ["Trader", "Transaction", "TransactionList", "EmptyLedgerError", "create_ledger"]
