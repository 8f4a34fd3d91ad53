"""Transaction ledger module."""

from tradebook.ledger.models import Trader, Transaction
from tradebook.ledger.transactions import EmptyLedgerError, TransactionList

__all__ = ["Trader", "Transaction", "TransactionList", "EmptyLedgerError"]
