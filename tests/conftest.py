from __future__ import annotations

import pytest

from tradebook.ledger import Trader, Transaction, TransactionList


@pytest.fixture
def raoul() -> Trader:
    return Trader("Raoul", "Cambridge")


@pytest.fixture
def mario() -> Trader:
    return Trader("Mario", "Milan")


@pytest.fixture
def ledger(raoul: Trader, mario: Trader) -> TransactionList:
    """Raoul trades twice from Cambridge, Mario once from Milan."""
    return TransactionList(
        [
            Transaction(raoul, 2011, 100),
            Transaction(raoul, 2012, 200),
            Transaction(mario, 2012, 300),
        ]
    )
