import pytest
from datetime import date, time
from pathlib import Path
from typing import List

from financial_tracker.domain.models import Transaction

@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults"""
    def _make(
        amount: float = -10.0,
        txn_date: date = date(2025, 1, 15),
        txn_time: time = time(9, 30, 0),
        description: str = "Coffee",
        vendor: str = "Coffee Shop",
    ) -> Transaction:
        return Transaction(
            date=txn_date,
            time=txn_time,
            description=description,
            vendor=vendor,
            amount=amount,
        )
    return _make

@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """A small newest-first ledger"""
    return [
        Transaction(date(2025, 3, 2), time(18, 5, 0), "Groceries", "Costco", -120.45),
        Transaction(date(2025, 3, 1), time(9, 0, 0), "Salary", "ACME Corp", 5000.00),
        Transaction(date(2025, 2, 14), time(20, 15, 30), "ergonomic keyboard", "Amazon Prime", -89.50),
        Transaction(date(2025, 1, 31), time(12, 0, 0), "Refund", "Amazon", 25.00),
        Transaction(date(2025, 1, 1), time(0, 0, 1), "Balance check", "Bank", 0.0),
    ]

@pytest.fixture
def ledger_path(tmp_path) -> Path:
    """Path to a ledger file that does not exist yet"""
    return tmp_path / "transactions.csv"
