from datetime import date, time
from typing import List, Optional, Tuple

from financial_tracker import filters
from financial_tracker.domain.models import Transaction
from financial_tracker.filters import DateRange, SearchCriteria
from financial_tracker.logging_setup import get_logger
from financial_tracker.parsers.pipe_record import DELIMITER
from financial_tracker.repositories.base import TransactionRepository
from financial_tracker.services.models import LedgerView

logger = get_logger(__name__)

class LedgerService:
    """
    Owns the in-memory ledger for the lifetime of the application.

    The ledger is kept newest first. Writes go to the repository before
    memory, so a failed write never leaves the two out of step.
    """

    def __init__(self, repository: TransactionRepository):
        self.repository = repository
        self._transactions: List[Transaction] = []

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Read-only snapshot of the ledger, newest first"""
        return tuple(self._transactions)

    def load(self) -> int:
        """
        Replace the in-memory ledger with the repository contents.

        Returns:
            Number of transactions loaded

        Raises:
            LedgerStorageError: If the ledger file cannot be created
            LedgerLoadError: If a stored record cannot be parsed
        """
        self._transactions = self.repository.load()
        return len(self._transactions)

    def record(self, transaction: Transaction) -> Transaction:
        """
        Persist a transaction and put it at the top of the ledger.

        Raises:
            LedgerWriteError: If the repository write fails. The
                in-memory ledger is left unchanged.
        """
        self.repository.append(transaction)
        self._transactions.insert(0, transaction)
        logger.info("Recorded %r", transaction)
        return transaction

    def add_deposit(
        self,
        txn_date: date,
        txn_time: time,
        description: str,
        vendor: str,
        amount: float,
    ) -> Transaction:
        """Record money coming in. `amount` is the positive magnitude, rounded to cents."""
        return self.record(self._build(txn_date, txn_time, description, vendor, amount, payment=False))

    def add_payment(
        self,
        txn_date: date,
        txn_time: time,
        description: str,
        vendor: str,
        amount: float,
    ) -> Transaction:
        """Record money going out. `amount` is the positive magnitude, rounded to cents and stored negated."""
        return self.record(self._build(txn_date, txn_time, description, vendor, amount, payment=True))

    def all_entries(self) -> LedgerView:
        return LedgerView(title="All Transactions", transactions=list(self._transactions))

    def deposits(self) -> LedgerView:
        return LedgerView(title="Deposits", transactions=filters.by_type(self._transactions, deposit=True))

    def payments(self) -> LedgerView:
        return LedgerView(title="Payments", transactions=filters.by_type(self._transactions, deposit=False))

    def month_to_date(self, today: Optional[date] = None) -> LedgerView:
        return self._period_view("Month To Date", filters.month_to_date(today))

    def previous_month(self, today: Optional[date] = None) -> LedgerView:
        return self._period_view("Previous Month", filters.previous_month(today))

    def year_to_date(self, today: Optional[date] = None) -> LedgerView:
        return self._period_view("Year To Date", filters.year_to_date(today))

    def previous_year(self, today: Optional[date] = None) -> LedgerView:
        return self._period_view("Previous Year", filters.previous_year(today))

    def search_vendor(self, query: str) -> LedgerView:
        """Case-insensitive vendor substring search"""
        return LedgerView(
            title=f"Vendor: {query}",
            transactions=filters.by_vendor(self._transactions, query),
        )

    def custom_search(self, criteria: SearchCriteria) -> LedgerView:
        """Conjunction of every supplied criterion; empty criteria match everything"""
        return LedgerView(
            title="Custom Search",
            transactions=filters.by_custom(self._transactions, criteria),
        )

    def _period_view(self, label: str, period: DateRange) -> LedgerView:
        return LedgerView(
            title=f"{label} ({period.start} to {period.end})",
            transactions=filters.by_date_range(self._transactions, period.start, period.end),
        )

    @staticmethod
    def _build(
        txn_date: date,
        txn_time: time,
        description: str,
        vendor: str,
        amount: float,
        payment: bool,
    ) -> Transaction:
        # Stored amounts carry two decimals, keep memory in step with the file
        amount = round(amount, 2)
        if amount <= 0:
            raise ValueError(f"Amount must be positive, got {amount}")

        for label, text in (("Description", description), ("Vendor", vendor)):
            if DELIMITER in text:
                raise ValueError(f"{label} cannot contain '{DELIMITER}'")

        return Transaction(
            date=txn_date,
            time=txn_time,
            description=description.strip(),
            vendor=vendor.strip(),
            amount=-amount if payment else amount,
        )
