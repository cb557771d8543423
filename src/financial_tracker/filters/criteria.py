from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from financial_tracker.domain.models import Transaction

def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()

def by_type(transactions: Iterable[Transaction], deposit: bool) -> List[Transaction]:
    """
    Keep deposits (amount > 0) or payments (amount < 0).

    Zero amounts match neither.
    """
    if deposit:
        return [t for t in transactions if t.amount > 0]
    return [t for t in transactions if t.amount < 0]

def by_date_range(
    transactions: Iterable[Transaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[Transaction]:
    """Keep transactions dated within [start, end]; a missing bound is open."""
    return [
        t for t in transactions
        if (start is None or t.date >= start) and (end is None or t.date <= end)
    ]

def by_vendor(transactions: Iterable[Transaction], query: str) -> List[Transaction]:
    """Keep transactions whose vendor contains query, ignoring case."""
    return [t for t in transactions if _contains(t.vendor, query)]

@dataclass(frozen=True)
class SearchCriteria:
    """
    Criteria for a custom search.

    Every field is optional. A transaction matches when it satisfies all
    the criteria that were supplied; an omitted criterion always matches.
    Text criteria are case-insensitive substring matches, amount bounds
    are inclusive and compare against the signed amount.
    """
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    vendor: Optional[str] = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.start_date,
                self.end_date,
                self.description,
                self.vendor,
                self.min_amount,
                self.max_amount,
            )
        )

    def matches(self, transaction: Transaction) -> bool:
        if self.start_date is not None and transaction.date < self.start_date:
            return False
        if self.end_date is not None and transaction.date > self.end_date:
            return False
        if self.description is not None and not _contains(transaction.description, self.description):
            return False
        if self.vendor is not None and not _contains(transaction.vendor, self.vendor):
            return False
        if self.min_amount is not None and transaction.amount < self.min_amount:
            return False
        if self.max_amount is not None and transaction.amount > self.max_amount:
            return False
        return True

def by_custom(transactions: Iterable[Transaction], criteria: SearchCriteria) -> List[Transaction]:
    """Keep transactions matching every supplied criterion."""
    return [t for t in transactions if criteria.matches(t)]
