"""
Filtering for ledger reports.

Pure functions over a sequence of transactions. Each returns a new list
and keeps the input's relative order, so a newest-first ledger stays
newest first.

Quick Start:
    >>> from financial_tracker.filters import by_date_range, by_vendor, previous_month
    >>>
    >>> amazon = by_vendor(transactions, "amazon")
    >>> period = previous_month()
    >>> last_month = by_date_range(transactions, period.start, period.end)
"""
from financial_tracker.filters.criteria import (
    SearchCriteria,
    by_type,
    by_date_range,
    by_vendor,
    by_custom,
)
from financial_tracker.filters.periods import (
    DateRange,
    month_to_date,
    previous_month,
    year_to_date,
    previous_year,
)

__all__ = [
    "SearchCriteria",
    "by_type",
    "by_date_range",
    "by_vendor",
    "by_custom",
    "DateRange",
    "month_to_date",
    "previous_month",
    "year_to_date",
    "previous_year",
]
