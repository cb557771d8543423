from calendar import monthrange
from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates"""
    start: date
    end: date

def month_to_date(today: Optional[date] = None) -> DateRange:
    """First day of the current month through today"""
    today = today or date.today()
    return DateRange(start=today.replace(day=1), end=today)

def previous_month(today: Optional[date] = None) -> DateRange:
    """The whole previous calendar month"""
    today = today or date.today()
    if today.month == 1:
        year, month = today.year - 1, 12
    else:
        year, month = today.year, today.month - 1
    _, last_day = monthrange(year, month)  # Handles leap years
    return DateRange(start=date(year, month, 1), end=date(year, month, last_day))

def year_to_date(today: Optional[date] = None) -> DateRange:
    """January 1 of the current year through today"""
    today = today or date.today()
    return DateRange(start=date(today.year, 1, 1), end=today)

def previous_year(today: Optional[date] = None) -> DateRange:
    """January 1 through December 31 of the previous year"""
    today = today or date.today()
    year = today.year - 1
    return DateRange(start=date(year, 1, 1), end=date(year, 12, 31))
