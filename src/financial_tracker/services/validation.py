import math
import re
from datetime import date, datetime, time

from financial_tracker.parsers.pipe_record import DATE_FORMAT, DELIMITER, TIME_FORMAT
from financial_tracker.services.models import ParseResult

EXIT_COMMAND = "exit"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2}$")

INVALID_DATE_FORMAT = "Invalid date format. Please use yyyy-MM-dd."
DATE_DOES_NOT_EXIST = "Date does not exist. Please enter a valid date."
INVALID_TIME_FORMAT = "Invalid time format. Please use HH:mm:ss."
INVALID_POSITIVE_AMOUNT = "Invalid amount. Please enter a valid positive number."
INVALID_AMOUNT = "Invalid amount. Please enter a valid number."
INVALID_TEXT = f"Text cannot contain '{DELIMITER}'. Please remove it."

def is_exit_command(text: str) -> bool:
    return text.strip().lower() == EXIT_COMMAND

def parse_date_input(text: str) -> ParseResult[date]:
    """Parse a yyyy-MM-dd date, rejecting dates that don't exist (e.g. Feb 30)."""
    text = text.strip()
    if not _DATE_PATTERN.match(text):
        return ParseResult.failure(INVALID_DATE_FORMAT)
    try:
        return ParseResult.success(datetime.strptime(text, DATE_FORMAT).date())
    except ValueError:
        return ParseResult.failure(DATE_DOES_NOT_EXIST)

def parse_time_input(text: str) -> ParseResult[time]:
    """Parse an HH:mm:ss time of day."""
    text = text.strip()
    if not _TIME_PATTERN.match(text):
        return ParseResult.failure(INVALID_TIME_FORMAT)
    try:
        return ParseResult.success(datetime.strptime(text, TIME_FORMAT).time())
    except ValueError:
        return ParseResult.failure(INVALID_TIME_FORMAT)

def parse_amount_input(text: str, positive_only: bool = True) -> ParseResult[float]:
    """
    Parse a currency amount.

    Args:
        text: Raw console input
        positive_only: Reject amounts that are not positive once rounded
            to cents. New transactions take a positive magnitude; search
            bounds accept any number.
    """
    error = INVALID_POSITIVE_AMOUNT if positive_only else INVALID_AMOUNT
    try:
        amount = float(text.strip())
    except ValueError:
        return ParseResult.failure(error)

    if not math.isfinite(amount):
        return ParseResult.failure(error)

    # Amounts are stored to the cent, so 0.004 would be saved as 0.00
    if positive_only and round(amount, 2) <= 0:
        return ParseResult.failure(error)

    return ParseResult.success(amount)

def parse_text_input(text: str) -> ParseResult[str]:
    """Accept free text that doesn't contain the record delimiter."""
    text = text.strip()
    if DELIMITER in text:
        return ParseResult.failure(INVALID_TEXT)
    return ParseResult.success(text)
