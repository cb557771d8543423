from datetime import datetime
from typing import List, Optional
from financial_tracker.parsers.base import RecordParser, RecordParseError
from financial_tracker.domain.models import Transaction

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
DELIMITER = "|"
FIELD_COUNT = 5

class PipeRecordParser(RecordParser):
    """
    Parser for the pipe-delimited ledger format.

    One record per line, no header, five fields in fixed order:

        2023-04-15|10:13:25|ergonomic keyboard|Amazon|-89.50

    There is no escaping, so a literal pipe inside the description or
    vendor breaks the record.
    """

    def split(self, line: str) -> Optional[List[str]]:
        """Split on the delimiter, None unless there are exactly five fields"""
        fields = line.rstrip("\r\n").split(DELIMITER)
        if len(fields) != FIELD_COUNT:
            return None
        return fields

    def parse(self, fields: List[str]) -> Transaction:
        """Parse trimmed fields into a Transaction."""
        if len(fields) != FIELD_COUNT:
            raise RecordParseError(
                "record",
                DELIMITER.join(fields),
                f"expected {FIELD_COUNT} fields, got {len(fields)}"
            )

        raw_date, raw_time, description, vendor, raw_amount = (f.strip() for f in fields)

        try:
            txn_date = datetime.strptime(raw_date, DATE_FORMAT).date()
        except ValueError as e:
            raise RecordParseError("date", raw_date, str(e)) from e

        try:
            txn_time = datetime.strptime(raw_time, TIME_FORMAT).time()
        except ValueError as e:
            raise RecordParseError("time", raw_time, str(e)) from e

        try:
            amount = float(raw_amount)
        except ValueError as e:
            raise RecordParseError("amount", raw_amount, str(e)) from e

        return Transaction(
            date=txn_date,
            time=txn_time,
            description=description,
            vendor=vendor,
            amount=amount,
        )

    def format(self, transaction: Transaction) -> str:
        """
        Serialize for appending.

        The record is prefixed with a newline rather than terminated by
        one, so each append starts a fresh line after whatever is there.
        Description and vendor are trimmed, as parse() trims them on the
        way back in.
        """
        return "\n" + DELIMITER.join([
            transaction.date.strftime(DATE_FORMAT),
            transaction.time.strftime(TIME_FORMAT),
            transaction.description.strip(),
            transaction.vendor.strip(),
            f"{transaction.amount:.2f}",
        ])
