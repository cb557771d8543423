from abc import ABC, abstractmethod
from typing import List, Optional
from financial_tracker.domain.models import Transaction

class RecordParseError(ValueError):
    """Raised when a field of a stored record cannot be parsed."""

    def __init__(self, field: str, value: str, reason: str = ""):
        self.field = field
        self.value = value
        message = f"Invalid {field} '{value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)

class RecordParser(ABC):
    """
    Abstract base class for ledger record formats.

    Each on-disk format gets its own concrete parser that knows how to
    split a raw line, turn the fields into a Transaction, and write a
    Transaction back out.
    """

    @abstractmethod
    def split(self, line: str) -> Optional[List[str]]:
        """
        Split a raw line into record fields.

        Args:
            line: One line read from the ledger file

        Returns:
            The list of fields, or None if the line does not have the
            shape of a record and should be skipped
        """
        pass

    @abstractmethod
    def parse(self, fields: List[str]) -> Transaction:
        """
        Build a Transaction from the fields of one record.

        Args:
            fields: Fields as returned by split()

        Returns:
            The parsed Transaction

        Raises:
            RecordParseError: If any field holds an unparseable value
        """
        pass

    @abstractmethod
    def format(self, transaction: Transaction) -> str:
        """
        Serialize a transaction into the text appended to the ledger file.

        Args:
            transaction: Transaction to write

        Returns:
            The serialized record
        """
        pass
