from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from financial_tracker.domain.models import Transaction

class LedgerError(Exception):
    """Base class for ledger persistence failures."""
    pass

class LedgerStorageError(LedgerError):
    """Raised when the ledger file cannot be created or read."""
    pass

class LedgerLoadError(LedgerError):
    """Raised when a stored record cannot be decoded or parsed."""

    def __init__(self, path: Path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(f"{path}, line {line_number}: {reason}")

class LedgerWriteError(LedgerError):
    """Raised when a transaction cannot be appended to the ledger file."""
    pass

class TransactionRepository(ABC):
    """
    Abstract repository for ledger persistence.

    The ledger is append-only: records are loaded once at startup and
    new ones are appended, nothing is ever rewritten or deleted.
    """

    # Set by load() when the backing store did not exist and was created
    created: bool = False

    @abstractmethod
    def load(self) -> List[Transaction]:
        """
        Load every stored transaction.

        Returns:
            Transactions ordered newest first

        Raises:
            LedgerStorageError: If the backing store cannot be created or read
            LedgerLoadError: If a stored record holds an unparseable value
                or is not valid text
        """
        pass

    @abstractmethod
    def append(self, transaction: Transaction) -> None:
        """
        Persist one new transaction after the existing ones.

        Args:
            transaction: Transaction to store

        Raises:
            LedgerWriteError: If the write fails
        """
        pass
