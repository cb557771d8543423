from pathlib import Path
from typing import List, Optional

from financial_tracker.domain.models import Transaction
from financial_tracker.logging_setup import get_logger
from financial_tracker.parsers.base import RecordParser, RecordParseError
from financial_tracker.parsers.pipe_record import PipeRecordParser
from financial_tracker.repositories.base import (
    TransactionRepository,
    LedgerStorageError,
    LedgerLoadError,
    LedgerWriteError,
)

logger = get_logger(__name__)

class FileTransactionRepository(TransactionRepository):
    """
    Flat-file implementation of the TransactionRepository.

    The file is opened and closed on every call, no handle is kept
    between operations.
    """

    def __init__(self, path: Path | str, parser: Optional[RecordParser] = None):
        self.path = Path(path)
        self.parser = parser or PipeRecordParser()
        self.created = False

    def load(self) -> List[Transaction]:
        """
        Read the whole file, newest record first.

        Lines without exactly five fields are skipped. A five-field line
        with a bad date, time or amount, or a line that isn't valid UTF-8,
        aborts the load so partially valid data is never dropped silently.
        """
        self.created = False
        if not self.path.exists():
            self._create()
            return []

        transactions = []
        skipped = 0

        try:
            with open(self.path, "rb") as f:
                for line_number, raw_line in enumerate(f, start=1):
                    try:
                        line = raw_line.decode("utf-8")
                    except UnicodeDecodeError as e:
                        raise LedgerLoadError(
                            self.path, line_number, f"not valid UTF-8 text ({e.reason})"
                        ) from e

                    fields = self.parser.split(line)
                    if fields is None:
                        if line.strip():
                            skipped += 1
                            logger.debug("Skipping malformed line %d in %s", line_number, self.path)
                        continue

                    try:
                        transactions.append(self.parser.parse(fields))
                    except RecordParseError as e:
                        raise LedgerLoadError(self.path, line_number, str(e)) from e
        except OSError as e:
            raise LedgerStorageError(f"Error reading file {self.path}: {e}") from e

        # File order is oldest first
        transactions.reverse()

        logger.info(
            "Loaded %d transactions from %s (%d malformed lines skipped)",
            len(transactions), self.path, skipped
        )
        return transactions

    def append(self, transaction: Transaction) -> None:
        """Append one record, never truncating existing content."""
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(self.parser.format(transaction))
        except OSError as e:
            logger.error("Failed writing to %s: %s", self.path, e)
            raise LedgerWriteError(f"Error writing to file {self.path}: {e}") from e

        logger.debug("Appended %r to %s", transaction, self.path)

    def _create(self) -> None:
        """Create an empty ledger file, including missing parent directories."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            raise LedgerStorageError(f"Error creating file {self.path}: {e}") from e

        self.created = True
        logger.info("Ledger file %s did not exist, created it", self.path)
