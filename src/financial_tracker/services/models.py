"""
Service layer models - DTOs for service operations.

These models represent the results of service operations, not domain entities.
"""
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar
from financial_tracker.domain.models import Transaction

T = TypeVar("T")

@dataclass
class LedgerView:
    """
    A titled subset of the ledger, ready for display.

    An empty view means the filter ran and nothing matched, which the
    shell reports differently from an empty table.
    """

    title: str
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.transactions

    @property
    def count(self) -> int:
        return len(self.transactions)

    @property
    def total_deposits(self) -> float:
        """Money in"""
        return sum(t.amount for t in self.transactions if t.amount > 0)

    @property
    def total_payments(self) -> float:
        """Money out, as a positive number"""
        return -sum(t.amount for t in self.transactions if t.amount < 0)

    @property
    def net(self) -> float:
        """Net cash flow (deposits - payments)"""
        return self.total_deposits - self.total_payments

    def __str__(self) -> str:
        if self.is_empty:
            return f"{self.title}: no transactions"
        return (
            f"{self.title}: {self.count} transactions, "
            f"in ${self.total_deposits:,.2f}, out ${self.total_payments:,.2f}, "
            f"net ${self.net:,.2f}"
        )

@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """
    Outcome of parsing one piece of console input.

    Exactly one of `value` and `error` is set. Console prompts loop until
    they get a result that is ok.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(error=error)
