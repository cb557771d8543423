from dataclasses import dataclass
from datetime import date, time
from typing import Optional
from financial_tracker.domain.enums import TransactionType

@dataclass(frozen=True)
class Transaction:
    """
    Core domain model representing a single ledger entry.

    The sign of `amount` is the only thing that tells a deposit from a
    payment: positive money came in, negative money went out.
    """
    date: date
    time: time
    description: str
    vendor: str
    amount: float

    @property
    def type(self) -> Optional[TransactionType]:
        """Deposit or payment, None for a zero amount"""
        if self.amount > 0:
            return TransactionType.DEPOSIT
        if self.amount < 0:
            return TransactionType.PAYMENT
        return None

    @property
    def is_deposit(self) -> bool:
        return self.type == TransactionType.DEPOSIT

    @property
    def is_payment(self) -> bool:
        return self.type == TransactionType.PAYMENT

    @property
    def absolute_amount(self) -> float:
        """Amount without sign for display"""
        return abs(self.amount)

    def __repr__(self):
        sign = "+" if self.amount >= 0 else "-"
        return f"Transaction({self.date} {self.time}, {self.description[:30]}, {self.vendor[:20]}, {sign}${self.absolute_amount:.2f})"
