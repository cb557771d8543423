from enum import Enum

class TransactionType(Enum):
    """Represents whether money is coming in or out"""
    DEPOSIT = "Deposit" # in
    PAYMENT = "Payment" # out
