"""Enumeration types for transactions and their dispute lifecycle."""

from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def requires_amount(self) -> bool:
        """Whether records of this type must carry an amount."""
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


class TransactionState(str, Enum):
    APPLIED = "APPLIED"
    DISPUTED = "DISPUTED"
    CHARGED_BACK = "CHARGED_BACK"
