"""Transaction factories shared by the tests."""

from decimal import Decimal

from tx_engine.models import Transaction, TransactionType


def deposit(client_id: int, transaction_id: int, amount: str | None) -> Transaction:
    return Transaction(
        TransactionType.DEPOSIT, client_id, transaction_id, None if amount is None else Decimal(amount)
    )


def withdrawal(client_id: int, transaction_id: int, amount: str | None) -> Transaction:
    return Transaction(
        TransactionType.WITHDRAWAL, client_id, transaction_id, None if amount is None else Decimal(amount)
    )


def dispute(client_id: int, transaction_id: int) -> Transaction:
    return Transaction(TransactionType.DISPUTE, client_id, transaction_id)


def resolve(client_id: int, transaction_id: int) -> Transaction:
    return Transaction(TransactionType.RESOLVE, client_id, transaction_id)


def chargeback(client_id: int, transaction_id: int) -> Transaction:
    return Transaction(TransactionType.CHARGEBACK, client_id, transaction_id)
