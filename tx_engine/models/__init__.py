"""Domain models for transaction processing."""

from tx_engine.models.account import ClientState
from tx_engine.models.enums import TransactionState, TransactionType
from tx_engine.models.transaction import MAX_CLIENT_ID, MAX_TRANSACTION_ID, Transaction

__all__ = [
    "ClientState",
    "MAX_CLIENT_ID",
    "MAX_TRANSACTION_ID",
    "Transaction",
    "TransactionState",
    "TransactionType",
]
