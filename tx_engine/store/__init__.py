"""In-memory stores for client accounts and their transaction history."""

from tx_engine.store.history import TransactionHistory, TransactionRecord
from tx_engine.store.ledger import AccountLedger, LedgerEntry

__all__ = ["AccountLedger", "LedgerEntry", "TransactionHistory", "TransactionRecord"]
