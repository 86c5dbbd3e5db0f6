"""Transaction input record."""

from dataclasses import dataclass
from decimal import Decimal

from tx_engine.models.enums import TransactionType

MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1


@dataclass(frozen=True)
class Transaction:
    """A single transaction to process.

    Dispute, resolve and chargeback records reference an earlier deposit or
    withdrawal of the same client through ``transaction_id``; their amount
    is taken from that earlier record.
    """

    transaction_type: TransactionType
    client_id: int  # 0..65535
    transaction_id: int  # 0..4294967295
    amount: Decimal | None = None
