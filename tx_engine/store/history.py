"""Per-client transaction history backing dispute lookups."""

from dataclasses import dataclass, field
from decimal import Decimal

from tx_engine.models.enums import TransactionState, TransactionType


@dataclass
class TransactionRecord:
    """An applied deposit or withdrawal and where it stands in its dispute lifecycle.

    Lifecycle: ``APPLIED -> DISPUTED -> APPLIED`` (resolve, may be disputed
    again) or ``DISPUTED -> CHARGED_BACK`` (chargeback, terminal).
    """

    amount: Decimal
    transaction_type: TransactionType
    state: TransactionState = TransactionState.APPLIED

    def can_dispute(self) -> bool:
        # Withdrawals are never disputable
        return (
            self.transaction_type == TransactionType.DEPOSIT
            and self.state == TransactionState.APPLIED
        )

    def can_resolve_or_charge_back(self) -> bool:
        return self.state == TransactionState.DISPUTED

    def mark_disputed(self) -> None:
        self.state = TransactionState.DISPUTED

    def mark_resolved(self) -> None:
        self.state = TransactionState.APPLIED

    def mark_charged_back(self) -> None:
        self.state = TransactionState.CHARGED_BACK


@dataclass
class TransactionHistory:
    """Applied deposits and withdrawals of one client, keyed by transaction ID."""

    _records: dict[int, TransactionRecord] = field(default_factory=dict)

    def record(
        self,
        transaction_id: int,
        amount: Decimal,
        transaction_type: TransactionType,
    ) -> TransactionRecord:
        """Store a freshly applied transaction.

        A repeated transaction ID replaces the earlier record.
        """
        record = TransactionRecord(amount=amount, transaction_type=transaction_type)
        self._records[transaction_id] = record
        return record

    def get(self, transaction_id: int) -> TransactionRecord | None:
        """Retrieve a stored record by ID."""
        return self._records.get(transaction_id)

    def __len__(self) -> int:
        return len(self._records)

    def count_by_state(self) -> dict[str, int]:
        """Return record counts per lifecycle state."""
        counts = {state.value: 0 for state in TransactionState}
        for record in self._records.values():
            counts[record.state.value] += 1
        return counts
