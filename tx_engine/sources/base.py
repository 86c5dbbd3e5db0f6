"""Transaction source interface."""

from typing import Iterator, Protocol

from tx_engine.models.transaction import Transaction


class TransactionSource(Protocol):
    """Producer of transactions in input order.

    ``read`` returns a lazy iterator. A malformed or unreadable record
    raises ``SourceError`` from the iterator and aborts the run.
    """

    def read(self) -> Iterator[Transaction]:
        """Iterate over deserialized transactions."""
        ...
