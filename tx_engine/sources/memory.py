"""In-memory transaction source."""

from typing import Iterable, Iterator

from tx_engine.models.transaction import Transaction


class IterableSource:
    """Serve transactions from any iterable, e.g. a list or a generator."""

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        self.transactions = transactions

    def read(self) -> Iterator[Transaction]:
        return iter(self.transactions)
