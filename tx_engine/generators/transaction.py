"""Synthetic transaction streams for sample files and benchmarks."""

import random
from decimal import Decimal
from typing import Iterator

from tx_engine.generators.base import BaseGenerator
from tx_engine.models.enums import TransactionType
from tx_engine.models.transaction import MAX_CLIENT_ID, Transaction

BENCHMARK_CLIENTS = 50
AMOUNT_PLACES = Decimal("0.0001")


class TransactionGenerator(BaseGenerator):
    """Generate synthetic transaction streams."""

    TRANSACTION_TYPES = list(TransactionType)
    TRANSACTION_WEIGHTS = [0.55, 0.30, 0.08, 0.04, 0.03]

    def generate(self, num_clients: int, num_transactions: int) -> Iterator[Transaction]:
        """Generate a realistic mix of transactions.

        Dispute-family records reference earlier deposits of the same
        client, so most of them apply cleanly. Withdrawals are drawn
        independently of the balance and some will be rejected for
        insufficient funds.

        Parameters
        ----------
        num_clients : int
            Number of distinct clients, IDs ``1..num_clients``.
        num_transactions : int
            Number of records to generate.

        Yields
        ------
        Transaction
            Generated transaction.
        """
        if not 1 <= num_clients <= MAX_CLIENT_ID:
            raise ValueError(f"num_clients must be between 1 and {MAX_CLIENT_ID}")

        deposits: dict[int, list[int]] = {}
        disputed: dict[int, list[int]] = {}
        next_transaction_id = 1

        for _ in range(num_transactions):
            client_id = random.randint(1, num_clients)
            tx_type = random.choices(self.TRANSACTION_TYPES, weights=self.TRANSACTION_WEIGHTS, k=1)[0]

            client_deposits = deposits.setdefault(client_id, [])
            client_disputed = disputed.setdefault(client_id, [])

            # Fall back to a deposit when there is nothing to reference
            if tx_type == TransactionType.DISPUTE and not client_deposits:
                tx_type = TransactionType.DEPOSIT
            elif tx_type in (TransactionType.RESOLVE, TransactionType.CHARGEBACK) and not client_disputed:
                tx_type = TransactionType.DEPOSIT

            if tx_type == TransactionType.DISPUTE:
                transaction_id = client_deposits.pop(random.randrange(len(client_deposits)))
                client_disputed.append(transaction_id)
                yield Transaction(tx_type, client_id, transaction_id)

            elif tx_type in (TransactionType.RESOLVE, TransactionType.CHARGEBACK):
                transaction_id = client_disputed.pop(random.randrange(len(client_disputed)))
                if tx_type == TransactionType.RESOLVE:
                    client_deposits.append(transaction_id)
                yield Transaction(tx_type, client_id, transaction_id)

            else:
                transaction_id = next_transaction_id
                next_transaction_id += 1
                if tx_type == TransactionType.DEPOSIT:
                    client_deposits.append(transaction_id)
                yield Transaction(tx_type, client_id, transaction_id, self._amount())

    def generate_benchmark(self, size: int) -> list[Transaction]:
        """Generate the fixed deposit/withdrawal mix used for throughput benchmarks.

        Half deposits, half withdrawals over 50 clients. Amounts grow with
        the record index; deposits get a large offset so most withdrawals
        succeed.

        Parameters
        ----------
        size : int
            Number of transactions.

        Returns
        -------
        list[Transaction]
            Materialized transactions, so generation is excluded from timings.
        """
        transactions = []
        for i in range(size):
            tx_type = TransactionType.DEPOSIT if random.random() < 0.5 else TransactionType.WITHDRAWAL
            offset = 10000 if tx_type == TransactionType.DEPOSIT else 1
            amount = Decimal(random.uniform(0, (i + 1) * 10) + offset).quantize(AMOUNT_PLACES)
            transactions.append(
                Transaction(
                    transaction_type=tx_type,
                    client_id=random.randrange(BENCHMARK_CLIENTS),
                    transaction_id=i,
                    amount=amount,
                )
            )
        return transactions

    def _amount(self) -> Decimal:
        """Positive amount with up to four fractional digits."""
        return self.fake.pydecimal(left_digits=4, right_digits=4, positive=True)
