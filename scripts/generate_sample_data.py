#!/usr/bin/env python3
"""Generate a sample transactions CSV.

The file mixes deposits, withdrawals and dispute/resolve/chargeback
records for a handful of clients and can be fed straight to ``tx-engine``.

Usage:
    python scripts/generate_sample_data.py
    python scripts/generate_sample_data.py --clients 20 --transactions 5000 --output local/big.csv
"""

import argparse
import csv
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tx_engine.generators import TransactionGenerator
from tx_engine.sinks.serialization import TRANSACTION_FIELDS, transaction_to_row


def save_csv(generator: TransactionGenerator, num_clients: int, num_transactions: int, path: Path) -> int:
    """Write generated transactions to ``path`` and return the row count."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(TRANSACTION_FIELDS)
        for transaction in generator.generate(num_clients, num_transactions):
            writer.writerow(transaction_to_row(transaction))
            count += 1
    return count


def main() -> None:
    """Generate the sample file."""
    parser = argparse.ArgumentParser(description="Generate a sample transactions CSV")
    parser.add_argument("--clients", type=int, default=10, help="Number of clients (default: 10)")
    parser.add_argument(
        "--transactions", type=int, default=200, help="Number of transactions (default: 200)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "local" / "transactions.csv",
        help="Output path (default: local/transactions.csv)",
    )
    args = parser.parse_args()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    generator = TransactionGenerator(seed=args.seed)
    count = save_csv(generator, args.clients, args.transactions, args.output)
    print(f"Saved {count} transactions for {args.clients} clients to {args.output}")


if __name__ == "__main__":
    main()
