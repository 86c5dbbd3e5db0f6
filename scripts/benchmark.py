#!/usr/bin/env python3
"""Benchmark transaction processing throughput.

Generates deposit/withdrawal batches of increasing size, processes each
against a discarding sink and reports transactions per second.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --large
    python scripts/benchmark.py --sizes 1000 50000 --repeat 5
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tx_engine.generators import TransactionGenerator
from tx_engine.models.transaction import Transaction
from tx_engine.processor import TransactionProcessor
from tx_engine.sinks import NullSink
from tx_engine.sources import IterableSource

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_SIZES = [100, 1000, 10000]
LARGE_SIZE = 1000000


def benchmark_size(transactions: list[Transaction], repeat: int) -> float:
    """Return the best wall-clock time over ``repeat`` runs.

    Parameters
    ----------
    transactions : list[Transaction]
        Pre-generated batch.
    repeat : int
        Number of runs.

    Returns
    -------
    float
        Fastest run in seconds.
    """
    best = float("inf")
    for _ in range(repeat):
        processor = TransactionProcessor(IterableSource(transactions), NullSink())
        t0 = time.perf_counter()
        report = processor.process_transactions()
        best = min(best, time.perf_counter() - t0)
        logger.debug("Run rejected %d transactions", report.transactions_failed)
    return best


def main() -> None:
    """Run the benchmark."""
    parser = argparse.ArgumentParser(description="Benchmark transaction processing")
    parser.add_argument("--sizes", type=int, nargs="+", default=None, help="Batch sizes to run")
    parser.add_argument("--large", action="store_true", help=f"Add a {LARGE_SIZE:,} transaction batch")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per batch size (default: 3)")
    parser.add_argument("--seed", type=int, default=0xBEEF00666, help="Random seed")
    args = parser.parse_args()

    sizes = args.sizes or list(DEFAULT_SIZES)
    if args.large:
        sizes.append(LARGE_SIZE)

    generator = TransactionGenerator(seed=args.seed)

    print("=" * 60)
    print("Transaction Processing Benchmark")
    print("=" * 60)
    for size in sizes:
        transactions = generator.generate_benchmark(size)
        elapsed = benchmark_size(transactions, args.repeat)
        print(f"  {size:>10,} transactions in {elapsed:.3f}s  ({size / max(elapsed, 1e-9):,.0f}/sec)")
    print("=" * 60)


if __name__ == "__main__":
    main()
