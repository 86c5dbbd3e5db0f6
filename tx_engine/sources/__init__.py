"""Transaction sources feeding the processor."""

from tx_engine.sources.base import TransactionSource
from tx_engine.sources.csv_file import CsvFileSource, CsvSource
from tx_engine.sources.memory import IterableSource

__all__ = ["CsvFileSource", "CsvSource", "IterableSource", "TransactionSource"]
