"""Pytest configuration and fixtures."""

import io
import logging
from typing import Callable, Iterator

import pytest

from tx_engine.processor import ProcessingReport, TransactionProcessor
from tx_engine.sinks import MemorySink
from tx_engine.sources import CsvSource


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo logging configuration done by the code under test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_levels = {
        name: logging.getLogger(name).level
        for name in ("", "tx_engine", "tx_engine.diagnostics", "faker")
    }
    yield
    root.handlers[:] = saved_handlers
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def memory_sink() -> MemorySink:
    """Fresh in-memory sink."""
    return MemorySink()


@pytest.fixture
def run_csv(memory_sink: MemorySink) -> Callable[[str], ProcessingReport]:
    """Process CSV text, collecting client states in ``memory_sink``."""

    def _run(text: str) -> ProcessingReport:
        processor = TransactionProcessor(CsvSource(io.StringIO(text)), memory_sink)
        return processor.process_transactions()

    return _run
