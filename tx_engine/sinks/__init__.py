"""Output sinks for exporting client states."""

from tx_engine.sinks.base import ClientStateSink
from tx_engine.sinks.csv_file import CsvSink
from tx_engine.sinks.json_lines import JsonLinesSink
from tx_engine.sinks.memory import MemorySink, NullSink

__all__ = ["ClientStateSink", "CsvSink", "JsonLinesSink", "MemorySink", "NullSink"]
