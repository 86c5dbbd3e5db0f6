"""Command-line entry point.

Usage::

    tx-engine transactions.csv > accounts.csv
    python -m tx_engine transactions.csv --format jsonl --sort-clients
"""

import argparse
import logging
import sys
from typing import TextIO

from tx_engine import __version__
from tx_engine.config import LOG_FORMATS, LOG_LEVELS, OUTPUT_FORMATS, EngineConfig
from tx_engine.exceptions import ConfigurationError, FatalProcessingError, SinkError
from tx_engine.logging import setup_logging
from tx_engine.processor import TransactionProcessor
from tx_engine.sinks import CsvSink, JsonLinesSink
from tx_engine.sinks.base import ClientStateSink
from tx_engine.sources import CsvFileSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tx-engine",
        description="Apply a CSV of client transactions and print the final account states.",
    )
    parser.add_argument("input", help="Path to the transactions CSV file")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write account states to this file instead of standard output",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: csv, or TX_ENGINE_OUTPUT_FORMAT)",
    )
    parser.add_argument(
        "--sort-clients",
        action="store_true",
        default=None,
        help="Order output by client ID instead of first appearance",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for diagnostics on standard error (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Diagnostics format (default: standard)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> EngineConfig:
    """Merge environment configuration with command-line overrides."""
    config = EngineConfig.from_env()
    if args.format is not None:
        config.sink.output_format = args.format
    if args.sort_clients is not None:
        config.sink.sort_clients = args.sort_clients
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config.validate()


def create_sink(output_format: str, stream: TextIO) -> ClientStateSink:
    """Create the sink for the configured output format."""
    if output_format == "jsonl":
        return JsonLinesSink(stream)
    return CsvSink(stream)


def run(config: EngineConfig, input_path: str, stream: TextIO) -> int:
    """Process one input file, writing account states to ``stream``.

    Returns
    -------
    int
        Number of rejected transactions.
    """
    source = CsvFileSource(input_path, trim_whitespace=config.source.trim_whitespace)
    sink = create_sink(config.sink.output_format, stream)
    processor = TransactionProcessor(source, sink, sort_clients=config.sink.sort_clients)
    report = processor.process_transactions()
    return report.transactions_failed


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)

    try:
        if args.output is None:
            run(config, args.input, sys.stdout)
        else:
            try:
                output = open(args.output, "w", encoding="utf-8", newline="")
            except OSError as e:
                raise SinkError(f"Cannot open output file: {args.output}") from e
            with output:
                run(config, args.input, output)
    except FatalProcessingError as e:
        logger.debug("Run aborted", exc_info=True)
        message = str(e)
        if e.__cause__ is not None and not isinstance(e.__cause__, FatalProcessingError):
            message += f" ({e.__cause__})"
        print(f"error: {message}", file=sys.stderr)
        return 1

    return 0
