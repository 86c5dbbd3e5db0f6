"""Structured logging configuration for tx-engine."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

DIAGNOSTICS_LOGGER = "tx_engine.diagnostics"


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for tx-engine.

    Standard output carries the account snapshots, so log records go to
    standard error unless another stream is given.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Destination stream (default: ``sys.stderr``).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(min(log_level, logging.WARNING))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("tx_engine").setLevel(log_level)

    # Rejected transactions are reported even when the engine runs quietly
    logging.getLogger(DIAGNOSTICS_LOGGER).setLevel(min(log_level, logging.WARNING))

    # Reduce noise from external libraries
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Fields passed as ``extra={"context": {...}}`` are merged into the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            log_data.update(context)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)
