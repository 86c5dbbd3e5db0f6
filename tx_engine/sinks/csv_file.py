"""CSV sink writing client states to a text stream."""

import csv
import logging
from decimal import InvalidOperation
from typing import TextIO

from tx_engine.exceptions import SinkError
from tx_engine.models.account import ClientState
from tx_engine.sinks.serialization import STATE_FIELDS, state_to_row

logger = logging.getLogger(__name__)


class CsvSink:
    """Output client states as CSV rows.

    The header is written together with the first row, so a run without
    clients produces no output at all.
    """

    def __init__(self, stream: TextIO) -> None:
        """Initialize CSV sink.

        Parameters
        ----------
        stream : TextIO
            Open text stream, e.g. ``sys.stdout``. Not closed by the sink.
        """
        self.stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self.records_written = 0

    def write(self, state: ClientState) -> None:
        """Write one client state row."""
        try:
            row = state_to_row(state)
            if self.records_written == 0:
                self._writer.writerow(STATE_FIELDS)
            self._writer.writerow(row)
        except (OSError, csv.Error, InvalidOperation) as e:
            raise SinkError(f"Error serializing state for client: {state.client_id}") from e
        self.records_written += 1

    def flush(self) -> None:
        """Flush the underlying stream."""
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkError("Error flushing client states") from e
        logger.debug("Wrote %d client states as CSV", self.records_written)
