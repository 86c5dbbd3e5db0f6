"""JSON Lines sink writing one client state object per line."""

import json
import logging
from decimal import InvalidOperation
from typing import TextIO

from tx_engine.exceptions import SinkError
from tx_engine.models.account import ClientState
from tx_engine.sinks.serialization import state_to_dict

logger = logging.getLogger(__name__)


class JsonLinesSink:
    """Output client states as JSON Lines.

    Decimal fields are strings with four fractional digits so no precision
    is lost to floating point.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.records_written = 0

    def write(self, state: ClientState) -> None:
        """Write one client state object."""
        try:
            self.stream.write(json.dumps(state_to_dict(state), ensure_ascii=False) + "\n")
        except (OSError, InvalidOperation) as e:
            raise SinkError(f"Error serializing state for client: {state.client_id}") from e
        self.records_written += 1

    def flush(self) -> None:
        """Flush the underlying stream."""
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkError("Error flushing client states") from e
        logger.debug("Wrote %d client states as JSON lines", self.records_written)
