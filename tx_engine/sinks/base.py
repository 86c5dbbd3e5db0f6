"""Client state sink interface."""

from typing import Protocol

from tx_engine.models.account import ClientState


class ClientStateSink(Protocol):
    """Destination for final client states.

    ``write`` is called once per client after all transactions have been
    applied, then ``flush`` once. Write failures raise ``SinkError``.
    """

    def write(self, state: ClientState) -> None:
        """Serialize the given client state to its destination."""
        ...

    def flush(self) -> None:
        """Push buffered output to its destination."""
        ...
