"""In-memory sinks for tests and benchmarks."""

from dataclasses import replace

from tx_engine.models.account import ClientState


class MemorySink:
    """Collect snapshots of written client states."""

    def __init__(self) -> None:
        self.states: list[ClientState] = []
        self.flushed = False

    def write(self, state: ClientState) -> None:
        self.states.append(replace(state))

    def flush(self) -> None:
        self.flushed = True

    def by_client(self) -> dict[int, ClientState]:
        """Return collected states keyed by client ID."""
        return {state.client_id: state for state in self.states}


class NullSink:
    """Discard client states, counting them."""

    def __init__(self) -> None:
        self.records_written = 0

    def write(self, state: ClientState) -> None:
        self.records_written += 1

    def flush(self) -> None:
        pass
