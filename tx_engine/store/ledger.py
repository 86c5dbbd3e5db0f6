"""In-memory account ledger owning every client's state and history."""

from dataclasses import dataclass, field
from typing import Iterator

from tx_engine.models.account import ClientState
from tx_engine.models.enums import TransactionState
from tx_engine.store.history import TransactionHistory


@dataclass
class LedgerEntry:
    """Client state with all referenced transactions."""

    state: ClientState
    history: TransactionHistory = field(default_factory=TransactionHistory)


@dataclass
class AccountLedger:
    """Client ledger keyed by client ID.

    Entries are created on first reference and never removed. Iteration
    follows the order in which clients were first seen.
    """

    clients: dict[int, LedgerEntry] = field(default_factory=dict)

    def get_or_create(self, client_id: int) -> LedgerEntry:
        """Get the client's entry, creating a zero-balance unlocked one if missing."""
        entry = self.clients.get(client_id)
        if entry is None:
            entry = LedgerEntry(state=ClientState(client_id=client_id))
            self.clients[client_id] = entry
        return entry

    def get(self, client_id: int) -> LedgerEntry | None:
        """Get the client's entry without creating one."""
        return self.clients.get(client_id)

    def states(self, sort_clients: bool = False) -> Iterator[ClientState]:
        """Iterate over client states.

        Parameters
        ----------
        sort_clients : bool
            Yield states ordered by client ID instead of first-seen order.
        """
        client_ids = sorted(self.clients) if sort_clients else list(self.clients)
        for client_id in client_ids:
            yield self.clients[client_id].state

    def __len__(self) -> int:
        return len(self.clients)

    def summary(self) -> dict[str, int]:
        """Return summary counts across all clients."""
        summary = {"clients": len(self.clients), "locked_clients": 0, "transactions": 0}
        for state in TransactionState:
            summary[f"{state.value.lower()}_transactions"] = 0

        for entry in self.clients.values():
            if entry.state.locked:
                summary["locked_clients"] += 1
            summary["transactions"] += len(entry.history)
            for state_value, count in entry.history.count_by_state().items():
                summary[f"{state_value.lower()}_transactions"] += count
        return summary
