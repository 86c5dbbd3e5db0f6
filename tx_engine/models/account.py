"""Client account state and its balance operations."""

from dataclasses import dataclass, field
from decimal import Decimal

from tx_engine.exceptions import (
    AccountLockedError,
    InsufficientFundsError,
    InvalidAmountError,
)

ZERO = Decimal(0)


@dataclass
class ClientState:
    """Single client state after applying a list of transactions.

    Every operation either applies completely or raises an
    ``AccountError`` and leaves the state untouched. ``total`` always
    equals ``available + held``.
    """

    client_id: int
    # Funds available for trading, staking, withdrawal, etc.
    available: Decimal = field(default=ZERO)
    # Funds held for dispute
    held: Decimal = field(default=ZERO)
    # Funds that are available or held
    total: Decimal = field(default=ZERO)
    locked: bool = False

    def deposit(self, amount: Decimal) -> None:
        """Credit available funds. Allowed on a locked account."""
        _check_amount(amount)
        self.available += amount
        self.total += amount

    def withdraw(self, amount: Decimal) -> None:
        """Debit available funds."""
        if self.locked:
            raise AccountLockedError(f"Account {self.client_id} is locked")
        _check_amount(amount)
        if self.available < amount:
            raise InsufficientFundsError(
                f"Insufficient available funds: {self.available} < {amount}"
            )
        self.available -= amount
        self.total -= amount

    def dispute_deposit(self, amount: Decimal) -> None:
        """Move a disputed deposit from available to held funds."""
        _check_amount(amount)
        self.available -= amount
        self.held += amount

    def resolve(self, amount: Decimal) -> None:
        """Release held funds back to available funds."""
        _check_amount(amount)
        self._check_held(amount)
        self.available += amount
        self.held -= amount

    def chargeback(self, amount: Decimal) -> None:
        """Remove held funds and lock the account for good."""
        _check_amount(amount)
        self._check_held(amount)
        self.held -= amount
        self.total -= amount
        self.locked = True

    def _check_held(self, amount: Decimal) -> None:
        if self.held < amount:
            raise InsufficientFundsError(f"Insufficient held funds: {self.held} < {amount}")


def _check_amount(amount: Decimal) -> None:
    if amount < ZERO:
        raise InvalidAmountError(f"Invalid amount: {amount}")
