"""Shared serialization utilities for sinks."""

from dataclasses import fields
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from enum import Enum
from typing import Any

from tx_engine.models.account import ClientState
from tx_engine.models.transaction import Transaction

STATE_FIELDS = ("client", "available", "held", "total", "locked")
TRANSACTION_FIELDS = ("type", "client", "tx", "amount")

DECIMAL_PLACES = Decimal("0.0001")

# Output names for model attributes that differ from the wire format
_FIELD_NAMES = {"client_id": "client", "transaction_id": "tx", "transaction_type": "type"}


def format_decimal(value: Decimal) -> str:
    """Render a decimal with exactly four fractional digits.

    Parameters
    ----------
    value : Decimal
        Value to render.

    Returns
    -------
    str
        Fixed-point representation, e.g. ``"1.5000"``. Never scientific
        notation, never ``"-0.0000"``.
    """
    with localcontext() as ctx:
        # Room for every integer digit plus the four fractional ones
        ctx.prec = max(ctx.prec, value.adjusted() + 6)
        quantized = value.quantize(DECIMAL_PLACES, rounding=ROUND_HALF_EVEN)
    if quantized.is_zero():
        quantized = abs(quantized)
    return f"{quantized:f}"


def serialize_value(value: Any) -> Any:
    """Serialize a value for text output."""
    if isinstance(value, Decimal):
        return format_decimal(value)
    elif isinstance(value, Enum):
        return value.value
    return value


def to_dict_fast(obj: Any) -> dict[str, Any]:
    """Convert a flat dataclass to an output dict without deep copy.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary keyed by output field names.
    """
    return {
        _FIELD_NAMES.get(f.name, f.name): serialize_value(getattr(obj, f.name))
        for f in fields(obj)
    }


def state_to_dict(state: ClientState) -> dict[str, Any]:
    """Convert a client state to a dict with ``STATE_FIELDS`` keys."""
    data = to_dict_fast(state)
    return {name: data[name] for name in STATE_FIELDS}


def state_to_row(state: ClientState) -> list[str]:
    """Convert a client state to a CSV row."""
    return [
        str(state.client_id),
        format_decimal(state.available),
        format_decimal(state.held),
        format_decimal(state.total),
        "true" if state.locked else "false",
    ]


def transaction_to_row(transaction: Transaction) -> list[str]:
    """Convert a transaction to an input CSV row (``TRANSACTION_FIELDS`` order)."""
    return [
        transaction.transaction_type.value,
        str(transaction.client_id),
        str(transaction.transaction_id),
        "" if transaction.amount is None else f"{transaction.amount:f}",
    ]
