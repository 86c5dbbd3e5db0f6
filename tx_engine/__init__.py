"""Batch payments engine: applies client transactions and reports account states."""

__version__ = "0.1.0"
