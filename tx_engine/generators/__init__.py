"""Synthetic transaction generators."""

from tx_engine.generators.transaction import TransactionGenerator

__all__ = ["TransactionGenerator"]
