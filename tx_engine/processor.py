"""Transaction processing service."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

from tx_engine.exceptions import (
    AccountError,
    AccountOperationError,
    CannotDisputeError,
    CannotResolveOrChargeBackError,
    MissingAmountError,
    TransactionError,
    TxEngineError,
)
from tx_engine.logging import DIAGNOSTICS_LOGGER
from tx_engine.models.enums import TransactionType
from tx_engine.models.transaction import Transaction
from tx_engine.sinks.base import ClientStateSink
from tx_engine.sources.base import TransactionSource
from tx_engine.store.history import TransactionRecord
from tx_engine.store.ledger import AccountLedger, LedgerEntry

logger = logging.getLogger(__name__)
diagnostics = logging.getLogger(DIAGNOSTICS_LOGGER)


@dataclass
class ProcessingReport:
    """Outcome of a processing run."""

    transactions_processed: int = 0
    errors: list[TransactionError] = field(default_factory=list)
    clients: int = 0

    @property
    def transactions_failed(self) -> int:
        return len(self.errors)


class TransactionProcessor:
    """Gather transactions from a source, compute client states, write them to a sink.

    Intended as a single-shot service processing one batch of transactions.
    A transaction that breaks a business rule is rejected and collected in
    the report while processing continues. Source and sink failures
    (``SourceError``, ``SinkError``) abort the run.

    Parameters
    ----------
    source : TransactionSource
        Producer of transactions in input order.
    sink : ClientStateSink
        Destination for the final client states.
    sort_clients : bool
        Export clients ordered by ID instead of first-seen order.
    ledger : AccountLedger | None
        Ledger to apply transactions to (default: a fresh one).
    """

    def __init__(
        self,
        source: TransactionSource,
        sink: ClientStateSink,
        sort_clients: bool = False,
        ledger: AccountLedger | None = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._sort_clients = sort_clients
        self.ledger = ledger if ledger is not None else AccountLedger()
        self._report = ProcessingReport()
        self._done = False

    def process_transactions(self) -> ProcessingReport:
        """Process all transactions and export the final client states.

        Returns
        -------
        ProcessingReport
            Counts and the rejected transactions, in input order.

        Raises
        ------
        SourceError
            If the source yields a malformed record or cannot be read.
        SinkError
            If a client state cannot be written.
        """
        if self._done:
            raise TxEngineError("Transaction processor has already run")
        self._done = True

        self._import_and_process_transactions()
        self._report_transaction_errors()
        self._export_client_states()

        self._report.clients = len(self.ledger)
        logger.info(
            "Processed %d transactions for %d clients (%d rejected)",
            self._report.transactions_processed,
            self._report.clients,
            self._report.transactions_failed,
        )
        return self._report

    def _import_and_process_transactions(self) -> None:
        for transaction in self._source.read():
            # Clients are exported even when all of their transactions fail
            entry = self.ledger.get_or_create(transaction.client_id)
            self._report.transactions_processed += 1

            try:
                self.process_transaction(entry, transaction)
            except TransactionError as e:
                # A single invalid transaction must not stop the batch
                self._report.errors.append(e)

    def _report_transaction_errors(self) -> None:
        for error in self._report.errors:
            diagnostics.warning(
                "%s",
                error,
                extra={"context": {"transaction_id": error.transaction_id, "error": type(error).__name__}},
            )

    def _export_client_states(self) -> None:
        for state in self.ledger.states(sort_clients=self._sort_clients):
            self._sink.write(state)
        self._sink.flush()

    def process_transaction(self, entry: LedgerEntry, transaction: Transaction) -> None:
        """Apply one transaction to a client's ledger entry.

        Raises
        ------
        TransactionError
            If the transaction is rejected. The entry is left unchanged.
        """
        if transaction.transaction_type.requires_amount:
            amount = _extract_amount(transaction)
            if transaction.transaction_type == TransactionType.DEPOSIT:
                _apply(transaction, entry.state.deposit, amount)
            else:
                _apply(transaction, entry.state.withdraw, amount)
            entry.history.record(transaction.transaction_id, amount, transaction.transaction_type)

        elif transaction.transaction_type == TransactionType.DISPUTE:
            original = self._find_original(entry, transaction)
            if original is None:
                return
            if not original.can_dispute():
                raise CannotDisputeError(transaction.transaction_id)
            _apply(transaction, entry.state.dispute_deposit, original.amount)
            original.mark_disputed()

        elif transaction.transaction_type == TransactionType.RESOLVE:
            original = self._find_original(entry, transaction)
            if original is None:
                return
            if not original.can_resolve_or_charge_back():
                raise CannotResolveOrChargeBackError(transaction.transaction_id)
            _apply(transaction, entry.state.resolve, original.amount)
            # back to applied, can be disputed again
            original.mark_resolved()

        elif transaction.transaction_type == TransactionType.CHARGEBACK:
            original = self._find_original(entry, transaction)
            if original is None:
                return
            if not original.can_resolve_or_charge_back():
                raise CannotResolveOrChargeBackError(transaction.transaction_id)
            _apply(transaction, entry.state.chargeback, original.amount)
            original.mark_charged_back()

    def _find_original(self, entry: LedgerEntry, transaction: Transaction) -> TransactionRecord | None:
        original = entry.history.get(transaction.transaction_id)
        if original is None:
            # References to unknown transactions are ignored
            logger.debug(
                "Ignoring %s for unknown transaction %d of client %d",
                transaction.transaction_type.value,
                transaction.transaction_id,
                transaction.client_id,
            )
        return original


def _extract_amount(transaction: Transaction) -> Decimal:
    if transaction.amount is None:
        raise MissingAmountError(transaction.transaction_id)
    return transaction.amount


def _apply(
    transaction: Transaction,
    operation: Callable[[Decimal], None],
    amount: Decimal,
) -> None:
    try:
        operation(amount)
    except AccountError as e:
        raise AccountOperationError(transaction.transaction_id, e) from e
