"""Custom exception hierarchy for tx-engine."""


class TxEngineError(Exception):
    """Base exception for all tx-engine errors."""


class ConfigurationError(TxEngineError):
    """Raised when configuration is invalid or missing."""


class FatalProcessingError(TxEngineError):
    """Raised when a run cannot continue and must be aborted."""


class SourceError(FatalProcessingError):
    """Raised when the transaction source is unreadable or malformed."""


class SinkError(FatalProcessingError):
    """Raised when a sink operation fails."""


class AccountError(TxEngineError):
    """Raised when an account operation violates a balance or lock rule."""


class InvalidAmountError(AccountError):
    """Raised when an operation is given a negative amount."""


class InsufficientFundsError(AccountError):
    """Raised when available or held funds cannot cover an amount."""


class AccountLockedError(AccountError):
    """Raised when a withdrawal is attempted on a locked account."""


class TransactionError(TxEngineError):
    """Base class for recoverable, per-transaction errors.

    A transaction error rejects a single input record. The run collects
    it and carries on with the next record.
    """

    def __init__(self, transaction_id: int, message: str) -> None:
        super().__init__(message)
        self.transaction_id = transaction_id


class MissingAmountError(TransactionError):
    """Raised when a deposit or withdrawal carries no amount."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(transaction_id, f"Missing amount for transaction: {transaction_id}")


class CannotDisputeError(TransactionError):
    """Raised when the referenced transaction is not an applied deposit."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(transaction_id, f"Transaction cannot be disputed: {transaction_id}")


class CannotResolveOrChargeBackError(TransactionError):
    """Raised when the referenced transaction is not under dispute."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(
            transaction_id, f"Transaction cannot be resolved or charged back: {transaction_id}"
        )


class AccountOperationError(TransactionError):
    """Raised when the account rejects the operation a transaction maps to."""

    def __init__(self, transaction_id: int, error: AccountError) -> None:
        super().__init__(transaction_id, f"Error for transaction {transaction_id}: {error}")
        self.error = error
