"""Base error type shared by all ledger domain modules."""


class LedgerError(Exception):
    """Base class for caller-visible ledger errors.

    ``code`` is the machine-readable error kind, the message is for humans.
    """

    code = "LedgerError"
    default_message = "Ledger operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidRequestShapeError(LedgerError):
    """Raised when an inbound payload cannot be interpreted."""

    code = "InvalidRequestShape"
    default_message = "Invalid request body"


class InternalFailureError(LedgerError):
    """Raised when storage fails inside an atomic unit; the unit was rolled back."""

    code = "InternalFailure"
    default_message = "Internal failure, no changes were applied"


class RateLimitExceededError(LedgerError):
    """Raised when a client exceeds its request allowance."""

    code = "RateLimited"
    default_message = "Rate limit exceeded. Try again later."
