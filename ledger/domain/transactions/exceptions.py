"""Transaction log specific exceptions."""

from ledger.domain.common.exceptions import LedgerError


class InvalidQueryParameterError(LedgerError):
    """Raised when the recent-transactions count is not a positive integer."""

    code = "InvalidQueryParameter"
    default_message = "Invalid count parameter"
