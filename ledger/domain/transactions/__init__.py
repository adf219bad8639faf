"""Transaction log domain exports.

Services are imported from their modules directly; this package only exposes
the plain types so repositories can depend on it without import cycles.
"""

from .clock import MonotonicClock, default_clock
from .exceptions import InvalidQueryParameterError
from .models import TransactionRecord

__all__ = [
    "InvalidQueryParameterError",
    "MonotonicClock",
    "TransactionRecord",
    "default_clock",
]
