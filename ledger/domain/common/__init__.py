"""Shared abstractions used across domain modules."""

from .exceptions import InternalFailureError, InvalidRequestShapeError, LedgerError, RateLimitExceededError
from .repository import AsyncRepository

__all__ = [
    "AsyncRepository",
    "InternalFailureError",
    "InvalidRequestShapeError",
    "LedgerError",
    "RateLimitExceededError",
]
