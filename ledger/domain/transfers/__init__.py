"""Transfer engine exports"""

from .exceptions import (
    InsufficientFundsError,
    NonPositiveAmountError,
    ReceiverNotFoundError,
    SelfTransferError,
    SenderNotFoundError,
    TransferError,
)
from .models import TransferRequest

__all__ = [
    "InsufficientFundsError",
    "NonPositiveAmountError",
    "ReceiverNotFoundError",
    "SelfTransferError",
    "SenderNotFoundError",
    "TransferError",
    "TransferRequest",
]
