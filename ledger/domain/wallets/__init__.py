"""Wallet domain exports"""

from .address import generate_address, is_valid_address, mask_address
from .exceptions import (
    BalanceWouldGoNegativeError,
    InvalidAddressFormatError,
    WalletAlreadyExistsError,
    WalletError,
    WalletNotFoundError,
)
from .models import WalletSnapshot
from .money import from_minor_units, to_minor_units

__all__ = [
    "BalanceWouldGoNegativeError",
    "InvalidAddressFormatError",
    "WalletAlreadyExistsError",
    "WalletError",
    "WalletNotFoundError",
    "WalletSnapshot",
    "from_minor_units",
    "generate_address",
    "is_valid_address",
    "mask_address",
    "to_minor_units",
]
