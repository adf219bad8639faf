"""Wallet domain specific exceptions."""

from ledger.domain.common.exceptions import LedgerError


class WalletError(LedgerError):
    """Base class for wallet related domain errors."""


class InvalidAddressFormatError(WalletError):
    """Raised when an address is not 64 lowercase hex characters."""

    code = "InvalidAddressFormat"
    default_message = "Invalid wallet address format"


class WalletNotFoundError(WalletError):
    """Raised when the requested wallet does not exist."""

    code = "WalletNotFound"
    default_message = "Wallet not found"


class WalletAlreadyExistsError(WalletError):
    """Raised when creating a wallet whose address is already taken."""

    code = "WalletAlreadyExists"
    default_message = "Wallet already exists"


class BalanceWouldGoNegativeError(WalletError):
    """Raised when a balance adjustment would leave the wallet below zero."""

    code = "InsufficientFunds"
    default_message = "Insufficient funds"
