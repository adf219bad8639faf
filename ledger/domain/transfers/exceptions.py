"""Transfer engine rejections."""

from ledger.domain.common.exceptions import LedgerError


class TransferError(LedgerError):
    """Base class for transfer rejections."""


class SelfTransferError(TransferError):
    code = "SelfTransfer"
    default_message = "Cannot send funds to the same wallet"


class NonPositiveAmountError(TransferError):
    code = "NonPositiveAmount"
    default_message = "Amount must be greater than zero"


class SenderNotFoundError(TransferError):
    code = "SenderNotFound"
    default_message = "Sender wallet not found"


class ReceiverNotFoundError(TransferError):
    code = "ReceiverNotFound"
    default_message = "Receiver wallet not found"


class InsufficientFundsError(TransferError):
    code = "InsufficientFunds"
    default_message = "Insufficient funds"
