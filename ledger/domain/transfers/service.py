"""Transfer engine.

Validates a transfer request and applies it as one atomic unit: debit the
sender, credit the receiver and append the transaction record, all inside a
single storage transaction. Either everything commits or nothing does.

Structural checks (address format, self transfer, amount sign) run before any
storage access. Everything that reads balances runs inside the unit, which is
opened on a write session so concurrent transfers touching the same wallet are
serialized by the storage layer.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger.domain.common.exceptions import InternalFailureError, InvalidRequestShapeError, LedgerError
from ledger.domain.transactions.clock import MonotonicClock
from ledger.domain.transactions.models import TransactionRecord
from ledger.domain.transactions.repository import TransactionRepository
from ledger.domain.transactions.service import to_transaction_record
from ledger.domain.wallets.address import is_valid_address, mask_address
from ledger.domain.wallets.exceptions import (
    BalanceWouldGoNegativeError,
    InvalidAddressFormatError,
    WalletNotFoundError,
)
from ledger.domain.wallets.money import has_minor_unit_precision, to_minor_units
from ledger.domain.wallets.repository import WalletRepository
from ledger.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from ledger.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from ledger.infrastructure.database.session import Database

from .exceptions import (
    InsufficientFundsError,
    NonPositiveAmountError,
    ReceiverNotFoundError,
    SelfTransferError,
    SenderNotFoundError,
)
from .models import TransferRequest

logger = logging.getLogger(__name__)

WalletRepositoryFactory = Callable[[AsyncSession], WalletRepository]
TransactionRepositoryFactory = Callable[[AsyncSession], TransactionRepository]


class TransferService:
    """Moves value between two wallets. Holds no state besides its collaborators."""

    def __init__(
        self,
        sessions: async_sessionmaker[AsyncSession],
        *,
        clock: Optional[MonotonicClock] = None,
        wallet_repository: Optional[WalletRepositoryFactory] = None,
        transaction_repository: Optional[TransactionRepositoryFactory] = None,
    ) -> None:
        self._sessions = sessions
        self._wallet_repository = wallet_repository or SqlWalletRepository
        self._transaction_repository = transaction_repository or (
            lambda session: SqlTransactionRepository(session, clock)
        )

    @classmethod
    def from_database(cls, database: Database, *, clock: Optional[MonotonicClock] = None) -> "TransferService":
        return cls(database.write_sessions, clock=clock)

    async def transfer(self, request: TransferRequest) -> TransactionRecord:
        try:
            amount_cents = self._validate(request)
            record = await self._execute(request, amount_cents)
        except LedgerError as exc:
            logger.warning("Transfer rejected: %s", exc.message, extra=self._log_fields(request, error=exc.code))
            raise

        logger.info("Transaction completed successfully", extra=self._log_fields(request, transaction_id=record.id))
        return record

    def _validate(self, request: TransferRequest) -> int:
        if not is_valid_address(request.from_address) or not is_valid_address(request.to_address):
            raise InvalidAddressFormatError()
        if request.from_address == request.to_address:
            raise SelfTransferError()

        amount = _as_decimal(request.amount)
        if amount <= 0:
            raise NonPositiveAmountError()
        if not has_minor_unit_precision(amount):
            raise InvalidRequestShapeError("Amount must have at most two decimal places")
        return to_minor_units(amount)

    async def _execute(self, request: TransferRequest, amount_cents: int) -> TransactionRecord:
        try:
            async with self._sessions() as session:
                async with session.begin():
                    return await self._apply(session, request, amount_cents)
        except SQLAlchemyError as exc:
            logger.error(
                "Transfer failed in storage, rolled back",
                exc_info=exc,
                extra=self._log_fields(request, error=type(exc).__name__),
            )
            raise InternalFailureError() from exc

    async def _apply(self, session: AsyncSession, request: TransferRequest, amount_cents: int) -> TransactionRecord:
        wallets = self._wallet_repository(session)
        transactions = self._transaction_repository(session)

        locked = await wallets.lock_many([request.from_address, request.to_address])

        sender = locked.get(request.from_address)
        if sender is None:
            raise SenderNotFoundError()
        if sender.balance_cents < amount_cents:
            raise InsufficientFundsError()
        if request.to_address not in locked:
            raise ReceiverNotFoundError()

        try:
            await wallets.adjust_balance(request.from_address, -amount_cents)
        except BalanceWouldGoNegativeError as exc:
            raise InsufficientFundsError() from exc
        except WalletNotFoundError as exc:
            raise SenderNotFoundError() from exc

        try:
            await wallets.adjust_balance(request.to_address, amount_cents)
        except WalletNotFoundError as exc:
            raise ReceiverNotFoundError() from exc

        tx = await transactions.append(
            from_address=request.from_address,
            to_address=request.to_address,
            amount_cents=amount_cents,
        )
        return to_transaction_record(tx)

    @staticmethod
    def _log_fields(request: TransferRequest, **fields: Any) -> dict[str, Any]:
        return {
            "sender": mask_address(request.from_address),
            "receiver": mask_address(request.to_address),
            "amount": str(request.amount),
            **fields,
        }


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str)) and not isinstance(value, bool):
        try:
            amount = Decimal(value)
        except InvalidOperation as exc:
            raise InvalidRequestShapeError("Amount is not a number") from exc
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    else:
        raise InvalidRequestShapeError("Amount is not a number")
    if not amount.is_finite():
        raise InvalidRequestShapeError("Amount is not a number")
    return amount


__all__ = ["TransferService"]
