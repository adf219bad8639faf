"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from typing import Iterable

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from ledger.db.models import Wallet
from ledger.domain.common.repository import AsyncRepository
from ledger.domain.wallets.address import mask_address
from ledger.domain.wallets.exceptions import (
    BalanceWouldGoNegativeError,
    WalletAlreadyExistsError,
    WalletNotFoundError,
)


class SqlWalletRepository(AsyncRepository[Wallet]):
    model = Wallet

    async def get(self, address: str) -> Wallet | None:
        stmt = select(Wallet).where(Wallet.address == address)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def lock_many(self, addresses: Iterable[str]) -> dict[str, Wallet]:
        """Load and row-lock several wallets, always in address order.

        A fixed lock order keeps two opposite transfers from deadlocking each other.
        On SQLite FOR UPDATE is not emitted; the write session's BEGIN IMMEDIATE
        already holds the database write lock.
        """
        ordered = sorted(set(addresses))
        stmt = select(Wallet).where(Wallet.address.in_(ordered)).order_by(Wallet.address).with_for_update()
        result = await self.session.execute(stmt)
        return {wallet.address: wallet for wallet in result.scalars()}

    async def create(self, address: str, balance_cents: int) -> Wallet:
        if await self.session.get(Wallet, address) is not None:
            raise WalletAlreadyExistsError(f"Wallet already exists: {mask_address(address)}")

        wallet = Wallet(address=address, balance_cents=balance_cents)
        try:
            async with self.session.begin_nested():
                self.session.add(wallet)
        except IntegrityError as exc:
            raise WalletAlreadyExistsError(f"Wallet already exists: {mask_address(address)}") from exc
        return wallet

    async def adjust_balance(self, address: str, delta_cents: int) -> int:
        """Apply ``balance += delta`` in one conditional UPDATE and return the new balance.

        The WHERE clause carries the non-negativity check, so the comparison and
        the write happen in the same statement.
        """
        stmt = (
            update(Wallet)
            .where(Wallet.address == address)
            .where(Wallet.balance_cents + delta_cents >= 0)
            .values(balance_cents=Wallet.balance_cents + delta_cents)
            .execution_options(synchronize_session="fetch")
            .returning(Wallet.balance_cents)
        )
        result = await self.session.execute(stmt)
        balance = result.scalar_one_or_none()
        if balance is not None:
            return int(balance)

        if await self.get(address) is None:
            raise WalletNotFoundError(f"Wallet not found: {mask_address(address)}")
        raise BalanceWouldGoNegativeError()
