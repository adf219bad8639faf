"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from ledger.db.models import Wallet as WalletModel
from ledger.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from ledger.infrastructure.database.session import Database

from .address import generate_address, is_valid_address, mask_address
from .exceptions import InvalidAddressFormatError, WalletAlreadyExistsError, WalletNotFoundError
from .models import WalletSnapshot
from .money import to_minor_units
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(SqlWalletRepository(session))

    async def get_wallet(self, address: str) -> WalletSnapshot:
        if not is_valid_address(address):
            raise InvalidAddressFormatError()
        wallet = await self.repository.get(address)
        if wallet is None:
            logger.warning("Wallet not found", extra={"address": mask_address(address)})
            raise WalletNotFoundError()
        return self._to_snapshot(wallet)

    async def create_wallet(self, balance: Decimal) -> WalletSnapshot:
        """Create a wallet under a fresh random address.

        Retries until an unused address comes up. The address space is 16**64,
        so in practice the first attempt wins.
        """
        balance_cents = to_minor_units(balance)
        while True:
            address = generate_address()
            try:
                wallet = await self.repository.create(address, balance_cents)
            except WalletAlreadyExistsError:
                logger.debug("Address collision, regenerating", extra={"address": mask_address(address)})
                continue
            return self._to_snapshot(wallet)

    async def provision(self, count: int, balance: Decimal) -> list[WalletSnapshot]:
        """Seed ``count`` funded wallets if the store is empty; otherwise do nothing."""
        existing = await self.repository.count()
        if existing > 0:
            logger.info("Wallet store already holds %d wallets, skipping provisioning", existing)
            return []

        wallets = [await self.create_wallet(balance) for _ in range(count)]
        logger.info("Provisioned %d wallets with balance %s", len(wallets), balance)
        return wallets

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            address=model.address,
            balance_cents=model.balance_cents,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


async def provision_wallets(database: Database, count: int, balance: Decimal) -> list[WalletSnapshot]:
    """Startup seeding: one atomic unit on a write session."""
    async with database.write_sessions() as session:
        async with session.begin():
            return await WalletService.with_session(session).provision(count, balance)
