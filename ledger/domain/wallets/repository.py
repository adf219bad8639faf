"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Iterable, Protocol

from ledger.db.models import Wallet as WalletModel


class WalletRepository(Protocol):
    async def get(self, address: str) -> WalletModel | None:
        ...

    async def lock_many(self, addresses: Iterable[str]) -> dict[str, WalletModel]:
        ...

    async def create(self, address: str, balance_cents: int) -> WalletModel:
        ...

    async def adjust_balance(self, address: str, delta_cents: int) -> int:
        ...

    async def count(self) -> int:
        ...
