"""
Pytest configuration for the ledger service.

Provides fixtures for:
- Test settings pointing at a throwaway SQLite file per test
- An initialised Database storage context
- Funded wallets created directly through the repository
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio

from ledger.core.config import DatabaseSettings, LedgerSettings, RateLimitSettings, Settings
from ledger.domain.wallets.address import generate_address
from ledger.domain.wallets.money import from_minor_units, to_minor_units
from ledger.infrastructure.database import Database
from ledger.infrastructure.database.repositories import SqlTransactionRepository, SqlWalletRepository

WalletFactory = Callable[[str], Awaitable[str]]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "storage" / "ledger.db"


@pytest.fixture
def test_settings(db_path: Path) -> Settings:
    """Settings with an isolated database and admission control switched off."""
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{db_path}"),
        ledger=LedgerSettings(seed_on_startup=True),
        rate_limit=RateLimitSettings(enabled=False),
    )


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    db = Database.from_settings(test_settings)
    await db.init_db()
    try:
        yield db
    finally:
        await db.dispose()


@pytest_asyncio.fixture
async def make_wallet(database: Database) -> WalletFactory:
    """Create a wallet with the given balance (e.g. "100.00") and return its address."""

    async def _make(balance: str) -> str:
        address = generate_address()
        async with database.write_sessions() as session:
            async with session.begin():
                await SqlWalletRepository(session).create(address, to_minor_units(Decimal(balance)))
        return address

    return _make


@pytest_asyncio.fixture
async def balance_of(database: Database) -> Callable[[str], Awaitable[Decimal]]:
    async def _balance(address: str) -> Decimal:
        async with database.sessions() as session:
            wallet = await SqlWalletRepository(session).get(address)
            assert wallet is not None
            return from_minor_units(wallet.balance_cents)

    return _balance


@pytest_asyncio.fixture
async def transaction_count(database: Database) -> Callable[[], Awaitable[int]]:
    async def _count() -> int:
        async with database.sessions() as session:
            return await SqlTransactionRepository(session).count()

    return _count
