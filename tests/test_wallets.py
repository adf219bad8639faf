"""Wallet store, balance lookup and provisioning."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ledger.domain.wallets import service as wallet_service_module
from ledger.domain.wallets.address import generate_address, is_valid_address
from ledger.domain.wallets.exceptions import (
    BalanceWouldGoNegativeError,
    InvalidAddressFormatError,
    WalletAlreadyExistsError,
    WalletNotFoundError,
)
from ledger.domain.wallets.service import WalletService, provision_wallets
from ledger.infrastructure.database.repositories import SqlWalletRepository


@pytest.mark.asyncio
async def test_provisioning_fresh_store_creates_funded_wallets(database):
    created = await provision_wallets(database, 10, Decimal("100.00"))

    assert len(created) == 10
    assert len({w.address for w in created}) == 10
    async with database.sessions() as session:
        service = WalletService.with_session(session)
        for wallet in created:
            assert is_valid_address(wallet.address)
            snapshot = await service.get_wallet(wallet.address)
            assert snapshot.balance == Decimal("100.00")


@pytest.mark.asyncio
async def test_provisioning_skips_non_empty_store(database, make_wallet):
    await make_wallet("5.00")

    created = await provision_wallets(database, 10, Decimal("100.00"))

    assert created == []
    async with database.sessions() as session:
        assert await SqlWalletRepository(session).count() == 1


@pytest.mark.asyncio
async def test_create_wallet_retries_on_address_collision(database, make_wallet, monkeypatch):
    taken = await make_wallet("1.00")
    fresh = generate_address()
    candidates = iter([taken, taken, fresh])
    monkeypatch.setattr(wallet_service_module, "generate_address", lambda: next(candidates))

    async with database.write_sessions() as session:
        async with session.begin():
            wallet = await WalletService.with_session(session).create_wallet(Decimal("100.00"))

    assert wallet.address == fresh
    async with database.sessions() as session:
        assert await SqlWalletRepository(session).count() == 2


@pytest.mark.asyncio
async def test_create_rejects_existing_address(database, make_wallet):
    taken = await make_wallet("1.00")

    async with database.write_sessions() as session:
        async with session.begin():
            with pytest.raises(WalletAlreadyExistsError):
                await SqlWalletRepository(session).create(taken, 500)


@pytest.mark.asyncio
async def test_get_wallet_validates_and_reports_missing(database):
    async with database.sessions() as session:
        service = WalletService.with_session(session)
        with pytest.raises(InvalidAddressFormatError):
            await service.get_wallet("xyz")
        with pytest.raises(WalletNotFoundError):
            await service.get_wallet(generate_address())


@pytest.mark.asyncio
async def test_repeated_balance_queries_are_identical(database, make_wallet):
    address = await make_wallet("42.17")

    async with database.sessions() as session:
        service = WalletService.with_session(session)
        first = await service.get_wallet(address)
        second = await service.get_wallet(address)

    assert first.balance == second.balance == Decimal("42.17")


@pytest.mark.asyncio
async def test_adjust_balance_refuses_to_go_negative(database, make_wallet, balance_of):
    address = await make_wallet("10.00")

    async with database.write_sessions() as session:
        async with session.begin():
            repo = SqlWalletRepository(session)
            assert await repo.adjust_balance(address, -400) == 600
            with pytest.raises(BalanceWouldGoNegativeError):
                await repo.adjust_balance(address, -601)
            with pytest.raises(WalletNotFoundError):
                await repo.adjust_balance(generate_address(), 100)

    assert await balance_of(address) == Decimal("6.00")
