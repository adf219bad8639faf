"""Transaction log: recency listing, count handling and commit timestamps."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ledger.domain.transactions.clock import MonotonicClock
from ledger.domain.transactions.exceptions import InvalidQueryParameterError
from ledger.domain.transactions.service import TransactionService
from ledger.domain.transfers import TransferRequest
from ledger.domain.transfers.service import TransferService
from ledger.infrastructure.database.repositories import SqlTransactionRepository


def _service(**kwargs) -> TransactionService:
    return TransactionService(repository=None, **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_count_falls_back_to_default(raw):
    assert _service(default_count=10).resolve_count(raw) == 10


@pytest.mark.parametrize("raw, expected", [("5", 5), ("1", 1), (7, 7), ("1000", 1000), ("1001", 1000), ("99999", 1000)])
def test_count_is_parsed_and_clamped(raw, expected):
    assert _service(max_count=1000).resolve_count(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "-100", 0, -3, "abc", "1.5", "5 ", " 5", "1_0", True])
def test_invalid_count_is_rejected_not_defaulted(raw):
    with pytest.raises(InvalidQueryParameterError):
        _service().resolve_count(raw)


@pytest.mark.asyncio
async def test_list_recent_returns_newest_first(database, make_wallet):
    sender = await make_wallet("100.00")
    receiver = await make_wallet("100.00")
    transfers = TransferService.from_database(database)
    committed = []
    for i in range(8):
        record = await transfers.transfer(TransferRequest(sender, receiver, Decimal(i + 1)))
        committed.append(record.id)

    async with database.sessions() as session:
        recent = await TransactionService.with_session(session).list_recent("5")

    assert [r.id for r in recent] == list(reversed(committed))[:5]
    assert [r.amount for r in recent] == [Decimal("8.00"), Decimal("7.00"), Decimal("6.00"), Decimal("5.00"), Decimal("4.00")]
    assert all(r.timestamp.tzinfo is not None for r in recent)
    timestamps = [r.timestamp for r in recent]
    assert timestamps == sorted(timestamps, reverse=True)


@pytest.mark.asyncio
async def test_list_recent_on_empty_log(database):
    async with database.sessions() as session:
        assert await TransactionService.with_session(session).list_recent() == []


@pytest.mark.asyncio
async def test_append_assigns_ids_and_timestamps(database, make_wallet):
    a = await make_wallet("1.00")
    b = await make_wallet("1.00")
    fixed = datetime(2026, 1, 1, tzinfo=timezone.utc)

    async with database.write_sessions() as session:
        async with session.begin():
            log = SqlTransactionRepository(session)
            first = await log.append(from_address=a, to_address=b, amount_cents=100)
            second = await log.append(from_address=b, to_address=a, amount_cents=50, timestamp=fixed)

    assert first.id is not None and second.id == first.id + 1
    assert first.timestamp is not None
    assert second.timestamp == fixed


def test_clock_never_goes_backwards():
    base = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    readings = iter([base, base, base - timedelta(seconds=5), base + timedelta(seconds=1)])
    clock = MonotonicClock(source=lambda: next(readings))

    stamps = [clock.now() for _ in range(4)]

    assert stamps[0] == base
    assert stamps[1] == base + timedelta(microseconds=1)
    assert stamps[2] == base + timedelta(microseconds=2)
    assert stamps[3] == base + timedelta(seconds=1)
    assert stamps == sorted(stamps) and len(set(stamps)) == 4
