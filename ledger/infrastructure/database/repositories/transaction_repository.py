"""SQLAlchemy implementation for the transaction log"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.db.models import Transaction
from ledger.domain.common.repository import AsyncRepository
from ledger.domain.transactions.clock import MonotonicClock, default_clock


class SqlTransactionRepository(AsyncRepository[Transaction]):
    model = Transaction

    def __init__(self, session: AsyncSession, clock: Optional[MonotonicClock] = None) -> None:
        super().__init__(session)
        self._clock = clock or default_clock

    async def append(
        self,
        *,
        from_address: str,
        to_address: str,
        amount_cents: int,
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        tx = Transaction(
            from_address=from_address,
            to_address=to_address,
            amount_cents=amount_cents,
            timestamp=timestamp or self._clock.now(),
        )
        return await self.add(tx)

    async def list_recent(self, limit: int) -> Sequence[Transaction]:
        stmt = (
            select(Transaction)
            .order_by(desc(Transaction.timestamp), desc(Transaction.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
