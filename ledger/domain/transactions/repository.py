"""Repository protocol for the transaction log."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ledger.db.models import Transaction as TransactionModel


class TransactionRepository(Protocol):
    async def append(
        self,
        *,
        from_address: str,
        to_address: str,
        amount_cents: int,
        timestamp: Optional[datetime] = None,
    ) -> TransactionModel:
        ...

    async def list_recent(self, limit: int) -> Sequence[TransactionModel]:
        ...
