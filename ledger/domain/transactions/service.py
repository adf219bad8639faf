"""Read side of the transaction log."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from ledger.db.models import Transaction as TransactionModel
from ledger.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository

from .exceptions import InvalidQueryParameterError
from .models import TransactionRecord
from .repository import TransactionRepository

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository
    default_count: int = 10
    max_count: int = 1000

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        *,
        default_count: int = 10,
        max_count: int = 1000,
    ) -> "TransactionService":
        return cls(SqlTransactionRepository(session), default_count=default_count, max_count=max_count)

    def resolve_count(self, raw: Optional[Union[str, int]]) -> int:
        """Turn a raw ``count`` parameter into a row limit.

        Missing means the default; anything that is not a positive integer is
        rejected; large values are clamped to ``max_count``.
        """
        if raw is None or raw == "":
            return self.default_count
        if isinstance(raw, bool):
            raise InvalidQueryParameterError()
        if isinstance(raw, int):
            count = raw
        elif isinstance(raw, str) and _COUNT_RE.fullmatch(raw):
            count = int(raw)
        else:
            logger.warning("Invalid count parameter", extra={"count": raw})
            raise InvalidQueryParameterError()

        if count <= 0:
            logger.warning("Invalid count parameter", extra={"count": raw})
            raise InvalidQueryParameterError()
        return min(count, self.max_count)

    async def list_recent(self, count: Optional[Union[str, int]] = None) -> list[TransactionRecord]:
        limit = self.resolve_count(count)
        rows = await self.repository.list_recent(limit)
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(model: TransactionModel) -> TransactionRecord:
        return to_transaction_record(model)


def to_transaction_record(model: TransactionModel) -> TransactionRecord:
    timestamp: datetime = model.timestamp
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return TransactionRecord(
        id=model.id,
        from_address=model.from_address,
        to_address=model.to_address,
        amount_cents=model.amount_cents,
        timestamp=timestamp,
    )
