"""Domain models for the transaction log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ledger.domain.wallets.money import from_minor_units


@dataclass(slots=True, frozen=True)
class TransactionRecord:
    id: int
    from_address: str
    to_address: str
    amount_cents: int
    timestamp: datetime

    @property
    def amount(self) -> Decimal:
        return from_minor_units(self.amount_cents)
