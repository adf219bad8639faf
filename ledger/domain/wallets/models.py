"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from .money import from_minor_units


@dataclass(slots=True, frozen=True)
class WalletSnapshot:
    address: str
    balance_cents: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def balance(self) -> Decimal:
        return from_minor_units(self.balance_cents)
