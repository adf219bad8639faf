"""Input model for the transfer engine."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class TransferRequest:
    from_address: str
    to_address: str
    amount: Decimal
