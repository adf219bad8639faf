"""Conversions between decimal amounts and integer minor units (cents)."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

MINOR_UNITS_PER_UNIT = 100
CENT = Decimal("0.01")


def has_minor_unit_precision(amount: Decimal) -> bool:
    """True when ``amount`` is finite and has at most two fractional digits."""
    if not amount.is_finite():
        return False
    try:
        return amount == amount.quantize(CENT)
    except InvalidOperation:
        return False


def to_minor_units(amount: Decimal) -> int:
    if not has_minor_unit_precision(amount):
        raise ValueError(f"amount {amount} is not representable in minor units")
    return int(amount.quantize(CENT) * MINOR_UNITS_PER_UNIT)


def from_minor_units(cents: int) -> Decimal:
    return (Decimal(cents) / MINOR_UNITS_PER_UNIT).quantize(CENT)


__all__ = ["CENT", "MINOR_UNITS_PER_UNIT", "from_minor_units", "has_minor_unit_precision", "to_minor_units"]
