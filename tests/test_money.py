from decimal import Decimal

import pytest

from ledger.domain.wallets.money import from_minor_units, has_minor_unit_precision, to_minor_units


@pytest.mark.parametrize(
    "amount, cents",
    [
        (Decimal("100"), 10000),
        (Decimal("30.00"), 3000),
        (Decimal("0.01"), 1),
        (Decimal("33.3"), 3330),
        (Decimal("-5.25"), -525),
    ],
)
def test_to_minor_units(amount, cents):
    assert to_minor_units(amount) == cents


@pytest.mark.parametrize("amount", [Decimal("0.001"), Decimal("1.999"), Decimal("NaN"), Decimal("Infinity")])
def test_sub_cent_and_non_finite_amounts_are_refused(amount):
    assert not has_minor_unit_precision(amount)
    with pytest.raises(ValueError):
        to_minor_units(amount)


def test_from_minor_units_always_has_two_places():
    assert str(from_minor_units(7000)) == "70.00"
    assert str(from_minor_units(5)) == "0.05"
    assert str(from_minor_units(0)) == "0.00"


def test_many_small_transfers_do_not_drift():
    cents = 0
    for _ in range(1000):
        cents += to_minor_units(Decimal("0.10"))

    assert from_minor_units(cents) == Decimal("100.00")
