"""Address validation, generation and masking."""

import pytest

from ledger.domain.wallets.address import ADDRESS_LENGTH, generate_address, is_valid_address, mask_address


@pytest.mark.parametrize(
    "value",
    [
        "0" * 64,
        "f" * 64,
        "0123456789abcdef" * 4,
    ],
)
def test_accepts_64_lowercase_hex(value):
    assert is_valid_address(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "a" * 63,
        "a" * 65,
        "A" * 64,
        "0123456789ABCDEF" * 4,
        "g" * 64,
        "a" * 63 + " ",
        "a" * 64 + "\n",
        "0123456789",
        None,
        123,
    ],
)
def test_rejects_everything_else(value):
    assert not is_valid_address(value)


def test_generated_addresses_are_valid_and_distinct():
    addresses = {generate_address() for _ in range(50)}

    assert len(addresses) == 50
    assert all(len(a) == ADDRESS_LENGTH and is_valid_address(a) for a in addresses)


def test_mask_keeps_first_and_last_five():
    address = "abcde" + "0" * 54 + "12345"

    assert mask_address(address) == "abcde...12345"


@pytest.mark.parametrize("value", ["", "abc", "123456789"])
def test_mask_hides_short_values_entirely(value):
    assert mask_address(value) == "******"
