"""Wallet address format: 64 lowercase hexadecimal characters."""

from __future__ import annotations

import re
import secrets

ADDRESS_LENGTH = 64
ADDRESS_ALPHABET = "abcdef0123456789"

_ADDRESS_RE = re.compile(r"[a-f0-9]{%d}" % ADDRESS_LENGTH)


def is_valid_address(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return _ADDRESS_RE.fullmatch(value) is not None


def generate_address() -> str:
    """Return a random well-formed address.

    Uniqueness is not checked here; callers insert it and retry on collision.
    """
    return "".join(secrets.choice(ADDRESS_ALPHABET) for _ in range(ADDRESS_LENGTH))


def mask_address(value: str) -> str:
    """Shorten an address for log output, e.g. ``3fa9c...0b1de``."""
    if not isinstance(value, str) or len(value) < 10:
        return "******"
    return f"{value[:5]}...{value[-5:]}"


__all__ = [
    "ADDRESS_ALPHABET",
    "ADDRESS_LENGTH",
    "generate_address",
    "is_valid_address",
    "mask_address",
]
