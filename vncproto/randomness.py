"""Cryptographically secure random bytes."""

from __future__ import annotations

import secrets


def random_bytes(length: int) -> bytes:
    """Return length bytes from the operating system's secure generator."""
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_bytes(length)