"""Message digests used by the authentication schemes."""

from __future__ import annotations

import enum
import hashlib
from collections.abc import Callable, Iterable
from typing import Any


class HashType(enum.IntEnum):
    INVALID = 0
    MD5 = 1
    SHA1 = 2
    SHA256 = 3


_FACTORIES: dict[HashType, Callable[[], Any]] = {
    HashType.MD5: hashlib.md5,
    HashType.SHA1: hashlib.sha1,
    HashType.SHA256: hashlib.sha256,
}


class Hash:
    """An incremental digest; taking the digest starts it afresh."""

    def __init__(self, hash_type: HashType | int) -> None:
        try:
            factory = _FACTORIES[HashType(hash_type)]
        except (ValueError, KeyError):
            raise ValueError(f"invalid hash type: {hash_type!r}") from None
        self.hash_type = HashType(hash_type)
        self._factory = factory
        self._state = factory()

    @property
    def digest_size(self) -> int:
        return self._state.digest_size

    def update(self, data: bytes) -> None:
        self._state.update(bytes(data))

    def digest(self, length: int | None = None) -> bytes:
        """The first length bytes of the digest (all of it by default)."""
        full = self._state.digest()
        if length is None:
            length = len(full)
        if not 0 <= length <= len(full):
            raise ValueError(
                f"digest length must be between 0 and {len(full)}")
        self._state = self._factory()
        return full[:length]


def hash_one(hash_type: HashType | int, data: bytes,
             length: int | None = None) -> bytes:
    """Digest a single piece of data."""
    hasher = Hash(hash_type)
    hasher.update(data)
    return hasher.digest(length)


def hash_many(hash_type: HashType | int, chunks: Iterable[bytes],
              length: int | None = None) -> bytes:
    """Digest the concatenation of chunks, stopping at the first empty one."""
    hasher = Hash(hash_type)
    for chunk in chunks:
        if not chunk:
            break
        hasher.update(chunk)
    return hasher.digest(length)