"""Base64 encoding, and decoding that accepts both the standard and the
URL-safe alphabet."""

from __future__ import annotations

import base64

_STANDARD = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_DECODE = {char: value for value, char in enumerate(_STANDARD)}
_DECODE["-"] = 62
_DECODE["_"] = 63

_VALID = frozenset(_DECODE) | {"="}


def encode(data: bytes) -> str:
    """Encode bytes with the standard alphabet and '=' padding."""
    return base64.b64encode(bytes(data)).decode("ascii")


def is_valid(text: str) -> bool:
    """Whether every character belongs to either alphabet or is '='."""
    return all(char in _VALID for char in text)


def decode(text: str) -> bytes:
    """Decode text; everything from the first '=' on is ignored.

    Raises ValueError if the text holds a character outside both alphabets.
    """
    if not is_valid(text):
        raise ValueError("invalid base64 text")

    body = text.split("=", 1)[0]
    out = bytearray()
    for start in range(0, len(body), 4):
        chunk = body[start:start + 4]
        acc = 0
        for char in chunk:
            acc = (acc << 6) | _DECODE[char]
        acc <<= 6 * (4 - len(chunk))
        out += acc.to_bytes(3, "big")[:len(chunk) * 3 // 4]
    return bytes(out)