"""AES ciphers for the encrypted stream and authentication schemes.

The EAX ciphers use a 128-bit little-endian message counter as nonce,
kept separately for each direction and increased after every message.
"""

from __future__ import annotations

import abc
import enum

from Crypto.Cipher import AES

MAC_SIZE = 16
_NONCE_SIZE = 16
_COUNTER_MODULUS = 1 << 128


class CipherType(enum.IntEnum):
    INVALID = 0
    AES128_ECB = 1
    AES_EAX = 2
    AES256_EAX = 3


def _check_key(key: bytes, size: int) -> bytes:
    key = bytes(key)
    if len(key) != size:
        raise ValueError(f"key must be {size} bytes, got {len(key)}")
    return key


class Cipher(abc.ABC):
    """A pair of encryption and decryption contexts."""

    @abc.abstractmethod
    def encrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        """Return the ciphertext and the message authentication code."""

    @abc.abstractmethod
    def decrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        """Return the plaintext and the computed authentication code."""


class Aes128EcbCipher(Cipher):
    """AES-128 in ECB mode; carries no authentication code."""

    KEY_SIZE = 16

    def __init__(self, enc_key: bytes | None = None,
                 dec_key: bytes | None = None) -> None:
        self._enc = (AES.new(_check_key(enc_key, self.KEY_SIZE), AES.MODE_ECB)
                     if enc_key is not None else None)
        self._dec = (AES.new(_check_key(dec_key, self.KEY_SIZE), AES.MODE_ECB)
                     if dec_key is not None else None)

    @staticmethod
    def _check_blocks(data: bytes) -> bytes:
        data = bytes(data)
        if len(data) % AES.block_size:
            raise ValueError("ECB data must be a whole number of blocks")
        return data

    def encrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        if self._enc is None:
            raise ValueError("no encryption key set")
        return self._enc.encrypt(self._check_blocks(data)), b""

    def decrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        if self._dec is None:
            raise ValueError("no decryption key set")
        return self._dec.decrypt(self._check_blocks(data)), b""


class _EaxDirection:
    def __init__(self, key: bytes) -> None:
        self._key = key
        self._counter = 0

    def _next_nonce(self) -> bytes:
        nonce = self._counter.to_bytes(_NONCE_SIZE, "little")
        self._counter = (self._counter + 1) % _COUNTER_MODULUS
        return nonce

    def _context(self, nonce: bytes, ad: bytes):
        ctx = AES.new(self._key, AES.MODE_EAX, nonce=nonce, mac_len=MAC_SIZE)
        ctx.update(bytes(ad))
        return ctx

    def seal(self, data: bytes, ad: bytes) -> tuple[bytes, bytes]:
        ctx = self._context(self._next_nonce(), ad)
        ciphertext = ctx.encrypt(bytes(data))
        return ciphertext, ctx.digest()

    def open(self, data: bytes, ad: bytes) -> tuple[bytes, bytes]:
        nonce = self._next_nonce()
        plaintext = self._context(nonce, ad).decrypt(bytes(data))
        # Sealing the plaintext again yields the same ciphertext and so the
        # tag the sender should have produced.
        check = self._context(nonce, ad)
        check.encrypt(plaintext)
        return plaintext, check.digest()


class AesEaxCipher(Cipher):
    """AES-128 in EAX mode with counter nonces."""

    KEY_SIZE = 16

    def __init__(self, enc_key: bytes, dec_key: bytes) -> None:
        self._enc = _EaxDirection(_check_key(enc_key, self.KEY_SIZE))
        self._dec = _EaxDirection(_check_key(dec_key, self.KEY_SIZE))

    def encrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        return self._enc.seal(data, ad)

    def decrypt(self, data: bytes, ad: bytes = b"") -> tuple[bytes, bytes]:
        return self._dec.open(data, ad)


class Aes256EaxCipher(AesEaxCipher):
    """AES-256 in EAX mode with counter nonces."""

    KEY_SIZE = 32


def new_cipher(enc_key: bytes | None, dec_key: bytes | None,
               cipher_type: CipherType | int) -> Cipher:
    """Create a cipher of the given type."""
    try:
        cipher_type = CipherType(cipher_type)
    except ValueError:
        raise ValueError(f"invalid cipher type: {cipher_type!r}") from None
    if cipher_type is CipherType.AES128_ECB:
        return Aes128EcbCipher(enc_key, dec_key)
    if cipher_type is CipherType.AES_EAX:
        return AesEaxCipher(enc_key, dec_key)
    if cipher_type is CipherType.AES256_EAX:
        return Aes256EaxCipher(enc_key, dec_key)
    raise ValueError(f"invalid cipher type: {cipher_type!r}")