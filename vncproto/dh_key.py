"""Diffie-Hellman keys over the 2048-bit MODP group."""

from __future__ import annotations

from dataclasses import dataclass

from vncproto.randomness import random_bytes

# The 2048-bit MODP group of RFC 3526, section 3.
_MODP_2048 = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
    "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AACAA68FFFFFFFFFFFFFFFF", 16)

_MODP_2048_SIZE = 256


def _export(value: int, size: int) -> bytes:
    try:
        return value.to_bytes(size, "big")
    except OverflowError:
        raise ValueError(f"value does not fit in {size} bytes") from None


@dataclass(frozen=True)
class DhKey:
    """Generator g, modulus p and either a secret exponent or a public value q."""

    g: int
    p: int
    q: int

    @classmethod
    def from_bytes(cls, g: int, p: bytes, q: bytes) -> DhKey:
        """Build a key from big-endian modulus and value bytes."""
        return cls(g, int.from_bytes(bytes(p), "big"),
                   int.from_bytes(bytes(q), "big"))

    def p_bytes(self, size: int) -> bytes:
        """The modulus as size big-endian bytes."""
        return _export(self.p, size)

    def q_bytes(self, size: int) -> bytes:
        """The value as size big-endian bytes."""
        return _export(self.q, size)


def keygen() -> DhKey:
    """A new private key: g = 2, the RFC 3526 prime and a random exponent."""
    exponent = int.from_bytes(random_bytes(_MODP_2048_SIZE), "big")
    return DhKey(2, _MODP_2048, exponent)


def derive_public_key(private_key: DhKey) -> DhKey:
    """The public key g^q mod p belonging to a private key."""
    return DhKey(private_key.g, private_key.p,
                 pow(private_key.g, private_key.q, private_key.p))


def derive_shared_secret(own_secret: DhKey, remote_public_key: DhKey) -> DhKey:
    """The shared secret remote^own mod p.

    Raises ValueError when the two keys are not from the same group.
    """
    if own_secret.g != remote_public_key.g:
        raise ValueError("keys use different generators")
    if own_secret.p != remote_public_key.p:
        raise ValueError("keys use different moduli")
    return DhKey(own_secret.g, own_secret.p,
                 pow(remote_public_key.q, own_secret.q, own_secret.p))