import pytest

from vncproto.dh_key import (
    DhKey,
    derive_public_key,
    derive_shared_secret,
    keygen,
)


def test_textbook_exchange():
    alice = DhKey(5, 23, 6)
    bob = DhKey(5, 23, 15)
    alice_pub = derive_public_key(alice)
    bob_pub = derive_public_key(bob)
    assert alice_pub.q == 8
    assert bob_pub.q == 19
    assert derive_shared_secret(alice, bob_pub).q == 2
    assert derive_shared_secret(bob, alice_pub).q == derive_shared_secret(alice, bob_pub).q


def test_keygen_uses_rfc3526_group():
    key = keygen()
    assert key.g == 2
    modulus = key.p_bytes(256)
    assert modulus[:8] == b"\xff" * 8
    assert modulus[-8:] == b"\xff" * 8
    assert modulus[8:12] == bytes.fromhex("C90FDAA2")


def test_keygen_gives_fresh_exponents():
    exponents = [keygen().q for _ in range(4)]
    assert len(set(exponents)) == 4
    assert all(0 <= q < 2 ** 2048 for q in exponents)


def test_generated_keys_agree_on_secret():
    alice, bob = keygen(), keygen()
    alice_pub, bob_pub = derive_public_key(alice), derive_public_key(bob)
    assert 0 < alice_pub.q < alice.p
    shared_a = derive_shared_secret(alice, bob_pub)
    shared_b = derive_shared_secret(bob, alice_pub)
    assert shared_a == shared_b
    assert len(shared_a.q_bytes(256)) == 256


def test_from_bytes_round_trip():
    key = DhKey.from_bytes(2, b"\x00\x17", b"\x06")
    assert (key.g, key.p, key.q) == (2, 23, 6)
    assert key.p_bytes(4) == b"\x00\x00\x00\x17"
    assert key.q_bytes(1) == b"\x06"


def test_export_too_small_rejected():
    with pytest.raises(ValueError):
        keygen().p_bytes(128)


def test_mismatched_generator_rejected():
    with pytest.raises(ValueError):
        derive_shared_secret(DhKey(2, 23, 6), DhKey(5, 23, 19))


def test_mismatched_modulus_rejected():
    with pytest.raises(ValueError):
        derive_shared_secret(DhKey(5, 23, 6), DhKey(5, 29, 19))