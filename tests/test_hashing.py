import pytest

from vncproto.hashing import Hash, HashType, hash_many, hash_one


def test_md5_of_empty_input():
    assert hash_one(HashType.MD5, b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_sha1_of_abc():
    assert (hash_one(HashType.SHA1, b"abc").hex()
            == "a9993e364706816aba3e25717850c26c9cd0d89d")


def test_sha256_of_abc():
    assert (hash_one(HashType.SHA256, b"abc").hex()
            == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")


@pytest.mark.parametrize("hash_type,size", [
    (HashType.MD5, 16), (HashType.SHA1, 20), (HashType.SHA256, 32)])
def test_digest_sizes(hash_type, size):
    assert len(hash_one(hash_type, b"data")) == size
    assert Hash(hash_type).digest_size == size


def test_truncated_digest_is_prefix():
    full = hash_one(HashType.SHA256, b"server random")
    assert hash_one(HashType.SHA256, b"server random", 16) == full[:16]


def test_many_equals_one_of_concatenation():
    chunks = [b"client", b"-", b"random"]
    assert (hash_many(HashType.SHA1, chunks)
            == hash_one(HashType.SHA1, b"client-random"))


def test_many_stops_at_first_empty_chunk():
    assert (hash_many(HashType.SHA256, [b"abc", b"", b"ignored"])
            == hash_one(HashType.SHA256, b"abc"))


def test_incremental_update_matches_one_shot():
    hasher = Hash(HashType.MD5)
    hasher.update(b"hello ")
    hasher.update(b"world")
    assert hasher.digest() == hash_one(HashType.MD5, b"hello world")


def test_digest_resets_state():
    hasher = Hash(HashType.SHA1)
    hasher.update(b"first")
    hasher.digest()
    hasher.update(b"second")
    assert hasher.digest() == hash_one(HashType.SHA1, b"second")


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Hash(HashType.INVALID)
    with pytest.raises(ValueError):
        hash_one(42, b"x")


def test_too_long_digest_rejected():
    with pytest.raises(ValueError):
        hash_one(HashType.MD5, b"x", 17)