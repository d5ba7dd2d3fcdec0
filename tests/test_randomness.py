import pytest

from vncproto.randomness import random_bytes


@pytest.mark.parametrize("length", [1, 16, 256])
def test_length_is_respected(length):
    assert len(random_bytes(length)) == length


def test_zero_length_gives_empty_bytes():
    assert random_bytes(0) == b""


def test_negative_length_is_rejected():
    with pytest.raises(ValueError):
        random_bytes(-1)


def test_successive_calls_differ():
    draws = {random_bytes(16) for _ in range(8)}
    assert len(draws) == 8