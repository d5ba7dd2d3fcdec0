import math

import pytest

from vncproto.entropy import first_order_entropy, second_order_entropy


def test_first_order_empty():
    assert first_order_entropy([]) == (0.0, 0)


def test_first_order_constant():
    assert first_order_entropy([7, 7, 7, 7]) == (0.0, 1)


@pytest.mark.parametrize("n", [2, 4, 8, 16])
def test_first_order_uniform_is_log2(n):
    entropy, unique = first_order_entropy(list(range(n)) * 3)
    assert unique == n
    assert entropy == pytest.approx(math.log2(n))


def test_first_order_bounded_by_unique_count():
    values = [1, 1, 1, 2, 3, 3, 9, 9, 9, 9]
    entropy, unique = first_order_entropy(values)
    assert unique == 4
    assert 0.0 < entropy < math.log2(unique)


def test_first_order_ignores_order():
    a = first_order_entropy([1, 2, 2, 3, 3, 3])
    b = first_order_entropy([3, 2, 3, 1, 3, 2])
    assert a == b


def test_second_order_short_input():
    assert second_order_entropy([]) == 0.0
    assert second_order_entropy([42]) == 0.0


def test_second_order_constant():
    assert second_order_entropy([5] * 10) == 0.0


def test_second_order_alternating_pairs():
    # Pairs (1, 2) and (2, 1) occur equally often.
    assert second_order_entropy([1, 2, 1]) == pytest.approx(1.0)


def test_second_order_all_distinct_pairs():
    values = list(range(9))
    assert second_order_entropy(values) == pytest.approx(math.log2(8))


def test_second_order_at_least_first_order_of_pairs_count():
    values = [0, 1, 0, 1, 2, 2, 0, 1]
    pairs = list(zip(values, values[1:]))
    assert second_order_entropy(values) == pytest.approx(
        first_order_entropy(pairs)[0])