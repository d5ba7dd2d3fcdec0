"""Entropy measures for judging how compressible pixel data is."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def _entropy(counts: Iterable[int], total: int) -> float:
    entropy = 0.0
    for count in counts:
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def first_order_entropy(values: Iterable[Hashable]) -> tuple[float, int]:
    """The entropy in bits per symbol and the number of distinct symbols."""
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        return 0.0, 0
    return _entropy(counts.values(), total), len(counts)


def second_order_entropy(values: Sequence[Hashable]) -> float:
    """The entropy in bits per pair of neighbouring symbols."""
    if len(values) < 2:
        return 0.0
    pairs = Counter(zip(values, values[1:]))
    return _entropy(pairs.values(), len(values) - 1)