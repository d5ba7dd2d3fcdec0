"""Bandwidth estimation from timed transmissions."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

SAMPLES_MAX = 16


@dataclass(frozen=True)
class BandwidthSample:
    """One transmission: its size and its times in microseconds."""

    n_bytes: int
    departure_time: int
    arrival_time: int


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


class BandwidthEstimator:
    """Estimates bytes per second over the last sixteen samples."""

    def __init__(self, rtt_min: int = 0) -> None:
        self.rtt_min = rtt_min
        self._samples: deque[BandwidthSample] = deque(maxlen=SAMPLES_MAX)
        self._estimate = 0.0

    def _non_congested(self) -> float:
        # With spare capacity there are gaps between transmissions.
        bytes_total = sum(s.n_bytes for s in self._samples)
        delay_total = sum(s.arrival_time - s.departure_time - self.rtt_min
                          for s in self._samples)
        return _divide(bytes_total, delay_total * 1e-6)

    def _congested(self) -> float:
        # Under congestion transmissions follow one another without gaps.
        if not self._samples:
            return 0.0
        bytes_total = sum(s.n_bytes for s in self._samples)
        rtt = self._samples[-1].arrival_time - self._samples[0].departure_time
        return _divide(bytes_total, (rtt - self.rtt_min) * 1e-6)

    def feed(self, sample: BandwidthSample) -> None:
        self._samples.append(sample)
        self._estimate = _fmax(self._non_congested(), self._congested())

    def update_rtt_min(self, rtt_min: int) -> None:
        """Set the minimum round trip time; takes effect on the next feed."""
        self.rtt_min = rtt_min

    def estimate(self) -> int:
        """The estimate in bytes per second, rounded half away from zero."""
        value = self._estimate
        if not math.isfinite(value):
            return 0
        return int(math.copysign(math.floor(abs(value) + 0.5), value))