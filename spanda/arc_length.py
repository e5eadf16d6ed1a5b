"""Arc-length lookup tables for constant-speed travel along curves."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from itertools import accumulate, pairwise

__all__ = ["ARC_LENGTH_SAMPLES", "ArcLengthTable", "tangent_angle"]

ARC_LENGTH_SAMPLES = 256
"""Default number of samples taken when building a table."""

Point = Sequence[float]


def tangent_angle(tangent: Point) -> float:
    """Angle of a tangent vector in radians, measured from the positive x axis."""
    return math.atan2(tangent[1], tangent[0])


class ArcLengthTable:
    """Cumulative arc length sampled at evenly spaced parameter values.

    ``entries[i]`` is the length of the curve from ``t = 0`` up to
    ``t = i / (len(entries) - 1)``.
    """

    def __init__(self, entries: Sequence[float]) -> None:
        self._entries = tuple(float(e) for e in entries)
        self._total = self._entries[-1] if self._entries else 0.0

    @classmethod
    def build(
        cls,
        evaluate: Callable[[float], Point],
        samples: int = ARC_LENGTH_SAMPLES,
    ) -> ArcLengthTable:
        """Sample ``evaluate`` at ``samples`` evenly spaced values of ``t``."""
        if samples < 2:
            return cls([0.0])
        points = [evaluate(i / (samples - 1)) for i in range(samples)]
        steps = (math.hypot(b[0] - a[0], b[1] - a[1]) for a, b in pairwise(points))
        return cls(list(accumulate(steps, initial=0.0)))

    @property
    def entries(self) -> tuple[float, ...]:
        """The cumulative lengths, one per sample."""
        return self._entries

    def total_length(self) -> float:
        """Length of the whole curve."""
        return self._total

    def uniform_to_t(self, u: float) -> float:
        """Parameter ``t`` at which a fraction ``u`` of the total length is covered.

        On a curve of zero length, or a table with a single sample, ``u`` is
        returned as it is.
        """
        entries = self._entries
        if self._total <= 0.0 or len(entries) < 2:
            return u

        u = max(0.0, min(1.0, u))
        target = u * self._total

        n = len(entries)
        lo, hi = 0, n - 1
        while lo < hi - 1:
            mid = (lo + hi) // 2
            if entries[mid] < target:
                lo = mid
            else:
                hi = mid

        seg_len = entries[hi] - entries[lo]
        frac = (target - entries[lo]) / seg_len if seg_len > 1e-10 else 0.0
        t_lo = lo / (n - 1)
        t_hi = hi / (n - 1)
        return t_lo + frac * (t_hi - t_lo)