"""Shape morphing between two sets of 2D points."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate, pairwise

__all__ = ["MorphPath", "resample"]

Point = tuple[float, float]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _as_points(points: Iterable[Sequence[float]]) -> list[Point]:
    return [(float(p[0]), float(p[1])) for p in points]


def _blend(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def resample(points: Iterable[Sequence[float]], target_count: int) -> list[Point]:
    """Resample a polyline to ``target_count`` points evenly spaced by arc length.

    The first and last points are kept. With fewer than two input points or a
    target below two, the input comes back unchanged, except that a target of
    one returns only the first point.
    """
    pts = _as_points(points)
    if len(pts) < 2 or target_count < 2:
        if target_count == 1 and pts:
            return [pts[0]]
        return pts

    lengths = list(
        accumulate(
            (math.hypot(b[0] - a[0], b[1] - a[1]) for a, b in pairwise(pts)),
            initial=0.0,
        )
    )
    total = lengths[-1]
    if total < 1e-10:
        return [pts[0]] * target_count

    last_segment = len(pts) - 2
    result: list[Point] = []
    for i in range(target_count):
        target = total * (i / (target_count - 1))
        idx = bisect_left(lengths, target)
        if idx < len(lengths) and lengths[idx] == target:
            seg = min(idx, last_segment)
        else:
            seg = 0 if idx == 0 else min(idx - 1, last_segment)

        seg_start, seg_end = lengths[seg], lengths[seg + 1]
        seg_len = seg_end - seg_start
        local_t = (target - seg_start) / seg_len if seg_len > 1e-10 else 0.0
        result.append(_blend(pts[seg], pts[seg + 1], local_t))
    return result


class MorphPath:
    """Animated morph from one list of 2D points to another.

    If the two lists differ in length (and neither is empty), the shorter one
    is resampled to the length of the longer. Without an easing the progress
    is used as is (linear).
    """

    def __init__(
        self,
        from_points: Iterable[Sequence[float]],
        to_points: Iterable[Sequence[float]],
        duration: float = 1.0,
        easing: Callable[[float], float] | None = None,
    ) -> None:
        source = _as_points(from_points)
        target = _as_points(to_points)
        if source and target and len(source) != len(target):
            count = max(len(source), len(target))
            if len(source) < count:
                source = resample(source, count)
            else:
                target = resample(target, count)

        self.from_points = source
        self.to_points = target
        self.duration = duration
        self.easing = easing
        self._elapsed = 0.0
        self._completed = False

    def progress(self) -> float:
        """Raw progress in ``[0, 1]`` before easing."""
        if self.duration > 0.0:
            return _clamp(self._elapsed / self.duration, 0.0, 1.0)
        return 1.0

    def value(self) -> list[Point]:
        """The interpolated points at the current progress."""
        raw = self.progress()
        t = self.easing(raw) if self.easing is not None else raw
        return [_blend(a, b, t) for a, b in zip(self.from_points, self.to_points)]

    def is_complete(self) -> bool:
        return self._completed

    def reset(self) -> None:
        """Rewind to the start."""
        self._elapsed = 0.0
        self._completed = False

    def seek(self, t: float) -> None:
        """Jump to progress ``t`` (clamped to ``[0, 1]``)."""
        self._elapsed = _clamp(t, 0.0, 1.0) * self.duration
        self._completed = t >= 1.0

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether the morph is still running."""
        if self._completed:
            return False
        self._elapsed += dt
        if self._elapsed >= self.duration:
            self._elapsed = self.duration
            self._completed = True
        return not self._completed