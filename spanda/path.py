"""Bezier curves, multi-segment motion paths and tweens along them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from spanda.interpolate import lerp

__all__ = ["BezierPath", "MotionPath", "MotionPathTween"]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _linear(t: float) -> float:
    return t


@dataclass(frozen=True)
class BezierPath:
    """A single Bezier segment: linear (2 points), quadratic (3) or cubic (4)."""

    points: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not 2 <= len(self.points) <= 4:
            raise ValueError("a Bezier segment needs between 2 and 4 points")

    @classmethod
    def linear(cls, start: Any, end: Any) -> BezierPath:
        """Straight line from ``start`` to ``end``."""
        return cls((start, end))

    @classmethod
    def quadratic(cls, start: Any, control: Any, end: Any) -> BezierPath:
        """Quadratic Bezier with one control point."""
        return cls((start, control, end))

    @classmethod
    def cubic(cls, start: Any, control1: Any, control2: Any, end: Any) -> BezierPath:
        """Cubic Bezier with two control points."""
        return cls((start, control1, control2, end))

    @property
    def start(self) -> Any:
        return self.points[0]

    @property
    def end(self) -> Any:
        return self.points[-1]

    def evaluate(self, t: float) -> Any:
        """Point on the curve at progress ``t``, clamped to ``[0, 1]``."""
        t = _clamp(t, 0.0, 1.0)
        level = list(self.points)
        while len(level) > 1:
            level = [lerp(p, q, t) for p, q in zip(level, level[1:])]
        return level[0]


class MotionPath:
    """A chain of Bezier segments, each taking a weighted share of ``t``."""

    def __init__(self) -> None:
        self._segments: list[tuple[BezierPath, float]] = []

    def line(self, start: Any, end: Any, weight: float = 1.0) -> MotionPath:
        """Append a straight segment."""
        return self.segment(BezierPath.linear(start, end), weight)

    def quadratic(self, start: Any, control: Any, end: Any, weight: float = 1.0) -> MotionPath:
        """Append a quadratic Bezier segment."""
        return self.segment(BezierPath.quadratic(start, control, end), weight)

    def cubic(
        self, start: Any, control1: Any, control2: Any, end: Any, weight: float = 1.0
    ) -> MotionPath:
        """Append a cubic Bezier segment."""
        return self.segment(BezierPath.cubic(start, control1, control2, end), weight)

    def segment(self, path: BezierPath, weight: float = 1.0) -> MotionPath:
        """Append an existing segment; negative weights count as zero."""
        self._segments.append((path, max(weight, 0.0)))
        return self

    def segment_count(self) -> int:
        """Number of segments in the path."""
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def evaluate(self, t: float) -> Any:
        """Point on the whole path at progress ``t``, clamped to ``[0, 1]``."""
        t = _clamp(t, 0.0, 1.0)
        if not self._segments:
            raise ValueError("cannot evaluate an empty path")
        if len(self._segments) == 1:
            return self._segments[0][0].evaluate(t)

        total = sum(weight for _, weight in self._segments)
        if total <= 0.0:
            return self._segments[0][0].evaluate(0.0)

        target = t * total
        accumulated = 0.0
        for curve, weight in self._segments:
            boundary = accumulated + weight
            if boundary >= target or abs(target - boundary) < 1e-10:
                local_t = 0.0 if weight <= 0.0 else _clamp((target - accumulated) / weight, 0.0, 1.0)
                return curve.evaluate(local_t)
            accumulated = boundary

        return self._segments[-1][0].evaluate(1.0)


class MotionPathTween:
    """Moves a value along a :class:`MotionPath` over time."""

    def __init__(
        self,
        path: MotionPath,
        duration: float = 1.0,
        easing: Callable[[float], float] | None = None,
    ) -> None:
        self.path = path
        self.duration = max(duration, 0.0)
        self.easing = easing if easing is not None else _linear
        self._elapsed = 0.0
        self._completed = False

    def progress(self) -> float:
        """Raw progress in ``[0, 1]`` before easing."""
        if self.duration <= 0.0:
            return 1.0
        return _clamp(self._elapsed / self.duration, 0.0, 1.0)

    def value(self) -> Any:
        """Current position on the path."""
        return self.path.evaluate(self.easing(self.progress()))

    def is_complete(self) -> bool:
        return self._completed

    def reset(self) -> None:
        """Return to the start of the path."""
        self._elapsed = 0.0
        self._completed = False

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether the tween is still running."""
        if self._completed:
            return False
        self._elapsed += max(dt, 0.0)
        if self._elapsed >= self.duration:
            self._elapsed = self.duration
            self._completed = True
            return False
        return True