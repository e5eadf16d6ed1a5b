"""Multi-segment 2D paths built from SVG-style drawing commands.

A :class:`CompoundPath` resolves move, line, quadratic, cubic and close
commands into segments. It is evaluated with arc-length parameterisation, so
equal steps of progress cover equal distances. It supports start and end
offsets for partial traversal and a rotation angle along the tangent.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

from spanda.arc_length import ARC_LENGTH_SAMPLES, ArcLengthTable, tangent_angle

__all__ = [
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CubicTo",
    "Close",
    "PathCommand",
    "CompoundPath",
]

Point = tuple[float, float]


def _point(p: Sequence[float]) -> Point:
    return (float(p[0]), float(p[1]))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class MoveTo:
    """Move to a point, starting a new subpath."""

    point: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _point(self.point))


@dataclass(frozen=True)
class LineTo:
    """Straight line to a point."""

    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "end", _point(self.end))


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bezier curve with one control point."""

    control: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "control", _point(self.control))
        object.__setattr__(self, "end", _point(self.end))


@dataclass(frozen=True)
class CubicTo:
    """Cubic Bezier curve with two control points."""

    control1: Point
    control2: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "control1", _point(self.control1))
        object.__setattr__(self, "control2", _point(self.control2))
        object.__setattr__(self, "end", _point(self.end))


@dataclass(frozen=True)
class Close:
    """Close the subpath with a line back to the last move-to point."""


PathCommand = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


def _de_casteljau(points: Sequence[Point], t: float) -> Point:
    level = list(points)
    while len(level) > 1:
        level = [
            (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)
            for a, b in zip(level, level[1:])
        ]
    return level[0]


@dataclass(frozen=True)
class _Segment:
    """A resolved Bezier segment of degree 1, 2 or 3."""

    points: tuple[Point, ...]

    def evaluate(self, t: float) -> Point:
        return _de_casteljau(self.points, t)

    def derivative(self, t: float) -> Point:
        degree = len(self.points) - 1
        hodograph = [
            (degree * (b[0] - a[0]), degree * (b[1] - a[1]))
            for a, b in zip(self.points, self.points[1:])
        ]
        return _de_casteljau(hodograph, t)


def _resolve(commands: Iterable[PathCommand]) -> list[_Segment]:
    segments: list[_Segment] = []
    current: Point = (0.0, 0.0)
    subpath_start = current

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            current = subpath_start = cmd.point
        elif isinstance(cmd, LineTo):
            segments.append(_Segment((current, cmd.end)))
            current = cmd.end
        elif isinstance(cmd, QuadTo):
            segments.append(_Segment((current, cmd.control, cmd.end)))
            current = cmd.end
        elif isinstance(cmd, CubicTo):
            segments.append(_Segment((current, cmd.control1, cmd.control2, cmd.end)))
            current = cmd.end
        elif isinstance(cmd, Close):
            if (
                abs(current[0] - subpath_start[0]) > 1e-10
                or abs(current[1] - subpath_start[1]) > 1e-10
            ):
                segments.append(_Segment((current, subpath_start)))
                current = subpath_start
        else:
            raise TypeError(f"unknown path command: {cmd!r}")

    return segments


class CompoundPath:
    """A 2D path made of line, quadratic and cubic segments.

    Offsets are fractions of the full path length, clamped to ``[0, 1]``;
    ``rotation_offset`` is in degrees and is added to the tangent angle.
    """

    def __init__(
        self,
        commands: Iterable[PathCommand],
        start_offset: float = 0.0,
        end_offset: float = 1.0,
        rotation_offset: float = 0.0,
    ) -> None:
        self._segments = _resolve(commands)
        self.start_offset = _clamp(start_offset, 0.0, 1.0)
        self.end_offset = _clamp(end_offset, 0.0, 1.0)
        self.rotation_offset_rad = math.radians(rotation_offset)
        self._arc_table = ArcLengthTable.build(self._evaluate_global, ARC_LENGTH_SAMPLES)

    def __repr__(self) -> str:
        return (
            f"CompoundPath(segments={len(self._segments)}, "
            f"arc_length={self.arc_length()!r}, start_offset={self.start_offset!r}, "
            f"end_offset={self.end_offset!r})"
        )

    def arc_length(self) -> float:
        """Total length of the whole path."""
        return self._arc_table.total_length()

    def segment_count(self) -> int:
        """Number of resolved segments."""
        return len(self._segments)

    def _locate(self, t: float) -> tuple[_Segment, float]:
        count = len(self._segments)
        scaled = _clamp(t, 0.0, 1.0) * count
        idx = min(math.floor(scaled), count - 1)
        return self._segments[idx], _clamp(scaled - idx, 0.0, 1.0)

    def _evaluate_global(self, t: float) -> Point:
        if not self._segments:
            return (0.0, 0.0)
        segment, local = self._locate(t)
        return segment.evaluate(local)

    def _map_u(self, u: float) -> float:
        u = _clamp(u, 0.0, 1.0)
        effective = self.start_offset + u * (self.end_offset - self.start_offset)
        return self._arc_table.uniform_to_t(effective)

    def position(self, u: float) -> Point:
        """Point at progress ``u`` in ``[0, 1]``, at constant speed."""
        return self._evaluate_global(self._map_u(u))

    def tangent(self, u: float) -> Point:
        """Tangent vector at progress ``u``; ``(1, 0)`` for an empty path."""
        if not self._segments:
            return (1.0, 0.0)
        segment, local = self._locate(self._map_u(u))
        return segment.derivative(local)

    def rotation(self, u: float) -> float:
        """Tangent angle in radians at progress ``u``, plus the rotation offset."""
        return tangent_angle(self.tangent(u)) + self.rotation_offset_rad

    def rotation_deg(self, u: float) -> float:
        """Tangent angle in degrees at progress ``u``, plus the rotation offset."""
        return math.degrees(self.rotation(u))