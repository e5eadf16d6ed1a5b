"""Keyframe tracks: values at points in time, blended segment by segment."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from spanda.interpolate import lerp

__all__ = ["Loop", "LoopMode", "Keyframe", "KeyframeTrack"]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _linear(t: float) -> float:
    return t


class LoopMode(Enum):
    """How a track behaves once it reaches its last keyframe."""

    ONCE = "once"
    TIMES = "times"
    FOREVER = "forever"
    PING_PONG = "ping_pong"


@dataclass(frozen=True)
class Loop:
    """Repeat behaviour of a :class:`KeyframeTrack`.

    Use the constants ``Loop.ONCE``, ``Loop.FOREVER`` and ``Loop.PING_PONG``,
    or ``Loop.times(n)`` to play a fixed number of times.
    """

    mode: LoopMode
    count: int = 0

    ONCE: ClassVar[Loop]
    FOREVER: ClassVar[Loop]
    PING_PONG: ClassVar[Loop]

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("loop count cannot be negative")

    @classmethod
    def times(cls, n: int) -> Loop:
        """Play the track ``n`` times, then stop."""
        return cls(LoopMode.TIMES, n)


Loop.ONCE = Loop(LoopMode.ONCE)
Loop.FOREVER = Loop(LoopMode.FOREVER)
Loop.PING_PONG = Loop(LoopMode.PING_PONG)


@dataclass(frozen=True)
class Keyframe:
    """A value at a time, with the easing used towards the next keyframe."""

    time: float
    value: Any
    easing: Callable[[float], float] = _linear


class KeyframeTrack:
    """A time-sorted sequence of keyframes that can be evaluated at any time."""

    def __init__(self, looping: Loop = Loop.ONCE) -> None:
        self.looping = looping
        self._frames: list[Keyframe] = []
        self._elapsed = 0.0
        self._completed = False

    @property
    def frames(self) -> tuple[Keyframe, ...]:
        """The keyframes, ordered by time."""
        return tuple(self._frames)

    @property
    def elapsed(self) -> float:
        """Seconds played so far."""
        return self._elapsed

    def push(
        self,
        time: float,
        value: Any,
        easing: Callable[[float], float] | None = None,
    ) -> KeyframeTrack:
        """Add a keyframe; ``easing`` shapes the segment to the next frame."""
        self._frames.append(Keyframe(time, value, easing if easing is not None else _linear))
        self._frames.sort(key=lambda frame: frame.time)
        return self

    def duration(self) -> float:
        """Time of the last keyframe, or 0 for an empty track."""
        return self._frames[-1].time if self._frames else 0.0

    def value_at(self, t: float) -> Any:
        """Value at time ``t``, independent of playback state."""
        if not self._frames:
            raise ValueError("cannot evaluate an empty keyframe track")
        if len(self._frames) == 1:
            return self._frames[0].value

        t = _clamp(t, 0.0, self.duration())
        idx = next(
            (i for i in range(len(self._frames) - 1, -1, -1) if self._frames[i].time <= t),
            0,
        )
        if idx >= len(self._frames) - 1:
            return self._frames[-1].value

        a, b = self._frames[idx], self._frames[idx + 1]
        span = b.time - a.time
        if span <= 0.0:
            return b.value
        local_t = _clamp((t - a.time) / span, 0.0, 1.0)
        return lerp(a.value, b.value, a.easing(local_t))

    def value(self) -> Any:
        """Value at the current playback position."""
        return self.value_at(self._effective_time())

    def is_complete(self) -> bool:
        return self._completed

    def reset(self) -> None:
        """Rewind to the beginning."""
        self._elapsed = 0.0
        self._completed = False

    def _effective_time(self) -> float:
        dur = self.duration()
        if dur <= 0.0:
            return 0.0
        mode = self.looping.mode
        if mode is LoopMode.ONCE:
            return _clamp(self._elapsed, 0.0, dur)
        if mode is LoopMode.PING_PONG:
            cycle_t = math.fmod(self._elapsed, 2.0 * dur)
            return cycle_t if cycle_t <= dur else 2.0 * dur - cycle_t
        return math.fmod(self._elapsed, dur)

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether the track is still playing."""
        if self._completed:
            return False

        self._elapsed += max(dt, 0.0)
        dur = self.duration()
        if dur <= 0.0:
            self._completed = True
            return False

        mode = self.looping.mode
        if mode is LoopMode.ONCE:
            if self._elapsed >= dur:
                self._elapsed = dur
                self._completed = True
        elif mode is LoopMode.TIMES:
            n = self.looping.count
            if math.floor(self._elapsed / dur) >= n:
                self._elapsed = dur * n
                self._completed = True

        return not self._completed