"""Friction-based deceleration from an initial velocity, with no target."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any

__all__ = ["InertiaConfig", "Inertia", "InertiaN"]


@dataclass
class InertiaConfig:
    """Friction (0 = none, 1 = instant stop) and the settle threshold."""

    friction: float = 0.05
    epsilon: float = 0.1

    @classmethod
    def default_flick(cls) -> InertiaConfig:
        """Moderate deceleration."""
        return cls(friction=0.05, epsilon=0.1)

    @classmethod
    def heavy(cls) -> InertiaConfig:
        """Slow deceleration, long coast."""
        return cls(friction=0.02, epsilon=0.1)

    @classmethod
    def snappy(cls) -> InertiaConfig:
        """Fast deceleration, quick stop."""
        return cls(friction=0.1, epsilon=0.1)


def _decay(config: InertiaConfig, dt: float) -> float:
    # Friction is normalised to a 60 fps reference frame.
    return (1.0 - config.friction) ** (dt * 60.0)


class Inertia:
    """Single-axis inertia: position accumulates while velocity decays."""

    def __init__(
        self,
        config: InertiaConfig | None = None,
        velocity: float = 0.0,
        position: float = 0.0,
    ) -> None:
        self.config = config if config is not None else InertiaConfig.default_flick()
        self._velocity = float(velocity)
        self._position = float(position)
        self._settled = abs(self._velocity) < self.config.epsilon

    def position(self) -> float:
        return self._position

    def velocity(self) -> float:
        return self._velocity

    def is_settled(self) -> bool:
        """Whether the velocity has dropped below the threshold."""
        return self._settled

    def kick(self, velocity: float) -> None:
        """Apply a new velocity and restart the motion."""
        self._velocity = float(velocity)
        self._settled = False

    def reset(self) -> None:
        """Zero the position and velocity."""
        self._position = 0.0
        self._velocity = 0.0
        self._settled = True

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether it is still moving."""
        if self._settled:
            return False
        self._velocity *= _decay(self.config, dt)
        self._position += self._velocity * dt
        if abs(self._velocity) < self.config.epsilon:
            self._velocity = 0.0
            self._settled = True
        return not self._settled


def _components(value: Any) -> list[float]:
    if isinstance(value, Real):
        return [float(value)]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [float(c) for c in value]
    raise TypeError(f"cannot decompose values of type {type(value).__name__}")


def _rebuild(template: Any, components: list[float]) -> Any:
    if isinstance(template, Real):
        return components[0]
    if isinstance(template, tuple):
        make = getattr(template, "_make", None)
        return make(components) if callable(make) else tuple(components)
    if isinstance(template, list):
        return list(components)
    return type(template)(components)


class InertiaN:
    """Inertia on every component of a number or a sequence of numbers."""

    def __init__(
        self,
        config: InertiaConfig | None,
        initial: Any,
        velocity: Any = None,
    ) -> None:
        self.config = config if config is not None else InertiaConfig.default_flick()
        self._positions = _components(initial)
        self._current = initial
        if velocity is None:
            self._velocities = [0.0] * len(self._positions)
            self._settled = True
        else:
            self._velocities = self._checked_velocity(velocity)
            self._settled = all(abs(v) < self.config.epsilon for v in self._velocities)

    def _checked_velocity(self, velocity: Any) -> list[float]:
        components = _components(velocity)
        if len(components) != len(self._positions):
            raise ValueError(
                f"velocity has {len(components)} components, position has {len(self._positions)}"
            )
        return components

    def position(self) -> Any:
        """Current position, in the same shape as the initial value."""
        return self._current

    def velocity_components(self) -> tuple[float, ...]:
        return tuple(self._velocities)

    def is_settled(self) -> bool:
        """Whether every axis has come to rest."""
        return self._settled

    def kick(self, velocity: Any) -> None:
        """Apply a new velocity and restart the motion."""
        self._velocities = self._checked_velocity(velocity)
        self._settled = False

    def reset(self, initial: Any) -> None:
        """Restart at ``initial`` with zero velocity."""
        self._positions = _components(initial)
        self._velocities = [0.0] * len(self._positions)
        self._current = initial
        self._settled = True

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether any axis is still moving."""
        if self._settled:
            return False
        decay = _decay(self.config, dt)
        all_settled = True
        velocities: list[float] = []
        for i, v in enumerate(self._velocities):
            v *= decay
            self._positions[i] += v * dt
            if abs(v) >= self.config.epsilon:
                all_settled = False
            else:
                v = 0.0
            velocities.append(v)
        self._velocities = velocities
        self._current = _rebuild(self._current, list(self._positions))
        if all_settled:
            self._settled = True
        return not self._settled