"""Linear interpolation for scalars, vectors and custom value types."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

__all__ = ["lerp"]


def lerp(a: Any, b: Any, t: float) -> Any:
    """Interpolate linearly from ``a`` to ``b`` by factor ``t``.

    Numbers are blended directly. Sequences such as ``(x, y)`` or ``[x, y, z]``
    are blended component by component and keep their type. Any other object
    that has a ``lerp(other, t)`` method is asked to interpolate itself.
    """
    if isinstance(a, Real) and isinstance(b, Real):
        return a + (b - a) * t

    method = getattr(a, "lerp", None)
    if callable(method):
        return method(b, t)

    if isinstance(a, Sequence) and not isinstance(a, (str, bytes)):
        if not isinstance(b, Sequence) or isinstance(b, (str, bytes)):
            raise TypeError(f"cannot interpolate {type(a).__name__} with {type(b).__name__}")
        if len(a) != len(b):
            raise ValueError(
                f"cannot interpolate sequences of different lengths ({len(a)} and {len(b)})"
            )
        values = [lerp(x, y, t) for x, y in zip(a, b)]
        if isinstance(a, tuple):
            make = getattr(a, "_make", None)
            return make(values) if callable(make) else tuple(values)
        return values

    raise TypeError(f"cannot interpolate values of type {type(a).__name__}")