"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360).

    NaN propagates unchanged.

    Example:
        >>> normalize_hue(-30)
        330.0
        >>> normalize_hue(720)
        0.0
    """
    wrapped = float(np.fmod(hue, 360.0))
    if wrapped < 0:
        wrapped += 360.0
    # -1e-20 + 360 rounds to 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return math.floor(x + 0.5)


def linspace_unit(n: int) -> list[float]:
    """Return ``n`` evenly spaced positions covering [0, 1] inclusive.

    Example:
        >>> linspace_unit(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [float(t) for t in np.linspace(0.0, 1.0, n)]
