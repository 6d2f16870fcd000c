"""Easing curves for lightness pacing.

Each curve maps t in [0, 1] onto [0, 1] with fixed endpoints.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class LightnessEase(str, Enum):
    """Easing applied to the lightness channel during interpolation."""

    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"


def ease_linear(t: float) -> float:
    return t


def ease_in_out_quad(t: float) -> float:
    """Symmetric quadratic S-curve."""
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


_EASINGS: dict[LightnessEase, Callable[[float], float]] = {
    LightnessEase.LINEAR: ease_linear,
    LightnessEase.EASE: ease_in_out_quad,
    LightnessEase.EASE_IN: ease_in_quad,
    LightnessEase.EASE_OUT: ease_out_quad,
}


def apply_easing(t: float, easing: LightnessEase | str = LightnessEase.LINEAR) -> float:
    """Apply a named easing curve to ``t``.

    Unknown easing names fall back to linear.

    Example:
        >>> apply_easing(0.5, "easeIn")
        0.25
    """
    try:
        curve = _EASINGS[LightnessEase(easing)]
    except ValueError:
        curve = ease_linear
    return curve(t)
