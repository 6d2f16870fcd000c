"""OKLCH interpolation between two colors.

Lightness follows an eased t while hue follows the raw t, so lightness
pacing and hue travel are independent. Chroma may be lifted in the middle
of the run to counter the desaturated "muddy valley" of a straight lerp.
"""

from __future__ import annotations

import math

from huecraft.core.color.hue import HuePath, interpolate_hue
from huecraft.core.color.models import ColorLike, OklchColor, as_color, make_color
from huecraft.core.curves.easing import LightnessEase, apply_easing
from huecraft.core.utils.math import lerp

# Chroma boost is only applied strictly inside this window of t
_BOOST_WINDOW = (0.2, 0.8)
_BOOST_AMPLITUDE = 0.2


def chroma_boost_factor(t: float) -> float:
    """Multiplier applied to lerped chroma at ``t`` when boosting.

    A sine bump peaking at 1.2 for t=0.5. Outside the (0.2, 0.8) window
    the factor is exactly 1, so there is a step at the window edges.
    """
    if _BOOST_WINDOW[0] < t < _BOOST_WINDOW[1]:
        return 1 + _BOOST_AMPLITUDE * math.sin(t * math.pi)
    return 1.0


def interpolate_oklch(
    color_a: ColorLike,
    color_b: ColorLike,
    steps: int = 3,
    *,
    hue_path: HuePath | str = HuePath.SHORT,
    lightness_ease: LightnessEase | str = LightnessEase.LINEAR,
    chroma_boost: bool = False,
) -> list[OklchColor]:
    """Interpolate ``steps`` intermediate colors between two endpoints.

    Args:
        color_a: Start color.
        color_b: End color.
        steps: Number of intermediate stops (>= 0).
        hue_path: Path policy for the hue channel.
        lightness_ease: Easing applied to t for the lightness channel only.
        chroma_boost: Lift chroma in the middle of the run.

    Returns:
        ``steps + 2`` colors, endpoints included, each clamped to
        l in [0, 1] and c in [0, 0.4].

    Example:
        >>> a = OklchColor(l=0.4, c=0.1, h=20)
        >>> b = OklchColor(l=0.8, c=0.1, h=80)
        >>> [round(c.h) for c in interpolate_oklch(a, b, 1)]
        [20, 50, 80]
    """
    a = as_color(color_a)
    b = as_color(color_b)
    steps = max(0, steps)

    result: list[OklchColor] = []
    for i in range(steps + 2):
        t = i / (steps + 1)
        eased_t = apply_easing(t, lightness_ease)

        lightness = lerp(a.lightness, b.lightness, eased_t)
        hue = interpolate_hue(a.hue, b.hue, t, hue_path)

        chroma = lerp(a.chroma, b.chroma, t)
        if chroma_boost:
            chroma *= chroma_boost_factor(t)

        result.append(make_color(lightness, chroma, hue))

    return result


__all__ = [
    "chroma_boost_factor",
    "interpolate_oklch",
]
