"""Key-stop generators, one per gradient style.

Each generator is a pure function ``(base, mood, stop_count) -> stops``.
Only the chromatic arc honours ``stop_count``; the other styles always
produce three anchors. Every stop is clamped into canonical range.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import math

from huecraft.core.color.hue import bias_toward_range
from huecraft.core.color.models import OklchColor, make_color
from huecraft.core.gradient.enums import GradientStyle
from huecraft.core.mood.models import MoodDescriptor
from huecraft.core.utils.math import clamp, linspace_unit

logger = logging.getLogger(__name__)

KeyStopGenerator = Callable[[OklchColor, MoodDescriptor, int], list[OklchColor]]


def atmospheric_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Base, desaturated shifted midpoint, darker muted near-complement."""
    l, c, h = base.lch()  # noqa: E741
    return [
        make_color(l, c, h),
        make_color(l * 0.85, c * 0.4, h + 20),
        make_color(max(0.15, l - 0.25), c * 0.6, h + 160),
    ]


def jewel_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Deep, rich stops: depth-clamped base, boosted analogous, matched complement."""
    l, c, h = base.lch()  # noqa: E741
    return [
        make_color(min(0.45, l), max(0.15, c), h),
        make_color(min(0.4, l - 0.05), min(0.28, c * 1.3), h + 35),
        make_color(min(0.42, l), max(0.14, c * 0.9), h + 180),
    ]


def earthy_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Warm analogous shifts ending on a warm-tinted neutral."""
    l, c, h = base.lch()  # noqa: E741
    warm_base = h if (h > 270 or h < 90) else h + 30
    return [
        make_color(l, min(c, 0.15), warm_base),
        make_color(l + 0.05, c * 0.85, warm_base + 15),  # toward ochre/sienna
        make_color(l - 0.1, max(0.02, c * 0.25), warm_base - 10),
    ]


def dreamy_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Softened base drifting toward blue-violet and a near-white finish."""
    l, c, h = base.lch()  # noqa: E741
    dream_shift = 60 if h < 200 else -40
    return [
        make_color(max(0.5, l - 0.1), c * 0.7, h),
        make_color(min(0.85, l + 0.15), c * 0.5, h + dream_shift),
        make_color(0.92, 0.02, h + dream_shift * 1.2),
    ]


def pop_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """High chroma throughout: base, complement, further rotation."""
    l, c, h = base.lch()  # noqa: E741
    return [
        make_color(l, max(0.18, c), h),
        make_color(l + 0.05, max(0.16, c * 0.95), h + 180),
        make_color(l - 0.05, max(0.15, c * 0.9), h + 220),
    ]


def noir_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Darkened base, near-black with the base undertone, dark complement."""
    l, c, h = base.lch()  # noqa: E741
    return [
        make_color(min(0.35, l), min(0.06, c * 0.4), h),
        make_color(0.12, 0.015, h),
        make_color(0.18, min(0.05, c * 0.3), h + 180),
    ]


def botanical_stops(base: OklchColor, mood: MoodDescriptor, stop_count: int) -> list[OklchColor]:
    """Green-biased base, lighter yellow-green, deep earthy anchor."""
    l, c, h = base.lch()  # noqa: E741
    green = bias_toward_range(h, (80, 160), 0.4)
    return [
        make_color(l, min(c, 0.18), green),
        make_color(min(0.7, l + 0.1), c * 0.9, green - 30),
        make_color(max(0.25, l - 0.2), c * 0.5, green + 20),
    ]


def chromatic_arc_stops(
    base: OklchColor,
    mood: MoodDescriptor,
    stop_count: int,
) -> list[OklchColor]:
    """Hue journey centred on the base hue at near-constant depth and energy.

    The arc spans 120 degrees for four or more stops, 90 otherwise.
    Lightness carries a small sine wave (+0.04 at the centre) and chroma a
    V-shaped lift toward the ends.
    """
    l, c, h = base.lch()  # noqa: E741
    arc_length = 120 if stop_count >= 4 else 90

    stops: list[OklchColor] = []
    for t in linspace_unit(max(2, stop_count)):
        target_h = h + arc_length * t - arc_length / 2
        target_l = clamp(l + math.sin(t * math.pi) * 0.04, 0.25, 0.85)
        target_c = clamp(c * (1 + abs(t - 0.5) * 0.15), 0.08, 0.28)
        stops.append(make_color(target_l, target_c, target_h))

    return stops


STYLE_GENERATORS: dict[GradientStyle, KeyStopGenerator] = {
    GradientStyle.ATMOSPHERIC: atmospheric_stops,
    GradientStyle.JEWEL: jewel_stops,
    GradientStyle.EARTHY: earthy_stops,
    GradientStyle.DREAMY: dreamy_stops,
    GradientStyle.POP: pop_stops,
    GradientStyle.NOIR: noir_stops,
    GradientStyle.BOTANICAL: botanical_stops,
    GradientStyle.CHROMATIC_ARC: chromatic_arc_stops,
}


def generate_key_stops(
    base: OklchColor,
    mood: MoodDescriptor,
    style: GradientStyle | str,
    stop_count: int = 3,
) -> list[OklchColor]:
    """Run the key-stop generator for ``style``.

    Unknown styles fall back to the chromatic arc.
    """
    try:
        generator = STYLE_GENERATORS[GradientStyle(style)]
    except ValueError:
        logger.debug(f"Unknown gradient style {style!r}, using chromatic-arc")
        generator = chromatic_arc_stops
    return generator(base, mood, stop_count)


__all__ = [
    "STYLE_GENERATORS",
    "KeyStopGenerator",
    "generate_key_stops",
]
