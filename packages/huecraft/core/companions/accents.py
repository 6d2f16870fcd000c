"""Accent and background finders.

Both read the input's mood and derive a small, randomized set of colors
that stand out from the input without fighting it.
"""

from __future__ import annotations

import logging
import random

from huecraft.core.color.models import ColorLike, as_color, make_color
from huecraft.core.companions.enums import AccentIntensity
from huecraft.core.companions.models import AccentResult, BackgroundOption, BackgroundResult
from huecraft.core.mood.classifier import analyze_color_mood
from huecraft.core.mood.enums import Depth
from huecraft.core.utils.math import clamp, round_half_up
from huecraft.core.utils.random import resolve_rng

logger = logging.getLogger(__name__)

# (base offset, random span) in degrees; the accent never sits at exactly 180
_ACCENT_HUE_OFFSETS: dict[AccentIntensity, tuple[float, float]] = {
    AccentIntensity.SUBTLE: (30.0, 20.0),
    AccentIntensity.BALANCED: (120.0, 40.0),
    AccentIntensity.BOLD: (150.0, 60.0),
}

_ACCENT_CHROMA_MULTIPLIERS: dict[AccentIntensity, float] = {
    AccentIntensity.SUBTLE: 1.0,
    AccentIntensity.BALANCED: 1.2,
    AccentIntensity.BOLD: 1.5,
}


def _resolve_intensity(intensity: AccentIntensity | str) -> AccentIntensity:
    try:
        return AccentIntensity(intensity)
    except ValueError:
        logger.debug(f"Unknown accent intensity '{intensity}', using balanced")
        return AccentIntensity.BALANCED


def find_vibe_accent(
    input_color: ColorLike,
    *,
    intensity: AccentIntensity | str = AccentIntensity.BALANCED,
    rng: random.Random | None = None,
) -> AccentResult:
    """Find an accent that enhances ``input_color`` without competing.

    The accent hue is offset from the input by an intensity-dependent
    amount, its chroma scales with the input's, and its lightness moves
    away from the input's for contrast.

    Args:
        input_color: Color to accent.
        intensity: subtle, balanced or bold. Unknown values use balanced.
        rng: Randomness source; defaults to the process-level generator.

    Returns:
        AccentResult with the accent and two alternatives at -20 and +25
        degrees from it.
    """
    rng = resolve_rng(rng)
    level = _resolve_intensity(intensity)
    mood = analyze_color_mood(as_color(input_color))
    l, c, h = mood.raw.l, mood.raw.c, mood.raw.h  # noqa: E741

    base_offset, span = _ACCENT_HUE_OFFSETS[level]
    offset = base_offset + rng.random() * span

    chroma = clamp(c * _ACCENT_CHROMA_MULTIPLIERS[level], 0.06, 0.25)

    if l > 0.55:
        lightness = l - 0.15 - rng.random() * 0.10
    else:
        lightness = l + 0.15 + rng.random() * 0.10
    lightness = clamp(lightness, 0.25, 0.80)

    explanation = (
        f"This {level.value} accent uses a {round_half_up(offset)}° offset instead of a "
        f"direct complement, with chroma matched to your {mood.energy.value} input. "
        "It enhances without competing."
    )

    return AccentResult(
        accent=make_color(lightness, chroma, h + offset),
        mood=mood.mood,
        explanation=explanation,
        alternatives=[
            make_color(lightness + 0.05, chroma * 0.85, h + offset - 20),
            make_color(lightness - 0.05, chroma * 1.1, h + offset + 25),
        ],
    )


def find_vibe_backgrounds(
    input_color: ColorLike,
    *,
    rng: random.Random | None = None,
) -> BackgroundResult:
    """Suggest four backgrounds that let ``input_color`` shine.

    Options are a tinted white, a near-black, a warm neutral whose
    lightness follows the input's depth, and a desaturated complement.
    """
    rng = resolve_rng(rng)
    mood = analyze_color_mood(as_color(input_color))
    l, h = mood.raw.l, mood.raw.h  # noqa: E741

    deep_input = mood.depth in (Depth.DEEP, Depth.ABYSS)
    backgrounds = [
        BackgroundOption(
            color=make_color(0.96 + rng.random() * 0.03, 0.005 + rng.random() * 0.01, h),
            label="Light & Clean",
            description="Tinted white that subtly echoes your color",
        ),
        BackgroundOption(
            color=make_color(0.10 + rng.random() * 0.05, 0.005 + rng.random() * 0.015, h),
            label="Deep & Moody",
            description="Almost-black that creates a rich stage",
        ),
        BackgroundOption(
            color=make_color(0.92 if deep_input else 0.15, 0.015, h + 30),
            # abyss inputs get the light neutral under the dark label
            label="Warm Paper" if mood.depth is Depth.DEEP else "Warm Dark",
            description="A warm neutral that provides gentle contrast",
        ),
        BackgroundOption(
            color=make_color(0.12 if l > 0.5 else 0.93, 0.02, h + 180),
            label="Complement Wash",
            description="Opposite hue at near-zero chroma, creates subtle tension",
        ),
    ]

    if l > 0.6:
        recommendation = "Your color is light, darker backgrounds will make it pop"
    else:
        recommendation = "Your color is rich/dark, lighter or very dark backgrounds both work well"

    return BackgroundResult(
        backgrounds=backgrounds,
        mood=mood.mood,
        recommendation=recommendation,
    )


__all__ = [
    "find_vibe_accent",
    "find_vibe_backgrounds",
]
