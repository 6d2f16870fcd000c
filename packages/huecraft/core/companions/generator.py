"""Vibe-aware companion generation.

Companions are chosen to share the input's energy, depth and temperature
rather than to sit at fixed geometric angles. A muted dusty purple gets
a warm ochre, a dusty sage and a tinted neutral, not a screaming yellow.

Generation is random. Pass a seeded ``random.Random`` as ``rng`` for
repeatable output; without one the process-level generator is used and
every call produces a fresh palette.
"""

from __future__ import annotations

import logging
import random

from huecraft.core.color.models import ColorLike, OklchColor, as_color, make_color
from huecraft.core.companions.describe import describe_companion_role, describe_relationship
from huecraft.core.companions.enums import CompanionPurpose, CompanionRole
from huecraft.core.companions.hues import pick_vibe_hue
from huecraft.core.companions.models import CompanionPalette, PaletteEntry
from huecraft.core.mood.classifier import analyze_color_mood
from huecraft.core.mood.models import MoodDescriptor
from huecraft.core.mood.tips import vibe_tips
from huecraft.core.utils.math import clamp, normalize_hue, round_half_up
from huecraft.core.utils.random import resolve_rng

logger = logging.getLogger(__name__)

# Output bounds for chromatic companions
_COMPANION_CHROMA = (0.01, 0.30)
_COMPANION_LIGHTNESS = (0.08, 0.95)
_LIGHTNESS_JITTER = 0.06

# Neutral companions above this lightness act as light grounds
_LIGHT_GROUND_THRESHOLD = 0.6


def generate_single_companion(
    input_color: OklchColor,
    mood: MoodDescriptor,
    index: int,
    total_chromatic: int,
    used_hues: list[float],
    rng: random.Random | None = None,
) -> PaletteEntry:
    """Generate the ``index``-th chromatic companion.

    Chroma is drawn from 40-100% of the strategy's chroma range; lightness
    is spread evenly across the strategy's lightness band by index with a
    small jitter.
    """
    rng = resolve_rng(rng)
    strategy = mood.strategy

    hue = pick_vibe_hue(mood.raw.h, mood, index, used_hues, rng)

    min_c, max_c = strategy.chroma_range
    chroma_variation = rng.random() * 0.6 + 0.4
    chroma = clamp(min_c + (max_c - min_c) * chroma_variation, *_COMPANION_CHROMA)

    min_l, max_l = strategy.lightness_range
    lightness_step = (index + 1) / (total_chromatic + 1)
    lightness = clamp(
        min_l + (max_l - min_l) * lightness_step + (rng.random() - 0.5) * _LIGHTNESS_JITTER,
        *_COMPANION_LIGHTNESS,
    )

    color = make_color(lightness, chroma, hue)
    return PaletteEntry(
        color=color,
        role=describe_companion_role(input_color, color),
        description=describe_relationship(input_color, color),
    )


def generate_grounding_neutral(
    mood: MoodDescriptor,
    index: int,
    rng: random.Random | None = None,
) -> PaletteEntry:
    """Generate a tinted neutral carrying the input's undertone.

    Lightness contrasts with the input: light inputs get dark neutrals,
    dark inputs light ones, mid-tones alternate by index.
    """
    rng = resolve_rng(rng)
    raw = mood.raw

    chroma = 0.01 + rng.random() * 0.025

    if raw.l > 0.6:
        lightness = 0.15 + rng.random() * 0.20
    elif raw.l < 0.4:
        lightness = 0.75 + rng.random() * 0.15
    elif index % 2 == 0:
        lightness = 0.85 + rng.random() * 0.08
    else:
        lightness = 0.18 + rng.random() * 0.12

    hue = normalize_hue(raw.h + (rng.random() - 0.5) * 20)

    role = (
        CompanionRole.LIGHT_GROUND
        if lightness > _LIGHT_GROUND_THRESHOLD
        else CompanionRole.DARK_GROUND
    )
    return PaletteEntry(
        color=make_color(lightness, chroma, hue),
        role=role,
        description=(
            f"A tinted neutral that shares the {mood.temperature.value} undertone of your input"
        ),
    )


def generate_vibe_companions(
    input_color: ColorLike,
    *,
    count: int = 5,
    purpose: CompanionPurpose | str = CompanionPurpose.PALETTE,
    include_input: bool = True,
    rng: random.Random | None = None,
) -> CompanionPalette:
    """Generate companions that match the vibe of ``input_color``.

    Args:
        input_color: Color to build around.
        count: Palette size, input included when ``include_input``.
        purpose: Intended use of the palette. Recorded in logs only.
        include_input: Put the input first in the palette.
        rng: Randomness source; defaults to the process-level generator.

    Returns:
        CompanionPalette with the input (if included) followed by the
        companions sorted from lightest to darkest.

    Example:
        >>> result = generate_vibe_companions({"l": 0.5, "c": 0.1, "h": 30},
        ...                                   rng=random.Random(1))
        >>> len(result.palette), result.palette[0].role
        (5, <CompanionRole.SOURCE: 'source'>)
    """
    rng = resolve_rng(rng)
    source = as_color(input_color)
    mood = analyze_color_mood(source)
    strategy = mood.strategy

    target_count = max(0, count - 1 if include_input else count)
    neutral_slots = round_half_up(target_count * strategy.neutral_chance)
    chroma_slots = target_count - neutral_slots

    logger.debug(
        f"Companions for mood={mood.mood.value} purpose={getattr(purpose, 'value', purpose)}: "
        f"{chroma_slots} chromatic, {neutral_slots} neutral"
    )

    companions: list[PaletteEntry] = []
    used_hues: list[float] = [source.hue]

    for i in range(chroma_slots):
        companion = generate_single_companion(source, mood, i, chroma_slots, used_hues, rng)
        companions.append(companion)
        used_hues.append(companion.color.hue)

    for i in range(neutral_slots):
        companions.append(generate_grounding_neutral(mood, i, rng))

    companions.sort(key=lambda entry: entry.color.lightness, reverse=True)

    palette = companions
    if include_input:
        palette = [
            PaletteEntry(color=source, role=CompanionRole.SOURCE, description="Your input color"),
            *companions,
        ]

    return CompanionPalette(
        palette=palette,
        mood=mood.mood,
        mood_description=strategy.description,
        energy=mood.energy,
        temperature=mood.temperature,
        depth=mood.depth,
        tips=vibe_tips(mood.mood),
    )


def regenerate_companions(
    input_color: ColorLike,
    *,
    count: int = 5,
    purpose: CompanionPurpose | str = CompanionPurpose.PALETTE,
    include_input: bool = True,
    rng: random.Random | None = None,
) -> CompanionPalette:
    """Draw a fresh palette for the same input.

    Regeneration is re-invocation: with the default generator every call
    differs, with an injected ``rng`` the sequence continues from its
    current state.
    """
    return generate_vibe_companions(
        input_color,
        count=count,
        purpose=purpose,
        include_input=include_input,
        rng=rng,
    )


__all__ = [
    "generate_grounding_neutral",
    "generate_single_companion",
    "generate_vibe_companions",
    "regenerate_companions",
]
