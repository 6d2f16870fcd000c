"""Companion strategy table, one entry per mood.

Most ranges scale off the analyzed color's own lightness and chroma.
Ethereal and noir pin absolute lightness bands instead.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from huecraft.core.mood.enums import HueSpread, Mood, TemperatureBias
from huecraft.core.mood.models import CompanionStrategy

logger = logging.getLogger(__name__)

StrategyBuilder = Callable[[float, float], CompanionStrategy]


def _moody(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(max(0.02, c * 0.4), c * 1.3),  # stay muted, slight boost allowed
        lightness_range=(l - 0.15, l + 0.15),
        hue_spread=HueSpread.WIDE,
        temperature_bias=TemperatureBias.PRESERVE,
        neutral_chance=0.3,
        description="Dark, desaturated, atmospheric",
    )


def _dreamy(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.3, c * 1.2),
        lightness_range=(l - 0.10, min(0.90, l + 0.15)),
        hue_spread=HueSpread.GENTLE,
        temperature_bias=TemperatureBias.SOFTEN,
        neutral_chance=0.2,
        description="Soft, nostalgic, whispery",
    )


def _jewel(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.6, c * 1.1),
        lightness_range=(l - 0.10, l + 0.20),
        hue_spread=HueSpread.WIDE,
        temperature_bias=TemperatureBias.CONTRAST,
        neutral_chance=0.15,
        description="Rich, deep, luxurious",
    )


def _pop(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.5, c * 1.2),
        lightness_range=(l - 0.20, l + 0.15),
        hue_spread=HueSpread.WIDE,
        temperature_bias=TemperatureBias.COMPLEMENT,
        neutral_chance=0.1,
        description="Bright, energetic, playful",
    )


def _earthy(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.4, c * 1.15),
        lightness_range=(l - 0.20, l + 0.20),
        hue_spread=HueSpread.ORGANIC,
        temperature_bias=TemperatureBias.WARM,
        neutral_chance=0.35,
        description="Natural, grounded, warm",
    )


def _serene(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.5, c * 1.1),
        lightness_range=(l - 0.10, l + 0.20),
        hue_spread=HueSpread.GENTLE,
        temperature_bias=TemperatureBias.COOL,
        neutral_chance=0.25,
        description="Calm, balanced, peaceful",
    )


def _ethereal(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(0.01, max(0.06, c * 1.2)),
        lightness_range=(0.70, 0.95),
        hue_spread=HueSpread.GENTLE,
        temperature_bias=TemperatureBias.SOFTEN,
        neutral_chance=0.4,
        description="Barely-there, misty, translucent",
    )


def _noir(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(0.01, max(0.06, c * 1.5)),
        lightness_range=(0.10, 0.40),
        hue_spread=HueSpread.MINIMAL,
        temperature_bias=TemperatureBias.PRESERVE,
        neutral_chance=0.5,
        description="Dark, minimal, dramatic",
    )


def _botanical(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.4, c * 1.2),
        lightness_range=(l - 0.15, l + 0.20),
        hue_spread=HueSpread.ORGANIC,
        temperature_bias=TemperatureBias.FRESH,
        neutral_chance=0.25,
        description="Natural, green-adjacent, organic",
    )


def _balanced(l: float, c: float) -> CompanionStrategy:  # noqa: E741
    return CompanionStrategy(
        chroma_range=(c * 0.5, c * 1.2),
        lightness_range=(l - 0.15, l + 0.15),
        hue_spread=HueSpread.MODERATE,
        temperature_bias=TemperatureBias.PRESERVE,
        neutral_chance=0.2,
        description="Versatile, harmonious",
    )


STRATEGIES: dict[Mood, StrategyBuilder] = {
    Mood.MOODY: _moody,
    Mood.DREAMY: _dreamy,
    Mood.JEWEL: _jewel,
    Mood.POP: _pop,
    Mood.EARTHY: _earthy,
    Mood.SERENE: _serene,
    Mood.ETHEREAL: _ethereal,
    Mood.NOIR: _noir,
    Mood.BOTANICAL: _botanical,
    Mood.BALANCED: _balanced,
}


def determine_companion_strategy(mood: Mood | str, l: float, c: float) -> CompanionStrategy:  # noqa: E741
    """Look up the companion strategy for ``mood``.

    Args:
        mood: Mood family. Unknown values fall back to ``balanced``.
        l: Analyzed lightness (unclamped).
        c: Analyzed chroma (unclamped).

    Returns:
        Strategy with ranges derived from ``l`` and ``c``.
    """
    try:
        builder = STRATEGIES[Mood(mood)]
    except ValueError:
        logger.debug(f"No strategy for mood {mood!r}, using balanced")
        builder = _balanced
    return builder(l, c)


__all__ = [
    "STRATEGIES",
    "determine_companion_strategy",
]
