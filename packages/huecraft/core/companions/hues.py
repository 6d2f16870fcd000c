"""Hue selection for chromatic companions.

A companion hue is the base hue plus a spread offset and jitter, then a
temperature bias, then a nudge away from hues already in the palette.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import random

from huecraft.core.color.hue import bias_toward_range
from huecraft.core.mood.enums import HueSpread, TemperatureBias
from huecraft.core.mood.models import MoodDescriptor
from huecraft.core.utils.math import normalize_hue
from huecraft.core.utils.random import resolve_rng

logger = logging.getLogger(__name__)

# Companions closer than this (degrees) to a used hue get nudged away
MIN_HUE_SEPARATION = 25.0
_MAX_NUDGES = 10


@dataclass(frozen=True)
class SpreadConfig:
    """Offsets cycled by companion index, plus the jitter half-width."""

    offsets: tuple[float, ...]
    jitter: float


SPREAD_CONFIG: dict[HueSpread, SpreadConfig] = {
    HueSpread.MINIMAL: SpreadConfig(offsets=(10, -15, 20, -25, 30), jitter=5),
    HueSpread.GENTLE: SpreadConfig(offsets=(25, -30, 50, -55, 75), jitter=10),
    HueSpread.MODERATE: SpreadConfig(offsets=(40, -45, 80, 160, -90), jitter=15),
    HueSpread.WIDE: SpreadConfig(offsets=(60, 150, -80, 200, -120), jitter=20),
    HueSpread.ORGANIC: SpreadConfig(offsets=(30, -25, 55, -50, 80), jitter=12),
}


def apply_temperature_bias(
    hue: float,
    base_hue: float,
    bias: TemperatureBias,
    index: int,
) -> float:
    """Adjust a spread hue according to the strategy's temperature bias.

    The result is not wrapped into [0, 360).
    """
    if bias is TemperatureBias.WARM:
        return bias_toward_range(hue, (0, 60), 0.3, wrap=False)
    if bias is TemperatureBias.COOL:
        return bias_toward_range(hue, (190, 260), 0.3, wrap=False)
    if bias is TemperatureBias.FRESH:
        return bias_toward_range(hue, (100, 170), 0.25, wrap=False)
    if bias is TemperatureBias.CONTRAST:
        # Alternate warm and cool
        if index % 2 == 0:
            return bias_toward_range(hue, (0, 50), 0.2, wrap=False)
        return bias_toward_range(hue, (200, 260), 0.2, wrap=False)
    if bias is TemperatureBias.SOFTEN:
        return base_hue + (hue - base_hue) * 0.7
    # preserve and complement leave the hue alone
    return hue


def _too_close(hue: float, used_hues: Sequence[float], min_separation: float) -> bool:
    for used in used_hues:
        diff = abs(normalize_hue(hue - used))
        if min(diff, 360 - diff) < min_separation:
            return True
    return False


def avoid_clumping(
    hue: float,
    used_hues: Sequence[float],
    min_separation: float = MIN_HUE_SEPARATION,
) -> float:
    """Nudge ``hue`` away from hues closer than ``min_separation``.

    Nudges alternate +separation, -separation, ... for at most ten tries.
    A nudge can land on another used hue; the last position is kept when
    the tries run out.
    """
    if not used_hues:
        return hue

    adjusted = hue
    for attempt in range(_MAX_NUDGES):
        if not _too_close(adjusted, used_hues, min_separation):
            return adjusted
        direction = 1 if attempt % 2 == 0 else -1
        adjusted = normalize_hue(adjusted + min_separation * direction)

    if _too_close(adjusted, used_hues, min_separation):
        logger.debug(f"Hue {hue:.1f} still crowded after {_MAX_NUDGES} nudges, keeping {adjusted:.1f}")
    return adjusted


def pick_vibe_hue(
    base_hue: float,
    mood: MoodDescriptor,
    index: int,
    used_hues: Sequence[float],
    rng: random.Random | None = None,
) -> float:
    """Choose the hue of the ``index``-th chromatic companion.

    Args:
        base_hue: Hue of the input color.
        mood: Descriptor of the input color.
        index: Companion index, selects the spread offset.
        used_hues: Hues already in the palette (input included).
        rng: Randomness source for the jitter.

    Returns:
        Hue in [0, 360).
    """
    rng = resolve_rng(rng)
    strategy = mood.strategy

    spread = SPREAD_CONFIG.get(strategy.hue_spread, SPREAD_CONFIG[HueSpread.MODERATE])
    base_offset = spread.offsets[index % len(spread.offsets)]
    jitter = (rng.random() - 0.5) * spread.jitter * 2

    target = base_hue + base_offset + jitter
    target = apply_temperature_bias(target, base_hue, strategy.temperature_bias, index)
    target = avoid_clumping(normalize_hue(target), used_hues)

    return normalize_hue(target)


__all__ = [
    "MIN_HUE_SEPARATION",
    "SPREAD_CONFIG",
    "SpreadConfig",
    "apply_temperature_bias",
    "avoid_clumping",
    "pick_vibe_hue",
]
