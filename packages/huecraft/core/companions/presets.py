"""Named vibe presets.

A preset steers the input color into a target mood (by pinning lightness
and limiting or raising chroma) and then generates companions for the
adjusted color.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import random

from huecraft.core.color.hue import bias_toward_range
from huecraft.core.color.models import ColorLike, OklchColor, as_color
from huecraft.core.companions.enums import CompanionPurpose
from huecraft.core.companions.generator import generate_vibe_companions
from huecraft.core.companions.models import CompanionPalette

logger = logging.getLogger(__name__)

PRESET_COMPANION_COUNT = 5

PresetAdjuster = Callable[[OklchColor], OklchColor]


def _dusty_romance(color: OklchColor) -> OklchColor:
    return color.model_copy(update={"c": min(color.chroma, 0.08), "l": 0.55})


def _midnight_jewel(color: OklchColor) -> OklchColor:
    return color.model_copy(update={"c": max(color.chroma, 0.18), "l": 0.30})


def _morning_fog(color: OklchColor) -> OklchColor:
    return color.model_copy(update={"c": min(color.chroma, 0.04), "l": 0.80})


def _desert_sun(color: OklchColor) -> OklchColor:
    hue = bias_toward_range(color.hue, (20, 50), 0.5, wrap=False)
    return color.model_copy(update={"c": 0.12, "l": 0.55, "h": hue})


def _deep_forest(color: OklchColor) -> OklchColor:
    # Not wrapped; classification reads the raw hue
    hue = bias_toward_range(color.hue, (120, 160), 0.6, wrap=False)
    return color.model_copy(update={"c": 0.10, "l": 0.35, "h": hue})


def _neon_noir(color: OklchColor) -> OklchColor:
    return color.model_copy(update={"c": max(color.chroma, 0.22), "l": 0.25})


VIBE_PRESETS: dict[str, PresetAdjuster] = {
    "dusty-romance": _dusty_romance,
    "midnight-jewel": _midnight_jewel,
    "morning-fog": _morning_fog,
    "desert-sun": _desert_sun,
    "deep-forest": _deep_forest,
    "neon-noir": _neon_noir,
}


def list_vibe_presets() -> list[str]:
    """Return preset names in catalog order."""
    return list(VIBE_PRESETS)


def get_vibe_preset(
    name: str,
    base_color: ColorLike,
    *,
    rng: random.Random | None = None,
) -> CompanionPalette:
    """Generate a five-color palette for ``base_color`` in the named preset's mood.

    Unknown names generate from the unadjusted base color.

    Example:
        >>> palette = get_vibe_preset("neon-noir", {"l": 0.7, "c": 0.1, "h": 300})
        >>> palette.palette[0].color.l
        0.25
    """
    color = as_color(base_color)
    adjust = VIBE_PRESETS.get(name)
    if adjust is None:
        logger.debug(f"Unknown preset '{name}', generating from the base color")
        adjusted = color
    else:
        adjusted = adjust(color)

    return generate_vibe_companions(
        adjusted,
        count=PRESET_COMPANION_COUNT,
        purpose=CompanionPurpose.PALETTE,
        rng=rng,
    )


__all__ = [
    "VIBE_PRESETS",
    "get_vibe_preset",
    "list_vibe_presets",
]
