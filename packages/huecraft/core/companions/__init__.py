"""Companion colors - palettes, accents, backgrounds and presets."""

from huecraft.core.companions.accents import find_vibe_accent, find_vibe_backgrounds
from huecraft.core.companions.describe import describe_companion_role, describe_relationship
from huecraft.core.companions.enums import AccentIntensity, CompanionPurpose, CompanionRole
from huecraft.core.companions.generator import (
    generate_grounding_neutral,
    generate_single_companion,
    generate_vibe_companions,
    regenerate_companions,
)
from huecraft.core.companions.hues import (
    MIN_HUE_SEPARATION,
    apply_temperature_bias,
    avoid_clumping,
    pick_vibe_hue,
)
from huecraft.core.companions.models import (
    AccentResult,
    BackgroundOption,
    BackgroundResult,
    CompanionPalette,
    PaletteEntry,
)
from huecraft.core.companions.presets import VIBE_PRESETS, get_vibe_preset, list_vibe_presets

__all__ = [
    "MIN_HUE_SEPARATION",
    "VIBE_PRESETS",
    "AccentIntensity",
    "AccentResult",
    "BackgroundOption",
    "BackgroundResult",
    "CompanionPalette",
    "CompanionPurpose",
    "CompanionRole",
    "PaletteEntry",
    "apply_temperature_bias",
    "avoid_clumping",
    "describe_companion_role",
    "describe_relationship",
    "find_vibe_accent",
    "find_vibe_backgrounds",
    "generate_grounding_neutral",
    "generate_single_companion",
    "generate_vibe_companions",
    "get_vibe_preset",
    "list_vibe_presets",
    "regenerate_companions",
]
