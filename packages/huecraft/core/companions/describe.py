"""Role and relationship descriptions for companions."""

from __future__ import annotations

from huecraft.core.color.models import OklchColor
from huecraft.core.companions.enums import CompanionRole
from huecraft.core.utils.math import normalize_hue

# (upper bound of hue difference, role, phrase), checked in order
_HUE_RELATIONS: tuple[tuple[float, CompanionRole, str], ...] = (
    (30, CompanionRole.NEIGHBOR, "A close neighbor"),
    (60, CompanionRole.ANALOGOUS, "An analogous friend"),
    (120, CompanionRole.CONTRAST, "A warm contrast"),
    (160, CompanionRole.TRIADIC, "A triadic partner"),
)
_FALLBACK_RELATION = (CompanionRole.COMPLEMENT, "A soft opposite")

# Deltas below these read as "the same"
_MATCHED_CHROMA = 0.03
_MATCHED_LIGHTNESS = 0.08


def _hue_relation(input_color: OklchColor, companion: OklchColor) -> tuple[CompanionRole, str]:
    # Measured one way round the wheel, so -20 degrees reads as 340
    hue_diff = abs(normalize_hue(companion.hue - input_color.hue))
    for upper, role, phrase in _HUE_RELATIONS:
        if hue_diff < upper:
            return role, phrase
    return _FALLBACK_RELATION


def describe_companion_role(input_color: OklchColor, companion: OklchColor) -> CompanionRole:
    """Role of ``companion`` from its hue offset to ``input_color``."""
    role, _ = _hue_relation(input_color, companion)
    return role


def describe_relationship(input_color: OklchColor, companion: OklchColor) -> str:
    """Describe hue, energy and weight of ``companion`` relative to the input.

    Example:
        >>> describe_relationship(OklchColor(l=0.5, c=0.1, h=0), OklchColor(l=0.7, c=0.1, h=10))
        'A close neighbor: matched energy, lighter'
    """
    _, phrase = _hue_relation(input_color, companion)

    chroma_diff = companion.chroma - input_color.chroma
    if abs(chroma_diff) < _MATCHED_CHROMA:
        energy = "matched energy"
    elif chroma_diff > 0:
        energy = "slightly bolder"
    else:
        energy = "slightly softer"

    light_diff = companion.lightness - input_color.lightness
    if abs(light_diff) < _MATCHED_LIGHTNESS:
        weight = "same weight"
    elif light_diff > 0:
        weight = "lighter"
    else:
        weight = "deeper"

    return f"{phrase}: {energy}, {weight}"


__all__ = [
    "describe_companion_role",
    "describe_relationship",
]
