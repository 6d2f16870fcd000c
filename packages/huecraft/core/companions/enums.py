"""Companion enums - roles, purposes and accent intensities."""

from enum import Enum


class CompanionRole(str, Enum):
    """Role of a palette entry relative to the input color."""

    SOURCE = "source"
    NEIGHBOR = "neighbor"
    ANALOGOUS = "analogous"
    CONTRAST = "contrast"
    TRIADIC = "triadic"
    COMPLEMENT = "complement"
    LIGHT_GROUND = "light-ground"
    DARK_GROUND = "dark-ground"


class CompanionPurpose(str, Enum):
    """What the caller intends to use the companions for."""

    PALETTE = "palette"
    ACCENT = "accent"
    BACKGROUND = "background"
    GRADIENT = "gradient"


class AccentIntensity(str, Enum):
    """How far an accent departs from the input color."""

    SUBTLE = "subtle"
    BALANCED = "balanced"
    BOLD = "bold"
