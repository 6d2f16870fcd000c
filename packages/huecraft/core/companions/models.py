"""Companion models - palettes, accents and backgrounds."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from huecraft.core.color.models import OklchColor
from huecraft.core.companions.enums import CompanionRole
from huecraft.core.mood.enums import Depth, Energy, Mood, Temperature


class PaletteEntry(BaseModel):
    """One color of a companion palette.

    Attributes:
        color: The color.
        role: Relationship to the input color.
        description: Human-readable relationship summary.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: OklchColor
    role: CompanionRole
    description: str


class CompanionPalette(BaseModel):
    """Vibe-matched companions for an input color.

    Attributes:
        palette: Entries; the input comes first when included, the
            generated companions follow from lightest to darkest.
        mood: Mood of the input.
        mood_description: Strategy description of that mood.
        energy: Energy of the input.
        temperature: Temperature of the input.
        depth: Depth of the input.
        tips: Explanations of why the palette works.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    palette: list[PaletteEntry]
    mood: Mood
    mood_description: str
    energy: Energy
    temperature: Temperature
    depth: Depth
    tips: list[str] = Field(default_factory=list)


class AccentResult(BaseModel):
    """An accent for an input color plus two nearby alternatives."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    accent: OklchColor
    mood: Mood
    explanation: str
    alternatives: list[OklchColor]


class BackgroundOption(BaseModel):
    """A candidate background color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: OklchColor
    label: str
    description: str


class BackgroundResult(BaseModel):
    """Background candidates that let the input color stand out."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    backgrounds: list[BackgroundOption]
    mood: Mood
    recommendation: str


__all__ = [
    "AccentResult",
    "BackgroundOption",
    "BackgroundResult",
    "CompanionPalette",
    "PaletteEntry",
]
