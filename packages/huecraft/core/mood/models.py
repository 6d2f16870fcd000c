"""Mood models - descriptor and companion strategy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from huecraft.core.mood.enums import Depth, Energy, HueSpread, Mood, Temperature, TemperatureBias


class RawLch(BaseModel):
    """Defaulted but unclamped channels of an analyzed color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    l: float  # noqa: E741
    c: float
    h: float


class CompanionStrategy(BaseModel):
    """Generation rules for companions of one mood.

    Ranges are absolute values already derived from the analyzed color.
    They are not clamped here; generated values are clamped at use.

    Attributes:
        chroma_range: (min, max) chroma for chromatic companions.
        lightness_range: (min, max) lightness band for chromatic companions.
        hue_spread: How far companion hues roam from the base.
        temperature_bias: Post-spread hue adjustment.
        neutral_chance: Share of companion slots given to tinted neutrals.
        description: Short human-readable summary of the mood.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    chroma_range: tuple[float, float]
    lightness_range: tuple[float, float]
    hue_spread: HueSpread
    temperature_bias: TemperatureBias
    neutral_chance: float = Field(default=0.2, ge=0.0, le=1.0)
    description: str


class MoodDescriptor(BaseModel):
    """Qualitative reading of one color.

    A pure function of the input color: the same color always yields the
    same descriptor.

    Attributes:
        energy: Chroma band.
        depth: Lightness band.
        temperature: Hue/chroma band.
        mood: Combined vibe family.
        strategy: Companion generation rules for this mood.
        raw: The channels read from the input, defaults substituted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    energy: Energy
    depth: Depth
    temperature: Temperature
    mood: Mood
    strategy: CompanionStrategy
    raw: RawLch


__all__ = [
    "CompanionStrategy",
    "MoodDescriptor",
    "RawLch",
]
