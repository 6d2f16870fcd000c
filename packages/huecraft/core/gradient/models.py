"""Gradient result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from huecraft.core.color.hue import HuePath
from huecraft.core.color.models import OklchColor
from huecraft.core.gradient.enums import GradientStyle
from huecraft.core.mood.enums import Energy, Mood, Temperature


class GradientResult(BaseModel):
    """A generated vibe gradient.

    Attributes:
        stops: Expanded stop list, ready to render.
        key_stops: Anchor colors produced by the style before expansion.
        style: Resolved gradient style.
        mood: Mood of the base color.
        energy: Energy of the base color.
        temperature: Temperature of the base color.
        hue_path: Resolved hue path used for expansion.
        description: Human-readable description of the style.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    stops: list[OklchColor] = Field(min_length=1)
    key_stops: list[OklchColor] = Field(min_length=1)
    style: GradientStyle
    mood: Mood
    energy: Energy
    temperature: Temperature
    hue_path: HuePath
    description: str


class GradientStyleInfo(BaseModel):
    """Lightweight style metadata for listing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: GradientStyle
    name: str
    description: str
    is_signature: bool = False


__all__ = [
    "GradientResult",
    "GradientStyleInfo",
]
