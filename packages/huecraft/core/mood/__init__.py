"""Mood analysis - descriptors and companion strategies for one color."""

from huecraft.core.mood.classifier import (
    analyze_color_mood,
    classify_depth,
    classify_energy,
    classify_mood,
    classify_temperature,
)
from huecraft.core.mood.enums import (
    Depth,
    Energy,
    HueSpread,
    Mood,
    Temperature,
    TemperatureBias,
)
from huecraft.core.mood.models import CompanionStrategy, MoodDescriptor, RawLch
from huecraft.core.mood.strategies import determine_companion_strategy
from huecraft.core.mood.tips import vibe_tips

__all__ = [
    "CompanionStrategy",
    "Depth",
    "Energy",
    "HueSpread",
    "Mood",
    "MoodDescriptor",
    "RawLch",
    "Temperature",
    "TemperatureBias",
    "analyze_color_mood",
    "classify_depth",
    "classify_energy",
    "classify_mood",
    "classify_temperature",
    "determine_companion_strategy",
    "vibe_tips",
]
