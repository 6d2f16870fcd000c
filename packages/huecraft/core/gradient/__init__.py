"""Gradient generation - stop optimization, style generators, vibe gradients."""

from huecraft.core.gradient.enums import GradientStyle
from huecraft.core.gradient.models import GradientResult, GradientStyleInfo
from huecraft.core.gradient.optimizer import optimize_for_gradient
from huecraft.core.gradient.styles import STYLE_GENERATORS, generate_key_stops
from huecraft.core.gradient.vibe import (
    AUTO,
    determine_hue_path,
    generate_style_preview,
    generate_vibe_gradient,
    get_gradient_styles,
    map_mood_to_gradient_style,
)

__all__ = [
    "AUTO",
    "STYLE_GENERATORS",
    "GradientResult",
    "GradientStyle",
    "GradientStyleInfo",
    "determine_hue_path",
    "generate_key_stops",
    "generate_style_preview",
    "generate_vibe_gradient",
    "get_gradient_styles",
    "map_mood_to_gradient_style",
    "optimize_for_gradient",
]
