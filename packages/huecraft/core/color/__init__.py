"""OKLCH color primitives: model, hue paths and interpolation."""

from huecraft.core.color.hue import (
    HuePath,
    bias_toward_range,
    hue_distance,
    interpolate_hue,
    resolve_delta,
)
from huecraft.core.color.interpolation import interpolate_oklch
from huecraft.core.color.models import ColorLike, OklchColor, as_color, make_color

__all__ = [
    "ColorLike",
    "HuePath",
    "OklchColor",
    "as_color",
    "bias_toward_range",
    "hue_distance",
    "interpolate_hue",
    "interpolate_oklch",
    "make_color",
    "resolve_delta",
]
