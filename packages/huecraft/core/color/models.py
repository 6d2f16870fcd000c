"""OKLCH color model.

OklchColor is the only color representation inside huecraft. Conversion
to and from hex/sRGB belongs to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from huecraft.core.utils.math import clamp, normalize_hue

# Values substituted when a channel is missing on input
DEFAULT_LIGHTNESS = 0.5
DEFAULT_CHROMA = 0.1
DEFAULT_HUE = 0.0

# Canonical output bounds
MAX_LIGHTNESS = 1.0
MAX_CHROMA = 0.4


class OklchColor(BaseModel):
    """A color in cylindrical OKLab coordinates.

    Channels are optional and unbounded on input: callers may hand over
    partial or out-of-gamut values. Readers use the ``lightness``,
    ``chroma`` and ``hue`` properties, which substitute the defaults
    (0.5, 0.1, 0) for missing channels without clamping.

    Attributes:
        mode: Color space tag, always ``"oklch"``.
        l: Lightness, nominally [0, 1].
        c: Chroma, nominally [0, ~0.4].
        h: Hue angle in degrees, nominally [0, 360).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    mode: Literal["oklch"] = "oklch"
    l: float | None = None  # noqa: E741
    c: float | None = None
    h: float | None = None

    @property
    def lightness(self) -> float:
        return DEFAULT_LIGHTNESS if self.l is None else self.l

    @property
    def chroma(self) -> float:
        return DEFAULT_CHROMA if self.c is None else self.c

    @property
    def hue(self) -> float:
        return DEFAULT_HUE if self.h is None else self.h

    def lch(self) -> tuple[float, float, float]:
        """Return the defaulted (l, c, h) triple."""
        return (self.lightness, self.chroma, self.hue)


def make_color(l: float, c: float, h: float) -> OklchColor:  # noqa: E741
    """Build a generated color with every channel forced into canonical range.

    Example:
        >>> make_color(1.2, -0.1, 370)
        OklchColor(mode='oklch', l=1.0, c=0.0, h=10.0)
    """
    return OklchColor(
        l=clamp(l, 0.0, MAX_LIGHTNESS),
        c=clamp(c, 0.0, MAX_CHROMA),
        h=normalize_hue(h),
    )


ColorLike = OklchColor | Mapping[str, Any]


def as_color(value: ColorLike) -> OklchColor:
    """Coerce a mapping such as ``{"l": 0.5, "c": 0.1, "h": 30}`` to OklchColor."""
    if isinstance(value, OklchColor):
        return value
    return OklchColor.model_validate(dict(value))


__all__ = [
    "DEFAULT_CHROMA",
    "DEFAULT_HUE",
    "DEFAULT_LIGHTNESS",
    "MAX_CHROMA",
    "MAX_LIGHTNESS",
    "ColorLike",
    "OklchColor",
    "as_color",
    "make_color",
]
