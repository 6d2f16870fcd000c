"""CSS gradient formatting for OKLCH stop lists.

Stops are placed evenly (i / (n - 1) * 100 percent). Lightness and chroma
are written with three decimals, hue rounded to whole degrees.

Hex output needs an OKLCH to hex converter, which huecraft does not
provide; callers pass one in.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from huecraft.core.color.models import OklchColor, as_color
from huecraft.core.utils.math import round_half_up

HexConverter = Callable[[OklchColor], str]


class GradientType(str, Enum):
    """CSS gradient function."""

    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


def _position(index: int, count: int) -> str:
    percent = index / (count - 1) * 100 if count > 1 else 0.0
    return f"{round_half_up(percent)}%"


def format_oklch(color: OklchColor) -> str:
    """Format one color as a CSS ``oklch()`` function.

    Example:
        >>> format_oklch(OklchColor(l=0.5, c=0.1234, h=200.6))
        'oklch(0.500 0.123 201)'
    """
    l, c, h = as_color(color).lch()  # noqa: E741
    return f"oklch({l:.3f} {c:.3f} {round_half_up(h)})"


def _wrap(stops_css: str, angle: float, gradient_type: GradientType | str, space: str) -> str:
    try:
        kind = GradientType(gradient_type)
    except ValueError:
        kind = GradientType.CONIC

    if kind is GradientType.LINEAR:
        return f"linear-gradient({angle:g}deg{space}, {stops_css})"
    if kind is GradientType.RADIAL:
        return f"radial-gradient(circle{space}, {stops_css})"
    return f"conic-gradient(from {angle:g}deg{space}, {stops_css})"


def stops_to_css(
    stops: Sequence[OklchColor],
    angle: float = 90,
    gradient_type: GradientType | str = GradientType.LINEAR,
) -> str:
    """Render stops as a CSS gradient interpolated in OKLCH.

    Example:
        >>> stops_to_css([OklchColor(l=0.5, c=0.1, h=0), OklchColor(l=0.7, c=0.1, h=90)])
        'linear-gradient(90deg in oklch, oklch(0.500 0.100 0) 0%, oklch(0.700 0.100 90) 100%)'
    """
    body = ", ".join(
        f"{format_oklch(stop)} {_position(i, len(stops))}" for i, stop in enumerate(stops)
    )
    return _wrap(body, angle, gradient_type, " in oklch")


def stops_to_hex_css(
    stops: Sequence[OklchColor],
    angle: float = 90,
    gradient_type: GradientType | str = GradientType.LINEAR,
    *,
    to_hex: HexConverter,
) -> str:
    """Render stops as a hex-color CSS gradient for older browsers."""
    body = ", ".join(
        f"{to_hex(stop)} {_position(i, len(stops))}" for i, stop in enumerate(stops)
    )
    return _wrap(body, angle, gradient_type, "")


def generate_full_css(
    stops: Sequence[OklchColor],
    angle: float = 90,
    gradient_type: GradientType | str = GradientType.LINEAR,
    *,
    to_hex: HexConverter,
) -> str:
    """Render a ``background`` declaration pair: hex fallback, then OKLCH."""
    hex_css = stops_to_hex_css(stops, angle, gradient_type, to_hex=to_hex)
    oklch_css = stops_to_css(stops, angle, gradient_type)

    return (
        "/* hex fallback */\n"
        f"background: {hex_css};\n"
        "/* oklch: better color interpolation in modern browsers */\n"
        f"background: {oklch_css};"
    )


__all__ = [
    "GradientType",
    "HexConverter",
    "format_oklch",
    "generate_full_css",
    "stops_to_css",
    "stops_to_hex_css",
]
