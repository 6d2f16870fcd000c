"""Output formats for generated colors."""

from huecraft.core.formats.css import (
    GradientType,
    HexConverter,
    format_oklch,
    generate_full_css,
    stops_to_css,
    stops_to_hex_css,
)

__all__ = [
    "GradientType",
    "HexConverter",
    "format_oklch",
    "generate_full_css",
    "stops_to_css",
    "stops_to_hex_css",
]
