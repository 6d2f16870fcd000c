"""Gradient enums - style vocabulary."""

from enum import Enum


class GradientStyle(str, Enum):
    """Key-stop generation style.

    Attributes:
        ATMOSPHERIC: Vivid to muted, dusk-like fade.
        JEWEL: Deep, rich colors throughout.
        EARTHY: Warm analogous shifts, natural pigments.
        DREAMY: Light-to-lighter misty progression.
        POP: High chroma throughout.
        NOIR: Dark, minimal, dramatic.
        BOTANICAL: Green-yellow organic arc.
        CHROMATIC_ARC: Hue journey at steady lightness and chroma.
    """

    ATMOSPHERIC = "atmospheric"
    JEWEL = "jewel"
    EARTHY = "earthy"
    DREAMY = "dreamy"
    POP = "pop"
    NOIR = "noir"
    BOTANICAL = "botanical"
    CHROMATIC_ARC = "chromatic-arc"

