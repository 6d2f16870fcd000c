"""Vibe gradient generation from a single base color.

Reads the base color's mood, picks a style and hue path for it (unless
given), generates the style's key stops and expands them into a gradient.
"""

from __future__ import annotations

import logging

from huecraft.core.color.hue import HuePath
from huecraft.core.color.models import ColorLike, as_color
from huecraft.core.formats.css import GradientType, stops_to_css
from huecraft.core.gradient.enums import GradientStyle
from huecraft.core.gradient.models import GradientResult, GradientStyleInfo
from huecraft.core.gradient.optimizer import optimize_for_gradient
from huecraft.core.gradient.styles import generate_key_stops
from huecraft.core.mood.classifier import analyze_color_mood
from huecraft.core.mood.enums import Mood
from huecraft.core.mood.models import MoodDescriptor
from huecraft.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

AUTO = "auto"

MOOD_TO_STYLE: dict[Mood, GradientStyle] = {
    Mood.MOODY: GradientStyle.ATMOSPHERIC,
    Mood.DREAMY: GradientStyle.DREAMY,
    Mood.JEWEL: GradientStyle.JEWEL,
    Mood.POP: GradientStyle.POP,
    Mood.EARTHY: GradientStyle.EARTHY,
    Mood.SERENE: GradientStyle.ATMOSPHERIC,
    Mood.ETHEREAL: GradientStyle.DREAMY,
    Mood.NOIR: GradientStyle.NOIR,
    Mood.BOTANICAL: GradientStyle.BOTANICAL,
    Mood.BALANCED: GradientStyle.CHROMATIC_ARC,
}

STYLE_DESCRIPTIONS: dict[GradientStyle, str] = {
    GradientStyle.ATMOSPHERIC: "A moody gradient that fades from vivid to muted, like a sky at dusk",
    GradientStyle.JEWEL: "Rich, deep colors that maintain luxurious intensity throughout",
    GradientStyle.EARTHY: "Natural warm tones with organic pigment-like transitions",
    GradientStyle.DREAMY: "Ethereal progression from color to light, like morning mist",
    GradientStyle.POP: "High-energy colors that maintain vibrancy across the spectrum",
    GradientStyle.NOIR: "Dramatic dark tones with subtle hue undertones",
    GradientStyle.BOTANICAL: "Organic greens and natural earth tones",
    GradientStyle.CHROMATIC_ARC: (
        "A signature gradient that travels through hue space while keeping depth "
        "and energy consistent; the kind of gradient you don't see elsewhere"
    ),
}

GRADIENT_STYLES: tuple[GradientStyleInfo, ...] = (
    GradientStyleInfo(
        id=GradientStyle.CHROMATIC_ARC,
        name="Chromatic Arc",
        description="Signature hue journey",
        is_signature=True,
    ),
    GradientStyleInfo(id=GradientStyle.ATMOSPHERIC, name="Atmospheric", description="Dusk-like fade"),
    GradientStyleInfo(id=GradientStyle.JEWEL, name="Jewel", description="Deep luxurious"),
    GradientStyleInfo(id=GradientStyle.DREAMY, name="Dreamy", description="Ethereal mist"),
    GradientStyleInfo(id=GradientStyle.EARTHY, name="Earthy", description="Natural pigment"),
    GradientStyleInfo(id=GradientStyle.POP, name="Pop", description="High energy"),
    GradientStyleInfo(id=GradientStyle.NOIR, name="Noir", description="Dark dramatic"),
    GradientStyleInfo(id=GradientStyle.BOTANICAL, name="Botanical", description="Organic greens"),
)

# Styles that intend a muted, flat passage and skip chroma boosting
_FLAT_STYLES = frozenset({GradientStyle.ATMOSPHERIC, GradientStyle.NOIR})


def map_mood_to_gradient_style(mood: MoodDescriptor) -> GradientStyle:
    """Pick the gradient style that suits a mood; chromatic-arc by default."""
    return MOOD_TO_STYLE.get(mood.mood, GradientStyle.CHROMATIC_ARC)


def determine_hue_path(base_hue: float, style: GradientStyle) -> HuePath:
    """Pick the hue path for a style.

    Earthy and botanical arc warm, dreamy arcs cool, the chromatic arc
    heads warm from the cool half of the wheel and cool from the warm
    half, everything else takes the short arc.
    """
    if style in (GradientStyle.EARTHY, GradientStyle.BOTANICAL):
        return HuePath.WARM
    if style is GradientStyle.DREAMY:
        return HuePath.COOL
    if style is GradientStyle.CHROMATIC_ARC:
        return HuePath.WARM if base_hue > 180 else HuePath.COOL
    return HuePath.SHORT


def _resolve_style(style: GradientStyle | str, mood: MoodDescriptor) -> GradientStyle:
    if style == AUTO:
        return map_mood_to_gradient_style(mood)
    try:
        return GradientStyle(style)
    except ValueError:
        logger.debug(f"Unknown gradient style {style!r}, using chromatic-arc")
        return GradientStyle.CHROMATIC_ARC


def _resolve_hue_path(hue_path: HuePath | str, base_hue: float, style: GradientStyle) -> HuePath:
    if hue_path == AUTO:
        return determine_hue_path(base_hue, style)
    try:
        return HuePath(hue_path)
    except ValueError:
        logger.debug(f"Unknown hue path {hue_path!r}, using short")
        return HuePath.SHORT


def gradient_description(style: GradientStyle | str) -> str:
    """Static description of a style; chromatic-arc text for unknown styles."""
    try:
        return STYLE_DESCRIPTIONS[GradientStyle(style)]
    except ValueError:
        return STYLE_DESCRIPTIONS[GradientStyle.CHROMATIC_ARC]


def generate_vibe_gradient(
    base_color: ColorLike,
    *,
    style: GradientStyle | str = AUTO,
    stops: int = 3,
    hue_path: HuePath | str = AUTO,
) -> GradientResult:
    """Generate a gradient that matches the mood of ``base_color``.

    Args:
        base_color: Seed color.
        style: Gradient style, or ``"auto"`` to derive it from the mood.
        stops: Key-stop count for the chromatic arc (raised to 2 if lower).
            Other styles always produce three key stops.
        hue_path: Hue path, or ``"auto"`` to derive it from the style.

    Returns:
        GradientResult with both the key stops and the expanded stops.

    Example:
        >>> result = generate_vibe_gradient({"l": 0.6, "c": 0.12, "h": 200},
        ...                                 style="chromatic-arc", stops=4)
        >>> [round(c.h) for c in result.key_stops]
        [140, 180, 220, 260]
    """
    base = as_color(base_color)
    mood = analyze_color_mood(base)

    resolved_style = _resolve_style(style, mood)
    resolved_path = _resolve_hue_path(hue_path, base.hue, resolved_style)

    log = get_logger(
        __name__,
        mood=mood.mood.value,
        style=resolved_style.value,
        hue_path=resolved_path.value,
    )
    log.debug(f"Resolved gradient style and hue path for {stops} key stops")

    key_stops = generate_key_stops(base, mood, resolved_style, max(2, stops))
    expanded = optimize_for_gradient(
        key_stops,
        hue_path=resolved_path,
        boost_chroma=resolved_style not in _FLAT_STYLES,
    )
    log.debug(f"Expanded {len(key_stops)} key stops to {len(expanded)}")

    return GradientResult(
        stops=expanded,
        key_stops=key_stops,
        style=resolved_style,
        mood=mood.mood,
        energy=mood.energy,
        temperature=mood.temperature,
        hue_path=resolved_path,
        description=gradient_description(resolved_style),
    )


def get_gradient_styles() -> list[GradientStyleInfo]:
    """List the available styles, signature style first."""
    return list(GRADIENT_STYLES)


def generate_style_preview(base_color: ColorLike, style: GradientStyle | str) -> str:
    """Render a quick three-stop CSS preview of ``style`` for ``base_color``."""
    result = generate_vibe_gradient(base_color, style=style, stops=3)
    return stops_to_css(result.stops, 90, GradientType.LINEAR)


__all__ = [
    "AUTO",
    "GRADIENT_STYLES",
    "MOOD_TO_STYLE",
    "STYLE_DESCRIPTIONS",
    "determine_hue_path",
    "generate_style_preview",
    "generate_vibe_gradient",
    "get_gradient_styles",
    "gradient_description",
    "map_mood_to_gradient_style",
]
