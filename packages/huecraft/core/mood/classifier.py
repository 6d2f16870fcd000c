"""Mood classifier - reads one color and describes its vibe.

Classification reads the raw channels (defaults substituted, never
clamped) and is fully deterministic.
"""

from __future__ import annotations

import logging

from huecraft.core.color.models import ColorLike, as_color
from huecraft.core.mood.enums import Depth, Energy, Mood, Temperature
from huecraft.core.mood.models import MoodDescriptor, RawLch
from huecraft.core.mood.strategies import determine_companion_strategy

logger = logging.getLogger(__name__)

# Upper bounds (exclusive) of each band, in order
_ENERGY_BANDS: tuple[tuple[float, Energy], ...] = (
    (0.04, Energy.WHISPER),
    (0.08, Energy.MUTED),
    (0.13, Energy.MODERATE),
    (0.20, Energy.VIBRANT),
)
_DEPTH_BANDS: tuple[tuple[float, Depth], ...] = (
    (0.25, Depth.ABYSS),
    (0.40, Depth.DEEP),
    (0.55, Depth.GROUNDED),
    (0.70, Depth.AIRY),
    (0.85, Depth.SOFT),
)

# Below this chroma temperature cannot be read
_NEUTRAL_CHROMA = 0.04
# Above this chroma warm reads as hot and cool reads as icy
_INTENSE_CHROMA = 0.15

_LOW_ENERGY = frozenset({Energy.WHISPER, Energy.MUTED})
_HIGH_ENERGY = frozenset({Energy.VIBRANT, Energy.ELECTRIC})


def classify_energy(chroma: float) -> Energy:
    for upper, energy in _ENERGY_BANDS:
        if chroma < upper:
            return energy
    return Energy.ELECTRIC


def classify_depth(lightness: float) -> Depth:
    for upper, depth in _DEPTH_BANDS:
        if lightness < upper:
            return depth
    return Depth.ETHEREAL


def classify_temperature(hue: float, chroma: float) -> Temperature:
    """Temperature from the raw hue and chroma.

    Bands: warm [0, 70) and [330, ...), cool [170, 280), fresh [70, 170),
    everything else complex.
    """
    if chroma < _NEUTRAL_CHROMA:
        return Temperature.NEUTRAL
    if 0 <= hue < 70 or hue >= 330:
        return Temperature.HOT if chroma > _INTENSE_CHROMA else Temperature.WARM
    if 170 <= hue < 280:
        return Temperature.ICY if chroma > _INTENSE_CHROMA else Temperature.COOL
    if 70 <= hue < 170:
        return Temperature.FRESH
    return Temperature.COMPLEX


def classify_mood(energy: Energy, depth: Depth, temperature: Temperature, hue: float) -> Mood:
    """Combine the three bands into a mood family.

    First matching rule wins; the order below is significant.
    ``hue`` is accepted for signature stability but not consulted.
    """
    if energy in _LOW_ENERGY and depth in (Depth.DEEP, Depth.GROUNDED):
        return Mood.MOODY

    if energy in _LOW_ENERGY and depth in (Depth.AIRY, Depth.SOFT):
        return Mood.DREAMY

    if energy in _HIGH_ENERGY and depth in (Depth.DEEP, Depth.ABYSS):
        return Mood.JEWEL

    if energy in _HIGH_ENERGY and depth in (Depth.AIRY, Depth.SOFT, Depth.ETHEREAL):
        return Mood.POP

    if energy is Energy.MODERATE and temperature in (Temperature.WARM, Temperature.HOT):
        return Mood.EARTHY

    if energy is Energy.MODERATE and temperature in (Temperature.COOL, Temperature.ICY):
        return Mood.SERENE

    if depth is Depth.ETHEREAL or (depth is Depth.SOFT and energy is Energy.WHISPER):
        return Mood.ETHEREAL

    if depth in (Depth.ABYSS, Depth.DEEP) and energy in _LOW_ENERGY:
        return Mood.NOIR

    if temperature is Temperature.FRESH and energy is not Energy.WHISPER:
        return Mood.BOTANICAL

    return Mood.BALANCED


def analyze_color_mood(color: ColorLike) -> MoodDescriptor:
    """Read a color's energy, depth, temperature and mood.

    Missing channels read as l=0.5, c=0.1, h=0.

    Args:
        color: Color to analyze.

    Returns:
        Immutable descriptor including the companion strategy.

    Example:
        >>> analyze_color_mood({"l": 0.3, "c": 0.05, "h": 20}).mood
        <Mood.MOODY: 'moody'>
    """
    lightness, chroma, hue = as_color(color).lch()

    energy = classify_energy(chroma)
    depth = classify_depth(lightness)
    temperature = classify_temperature(hue, chroma)
    mood = classify_mood(energy, depth, temperature, hue)
    strategy = determine_companion_strategy(mood, lightness, chroma)

    logger.debug(
        f"Analyzed l={lightness:.3f} c={chroma:.3f} h={hue:.1f} -> "
        f"{energy.value}/{depth.value}/{temperature.value} = {mood.value}"
    )

    return MoodDescriptor(
        energy=energy,
        depth=depth,
        temperature=temperature,
        mood=mood,
        strategy=strategy,
        raw=RawLch(l=lightness, c=chroma, h=hue),
    )


__all__ = [
    "analyze_color_mood",
    "classify_depth",
    "classify_energy",
    "classify_mood",
    "classify_temperature",
]
