"""Explanations of why a mood's palette works."""

from __future__ import annotations

from huecraft.core.mood.enums import Mood

VIBE_TIPS: dict[Mood, tuple[str, ...]] = {
    Mood.MOODY: (
        'Muted colors create cohesion through shared desaturation; they "whisper" together',
        "The tight lightness range keeps everything feeling intimate and atmospheric",
        "Tinted neutrals carry your color's undertone through the whole palette",
    ),
    Mood.DREAMY: (
        "Soft chromas and light values create that washed, nostalgic quality",
        "Gentle hue shifts keep things ethereal without becoming muddy",
        "These colors feel like they've been seen through frosted glass",
    ),
    Mood.JEWEL: (
        "Deep, saturated colors get their richness from low lightness + high chroma",
        "Mixing warm and cool deep tones creates drama without chaos",
        "These are the colors you'd find in stained glass or gemstones",
    ),
    Mood.POP: (
        "Bright, high-chroma colors need careful hue spacing to avoid clashing",
        "The lightness variation gives the palette visual rhythm",
        "These colors want to be seen; use them with generous white space",
    ),
    Mood.EARTHY: (
        "Earth tones cluster in the warm hue range with moderate chroma",
        "The warmth comes from hue bias, not just saturation",
        "Grounding neutrals anchor the palette; like soil under wildflowers",
    ),
    Mood.SERENE: (
        "Cool tones + moderate chroma create calm without feeling cold",
        "The gentle lightness range feels like open sky",
        "These colors don't compete; they coexist",
    ),
    Mood.ETHEREAL: (
        "Near-zero chroma makes these colors feel like they're barely there",
        "Light values create space and openness",
        "Think fog, mist, early morning light",
    ),
    Mood.NOIR: (
        "Deep values with minimal color create sophisticated tension",
        'The barely-visible hue tints are what separate this from just "dark"',
        "Less color, more mood",
    ),
    Mood.BOTANICAL: (
        "Green-adjacent hues with organic variation mimic nature's palette",
        "Nature doesn't do perfect complementary; it does close neighbors with accent surprises",
        "The chroma variation mirrors how leaves differ in saturation naturally",
    ),
    Mood.BALANCED: (
        "A versatile palette that works across contexts",
        "The chroma and lightness are matched to your input's energy level",
        "Hue variation is wide enough for interest, close enough for harmony",
    ),
}


def vibe_tips(mood: Mood | str) -> list[str]:
    """Return the tips for ``mood``, falling back to the balanced set."""
    try:
        return list(VIBE_TIPS[Mood(mood)])
    except ValueError:
        return list(VIBE_TIPS[Mood.BALANCED])
