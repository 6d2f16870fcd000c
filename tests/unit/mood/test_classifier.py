"""Tests for the mood classifier."""

from __future__ import annotations

import pytest

from huecraft.core.mood.classifier import (
    analyze_color_mood,
    classify_depth,
    classify_energy,
    classify_mood,
    classify_temperature,
)
from huecraft.core.mood.enums import Depth, Energy, Mood, Temperature


class TestBands:
    """Single-channel classification with exclusive upper bounds."""

    @pytest.mark.parametrize(
        ("chroma", "expected"),
        [
            (0.0, Energy.WHISPER),
            (0.039, Energy.WHISPER),
            (0.04, Energy.MUTED),
            (0.08, Energy.MODERATE),
            (0.13, Energy.VIBRANT),
            (0.199, Energy.VIBRANT),
            (0.20, Energy.ELECTRIC),
        ],
    )
    def test_energy(self, chroma: float, expected: Energy) -> None:
        """Energy follows chroma."""
        assert classify_energy(chroma) is expected

    @pytest.mark.parametrize(
        ("lightness", "expected"),
        [
            (0.1, Depth.ABYSS),
            (0.25, Depth.DEEP),
            (0.40, Depth.GROUNDED),
            (0.55, Depth.AIRY),
            (0.70, Depth.SOFT),
            (0.85, Depth.ETHEREAL),
        ],
    )
    def test_depth(self, lightness: float, expected: Depth) -> None:
        """Depth follows lightness."""
        assert classify_depth(lightness) is expected

    @pytest.mark.parametrize(
        ("hue", "chroma", "expected"),
        [
            (20, 0.03, Temperature.NEUTRAL),
            (20, 0.10, Temperature.WARM),
            (20, 0.20, Temperature.HOT),
            (335, 0.10, Temperature.WARM),
            (70, 0.10, Temperature.FRESH),
            (169, 0.10, Temperature.FRESH),
            (170, 0.10, Temperature.COOL),
            (200, 0.20, Temperature.ICY),
            (280, 0.10, Temperature.COMPLEX),
            (329, 0.10, Temperature.COMPLEX),
        ],
    )
    def test_temperature(self, hue: float, chroma: float, expected: Temperature) -> None:
        """Temperature reads hue bands, gated and intensified by chroma."""
        assert classify_temperature(hue, chroma) is expected


class TestMoodCascade:
    """Rule order of the mood cascade."""

    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            ({"l": 0.45, "c": 0.06, "h": 310}, Mood.MOODY),
            ({"l": 0.65, "c": 0.05, "h": 20}, Mood.DREAMY),
            ({"l": 0.30, "c": 0.20, "h": 20}, Mood.JEWEL),
            ({"l": 0.75, "c": 0.22, "h": 350}, Mood.POP),
            ({"l": 0.50, "c": 0.10, "h": 30}, Mood.EARTHY),
            ({"l": 0.50, "c": 0.10, "h": 220}, Mood.SERENE),
            ({"l": 0.90, "c": 0.02, "h": 80}, Mood.ETHEREAL),
            ({"l": 0.10, "c": 0.02, "h": 0}, Mood.NOIR),
            ({"l": 0.60, "c": 0.09, "h": 130}, Mood.BOTANICAL),
            ({"l": 0.50, "c": 0.10, "h": 300}, Mood.BALANCED),
        ],
    )
    def test_each_mood_reachable(self, color: dict, expected: Mood) -> None:
        """Every mood has a color that lands on it."""
        assert analyze_color_mood(color).mood is expected

    def test_soft_whisper_is_dreamy_not_ethereal(self) -> None:
        """The dreamy rule comes before the soft-and-whisper ethereal rule."""
        assert analyze_color_mood({"l": 0.8, "c": 0.02, "h": 0}).mood is Mood.DREAMY

    def test_grounded_muted_is_moody_not_noir(self) -> None:
        """Deep muted colors hit the moody rule first."""
        assert analyze_color_mood({"l": 0.3, "c": 0.05, "h": 20}).mood is Mood.MOODY

    def test_hue_not_consulted(self) -> None:
        """classify_mood ignores its hue argument."""
        args = (Energy.MODERATE, Depth.GROUNDED, Temperature.COMPLEX)
        assert classify_mood(*args, 0) is classify_mood(*args, 300)


class TestAnalyzeColorMood:
    """Full descriptors."""

    def test_dusty_warm(self) -> None:
        """l=0.3 c=0.05 h=20 is muted, deep and moody."""
        result = analyze_color_mood({"l": 0.3, "c": 0.05, "h": 20})
        assert result.energy is Energy.MUTED
        assert result.depth is Depth.DEEP
        assert result.mood is Mood.MOODY

    def test_bright_violet(self) -> None:
        """l=0.9 c=0.25 h=280 is an ethereal-depth pop color.

        Chroma 0.25 sits above the 0.20 electric threshold.
        """
        result = analyze_color_mood({"l": 0.9, "c": 0.25, "h": 280})
        assert result.energy is Energy.ELECTRIC
        assert result.depth is Depth.ETHEREAL
        assert result.mood is Mood.POP

    def test_missing_channels_use_defaults(self) -> None:
        """An empty color reads as l=0.5 c=0.1 h=0."""
        result = analyze_color_mood({})
        assert (result.raw.l, result.raw.c, result.raw.h) == (0.5, 0.1, 0.0)
        assert result.mood is Mood.EARTHY

    def test_raw_values_unclamped(self) -> None:
        """Raw channels keep out-of-range input."""
        result = analyze_color_mood({"l": 1.2, "c": 0.5, "h": 400})
        assert result.raw.l == 1.2
        assert result.raw.h == 400
        assert result.temperature is Temperature.HOT

    def test_deterministic(self, sample_colors) -> None:
        """Same color, same descriptor."""
        for color in sample_colors:
            assert analyze_color_mood(color) == analyze_color_mood(color)
