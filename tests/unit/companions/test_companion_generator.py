"""Tests for vibe companion generation."""

from __future__ import annotations

import random

import pytest

from huecraft.core.color.models import OklchColor
from huecraft.core.companions.enums import CompanionRole
from huecraft.core.companions.generator import (
    generate_grounding_neutral,
    generate_vibe_companions,
    regenerate_companions,
)
from huecraft.core.mood.classifier import analyze_color_mood
from huecraft.core.mood.enums import Mood
from huecraft.core.mood.tips import vibe_tips


class TestPaletteShape:
    """Sizes, ordering and the source entry."""

    def test_default_palette(self, dusty_purple: OklchColor, rng: random.Random) -> None:
        """Five entries with the input first as source."""
        result = generate_vibe_companions(dusty_purple, rng=rng)

        assert len(result.palette) == 5
        assert result.palette[0].role is CompanionRole.SOURCE
        assert result.palette[0].color == dusty_purple
        assert result.palette[0].description == "Your input color"

    def test_mapping_input_gets_mode_tag(self, rng: random.Random) -> None:
        """A plain mapping comes back as the same channels with the oklch tag."""
        result = generate_vibe_companions({"l": 0.3, "c": 0.05, "h": 20}, rng=rng)
        source = result.palette[0].color
        assert source.mode == "oklch"
        assert (source.l, source.c, source.h) == (0.3, 0.05, 20)

    def test_without_input(self, terracotta: OklchColor, rng: random.Random) -> None:
        """Excluding the input leaves count companions."""
        result = generate_vibe_companions(terracotta, count=4, include_input=False, rng=rng)
        assert len(result.palette) == 4
        assert all(entry.role is not CompanionRole.SOURCE for entry in result.palette)

    @pytest.mark.parametrize("count", [0, 1])
    def test_tiny_counts(self, count: int, terracotta: OklchColor, rng: random.Random) -> None:
        """Counts that leave no companion slots return just the input."""
        result = generate_vibe_companions(terracotta, count=count, rng=rng)
        assert len(result.palette) == 1
        assert result.palette[0].role is CompanionRole.SOURCE

    def test_sorted_light_to_dark_after_source(self, sample_colors, seeded_rng) -> None:
        """Companions are ordered by descending lightness; the input stays first."""
        for color in sample_colors:
            result = generate_vibe_companions(color, count=7, rng=seeded_rng)
            lightness = [entry.color.l for entry in result.palette[1:]]
            assert lightness == sorted(lightness, reverse=True)
            assert result.palette[0].color == color

    def test_mood_fields(self, electric_pink: OklchColor, rng: random.Random) -> None:
        """Mood data and tips describe the input."""
        result = generate_vibe_companions(electric_pink, rng=rng)
        mood = analyze_color_mood(electric_pink)

        assert result.mood is Mood.POP
        assert result.energy is mood.energy
        assert result.depth is mood.depth
        assert result.temperature is mood.temperature
        assert result.mood_description == mood.strategy.description
        assert result.tips == vibe_tips(Mood.POP)


class TestCompanionValues:
    """Ranges of generated colors."""

    def test_all_colors_in_gamut(self, sample_colors, seeded_rng) -> None:
        """Every generated channel lies in canonical range."""
        for color in sample_colors:
            result = generate_vibe_companions(color, count=8, rng=seeded_rng)
            for entry in result.palette[1:]:
                assert 0.0 <= entry.color.l <= 1.0
                assert 0.0 <= entry.color.c <= 0.4
                assert 0.0 <= entry.color.h < 360.0

    def test_neutral_split(self, rng: random.Random) -> None:
        """Noir gives half its slots to tinted neutrals."""
        noir = OklchColor(l=0.15, c=0.02, h=260)
        result = generate_vibe_companions(noir, count=5, rng=rng)
        grounds = [
            entry
            for entry in result.palette
            if entry.role in (CompanionRole.LIGHT_GROUND, CompanionRole.DARK_GROUND)
        ]
        # round(4 * 0.5) == 2
        assert len(grounds) == 2

    def test_chromatic_ranges(self, deep_teal: OklchColor, seeded_rng) -> None:
        """Chromatic companions respect the output clamps."""
        result = generate_vibe_companions(deep_teal, count=6, rng=seeded_rng)
        for entry in result.palette[1:]:
            if entry.role in (CompanionRole.LIGHT_GROUND, CompanionRole.DARK_GROUND):
                continue
            assert 0.01 <= entry.color.c <= 0.30
            assert 0.08 <= entry.color.l <= 0.95


class TestGroundingNeutral:
    """Tinted neutral companions."""

    def test_light_input_gets_dark_neutral(self, seeded_rng) -> None:
        """Inputs above 0.6 lightness get dark grounds."""
        mood = analyze_color_mood({"l": 0.8, "c": 0.1, "h": 100})
        entry = generate_grounding_neutral(mood, 0, seeded_rng)
        assert 0.15 <= entry.color.l <= 0.35
        assert entry.role is CompanionRole.DARK_GROUND

    def test_dark_input_gets_light_neutral(self, seeded_rng) -> None:
        """Inputs below 0.4 lightness get light grounds."""
        mood = analyze_color_mood({"l": 0.2, "c": 0.1, "h": 100})
        entry = generate_grounding_neutral(mood, 1, seeded_rng)
        assert 0.75 <= entry.color.l <= 0.90
        assert entry.role is CompanionRole.LIGHT_GROUND

    def test_mid_input_alternates(self, seeded_rng) -> None:
        """Mid-tone inputs alternate light and dark by index."""
        mood = analyze_color_mood({"l": 0.5, "c": 0.1, "h": 100})
        even = generate_grounding_neutral(mood, 0, seeded_rng)
        odd = generate_grounding_neutral(mood, 1, seeded_rng)
        assert 0.85 <= even.color.l <= 0.93
        assert 0.18 <= odd.color.l <= 0.30

    def test_low_chroma_and_close_hue(self, seeded_rng) -> None:
        """Neutrals carry a faint tint within 10 degrees of the input."""
        mood = analyze_color_mood({"l": 0.5, "c": 0.1, "h": 5})
        entry = generate_grounding_neutral(mood, 0, seeded_rng)
        assert 0.01 <= entry.color.c <= 0.035
        diff = abs(entry.color.h - 5)
        assert min(diff, 360 - diff) <= 10

    def test_description_names_temperature(self, rng: random.Random) -> None:
        """The description mentions the input's temperature."""
        mood = analyze_color_mood({"l": 0.5, "c": 0.1, "h": 30})
        entry = generate_grounding_neutral(mood, 0, rng)
        assert entry.description == "A tinted neutral that shares the warm undertone of your input"


class TestRandomness:
    """Injected generators."""

    def test_same_seed_same_palette(self, dusty_purple: OklchColor) -> None:
        """Equal seeds reproduce the palette."""
        first = generate_vibe_companions(dusty_purple, rng=random.Random(5))
        second = generate_vibe_companions(dusty_purple, rng=random.Random(5))
        assert first == second

    def test_regenerate_draws_fresh_colors(self, dusty_purple: OklchColor) -> None:
        """Regenerating from the same generator continues its sequence."""
        rng = random.Random(5)
        first = generate_vibe_companions(dusty_purple, rng=rng)
        second = regenerate_companions(dusty_purple, rng=rng)
        assert first.palette[0] == second.palette[0]
        assert first.palette[1:] != second.palette[1:]
