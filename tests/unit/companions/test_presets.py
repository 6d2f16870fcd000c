"""Tests for named vibe presets."""

from __future__ import annotations

import random

import pytest

from huecraft.core.color.models import OklchColor
from huecraft.core.companions.enums import CompanionRole
from huecraft.core.companions.generator import generate_vibe_companions
from huecraft.core.companions.presets import VIBE_PRESETS, get_vibe_preset, list_vibe_presets
from huecraft.core.mood.enums import Mood

BASE = OklchColor(l=0.7, c=0.12, h=300)


class TestListVibePresets:
    """Catalog."""

    def test_six_presets_in_order(self) -> None:
        """All presets are listed in catalog order."""
        assert list_vibe_presets() == [
            "dusty-romance",
            "midnight-jewel",
            "morning-fog",
            "desert-sun",
            "deep-forest",
            "neon-noir",
        ]
        assert list_vibe_presets() == list(VIBE_PRESETS)


class TestGetVibePreset:
    """Preset steering."""

    @pytest.mark.parametrize(
        ("name", "mood"),
        [
            ("midnight-jewel", Mood.JEWEL),
            ("morning-fog", Mood.DREAMY),
            ("neon-noir", Mood.JEWEL),
        ],
    )
    def test_steers_mood(self, name: str, mood: Mood, rng: random.Random) -> None:
        """Presets push the base color into their target mood."""
        assert get_vibe_preset(name, BASE, rng=rng).mood is mood

    def test_dusty_romance_caps_chroma(self, rng: random.Random) -> None:
        """Dusty romance caps chroma and pins lightness."""
        source = get_vibe_preset("dusty-romance", BASE, rng=rng).palette[0]
        assert source.color.c == 0.08
        assert source.color.l == 0.55

    def test_five_entries_source_first(self, rng: random.Random) -> None:
        """Presets generate five colors with the adjusted input first."""
        result = get_vibe_preset("neon-noir", BASE, rng=rng)
        assert len(result.palette) == 5
        source = result.palette[0]
        assert source.role is CompanionRole.SOURCE
        assert source.color.l == 0.25
        assert source.color.c == 0.22
        assert source.color.h == 300

    def test_desert_sun_biases_hue(self, rng: random.Random) -> None:
        """Desert sun pulls the hue half way toward 35 degrees."""
        source = get_vibe_preset("desert-sun", {"l": 0.5, "c": 0.1, "h": 75}, rng=rng).palette[0]
        assert source.color.h == pytest.approx(55)
        assert source.color.c == 0.12
        assert source.color.l == 0.55

    def test_deep_forest_biases_hue(self, rng: random.Random) -> None:
        """Deep forest pulls the hue 60% toward 140 degrees."""
        source = get_vibe_preset("deep-forest", {"l": 0.5, "c": 0.1, "h": 40}, rng=rng).palette[0]
        assert source.color.h == pytest.approx(100)

    def test_deep_forest_keeps_unwrapped_hue(self, rng: random.Random) -> None:
        """A hue near 360 biases past it and still classifies as warm."""
        result = get_vibe_preset("deep-forest", {"l": 0.5, "c": 0.1, "h": 350}, rng=rng)
        assert result.palette[0].color.h == pytest.approx(440)
        assert result.mood is Mood.EARTHY

    def test_desert_sun_keeps_unwrapped_hue(self, rng: random.Random) -> None:
        """Desert sun leaves a biased hue outside [0, 360) as is."""
        source = get_vibe_preset("desert-sun", {"l": 0.5, "c": 0.1, "h": 340}, rng=rng).palette[0]
        assert source.color.h == pytest.approx(367.5)

    def test_missing_chroma_uses_default(self, rng: random.Random) -> None:
        """Chroma limits apply to the defaulted chroma."""
        source = get_vibe_preset("midnight-jewel", {"l": 0.5, "h": 10}, rng=rng).palette[0]
        assert source.color.c == 0.18

    def test_unknown_preset_uses_base(self) -> None:
        """Unknown names generate from the unadjusted base color."""
        unknown = get_vibe_preset("glam-rock", BASE, rng=random.Random(3))
        plain = generate_vibe_companions(BASE, count=5, rng=random.Random(3))
        assert unknown == plain
