"""Tests for the gradient stop optimizer."""

from __future__ import annotations

import pytest

from huecraft.core.color.hue import HuePath
from huecraft.core.color.models import OklchColor
from huecraft.core.gradient.optimizer import optimize_for_gradient


class TestDegenerateInput:
    """Fewer than two colors."""

    def test_empty(self) -> None:
        """No colors in, no colors out."""
        assert optimize_for_gradient([]) == []

    def test_single_color(self) -> None:
        """A single color is returned unchanged."""
        color = OklchColor(l=0.5, c=0.1, h=20)
        assert optimize_for_gradient([color]) == [color]


class TestChromaMidpoint:
    """The boosted 0.5 stop."""

    def test_close_hues_get_one_midpoint(self) -> None:
        """Saturated neighbours under 90 degrees apart gain one stop."""
        a = OklchColor(l=0.4, c=0.1, h=0)
        b = OklchColor(l=0.6, c=0.1, h=40)
        result = optimize_for_gradient([a, b])

        assert len(result) == 3
        assert result[0] is a
        assert result[2] is b
        assert result[1].lch() == pytest.approx((0.5, 0.115, 20))

    def test_midpoint_chroma_capped(self) -> None:
        """Boosted chroma stops at 0.35."""
        a = OklchColor(l=0.5, c=0.33, h=0)
        b = OklchColor(l=0.5, c=0.33, h=30)
        assert optimize_for_gradient([a, b])[1].c == pytest.approx(0.35)

    def test_low_chroma_skips_midpoint(self) -> None:
        """Neutral-ish neighbours get nothing inserted."""
        a = OklchColor(l=0.5, c=0.02, h=0)
        b = OklchColor(l=0.5, c=0.10, h=40)
        assert len(optimize_for_gradient([a, b])) == 2

    def test_missing_chroma_reads_as_zero(self) -> None:
        """A color without chroma never qualifies for the midpoint."""
        a = OklchColor(l=0.5, h=0)
        b = OklchColor(l=0.5, h=40)
        assert len(optimize_for_gradient([a, b])) == 2

    def test_boost_disabled_skips_midpoint(self) -> None:
        """boost_chroma=False also disables the midpoint."""
        a = OklchColor(l=0.5, c=0.1, h=0)
        b = OklchColor(l=0.5, c=0.1, h=40)
        assert len(optimize_for_gradient([a, b], boost_chroma=False)) == 2


class TestHueBridges:
    """Quarter and three-quarter stops for wide hue jumps."""

    def test_wide_jump_positions_ascending(self) -> None:
        """150 degrees apart gives 0, 0.25, 0.5, 0.75, 1 ordering."""
        a = OklchColor(l=0.5, c=0.1, h=0)
        b = OklchColor(l=0.5, c=0.1, h=150)
        result = optimize_for_gradient([a, b])

        assert len(result) == 5
        assert [c.h for c in result] == pytest.approx([0, 37.5, 75, 112.5, 150])
        assert result[1].c == pytest.approx(0.11)
        assert result[2].c == pytest.approx(0.115)

    def test_bridges_without_boost(self) -> None:
        """Without boosting the bridges keep plain lerped chroma."""
        a = OklchColor(l=0.4, c=0.1, h=0)
        b = OklchColor(l=0.6, c=0.2, h=150)
        result = optimize_for_gradient([a, b], boost_chroma=False)

        assert len(result) == 4
        assert result[1].lch() == pytest.approx((0.45, 0.125, 37.5))
        assert result[2].lch() == pytest.approx((0.55, 0.175, 112.5))

    def test_exactly_ninety_is_not_bridged(self) -> None:
        """The distance test is strictly greater than 90."""
        a = OklchColor(l=0.5, c=0.1, h=0)
        b = OklchColor(l=0.5, c=0.1, h=90)
        assert len(optimize_for_gradient([a, b])) == 3

    def test_long_path_distance(self) -> None:
        """Under the long path close hues are far apart and get bridged."""
        a = OklchColor(l=0.5, c=0.1, h=0)
        b = OklchColor(l=0.5, c=0.1, h=40)
        result = optimize_for_gradient([a, b], hue_path=HuePath.LONG)

        assert len(result) == 5
        assert result[2].h == pytest.approx(200)


class TestMultipleColors:
    """Expansion across several pairs."""

    def test_pairs_expand_independently(self) -> None:
        """Each pair contributes its left color plus its inserted stops."""
        colors = [
            OklchColor(l=0.5, c=0.1, h=0),
            OklchColor(l=0.5, c=0.1, h=40),
            OklchColor(l=0.5, c=0.1, h=190),
        ]
        result = optimize_for_gradient(colors)

        # 1 + 1 midpoint, 1 + 3 (midpoint and bridges), last color
        assert len(result) == 7
        assert result[0] is colors[0]
        assert result[2] is colors[1]
        assert result[-1] is colors[2]

    def test_insert_midpoints_disabled(self) -> None:
        """Only key colors are returned."""
        colors = [OklchColor(l=0.5, c=0.1, h=h) for h in (0, 150, 300)]
        assert optimize_for_gradient(colors, insert_midpoints=False) == colors
