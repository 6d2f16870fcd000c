"""Tests for lightness easing curves."""

from __future__ import annotations

import pytest

from huecraft.core.curves.easing import (
    LightnessEase,
    apply_easing,
    ease_in_out_quad,
    ease_in_quad,
    ease_out_quad,
)


class TestEasingEndpoints:
    """Every curve is pinned at 0 and 1."""

    @pytest.mark.parametrize("easing", list(LightnessEase))
    def test_fixed_endpoints(self, easing: LightnessEase) -> None:
        """f(0) == 0 and f(1) == 1."""
        assert apply_easing(0.0, easing) == pytest.approx(0.0)
        assert apply_easing(1.0, easing) == pytest.approx(1.0)

    @pytest.mark.parametrize("easing", list(LightnessEase))
    def test_monotonic(self, easing: LightnessEase) -> None:
        """Curves never move backwards."""
        values = [apply_easing(i / 20, easing) for i in range(21)]
        assert values == sorted(values)


class TestEasingShapes:
    """Characteristic values of each curve."""

    def test_ease_in(self) -> None:
        """easeIn is t squared."""
        assert ease_in_quad(0.5) == pytest.approx(0.25)

    def test_ease_out(self) -> None:
        """easeOut is 1 - (1 - t) squared."""
        assert ease_out_quad(0.5) == pytest.approx(0.75)

    def test_ease_is_symmetric(self) -> None:
        """The S-curve passes through the centre and mirrors around it."""
        assert ease_in_out_quad(0.5) == pytest.approx(0.5)
        assert ease_in_out_quad(0.25) == pytest.approx(1 - ease_in_out_quad(0.75))
        assert ease_in_out_quad(0.25) < 0.25

    def test_string_names(self) -> None:
        """Curves can be named by their string values."""
        assert apply_easing(0.5, "easeIn") == pytest.approx(0.25)
        assert apply_easing(0.5, "easeOut") == pytest.approx(0.75)

    def test_unknown_name_is_linear(self) -> None:
        """Unknown names fall back to linear."""
        assert apply_easing(0.3, "bounce") == pytest.approx(0.3)
