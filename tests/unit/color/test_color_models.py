"""Tests for the OKLCH color model."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from huecraft.core.color.models import OklchColor, as_color, make_color


class TestOklchColor:
    """Defaults and coercion."""

    def test_missing_channels_default_on_read(self) -> None:
        """Missing l/c/h read as 0.5, 0.1 and 0."""
        color = OklchColor()
        assert color.l is None
        assert color.lch() == (0.5, 0.1, 0.0)

    def test_values_are_not_clamped_on_input(self) -> None:
        """Out-of-range input is kept as given."""
        color = OklchColor(l=1.4, c=-0.2, h=400)
        assert color.lch() == (1.4, -0.2, 400)

    def test_mode_tag(self) -> None:
        """The mode tag is always oklch."""
        assert OklchColor(l=0.5).mode == "oklch"
        with pytest.raises(ValidationError):
            OklchColor(mode="rgb")

    def test_frozen(self) -> None:
        """Colors are immutable."""
        color = OklchColor(l=0.5)
        with pytest.raises(ValidationError):
            color.l = 0.6  # type: ignore[misc]


class TestAsColor:
    """Mapping coercion."""

    def test_from_mapping(self) -> None:
        """Dicts become colors; unknown keys are ignored."""
        color = as_color({"l": 0.3, "c": 0.05, "h": 20, "alpha": 1})
        assert color == OklchColor(l=0.3, c=0.05, h=20)

    def test_passthrough(self) -> None:
        """Colors are returned unchanged."""
        color = OklchColor(l=0.3)
        assert as_color(color) is color


class TestMakeColor:
    """Canonical generated colors."""

    def test_clamps_and_wraps(self) -> None:
        """l into [0, 1], c into [0, 0.4], h into [0, 360)."""
        color = make_color(1.2, 0.55, -20)
        assert color.l == 1.0
        assert color.c == 0.4
        assert color.h == pytest.approx(340)

    def test_negative_chroma(self) -> None:
        """Negative chroma is clamped to zero."""
        assert make_color(0.5, -0.1, 10).c == 0.0
