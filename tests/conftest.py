"""Shared pytest fixtures for huecraft tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import random

import pytest

from huecraft.core.color.models import OklchColor
from huecraft.core.config.loader import clear_app_config_cache

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Randomness Fixtures
# ============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for repeatable sampling."""
    return random.Random(1234)


@pytest.fixture(params=[0, 7, 42, 2024, 99999])
def seeded_rng(request: pytest.FixtureRequest) -> random.Random:
    """Several seeds, for range assertions over different draws."""
    return random.Random(request.param)


# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def dusty_purple() -> OklchColor:
    """Muted, grounded purple (mood: moody)."""
    return OklchColor(l=0.45, c=0.06, h=310)


@pytest.fixture
def terracotta() -> OklchColor:
    """Moderate warm orange (mood: earthy)."""
    return OklchColor(l=0.55, c=0.11, h=45)


@pytest.fixture
def electric_pink() -> OklchColor:
    """Bright, high-chroma pink (mood: pop)."""
    return OklchColor(l=0.75, c=0.22, h=350)


@pytest.fixture
def deep_teal() -> OklchColor:
    """Dark, saturated teal (mood: jewel)."""
    return OklchColor(l=0.32, c=0.16, h=200)


@pytest.fixture
def sample_colors(
    dusty_purple: OklchColor,
    terracotta: OklchColor,
    electric_pink: OklchColor,
    deep_teal: OklchColor,
) -> list[OklchColor]:
    """A spread of colors across moods."""
    return [
        dusty_purple,
        terracotta,
        electric_pink,
        deep_teal,
        OklchColor(l=0.9, c=0.02, h=80),  # ethereal
        OklchColor(l=0.15, c=0.02, h=260),  # noir
        OklchColor(l=0.6, c=0.09, h=130),  # botanical
        OklchColor(l=0.5, c=0.1, h=300),  # balanced
    ]


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_app_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from a cached config and HUECRAFT_LOG_LEVEL."""
    monkeypatch.delenv("HUECRAFT_LOG_LEVEL", raising=False)
    clear_app_config_cache()
    yield
    clear_app_config_cache()
