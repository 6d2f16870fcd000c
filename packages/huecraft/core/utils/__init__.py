"""Shared utilities for huecraft."""

from huecraft.core.utils.json import dumps, read_json
from huecraft.core.utils.math import clamp, lerp, normalize_hue, round_half_up
from huecraft.core.utils.random import make_rng, resolve_rng

__all__ = [
    "clamp",
    "dumps",
    "lerp",
    "make_rng",
    "normalize_hue",
    "read_json",
    "resolve_rng",
    "round_half_up",
]
