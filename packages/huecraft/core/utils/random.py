"""Shared randomness source for the sampling engines.

Every sampling call in huecraft draws from a ``random.Random`` that callers
may inject. When none is given, the process-level generator below is used.
"""

from __future__ import annotations

import random

_DEFAULT_RNG = random.Random()


def resolve_rng(rng: random.Random | None = None) -> random.Random:
    """Return ``rng`` or the process-level generator."""
    return rng if rng is not None else _DEFAULT_RNG


def make_rng(seed: int | None = None) -> random.Random:
    """Create a generator, seeded when ``seed`` is given.

    Example:
        >>> make_rng(7).random() == make_rng(7).random()
        True
    """
    if seed is None:
        return _DEFAULT_RNG
    return random.Random(seed)
