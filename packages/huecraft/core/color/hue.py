"""Hue path resolution on the circular hue axis.

Every function normalizes its hue inputs into [0, 360) first. NaN inputs
propagate to NaN outputs; callers must guard against them.
"""

from __future__ import annotations

from enum import Enum

from huecraft.core.utils.math import normalize_hue

# Band tested against the short-arc midpoint for the warm path
_COOL_BAND = (170.0, 280.0)
# Band tested against the short-arc midpoint for the cool path
_WARM_BAND = (330.0, 60.0)


class HuePath(str, Enum):
    """Direction taken around the hue wheel when interpolating.

    Attributes:
        SHORT: Shortest arc (CSS default).
        LONG: The complementary, longer arc.
        WARM: Short arc unless its midpoint is cool, then the long arc.
        COOL: Short arc unless its midpoint is warm, then the long arc.
    """

    SHORT = "short"
    LONG = "long"
    WARM = "warm"
    COOL = "cool"


def _short_arc(diff: float) -> float:
    # Strict comparisons: a delta of exactly +/-180 is left alone
    if diff > 180:
        diff -= 360
    if diff < -180:
        diff += 360
    return diff


def _long_arc(diff: float) -> float:
    # 0 and +/-180 are degenerate and left alone
    if 0 < diff < 180:
        diff -= 360
    if -180 < diff < 0:
        diff += 360
    return diff


def resolve_delta(h1: float, h2: float, path: HuePath | str = HuePath.SHORT) -> float:
    """Signed angular delta from ``h1`` to ``h2`` under ``path``.

    The warm and cool policies decide from a single sample, the midpoint
    of the short arc, and switch to the long arc when that midpoint lies
    in the opposite temperature band.

    Args:
        h1: Start hue in degrees.
        h2: End hue in degrees.
        path: Path policy. Unknown values behave like ``short``.

    Returns:
        Signed delta in degrees such that ``h1 + delta`` lands on ``h2``.

    Example:
        >>> resolve_delta(350, 10)
        20.0
        >>> resolve_delta(350, 10, "long")
        -340.0
    """
    h1 = normalize_hue(h1)
    h2 = normalize_hue(h2)
    diff = h2 - h1
    short = _short_arc(diff)

    try:
        policy = HuePath(path)
    except ValueError:
        policy = HuePath.SHORT

    if policy is HuePath.LONG:
        return _long_arc(diff)

    if policy is HuePath.WARM:
        midpoint = normalize_hue(h1 + short / 2)
        if _COOL_BAND[0] < midpoint < _COOL_BAND[1]:
            return _long_arc(diff)
        return short

    if policy is HuePath.COOL:
        midpoint = normalize_hue(h1 + short / 2)
        if midpoint > _WARM_BAND[0] or midpoint < _WARM_BAND[1]:
            return _long_arc(diff)
        return short

    return short


def interpolate_hue(
    h1: float,
    h2: float,
    t: float,
    path: HuePath | str = HuePath.SHORT,
) -> float:
    """Hue at fraction ``t`` of the way from ``h1`` to ``h2`` along ``path``.

    Example:
        >>> interpolate_hue(350, 10, 0.5)
        0.0
    """
    delta = resolve_delta(h1, h2, path)
    return normalize_hue(normalize_hue(h1) + delta * t)


def hue_distance(h1: float, h2: float, path: HuePath | str = HuePath.SHORT) -> float:
    """Unsigned angular distance used to decide on bridging stops.

    Computed independently of :func:`resolve_delta`: the shortest
    distance, or its complement for the ``long`` path. The two can
    disagree at boundary angles, which is intended.
    """
    diff = abs(normalize_hue(h2) - normalize_hue(h1))
    if diff > 180:
        diff = 360 - diff

    if path == HuePath.LONG:
        return 360 - diff
    return diff


def bias_toward_range(
    hue: float,
    hue_range: tuple[float, float],
    strength: float,
    *,
    wrap: bool = True,
) -> float:
    """Pull ``hue`` toward the midpoint of ``hue_range`` along the short arc.

    Args:
        hue: Hue to adjust (any real).
        hue_range: (min, max) of the target band.
        strength: Fraction of the signed distance to travel (0-1).
        wrap: Normalize the result into [0, 360). When False the result
            may fall slightly outside and is left for the caller to wrap.

    Example:
        >>> bias_toward_range(200, (80, 160), 0.5)
        160.0
    """
    normalized = normalize_hue(hue)
    range_mid = (hue_range[0] + hue_range[1]) / 2

    diff = _short_arc(range_mid - normalized)
    biased = normalized + diff * strength
    return normalize_hue(biased) if wrap else biased


__all__ = [
    "HuePath",
    "bias_toward_range",
    "hue_distance",
    "interpolate_hue",
    "resolve_delta",
]
