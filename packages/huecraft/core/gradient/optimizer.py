"""Gradient stop optimizer.

Expands a list of key colors into a denser stop list that avoids the
chroma valley between saturated neighbours and bridges wide hue jumps.
"""

from __future__ import annotations

from collections.abc import Sequence

from huecraft.core.color.hue import HuePath, hue_distance, interpolate_hue
from huecraft.core.color.models import DEFAULT_LIGHTNESS, OklchColor, as_color, make_color
from huecraft.core.utils.math import clamp, lerp

# Both neighbours need more chroma than this to get a boosted midpoint
_MIDPOINT_MIN_CHROMA = 0.03
_MIDPOINT_CHROMA_GAIN = 1.15
_MIDPOINT_CHROMA_CAP = 0.35

# Hue jumps wider than this get quarter and three-quarter bridge stops
_BRIDGE_MIN_HUE_DISTANCE = 90.0
_BRIDGE_CHROMA_GAIN = 1.1


def _channels(color: OklchColor) -> tuple[float, float, float]:
    # Missing chroma and hue read as 0 here, unlike the 0.1 chroma default elsewhere
    return (
        DEFAULT_LIGHTNESS if color.l is None else color.l,
        0.0 if color.c is None else color.c,
        0.0 if color.h is None else color.h,
    )


def _intermediate_stops(
    a: OklchColor,
    b: OklchColor,
    hue_path: HuePath | str,
    boost_chroma: bool,
) -> list[OklchColor]:
    """Stops inserted between ``a`` and ``b``, ordered by position."""
    la, ca, ha = _channels(a)
    lb, cb, hb = _channels(b)

    positioned: list[tuple[float, OklchColor]] = []

    if boost_chroma and ca > _MIDPOINT_MIN_CHROMA and cb > _MIDPOINT_MIN_CHROMA:
        mid_c = clamp(max(ca, cb) * _MIDPOINT_CHROMA_GAIN, 0.0, _MIDPOINT_CHROMA_CAP)
        positioned.append(
            (0.5, make_color((la + lb) / 2, mid_c, interpolate_hue(ha, hb, 0.5, hue_path)))
        )

    if hue_distance(ha, hb, hue_path) > _BRIDGE_MIN_HUE_DISTANCE:
        gain = _BRIDGE_CHROMA_GAIN if boost_chroma else 1.0
        for t in (0.25, 0.75):
            positioned.append(
                (
                    t,
                    make_color(
                        lerp(la, lb, t),
                        lerp(ca, cb, t) * gain,
                        interpolate_hue(ha, hb, t, hue_path),
                    ),
                )
            )

    positioned.sort(key=lambda item: item[0])
    return [color for _, color in positioned]


def optimize_for_gradient(
    colors: Sequence[OklchColor],
    *,
    hue_path: HuePath | str = HuePath.SHORT,
    boost_chroma: bool = True,
    insert_midpoints: bool = True,
) -> list[OklchColor]:
    """Expand key colors into gradient stops.

    For every adjacent pair the left color is emitted, followed by any
    inserted stops in position order:

    - 0.5: chroma-boosted midpoint, when boosting and both colors carry
      chroma above 0.03.
    - 0.25 and 0.75: hue bridges, when the pair is more than 90 degrees
      apart along ``hue_path``.

    The last key color closes the list. Key colors are passed through
    untouched.

    Args:
        colors: Key colors.
        hue_path: Path policy for inserted hues and the distance test.
        boost_chroma: Enable the midpoint and the 1.1x bridge chroma gain.
        insert_midpoints: When False, only the key colors are returned.

    Returns:
        Expanded stop list, or the input unchanged when it has fewer
        than two colors.

    Example:
        >>> a = OklchColor(l=0.5, c=0.1, h=0)
        >>> b = OklchColor(l=0.5, c=0.1, h=40)
        >>> len(optimize_for_gradient([a, b]))
        3
    """
    if len(colors) < 2:
        return list(colors)

    expanded: list[OklchColor] = []
    for left, right in zip(colors, colors[1:]):
        expanded.append(left)

        if not insert_midpoints:
            continue

        expanded.extend(
            _intermediate_stops(as_color(left), as_color(right), hue_path, boost_chroma)
        )

    expanded.append(colors[-1])
    return expanded


__all__ = [
    "optimize_for_gradient",
]
