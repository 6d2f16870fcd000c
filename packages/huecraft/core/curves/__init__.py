"""Curve utilities."""

from huecraft.core.curves.easing import LightnessEase, apply_easing

__all__ = [
    "LightnessEase",
    "apply_easing",
]
