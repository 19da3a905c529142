"""Scalar blend primitives shared by noise, gradients and compositing."""

import math


def linear(a, b, t):
    """Straight-line blend: a + (b - a) * t."""
    return a + (b - a) * t


def cosine(a, b, t):
    """Cosine blend, flattening the slope at both endpoints."""
    return a + (b - a) * (1.0 - math.cos(t * math.pi)) / 2.0


def smoothstep(a, b, t):
    """Hermite blend: reshape t as t^2(3 - 2t), then blend linearly."""
    t = t * t * (3.0 - 2.0 * t)
    return linear(a, b, t)


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def clamp_value(x, low=0.0, high=1.0):
    """Restrict x to [low, high]. NaN clamps to low."""
    if not x >= low:
        return low
    if x > high:
        return high
    return x


BLENDS = {
    "linear": linear,
    "cosine": cosine,
    "smoothstep": smoothstep,
}


def get_blend(blend):
    """Resolve a blend given by name or as a callable.

    Raises:
        ValueError: If the name is not one of BLENDS.
    """
    if callable(blend):
        return blend
    try:
        return BLENDS[blend]
    except KeyError:
        raise ValueError(
            f"unknown blend {blend!r}, expected one of {sorted(BLENDS)}"
        ) from None
