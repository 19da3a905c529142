"""Coordinate transforms shared by signals and textures.

A mapping rewrites (u, v) before the wrapped node sees it. Each mapping
is written once and wrapped either as a Signal or as a Texture, so the
same rotation, scaling or warp applies to both kinds of tree.
"""

import math
from abc import ABC, abstractmethod

from .noise import PerlinNoise
from .signals import Signal, as_signal
from .textures import Texture, as_texture


class Mapping(ABC):
    """Base class for coordinate mappings: (u, v) -> (u', v')."""

    @abstractmethod
    def map(self, u, v):
        """Return the coordinate the wrapped node is sampled at."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class Rotation(Mapping):
    """Counter-clockwise rotation by degrees about a pivot.

    The wrapped node is sampled at the rotated coordinate, so its
    content appears turned the opposite way.
    """

    def __init__(self, degrees, pivot=(0.5, 0.5)):
        self.degrees = degrees
        self.pivot = (float(pivot[0]), float(pivot[1]))
        rad = math.radians(degrees)
        self._cos = math.cos(rad)
        self._sin = math.sin(rad)

    def map(self, u, v):
        du = u - self.pivot[0]
        dv = v - self.pivot[1]
        return (self.pivot[0] + du * self._cos - dv * self._sin,
                self.pivot[1] + du * self._sin + dv * self._cos)

    def __repr__(self):
        return f"Rotation({self.degrees}, pivot={self.pivot})"


class Scaling(Mapping):
    """Multiply coordinates by (su, sv) about a pivot.

    Factors above 1 sample more of the child, so its features shrink.

    Raises:
        ValueError: If either factor is not positive.
    """

    def __init__(self, su, sv=None, pivot=(0.5, 0.5)):
        if sv is None:
            sv = su
        if not su > 0 or not sv > 0:
            raise ValueError(f"scale factors must be positive, got ({su!r}, {sv!r})")
        self.su = su
        self.sv = sv
        self.pivot = (float(pivot[0]), float(pivot[1]))

    def map(self, u, v):
        return (self.pivot[0] + (u - self.pivot[0]) * self.su,
                self.pivot[1] + (v - self.pivot[1]) * self.sv)


class Translation(Mapping):
    """Shift the sampling point by (du, dv)."""

    def __init__(self, du, dv):
        self.du = du
        self.dv = dv

    def map(self, u, v):
        return u + self.du, v + self.dv


def _wrap(x):
    return x % 1.0 if math.isfinite(x) else 0.0


class Tiling(Mapping):
    """Repeat the child's unit square repeat_u x repeat_v times.

    Coordinates are wrapped into [0, 1), so this mapping also turns any
    out-of-range input into an in-range one. A product that overflows
    wraps to 0.
    """

    def __init__(self, repeat_u=1, repeat_v=None):
        if repeat_v is None:
            repeat_v = repeat_u
        if not repeat_u > 0 or not repeat_v > 0:
            raise ValueError(
                f"tile repeats must be positive, got ({repeat_u!r}, {repeat_v!r})")
        self.repeat_u = repeat_u
        self.repeat_v = repeat_v

    def map(self, u, v):
        return _wrap(u * self.repeat_u), _wrap(v * self.repeat_v)


class NoiseWarp(Mapping):
    """Displace coordinates by noise.

    u and v are pushed by independent noise samples (the v sample is
    taken from an offset region of the same noise field).
    """

    def __init__(self, noise, amplitude=0.05, frequency=4.0):
        if not isinstance(noise, PerlinNoise):
            raise TypeError(f"expected a PerlinNoise, got {type(noise).__name__}")
        if not frequency > 0:
            raise ValueError(f"frequency must be positive, got {frequency!r}")
        self.noise = noise
        self.amplitude = amplitude
        self.frequency = frequency

    def map(self, u, v):
        x = u * self.frequency
        y = v * self.frequency
        return (u + self.amplitude * self.noise.noise(x, y),
                v + self.amplitude * self.noise.noise(x + 31.7, y + 47.3))


# ---------------------------------------------------------------------------
# Wrappers
# ---------------------------------------------------------------------------

def _require_mapping(mapping):
    if not isinstance(mapping, Mapping):
        raise TypeError(f"expected a Mapping, got {type(mapping).__name__}")
    return mapping


class TransformedSignal(Signal):
    """Evaluate a signal at mapped coordinates. A None child is absent (0)."""

    def __init__(self, child, mapping):
        self.child = as_signal(child)
        self.mapping = _require_mapping(mapping)

    def value_at(self, u, v):
        return self.child.value_at(*self.mapping.map(u, v))

    def __repr__(self):
        return f"TransformedSignal({self.child!r}, {self.mapping!r})"


class TransformedTexture(Texture):
    """Evaluate a texture at mapped coordinates. A None child is opaque black."""

    def __init__(self, child, mapping):
        self.child = as_texture(child)
        self.mapping = _require_mapping(mapping)

    def color_at(self, u, v):
        return self.child.color_at(*self.mapping.map(u, v))

    def __repr__(self):
        return f"TransformedTexture({self.child!r}, {self.mapping!r})"


def transform(node, mapping):
    """Wrap a Signal or Texture so it is sampled through mapping.

    Raises:
        TypeError: If node is neither a Signal nor a Texture.
    """
    _require_mapping(mapping)
    if isinstance(node, Signal):
        return TransformedSignal(node, mapping)
    if isinstance(node, Texture):
        return TransformedTexture(node, mapping)
    raise TypeError(f"cannot transform {type(node).__name__}")


def rotate(node, degrees, pivot=(0.5, 0.5)):
    return transform(node, Rotation(degrees, pivot))


def scale(node, su, sv=None, pivot=(0.5, 0.5)):
    return transform(node, Scaling(su, sv, pivot))


def translate(node, du, dv):
    return transform(node, Translation(du, dv))


def tile(node, repeat_u, repeat_v=None):
    return transform(node, Tiling(repeat_u, repeat_v))


def warp(node, noise, amplitude=0.05, frequency=4.0):
    return transform(node, NoiseWarp(noise, amplitude, frequency))
