"""Procedural gradient noise for signal and texture effects."""

import logging
from functools import lru_cache

import numpy as np

from .interpolation import fade, linear

logger = logging.getLogger(__name__)

_SQRT_HALF = np.sqrt(0.5)

# Eight unit gradient directions: the axes and the diagonals
_GRADIENTS = np.array([
    [1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0],
    [_SQRT_HALF, _SQRT_HALF], [-_SQRT_HALF, _SQRT_HALF],
    [_SQRT_HALF, -_SQRT_HALF], [-_SQRT_HALF, -_SQRT_HALF],
])
_GRADIENTS.setflags(write=False)

# Unit-gradient 2D Perlin noise peaks at sqrt(1/2); rescale to [-1, 1]
_AMPLITUDE = np.sqrt(2.0)


@lru_cache(maxsize=32)
def permutation_table(seed):
    """Build the doubled 512-entry permutation table for a seed.

    Tables are cached per seed and returned read-only, so every engine
    built from the same seed shares a single array.
    """
    rng = np.random.RandomState(seed)
    p = rng.permutation(256).astype(np.int64)
    table = np.concatenate([p, p])
    table.setflags(write=False)
    logger.debug("Built noise permutation table for seed %d", seed)
    return table


def _lattice(coord):
    """Split a coordinate into a wrapped lattice index and an offset.

    Coordinates that overflowed to inf (a huge input times an octave
    frequency) sample the lattice origin.
    """
    coord = np.where(np.isfinite(coord), coord, 0.0)
    cell = np.floor(coord)
    index = np.mod(cell, 256).astype(np.int64)
    return index, coord - cell


def _dot_gradient(hash_val, dx, dy):
    g = _GRADIENTS[hash_val & 7]
    return g[..., 0] * dx + g[..., 1] * dy


class PerlinNoise:
    """Seeded 2D gradient noise.

    The permutation table is built once at construction and never
    written afterwards, so one instance can be shared by any number of
    nodes and threads.

    Args:
        seed: Integer seed. A random one is drawn (and kept in
            ``self.seed``) when None.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = int(np.random.randint(0, 2**31))
        self.seed = int(seed)
        self._perm = permutation_table(self.seed)

    def __repr__(self):
        return f"PerlinNoise(seed={self.seed})"

    def noise(self, x, y):
        """Evaluate base noise.

        Args:
            x, y: Floats or numpy arrays of any finite values.

        Returns:
            Float or array in [-1, 1].
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        xi, xf = _lattice(x)
        yi, yf = _lattice(y)
        perm = self._perm

        # Hash the four cell corners
        a = perm[xi] + yi
        b = perm[xi + 1] + yi
        aa = perm[a]
        ab = perm[a + 1]
        ba = perm[b]
        bb = perm[b + 1]

        n00 = _dot_gradient(aa, xf, yf)
        n10 = _dot_gradient(ba, xf - 1.0, yf)
        n01 = _dot_gradient(ab, xf, yf - 1.0)
        n11 = _dot_gradient(bb, xf - 1.0, yf - 1.0)

        u = fade(xf)
        v = fade(yf)
        result = linear(linear(n00, n10, u), linear(n01, n11, u), v)
        result = np.clip(result * _AMPLITUDE, -1.0, 1.0)

        if result.ndim == 0:
            return float(result)
        return result

    def fractal(self, x, y, octaves=4, persistence=0.5, lacunarity=2.0):
        """Fractal Brownian motion: weighted octaves of base noise.

        Octave i is sampled at frequency lacunarity**i with weight
        persistence**i; the sum is divided by the total weight.

        Args:
            x, y: Floats or numpy arrays.
            octaves: Number of noise layers (at least 1).
            persistence: Amplitude decay per octave.
            lacunarity: Frequency multiplier per octave.

        Returns:
            Float or array, approximately in [-1, 1].
        """
        check_fractal_params(octaves, persistence)
        value = 0.0
        amplitude = 1.0
        frequency = 1.0
        total_amplitude = 0.0

        for _ in range(octaves):
            value = value + amplitude * self.noise(x * frequency, y * frequency)
            total_amplitude += amplitude
            amplitude *= persistence
            frequency *= lacunarity

        return value / total_amplitude

    def turbulence(self, x, y, octaves=4, persistence=0.5, lacunarity=2.0):
        """Like fractal(), but summing absolute noise. Result in [0, 1]."""
        check_fractal_params(octaves, persistence)
        value = 0.0
        amplitude = 1.0
        frequency = 1.0
        total_amplitude = 0.0

        for _ in range(octaves):
            n = self.noise(x * frequency, y * frequency)
            value = value + amplitude * abs(n)
            total_amplitude += amplitude
            amplitude *= persistence
            frequency *= lacunarity

        return value / total_amplitude


def check_fractal_params(octaves, persistence):
    """Validate octave settings shared by noise-backed nodes."""
    if not isinstance(octaves, (int, np.integer)) or octaves < 1:
        raise ValueError(f"octaves must be a positive integer, got {octaves!r}")
    if persistence < 0:
        raise ValueError(f"persistence must be non-negative, got {persistence!r}")
