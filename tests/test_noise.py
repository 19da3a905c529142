"""Tests for the Perlin noise engine."""

import math

import numpy as np
import pytest

from textureforge.noise import PerlinNoise, permutation_table


@pytest.fixture
def noise():
    return PerlinNoise(seed=1234)


def _grid(lo=-8.0, hi=8.0, count=61):
    xs = np.linspace(lo, hi, count)
    return np.meshgrid(xs, xs + 0.37)


def test_permutation_table_shape():
    table = permutation_table(5)
    assert table.shape == (512,)
    assert sorted(table[:256]) == list(range(256))
    np.testing.assert_array_equal(table[:256], table[256:])


def test_permutation_table_is_shared_and_read_only():
    table = permutation_table(5)
    assert permutation_table(5) is table
    assert not table.flags.writeable
    with pytest.raises(ValueError):
        table[0] = 1


def test_random_seed_is_recorded():
    n = PerlinNoise()
    assert isinstance(n.seed, int)
    assert PerlinNoise(n.seed).noise(0.3, 0.4) == n.noise(0.3, 0.4)


def test_determinism(noise):
    first = noise.noise(1.3, 2.7)
    assert noise.noise(1.3, 2.7) == first
    assert PerlinNoise(seed=1234).noise(1.3, 2.7) == first
    assert noise.fractal(0.2, 0.9, 5, 0.6) == PerlinNoise(1234).fractal(0.2, 0.9, 5, 0.6)


def test_seeds_differ():
    xx, yy = _grid()
    a = PerlinNoise(1).noise(xx, yy)
    b = PerlinNoise(2).noise(xx, yy)
    assert not np.allclose(a, b)


def test_zero_on_lattice_points(noise):
    assert noise.noise(3.0, 5.0) == 0.0
    assert noise.noise(-7.0, 0.0) == 0.0


@pytest.mark.parametrize("persistence", [0.0, 0.25, 0.5, 0.9, 2.0])
def test_single_octave_fractal_equals_noise(noise, persistence):
    for x, y in [(0.1, 0.2), (3.7, -1.4), (100.25, 42.5)]:
        assert noise.fractal(x, y, octaves=1, persistence=persistence) == noise.noise(x, y)


def test_noise_bounded(noise):
    xx, yy = _grid()
    values = noise.noise(xx, yy)
    assert values.min() >= -1.0
    assert values.max() <= 1.0
    # Not flat
    assert values.std() > 0.05


@pytest.mark.parametrize("octaves,persistence", [(1, 0.5), (4, 0.5), (8, 0.7), (6, 1.0)])
def test_fractal_bounded(noise, octaves, persistence):
    xx, yy = _grid()
    values = noise.fractal(xx, yy, octaves, persistence)
    assert values.min() >= -1.0 - 1e-9
    assert values.max() <= 1.0 + 1e-9


def test_turbulence_bounded(noise):
    xx, yy = _grid()
    values = noise.turbulence(xx, yy, 5, 0.5)
    assert values.min() >= 0.0
    assert values.max() <= 1.0


def test_array_matches_scalar(noise):
    xs = np.array([0.3, 1.7, -4.2, 250.9])
    ys = np.array([0.1, -2.6, 9.9, 255.5])
    arr = noise.noise(xs, ys)
    expected = [noise.noise(x, y) for x, y in zip(xs, ys)]
    np.testing.assert_allclose(arr, expected)


def test_continuity_across_cells(noise):
    for x in [0.5, 1.0, 2.0, 255.0, 256.0]:
        left = noise.noise(x - 1e-7, 0.42)
        right = noise.noise(x + 1e-7, 0.42)
        assert abs(left - right) < 1e-5


def test_lattice_wraps_every_256(noise):
    assert noise.noise(0.3, 0.6) == pytest.approx(noise.noise(256.3, 0.6))


@pytest.mark.parametrize("x,y", [
    (1e300, -1e300), (1e18 + 0.5, 3.0), (-1e-300, 1e15),
    (1e308, 0.5), (-1e308, 1e308), (5e307, -5e307),
])
def test_huge_inputs_are_finite(noise, x, y):
    assert math.isfinite(noise.noise(x, y))
    fractal = noise.fractal(x, y, 4, 0.5)
    assert math.isfinite(fractal)
    assert -1.0 <= fractal <= 1.0
    assert 0.0 <= noise.turbulence(x, y, 6, 0.5) <= 1.0


def test_overflowing_octaves_use_lattice_origin(noise):
    # 1e308 * 2 overflows to inf in the second octave
    assert noise.noise(np.inf, 0.5) == noise.noise(0.0, 0.5)
    assert noise.noise(-np.inf, np.inf) == noise.noise(0.0, 0.0)


def test_noise_array_with_overflowed_entries(noise):
    xs = np.array([0.25, np.inf, -np.inf])
    result = noise.noise(xs, np.full(3, 0.5))
    assert np.all(np.isfinite(result))
    assert result[1] == result[2] == noise.noise(0.0, 0.5)


@pytest.mark.parametrize("octaves", [0, -1, 2.5])
def test_invalid_octaves(noise, octaves):
    with pytest.raises(ValueError):
        noise.fractal(0.5, 0.5, octaves=octaves)


def test_invalid_persistence(noise):
    with pytest.raises(ValueError):
        noise.fractal(0.5, 0.5, octaves=3, persistence=-0.5)
