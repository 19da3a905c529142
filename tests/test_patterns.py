"""Tests for geometric patterns and preset scenes."""

import numpy as np
import pytest

from textureforge.color import Color
from textureforge.noise import PerlinNoise
from textureforge.patterns import (
    PRESETS, BrickTexture, CheckerTexture, GridTexture,
)
from textureforge.textures import Texture

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
GRAY = Color(128, 128, 128)


def test_checker_same_parity_cells_match():
    checker = CheckerTexture(RED, BLUE, cells=4)
    assert checker.color_at(0.1, 0.1) == checker.color_at(0.3, 0.3) == RED


def test_checker_adjacent_cells_differ():
    checker = CheckerTexture(RED, BLUE, cells=4)
    assert checker.color_at(0.1, 0.1) != checker.color_at(0.3, 0.1)
    assert checker.color_at(0.3, 0.1) == BLUE


def test_checker_continues_outside_unit_square():
    checker = CheckerTexture(RED, BLUE, cells=4)
    assert checker.color_at(-0.1, 0.1) == BLUE
    assert checker.color_at(1.1, 0.1) == RED


def test_checker_matches_floor_parity():
    import math

    checker = CheckerTexture(RED, BLUE, cells=3)
    for u in np.linspace(-2.0, 2.0, 23):
        for v in np.linspace(-2.0, 2.0, 23):
            even = (math.floor(u * 3) + math.floor(v * 3)) % 2 == 0
            assert checker.color_at(u, v) == (RED if even else BLUE)


def test_checker_defaults_and_validation():
    assert CheckerTexture(cells=2).color_at(0.1, 0.1) == Color(0, 0, 0)
    with pytest.raises(ValueError):
        CheckerTexture(RED, BLUE, cells=0)
    with pytest.raises(ValueError):
        CheckerTexture(RED, BLUE, cells=2.5)


def test_brick_layout():
    bricks = BrickTexture(RED, GRAY, rows=4, columns=2, mortar_width=0.2)
    # Middle of a brick in the first row
    assert bricks.color_at(0.25, 0.125) == RED
    # Horizontal joint between rows
    assert bricks.color_at(0.25, 0.01) == GRAY
    # Vertical joint at u=0 in an even row...
    assert bricks.color_at(0.0, 0.125) == GRAY
    # ...is mid-brick in the offset odd row
    assert bricks.color_at(0.0, 0.375) == RED


def test_brick_layout_outside_unit_square():
    bricks = BrickTexture(RED, GRAY, rows=4, columns=2, mortar_width=0.2)
    assert bricks.color_at(1.25, 1.125) == RED
    assert bricks.color_at(-0.75, -0.875) == RED
    assert bricks.color_at(-1.0, 0.375) == RED


@pytest.mark.parametrize("u,v", [
    (1e308, 0.5), (0.5, -1e308), (-1e308, 1e308), (5e307, 5e307),
])
def test_geometric_patterns_at_huge_coordinates(u, v):
    for texture in (CheckerTexture(RED, BLUE, cells=8),
                    BrickTexture(RED, GRAY),
                    GridTexture(GRAY, RED)):
        assert texture.color_at(u, v) in (RED, BLUE, GRAY)


def test_brick_validation():
    with pytest.raises(ValueError):
        BrickTexture(rows=0)
    with pytest.raises(ValueError):
        BrickTexture(mortar_width=0.5)


def test_grid():
    grid = GridTexture(GRAY, RED, cells=4, line_width=0.2)
    assert grid.color_at(0.01, 0.125) == GRAY
    assert grid.color_at(0.125, 0.99) == GRAY
    assert grid.color_at(0.125, 0.125) == RED
    with pytest.raises(ValueError):
        GridTexture(cells=-1)


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_build_and_evaluate(name):
    noise = PerlinNoise(seed=21)
    texture = PRESETS[name](noise)
    assert isinstance(texture, Texture)
    colors = [texture.color_at(u, v)
              for u in np.linspace(0.0, 1.0, 5) for v in np.linspace(0.0, 1.0, 5)]
    assert all(isinstance(c, Color) for c in colors)
    # Same tree, same answer
    assert texture.color_at(0.3, 0.6) == texture.color_at(0.3, 0.6)
