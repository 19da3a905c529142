"""Ready-made patterns.

Geometric patterns are coordinate predicates choosing between two child
textures. The organic ones (marble, wood, clouds, ...) are just signal
and gradient compositions built from the other modules.
"""

from .color import Color
from .gradient import EARTH, FIRE, GRAYSCALE, SPECTRUM, ColorGradient
from .signals import (
    CoordinateSignal,
    InvertSignal,
    MandelbrotSignal,
    NoiseSignal,
    PowerSignal,
    SineSignal,
    SumSignal,
    ThresholdSignal,
    TurbulenceSignal,
)
from .textures import GradientTexture, MergeTexture, MixTexture, Texture, as_texture
from .transforms import scale, warp


def _require_count(name, value):
    if not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class CheckerTexture(Texture):
    """Alternating cells: first where floor(u*n) + floor(v*n) is even.

    Defined for any (u, v); the checkerboard simply continues outside
    the unit square. Parity comes from a float remainder and
    holds for any finite coordinate.
    """

    def __init__(self, first=None, second=None, cells=8):
        self.first = as_texture(first)
        self.second = as_texture(second)
        self.cells = _require_count("cells", cells)

    def color_at(self, u, v):
        odd = ((u * self.cells) % 2.0 >= 1.0) != ((v * self.cells) % 2.0 >= 1.0)
        if odd:
            return self.second.color_at(u, v)
        return self.first.color_at(u, v)


class BrickTexture(Texture):
    """Running-bond brickwork; odd rows are shifted by half a brick.

    Args:
        brick: Texture (or Color) inside bricks.
        mortar: Texture (or Color) in the joints.
        rows: Brick rows per unit of v.
        columns: Bricks per row per unit of u.
        mortar_width: Joint thickness as a fraction of a brick's height.

    Repeats outside the unit square.
    """

    def __init__(self, brick=None, mortar=None, rows=8, columns=4,
                 mortar_width=0.1):
        self.brick = as_texture(brick)
        self.mortar = as_texture(mortar)
        self.rows = _require_count("rows", rows)
        self.columns = _require_count("columns", columns)
        if not 0.0 <= mortar_width < 0.5:
            raise ValueError(f"mortar_width must be in [0, 0.5), got {mortar_width!r}")
        self.mortar_width = mortar_width

    def color_at(self, u, v):
        y = v * self.rows
        odd_row = y % 2.0 >= 1.0
        x = u * self.columns + (0.5 if odd_row else 0.0)
        fy = y % 1.0
        fx = x % 1.0

        # Same joint thickness across rows and columns
        half_v = self.mortar_width / 2.0
        half_u = min(half_v * self.columns / self.rows, 0.5)
        if fy < half_v or fy > 1.0 - half_v or fx < half_u or fx > 1.0 - half_u:
            return self.mortar.color_at(u, v)
        return self.brick.color_at(u, v)


class GridTexture(Texture):
    """Lines on a square grid of cells x cells, fill everywhere else.

    line_width is a fraction of a cell, centered on each cell border.
    """

    def __init__(self, line=None, fill=None, cells=8, line_width=0.1):
        self.line = as_texture(line)
        self.fill = as_texture(fill)
        self.cells = _require_count("cells", cells)
        if not 0.0 <= line_width <= 1.0:
            raise ValueError(f"line_width must be in [0, 1], got {line_width!r}")
        self.line_width = line_width

    def color_at(self, u, v):
        half = self.line_width / 2.0
        fu = (u * self.cells) % 1.0
        fv = (v * self.cells) % 1.0
        if fu < half or fu > 1.0 - half or fv < half or fv > 1.0 - half:
            return self.line.color_at(u, v)
        return self.fill.color_at(u, v)


# ---------------------------------------------------------------------------
# Composed scenes
# ---------------------------------------------------------------------------

MARBLE = ColorGradient([
    (0.0, Color(40, 40, 48)),
    (0.35, Color(150, 150, 160)),
    (0.6, Color(230, 230, 235)),
    (1.0, Color(250, 250, 252)),
])

WOOD = ColorGradient([
    (0.0, Color(92, 51, 23)),
    (0.5, Color(150, 95, 50)),
    (1.0, Color(196, 140, 85)),
])

SKY = ColorGradient([
    (0.0, Color(60, 110, 200)),
    (0.5, Color(140, 180, 235)),
    (1.0, Color(255, 255, 255)),
])


def marble(noise, veins=4.0, turbulence=0.25):
    """Diagonal sine bands warped by noise."""
    bands = warp(SineSignal(frequency=veins, axis="uv"), noise,
                 amplitude=turbulence, frequency=3.0)
    return GradientTexture(PowerSignal(bands, 0.7), MARBLE)


def wood(noise, rings=12.0):
    """Stretched grain lines wobbled by noise."""
    grain = scale(SineSignal(frequency=rings, axis="u"), 1.0, 0.1)
    return GradientTexture(warp(grain, noise, amplitude=0.03, frequency=3.0), WOOD)


def clouds(noise, frequency=4.0, octaves=6):
    """Soft fractal clouds over a blue sky."""
    return GradientTexture(
        NoiseSignal(noise, frequency=frequency, octaves=octaves, persistence=0.55),
        SKY,
    )


def fire(noise):
    """Turbulent flames rising from the bottom edge."""
    height = CoordinateSignal("v")
    flames = SumSignal(
        PowerSignal(height, 2.0),
        TurbulenceSignal(noise, frequency=5.0, octaves=5, persistence=0.5),
    )
    return GradientTexture(InvertSignal(PowerSignal(flames, 1.5)), FIRE)


def terrain(noise):
    """Fractal height map colored with the earth gradient."""
    height = NoiseSignal(noise, frequency=3.0, octaves=6, persistence=0.5)
    return GradientTexture(height, EARTH)


def mandelbrot(noise=None, max_iterations=64):
    """The Mandelbrot set colored with the spectrum gradient.

    noise is unused; it is accepted so every preset has the same call shape.
    """
    return GradientTexture(MandelbrotSignal(max_iterations), SPECTRUM)


def checker(noise, cells=8):
    """Checkerboard of marble and a darkened copy of it."""
    light = marble(noise)
    dark = MixTexture(light, Color(20, 20, 20), 0.7)
    return CheckerTexture(light, dark, cells)


def bricks(noise):
    """Noisy red bricks with grey mortar."""
    clay = MixTexture(
        Color(150, 50, 35),
        Color(110, 35, 25),
        NoiseSignal(noise, frequency=20.0, octaves=3),
    )
    mortar = GradientTexture(NoiseSignal(noise, frequency=40.0, octaves=2),
                             ColorGradient([(0.0, Color(150, 150, 140)),
                                            (1.0, Color(200, 200, 190))]))
    return BrickTexture(clay, mortar)


def spots(noise):
    """Hard-edged noise blobs merged over a grayscale ramp."""
    mask = ThresholdSignal(NoiseSignal(noise, frequency=6.0, octaves=3), 0.55, band=0.05)
    return MergeTexture(
        GradientTexture(CoordinateSignal("u"), GRAYSCALE),
        GradientTexture(CoordinateSignal("v"), FIRE),
        mask,
    )


PRESETS = {
    "marble": marble,
    "wood": wood,
    "clouds": clouds,
    "fire": fire,
    "terrain": terrain,
    "mandelbrot": mandelbrot,
    "checker": checker,
    "bricks": bricks,
    "spots": spots,
}
