"""Evaluation stays total at the edges of the float range."""

import pytest
from PIL import Image

from textureforge.color import Color
from textureforge.gradient import FIRE, OCEAN
from textureforge.noise import PerlinNoise
from textureforge.patterns import PRESETS, BrickTexture, CheckerTexture, GridTexture
from textureforge.signals import (
    ConstantSignal,
    InvertSignal,
    JitterSignal,
    LinearSignal,
    MandelbrotSignal,
    NoiseSignal,
    RadialSignal,
    ScaleSignal,
    SineSignal,
    TurbulenceSignal,
)
from textureforge.textures import (
    ChannelTexture,
    Gradient2DTexture,
    GradientTexture,
    ImageTexture,
    SolidTexture,
)
from textureforge.transforms import rotate, scale, tile, translate, warp

EXTREMES = [
    (1e308, 0.5),
    (0.5, 1e308),
    (-1e308, 1e308),
    (5e307, 5e307),
    (-5e307, -1e308),
    (1.7976931348623157e308, -1.7976931348623157e308),
]

NOISE = PerlinNoise(seed=99)


def _signals():
    base = NoiseSignal(NOISE, frequency=4.0, octaves=6)
    return {
        "constant": ConstantSignal(0.4),
        "linear": LinearSignal(0.0),
        "linear-diagonal": LinearSignal(45.0),
        "radial": RadialSignal(),
        "sine-u": SineSignal(4.0, axis="u"),
        "sine-uv": SineSignal(7.0, axis="uv", phase=0.3),
        "noise": base,
        "turbulence": TurbulenceSignal(NOISE, frequency=8.0, octaves=5),
        "mandelbrot": MandelbrotSignal(32),
        "jitter": JitterSignal(ConstantSignal(0.5), NOISE, amplitude=0.3),
        "scaled-value": ScaleSignal(base, 3.0),
        "inverted-noise": InvertSignal(base),
        "rotated": rotate(base, 33.0),
        "zoomed": scale(LinearSignal(45.0), 4.0),
        "shifted": translate(SineSignal(2.0), 1e308, -1e308),
        "tiled": tile(RadialSignal(), 3),
        "warped": warp(SineSignal(4.0, axis="uv"), NOISE, amplitude=0.2),
    }


def _textures():
    image = Image.new("RGBA", (3, 2), (10, 20, 30, 255))
    return {
        "solid": SolidTexture(Color(1, 2, 3)),
        "image": ImageTexture.from_image(image),
        "gradient": GradientTexture(NoiseSignal(NOISE), FIRE),
        "channels": ChannelTexture(SineSignal(3.0), LinearSignal(90.0),
                                   RadialSignal(), NoiseSignal(NOISE)),
        "gradient-2d": Gradient2DTexture(SineSignal(2.0), MandelbrotSignal(16),
                                         FIRE, OCEAN),
        "checker": CheckerTexture(Color(255, 0, 0), Color(0, 0, 255), cells=8),
        "bricks": BrickTexture(Color(150, 50, 35), Color(180, 180, 170)),
        "grid": GridTexture(Color(0, 0, 0), Color(255, 255, 255), cells=16),
        "rotated-checker": rotate(CheckerTexture(cells=5), 20.0),
        "rotated-image": rotate(ImageTexture.from_image(image), 20.0),
        "tiled-bricks": tile(BrickTexture(), 4),
    }


@pytest.mark.parametrize("name", sorted(_signals()))
@pytest.mark.parametrize("u,v", EXTREMES)
def test_signals_stay_in_range(name, u, v):
    value = _signals()[name].value_at(u, v)
    assert 0.0 <= value <= 1.0


@pytest.mark.parametrize("name", sorted(_textures()))
@pytest.mark.parametrize("u,v", EXTREMES)
def test_textures_return_colors(name, u, v):
    color = _textures()[name].color_at(u, v)
    assert isinstance(color, Color)
    assert 0.0 <= color.a <= 1.0


@pytest.mark.parametrize("name", sorted(PRESETS))
@pytest.mark.parametrize("u,v", EXTREMES)
def test_presets_return_colors(name, u, v):
    texture = PRESETS[name](NOISE)
    assert isinstance(texture.color_at(u, v), Color)
