"""TextureForge - Procedural color and scalar fields over UV space."""

from .color import Color
from .gradient import ColorGradient
from .noise import PerlinNoise
from .patterns import PRESETS
from .renderer import RenderConfig, render, render_signal
from .signals import Signal, evaluate_scalar
from .textures import Texture, evaluate_color

__version__ = "0.1.0"
__all__ = [
    "Color",
    "ColorGradient",
    "PerlinNoise",
    "RenderConfig",
    "Signal",
    "Texture",
    "evaluate_color",
    "evaluate_scalar",
    "generate",
    "render",
    "render_signal",
]


def generate(preset, width=256, height=256, seed=None, **kwargs):
    """Render one of the preset scenes.

    Args:
        preset: Name of a scene in ``patterns.PRESETS`` (marble, clouds,
            fire, ...).
        width: Output image width in pixels.
        height: Output image height in pixels.
        seed: Noise seed for reproducible output.
        **kwargs: Additional RenderConfig parameters (background).

    Returns:
        PIL Image in RGBA mode.

    Raises:
        KeyError: If the preset name is unknown.
    """
    try:
        factory = PRESETS[preset]
    except KeyError:
        raise KeyError(
            f"unknown preset {preset!r}, expected one of {sorted(PRESETS)}"
        ) from None

    config = RenderConfig(width=width, height=height, seed=seed, **kwargs)
    noise = PerlinNoise(config.seed)
    return render(factory(noise), config=config)
