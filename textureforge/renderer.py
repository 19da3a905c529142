"""Sample texture and signal trees into Pillow images.

The renderer owns the pixel buffer; nodes only ever see one (u, v) at a
time and return fresh values, so rows could be filled from several
threads without sharing any scratch state.
"""

import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .color import Color
from .signals import as_signal
from .textures import as_texture

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Configuration for rendering a texture."""

    width: int = 256
    height: int = 256

    # Noise seed for preset scenes (random when None)
    seed: int = None

    # Composited under the texture; None keeps the texture's alpha
    background: Color = None

    def __post_init__(self):
        _check_size(self.width, self.height)


def _check_size(width, height):
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")


def _pixel_centers(count):
    """UV coordinates of pixel centers along one axis."""
    return (np.arange(count, dtype=np.float64) + 0.5) / count


def render(texture, width=None, height=None, config=None):
    """Render a texture to an RGBA image.

    Args:
        texture: Texture node (None renders opaque black).
        width: Output width in pixels; overrides config.width.
        height: Output height in pixels; overrides config.height.
        config: RenderConfig instance (defaults used if None).

    Returns:
        PIL Image in RGBA mode.
    """
    if config is None:
        config = RenderConfig()
    width = config.width if width is None else width
    height = config.height if height is None else height
    _check_size(width, height)

    texture = as_texture(texture)
    logger.debug("Rendering %r at %dx%d", texture, width, height)

    us = _pixel_centers(width)
    vs = _pixel_centers(height)
    rgba = np.zeros((height, width, 4), dtype=np.uint8)

    for y, v in enumerate(vs):
        row = rgba[y]
        for x, u in enumerate(us):
            color = texture.color_at(float(u), float(v))
            if config.background is not None:
                color = config.background.lerp(color, color.a).with_alpha(1.0)
            row[x] = color.to_rgba_bytes()

    logger.info("Rendered %dx%d texture", width, height)
    return Image.fromarray(rgba)


def render_signal(signal, width=256, height=256):
    """Render a signal as a grayscale image.

    Values are clamped to [0, 1] and scaled to 0-255.

    Returns:
        PIL Image in L mode.
    """
    _check_size(width, height)
    signal = as_signal(signal)
    logger.debug("Rendering %r at %dx%d", signal, width, height)

    us = _pixel_centers(width)
    vs = _pixel_centers(height)
    values = np.zeros((height, width), dtype=np.float64)
    for y, v in enumerate(vs):
        for x, u in enumerate(us):
            values[y, x] = signal.value_at(float(u), float(v))

    gray = np.clip(values * 255, 0, 255).round().astype(np.uint8)
    return Image.fromarray(gray)
