"""Color textures: pure functions from a UV coordinate to a Color.

Leaves produce colors directly (solid, image lookup, signal through a
gradient); composites pick between or mix several child textures;
filters recolor one child. Any child that is omitted (None) is
replaced by ``ABSENT_TEXTURE``, which is opaque black.

Mixing uses a plain per-channel lerp, alpha included. It is *not*
Porter-Duff "over": mixing an opaque and a transparent color at 0.5
gives alpha 0.5.
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from .color import BLACK, Color
from .gradient import GRAYSCALE, ColorGradient
from .interpolation import clamp_value
from .signals import ConstantSignal, Signal, as_signal


class Texture(ABC):
    """Base class for every color node."""

    @abstractmethod
    def color_at(self, u, v):
        """Return the Color at (u, v)."""

    def __repr__(self):
        return f"{type(self).__name__}()"


def as_texture(child):
    """Return child, or the absent texture when child is None.

    A bare Color is accepted as shorthand for a SolidTexture.

    Raises:
        TypeError: If child is not None, a Color or a Texture.
    """
    if child is None:
        return ABSENT_TEXTURE
    if isinstance(child, Color):
        return SolidTexture(child)
    if not isinstance(child, Texture):
        raise TypeError(f"expected a Texture, got {type(child).__name__}")
    return child


def evaluate_color(texture, u, v):
    """Evaluate a texture tree at (u, v). None evaluates as opaque black."""
    return as_texture(texture).color_at(u, v)


def _weight_signal(ratio, name):
    if isinstance(ratio, Signal):
        return ratio
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {ratio!r}")
    return ConstantSignal(ratio)


# ---------------------------------------------------------------------------
# Leaf generators
# ---------------------------------------------------------------------------

class SolidTexture(Texture):
    """One color everywhere."""

    def __init__(self, color):
        if not isinstance(color, Color):
            raise TypeError(f"expected a Color, got {type(color).__name__}")
        self.color = color

    def color_at(self, u, v):
        return self.color

    def __repr__(self):
        return f"SolidTexture({self.color!r})"


class AbsentTexture(SolidTexture):
    """Stand-in for a missing child; always opaque black."""

    def __init__(self):
        super().__init__(BLACK)

    def __repr__(self):
        return "ABSENT_TEXTURE"


ABSENT_TEXTURE = AbsentTexture()


class ImageTexture(Texture):
    """Colors supplied by an external lookup.

    Args:
        lookup: Callable taking (u, v) and returning a Color. It receives
            coordinates unchanged, so out-of-range handling is its own.
    """

    def __init__(self, lookup):
        if not callable(lookup):
            raise TypeError("image lookup must be callable")
        self.lookup = lookup

    def color_at(self, u, v):
        return self.lookup(u, v)

    @classmethod
    def from_image(cls, image):
        """Build a nearest-pixel lookup over a Pillow image.

        The pixels are copied into a read-only array, so later edits to
        the image do not affect the texture. Coordinates wrap, so the
        image tiles outside [0, 1].
        """
        pixels = np.array(image.convert("RGBA"), dtype=np.uint8)
        pixels.setflags(write=False)
        height, width = pixels.shape[:2]

        def lookup(u, v):
            # Overflowed coordinates sample the first pixel
            u = u % 1.0 if math.isfinite(u) else 0.0
            v = v % 1.0 if math.isfinite(v) else 0.0
            x = int(math.floor(u * width)) % width
            y = int(math.floor(v * height)) % height
            r, g, b, a = pixels[y, x]
            return Color(int(r), int(g), int(b), a / 255.0)

        return cls(lookup)


class GradientTexture(Texture):
    """Color a signal through a gradient.

    Gradient lookups clamp to the endpoint stops, so any signal value is
    safe.
    """

    def __init__(self, signal=None, gradient=GRAYSCALE):
        if not isinstance(gradient, ColorGradient):
            raise TypeError(f"expected a ColorGradient, got {type(gradient).__name__}")
        self.signal = as_signal(signal)
        self.gradient = gradient

    def color_at(self, u, v):
        return self.gradient.color_at(self.signal.value_at(u, v))

    def __repr__(self):
        return f"GradientTexture({self.signal!r})"


class ChannelTexture(Texture):
    """Build a color from one signal per channel.

    Signal values are clamped to [0, 1] and scaled to the channel range.
    An absent red, green or blue channel is 0; an absent alpha is opaque.
    """

    def __init__(self, red=None, green=None, blue=None, alpha=None):
        self.red = as_signal(red)
        self.green = as_signal(green)
        self.blue = as_signal(blue)
        self.alpha = ConstantSignal(1.0) if alpha is None else as_signal(alpha)

    def color_at(self, u, v):
        return Color(
            clamp_value(self.red.value_at(u, v)) * 255,
            clamp_value(self.green.value_at(u, v)) * 255,
            clamp_value(self.blue.value_at(u, v)) * 255,
            self.alpha.value_at(u, v),
        )


class Gradient2DTexture(Texture):
    """Map a pair of signals through two gradients and mix them evenly.

    The x signal picks a color from gradient_x, the y signal one from
    gradient_y; the result is their 50/50 lerp.
    """

    def __init__(self, signal_x=None, signal_y=None,
                 gradient_x=GRAYSCALE, gradient_y=GRAYSCALE):
        for gradient in (gradient_x, gradient_y):
            if not isinstance(gradient, ColorGradient):
                raise TypeError(
                    f"expected a ColorGradient, got {type(gradient).__name__}")
        self.signal_x = as_signal(signal_x)
        self.signal_y = as_signal(signal_y)
        self.gradient_x = gradient_x
        self.gradient_y = gradient_y

    def color_at(self, u, v):
        cx = self.gradient_x.color_at(self.signal_x.value_at(u, v))
        cy = self.gradient_y.color_at(self.signal_y.value_at(u, v))
        return cx.lerp(cy, 0.5)


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------

class MergeTexture(Texture):
    """Pick first or second per coordinate from a mask signal.

    second is used where the mask reaches cutoff, first elsewhere. Only
    the chosen child is evaluated.
    """

    def __init__(self, first=None, second=None, mask=None, cutoff=0.5):
        self.first = as_texture(first)
        self.second = as_texture(second)
        self.mask = as_signal(mask)
        self.cutoff = cutoff

    def color_at(self, u, v):
        if self.mask.value_at(u, v) >= self.cutoff:
            return self.second.color_at(u, v)
        return self.first.color_at(u, v)


class MultiMergeTexture(Texture):
    """Pick one of N textures per coordinate from a selector signal.

    The selector value is clamped to [0, 1] and split into N equal
    bands; the top band includes 1.
    """

    def __init__(self, textures, selector=None):
        self.textures = tuple(as_texture(t) for t in textures)
        if not self.textures:
            raise ValueError("MultiMergeTexture needs at least one texture")
        self.selector = as_signal(selector)

    def color_at(self, u, v):
        count = len(self.textures)
        value = clamp_value(self.selector.value_at(u, v))
        index = min(int(value * count), count - 1)
        return self.textures[index].color_at(u, v)


class MixTexture(Texture):
    """Lerp every channel, alpha included, from first to second.

    Args:
        ratio: Fixed weight in [0, 1] for second, or a Signal whose value
            (clamped to [0, 1]) is the weight at each coordinate.
    """

    def __init__(self, first=None, second=None, ratio=0.5):
        self.first = as_texture(first)
        self.second = as_texture(second)
        self.ratio = _weight_signal(ratio, "mix ratio")

    def color_at(self, u, v):
        t = clamp_value(self.ratio.value_at(u, v))
        return self.first.color_at(u, v).lerp(self.second.color_at(u, v), t)


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

class FilterTexture(Texture):
    """A node recoloring the output of a single child."""

    def __init__(self, child=None):
        self.child = as_texture(child)

    def color_at(self, u, v):
        return self.filter(self.child.color_at(u, v))

    @abstractmethod
    def filter(self, color):
        """Map the child's color to this node's color."""

    def __repr__(self):
        return f"{type(self).__name__}({self.child!r})"


class NegateTexture(FilterTexture):
    """Invert RGB, keep alpha."""

    def filter(self, color):
        return color.negate()


class TintTexture(FilterTexture):
    """Pull the child's RGB towards tint by strength; alpha is kept."""

    def __init__(self, child=None, tint=BLACK, strength=0.5):
        super().__init__(child)
        if not 0.0 <= strength <= 1.0:
            raise ValueError(f"tint strength must be in [0, 1], got {strength!r}")
        if not isinstance(tint, Color):
            raise TypeError(f"expected a Color tint, got {type(tint).__name__}")
        self.tint = tint
        self.strength = strength

    def filter(self, color):
        tinted = color.lerp(self.tint, self.strength)
        return tinted.with_alpha(color.a)


class BrightnessTexture(FilterTexture):
    """Scale RGB by a non-negative factor."""

    def __init__(self, child=None, factor=1.0):
        super().__init__(child)
        if factor < 0:
            raise ValueError(f"brightness factor must be non-negative, got {factor!r}")
        self.factor = factor

    def filter(self, color):
        return color.scale(self.factor)
