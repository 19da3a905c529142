"""RGBA color value type."""

from dataclasses import dataclass

from .interpolation import clamp_value, linear


def _channel(value):
    return int(round(clamp_value(value, 0, 255)))


@dataclass(frozen=True)
class Color:
    """An RGBA color.

    Red, green and blue are integers in [0, 255]; alpha is a float in
    [0, 1]. Values are rounded and clamped on construction, so any
    arithmetic that goes through Color stays in range.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "r", _channel(self.r))
        object.__setattr__(self, "g", _channel(self.g))
        object.__setattr__(self, "b", _channel(self.b))
        object.__setattr__(self, "a", float(clamp_value(self.a, 0.0, 1.0)))

    @classmethod
    def from_hex(cls, text):
        """Parse "#rrggbb" or "#rrggbbaa" (the leading # is optional)."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (6, 8):
            raise ValueError(f"invalid hex color {text!r}")
        try:
            values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"invalid hex color {text!r}") from None
        alpha = values[3] / 255.0 if len(values) == 4 else 1.0
        return cls(values[0], values[1], values[2], alpha)

    def lerp(self, other, t, blend=linear):
        """Blend every channel, alpha included, towards other."""
        return Color(
            blend(self.r, other.r, t),
            blend(self.g, other.g, t),
            blend(self.b, other.b, t),
            blend(self.a, other.a, t),
        )

    def negate(self):
        return Color(255 - self.r, 255 - self.g, 255 - self.b, self.a)

    def scale(self, factor):
        """Multiply RGB by factor; alpha is left alone."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)

    def with_alpha(self, alpha):
        return Color(self.r, self.g, self.b, alpha)

    def to_rgba_bytes(self):
        """Return (r, g, b, a) with alpha expressed as 0-255."""
        return (self.r, self.g, self.b, int(round(self.a * 255)))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0.0)
