"""Multi-stop color gradients mapping a scalar position to a Color."""

from .color import Color
from .interpolation import get_blend


class ColorGradient:
    """An ordered list of (position, Color) stops.

    Stops are sorted by position; the sort is stable, so stops sharing a
    position keep the order they were given in.

    Args:
        stops: Iterable of (position, Color) pairs. Must not be empty.
        blend: Channel blend used between stops, by name or callable.
            Cosine by default.

    Raises:
        ValueError: If there are no stops or the blend is unknown.
    """

    def __init__(self, stops, blend="cosine"):
        stops = sorted(
            ((float(position), color) for position, color in stops),
            key=lambda stop: stop[0],
        )
        if not stops:
            raise ValueError("a gradient needs at least one stop")
        for _, color in stops:
            if not isinstance(color, Color):
                raise ValueError(f"gradient stop color must be a Color, got {color!r}")
        self.stops = tuple(stops)
        self.blend = get_blend(blend)

    def __repr__(self):
        return f"ColorGradient({list(self.stops)!r})"

    def __len__(self):
        return len(self.stops)

    def color_at(self, position):
        """Return the color at position.

        Positions before the first stop or after the last return that
        endpoint's color unchanged. Between stops, the first ascending
        pair enclosing the position is blended; a zero-width pair
        resolves to its lower stop.
        """
        first_pos, first_color = self.stops[0]
        last_pos, last_color = self.stops[-1]
        if position <= first_pos:
            return first_color
        if position >= last_pos:
            return last_color

        for (p0, c0), (p1, c1) in zip(self.stops, self.stops[1:]):
            if p0 <= position <= p1:
                if p1 == p0:
                    return c0
                t = (position - p0) / (p1 - p0)
                return c0.lerp(c1, t, blend=self.blend)

        # NaN positions fail every comparison above
        return first_color


def _hex_stops(*pairs):
    return [(position, Color.from_hex(text)) for position, text in pairs]


GRAYSCALE = ColorGradient(_hex_stops((0.0, "#000000"), (1.0, "#ffffff")))

SPECTRUM = ColorGradient(_hex_stops(
    (0.0, "#ff0000"),
    (1 / 6, "#ffff00"),
    (2 / 6, "#00ff00"),
    (3 / 6, "#00ffff"),
    (4 / 6, "#0000ff"),
    (5 / 6, "#ff00ff"),
    (1.0, "#ff0000"),
))

FIRE = ColorGradient(_hex_stops(
    (0.0, "#000000"),
    (0.3, "#8b0000"),
    (0.55, "#ff4500"),
    (0.8, "#ffd700"),
    (1.0, "#ffffe0"),
))

OCEAN = ColorGradient(_hex_stops(
    (0.0, "#000c2a"),
    (0.4, "#0b3d91"),
    (0.75, "#1e90ff"),
    (1.0, "#e0ffff"),
))

EARTH = ColorGradient(_hex_stops(
    (0.0, "#1a3c8c"),
    (0.45, "#3a78c8"),
    (0.5, "#e3d59b"),
    (0.55, "#4f9a3a"),
    (0.75, "#2e6420"),
    (0.9, "#7a6a58"),
    (1.0, "#ffffff"),
))

PRESETS = {
    "grayscale": GRAYSCALE,
    "spectrum": SPECTRUM,
    "fire": FIRE,
    "ocean": OCEAN,
    "earth": EARTH,
}


def preset(name):
    """Look up a preset gradient by name.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"unknown gradient preset {name!r}, expected one of {sorted(PRESETS)}"
        ) from None
