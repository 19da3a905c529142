"""Scalar signals: pure functions from a UV coordinate to a value in [0, 1].

Signals form immutable trees. Leaves generate a value from (u, v);
unary modifiers transform one child's value; binary combiners merge two
children. Coordinate transforms live in ``transforms``. Any child that
is omitted (None) is replaced by ``ABSENT_SIGNAL``, which is always 0.
"""

import math
from abc import ABC, abstractmethod

from .interpolation import clamp_value, linear, smoothstep
from .noise import PerlinNoise, check_fractal_params


class Signal(ABC):
    """Base class for every scalar node."""

    @abstractmethod
    def value_at(self, u, v):
        """Return the scalar at (u, v)."""

    def __repr__(self):
        return f"{type(self).__name__}()"


def as_signal(child):
    """Return child, or the absent signal when child is None.

    Raises:
        TypeError: If child is neither None nor a Signal.
    """
    if child is None:
        return ABSENT_SIGNAL
    if not isinstance(child, Signal):
        raise TypeError(f"expected a Signal, got {type(child).__name__}")
    return child


def evaluate_scalar(signal, u, v):
    """Evaluate a signal tree at (u, v). None evaluates as absent (0.0)."""
    return as_signal(signal).value_at(u, v)


def _require_noise(noise):
    if not isinstance(noise, PerlinNoise):
        raise TypeError(f"expected a PerlinNoise, got {type(noise).__name__}")
    return noise


def _require_positive(name, value):
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Leaf generators
# ---------------------------------------------------------------------------

class ConstantSignal(Signal):
    """The same value everywhere, clamped to [0, 1] at construction."""

    def __init__(self, value):
        self.value = clamp_value(float(value))

    def value_at(self, u, v):
        return self.value

    def __repr__(self):
        return f"ConstantSignal({self.value})"


class AbsentSignal(ConstantSignal):
    """Stand-in for a missing child; always 0."""

    def __init__(self):
        super().__init__(0.0)

    def __repr__(self):
        return "ABSENT_SIGNAL"


ABSENT_SIGNAL = AbsentSignal()


class CoordinateSignal(Signal):
    """Returns u or v unchanged.

    Out-of-range coordinates pass straight through; nothing is clamped.
    """

    def __init__(self, axis="u"):
        if axis not in ("u", "v"):
            raise ValueError(f"axis must be 'u' or 'v', got {axis!r}")
        self.axis = axis

    def value_at(self, u, v):
        return u if self.axis == "u" else v

    def __repr__(self):
        return f"CoordinateSignal({self.axis!r})"


class LinearSignal(Signal):
    """A ramp along a direction, 0 at one edge of the unit square and 1 at
    the opposite one. Clamped outside the square."""

    def __init__(self, degrees=0.0):
        self.degrees = degrees
        rad = math.radians(degrees)
        self._dx = math.cos(rad)
        self._dy = math.sin(rad)
        # Projections of the unit square corners bound the ramp
        corners = [0.0, self._dx, self._dy, self._dx + self._dy]
        self._low = min(corners)
        self._span = max(corners) - self._low

    def value_at(self, u, v):
        projected = u * self._dx + v * self._dy
        return clamp_value((projected - self._low) / self._span)


class RadialSignal(Signal):
    """Distance from center divided by radius, clamped to [0, 1]."""

    def __init__(self, center=(0.5, 0.5), radius=0.5):
        self.center = (float(center[0]), float(center[1]))
        self.radius = _require_positive("radius", radius)

    def value_at(self, u, v):
        distance = math.hypot(u - self.center[0], v - self.center[1])
        return clamp_value(distance / self.radius)


class SineSignal(Signal):
    """Periodic wave (1 + sin) / 2.

    Args:
        frequency: Whole cycles per unit of the chosen axis.
        axis: "u", "v", or "uv" for a diagonal wave.
        phase: Phase offset in cycles.

    Wraps naturally outside [0, 1].
    """

    def __init__(self, frequency=1.0, axis="u", phase=0.0):
        if axis not in ("u", "v", "uv"):
            raise ValueError(f"axis must be 'u', 'v' or 'uv', got {axis!r}")
        self.frequency = _require_positive("frequency", frequency)
        self.axis = axis
        self.phase = phase

    def value_at(self, u, v):
        if self.axis == "u":
            t = u
        elif self.axis == "v":
            t = v
        else:
            t = u + v
        cycles = t * self.frequency + self.phase
        if not math.isfinite(cycles):
            cycles = 0.0
        # Whole cycles drop out; keeps sin() in range for huge t
        angle = 2.0 * math.pi * math.fmod(cycles, 1.0)
        return (1.0 + math.sin(angle)) / 2.0


class NoiseSignal(Signal):
    """Fractal Perlin noise remapped from [-1, 1] to [0, 1], then clamped.

    Args:
        noise: Shared PerlinNoise engine.
        frequency: Lattice cells per unit of u and v.
        octaves: Number of fractal layers.
        persistence: Amplitude decay per octave.
    """

    def __init__(self, noise, frequency=4.0, octaves=4, persistence=0.5):
        self.noise = _require_noise(noise)
        self.frequency = _require_positive("frequency", frequency)
        check_fractal_params(octaves, persistence)
        self.octaves = octaves
        self.persistence = persistence

    def value_at(self, u, v):
        n = self.noise.fractal(u * self.frequency, v * self.frequency,
                               self.octaves, self.persistence)
        return clamp_value((n + 1.0) / 2.0)


class TurbulenceSignal(NoiseSignal):
    """Sum of absolute noise octaves; sharp creases where noise crosses 0."""

    def value_at(self, u, v):
        n = self.noise.turbulence(u * self.frequency, v * self.frequency,
                                  self.octaves, self.persistence)
        return clamp_value(n)


class MandelbrotSignal(Signal):
    """Escape-time iteration count of the Mandelbrot set, normalized.

    (u, v) in [0, 1] maps onto a window of width 3/zoom around center.
    Points that never escape within max_iterations give 1. Coordinates
    outside [0, 1] just extend the window.
    """

    def __init__(self, max_iterations=64, center=(-0.5, 0.0), zoom=1.0):
        if not isinstance(max_iterations, int) or max_iterations < 1:
            raise ValueError(
                f"max_iterations must be a positive integer, got {max_iterations!r}")
        self.max_iterations = max_iterations
        self.center = (float(center[0]), float(center[1]))
        self.zoom = _require_positive("zoom", zoom)

    def value_at(self, u, v):
        size = 3.0 / self.zoom
        c = complex(self.center[0] + (u - 0.5) * size,
                    self.center[1] + (v - 0.5) * size)
        # Outside the radius-2 disk the first step already escapes
        if not (abs(c.real) <= 2.0 and abs(c.imag) <= 2.0):
            return 0.0
        z = 0j
        for i in range(self.max_iterations):
            z = z * z + c
            if z.real * z.real + z.imag * z.imag > 4.0:
                return i / self.max_iterations
        return 1.0


# ---------------------------------------------------------------------------
# Unary modifiers
# ---------------------------------------------------------------------------

class UnarySignal(Signal):
    """A node that transforms the value of a single child."""

    def __init__(self, child=None):
        self.child = as_signal(child)

    def value_at(self, u, v):
        return self.modify(self.child.value_at(u, v))

    @abstractmethod
    def modify(self, value):
        """Map the child's value to this node's value."""

    def __repr__(self):
        return f"{type(self).__name__}({self.child!r})"


class ScaleSignal(UnarySignal):
    """value * factor, clamped to [0, 1]."""

    def __init__(self, child=None, factor=1.0):
        super().__init__(child)
        self.factor = _require_positive("factor", factor)

    def modify(self, value):
        return clamp_value(value * self.factor)


class InvertSignal(UnarySignal):
    """1 - value, clamped to [0, 1] for children that leave the range."""

    def modify(self, value):
        return clamp_value(1.0 - value)


class ClampSignal(UnarySignal):
    """Restrict the child's value to [minimum, maximum]."""

    def __init__(self, child=None, minimum=0.0, maximum=1.0):
        super().__init__(child)
        if minimum > maximum:
            raise ValueError(
                f"clamp minimum {minimum!r} is greater than maximum {maximum!r}")
        self.minimum = minimum
        self.maximum = maximum

    def modify(self, value):
        return clamp_value(value, self.minimum, self.maximum)


class PowerSignal(UnarySignal):
    """value ** exponent, with the child value clamped to [0, 1] first."""

    def __init__(self, child=None, exponent=1.0):
        super().__init__(child)
        self.exponent = _require_positive("exponent", exponent)

    def modify(self, value):
        return clamp_value(value) ** self.exponent


class ThresholdSignal(UnarySignal):
    """Step to 1 where the child reaches cutoff, 0 below it.

    With a non-zero band the step becomes a smoothstep ramp across
    [cutoff - band / 2, cutoff + band / 2].
    """

    def __init__(self, child=None, cutoff=0.5, band=0.0):
        super().__init__(child)
        if band < 0:
            raise ValueError(f"band must be non-negative, got {band!r}")
        self.cutoff = cutoff
        self.band = band

    def modify(self, value):
        if self.band == 0:
            return 1.0 if value >= self.cutoff else 0.0
        low = self.cutoff - self.band / 2.0
        t = clamp_value((value - low) / self.band)
        return smoothstep(0.0, 1.0, t)


class BandPassSignal(UnarySignal):
    """Pass values inside [low, high] through; anything else becomes 0."""

    def __init__(self, child=None, low=0.0, high=1.0):
        super().__init__(child)
        if low > high:
            raise ValueError(f"band low {low!r} is greater than high {high!r}")
        self.low = low
        self.high = high

    def modify(self, value):
        if self.low <= value <= self.high:
            return value
        return 0.0


class JitterSignal(Signal):
    """Add amplitude * noise(u, v) to the child's value, clamped to [0, 1]."""

    def __init__(self, child, noise, amplitude=0.1, frequency=8.0):
        self.child = as_signal(child)
        self.noise = _require_noise(noise)
        self.amplitude = amplitude
        self.frequency = _require_positive("frequency", frequency)

    def value_at(self, u, v):
        value = self.child.value_at(u, v)
        offset = self.noise.noise(u * self.frequency, v * self.frequency)
        return clamp_value(value + self.amplitude * offset)

    def __repr__(self):
        return f"JitterSignal({self.child!r}, amplitude={self.amplitude})"


# ---------------------------------------------------------------------------
# Binary combiners
# ---------------------------------------------------------------------------

class BinarySignal(Signal):
    """A node combining the values of two children."""

    def __init__(self, first=None, second=None):
        self.first = as_signal(first)
        self.second = as_signal(second)

    def value_at(self, u, v):
        return self.combine(self.first.value_at(u, v),
                            self.second.value_at(u, v))

    @abstractmethod
    def combine(self, a, b):
        """Merge the two child values."""

    def __repr__(self):
        return f"{type(self).__name__}({self.first!r}, {self.second!r})"


class SumSignal(BinarySignal):
    """a + b, clamped to [0, 1]."""

    def combine(self, a, b):
        return clamp_value(a + b)


class MultiplySignal(BinarySignal):
    """a * b, clamped to [0, 1]."""

    def combine(self, a, b):
        return clamp_value(a * b)


class MinSignal(BinarySignal):

    def combine(self, a, b):
        return min(a, b)


class MaxSignal(BinarySignal):

    def combine(self, a, b):
        return max(a, b)


class BlendSignal(Signal):
    """Linear blend from first to second.

    Args:
        weight: Fixed float in [0, 1], or a Signal whose (clamped) value
            is used as the weight at each coordinate.
    """

    def __init__(self, first=None, second=None, weight=0.5):
        self.first = as_signal(first)
        self.second = as_signal(second)
        if isinstance(weight, Signal):
            self.weight = weight
        else:
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"blend weight must be in [0, 1], got {weight!r}")
            self.weight = ConstantSignal(weight)

    def value_at(self, u, v):
        t = clamp_value(self.weight.value_at(u, v))
        return linear(self.first.value_at(u, v), self.second.value_at(u, v), t)
