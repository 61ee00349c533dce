"""Colors, color ramps and blend modes for particles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Color:
    """An RGBA color with float channels in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def lerp(self, other: Color, t: float) -> Color:
        """Blend toward `other`: `self * (1 - t) + other * t`, channel by channel."""
        return Color(
            *(mine * (1.0 - t) + theirs * t for mine, theirs in zip(self, other))
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Three-stop color ramp over a particle's lifetime."""

    start: Color = field(default=WHITE)
    mid: Color = field(default=WHITE)
    end: Color = field(default=WHITE)

    def at(self, t: float) -> Color:
        """Color at lifetime fraction `t`: start to mid over the first half, then to end."""
        if t < 0.5:
            return self.start.lerp(self.mid, t * 2.0)
        return self.mid.lerp(self.end, (t - 0.5) * 2.0)


class BlendMode(Enum):
    """How overlapping particles combine."""

    ALPHA = "alpha"
    ADDITIVE = "additive"