"""Key-point curves sampled into lookup tables for fast evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise


class Interpolation(Enum):
    """How the points between two key points are produced."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass
class BatchedCurve:
    """A curve sampled at evenly spaced steps."""

    points: list[float]

    def get(self, t: float) -> float:
        """Value at `t` in 0..1, interpolated between the two nearest samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A piecewise curve through key points `(x, y)` with x rising from 0 to 1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve every `1 / resolution` along x."""
        if self.interpolation is not Interpolation.LINEAR:
            raise ValueError(f"{self.interpolation.name} interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in pairwise(self.points):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(samples)