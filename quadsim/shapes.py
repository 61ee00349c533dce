"""Emission regions, particle meshes and sprite-sheet layouts."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from quadsim.geometry import Vec2

_WHITE_RGBA = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class PointEmission:
    """Particles start exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        """Offset from the emitter position: always zero."""
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectEmission:
    """Particles start anywhere inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        """Uniformly distributed offset inside the rectangle."""
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission:
    """Particles start anywhere inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        """Uniformly distributed offset inside the disc."""
        ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return Vec2(ro * math.cos(phi), ro * math.sin(phi))


EmissionShape = PointEmission | RectEmission | SphereEmission


@dataclass(frozen=True)
class RectangleShape:
    """A quad of half-height 1 whose half-width is `aspect_ratio`."""

    aspect_ratio: float = 1.0

    def geometry(self) -> tuple[list[float], list[int]]:
        """Vertices (position, uv, color per vertex) and triangle indices."""
        a = self.aspect_ratio
        corners = [
            (-a, -1.0, 0.0, 0.0),
            (a, -1.0, 1.0, 0.0),
            (a, 1.0, 1.0, 1.0),
            (-a, 1.0, 0.0, 1.0),
        ]
        vertices: list[float] = []
        for x, y, u, v in corners:
            vertices.extend((x, y, 0.0, u, v, *_WHITE_RGBA))
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleShape:
    """A unit disc made of a fan of `subdivisions` triangles."""

    subdivisions: int

    def __post_init__(self) -> None:
        if self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")

    def geometry(self) -> tuple[list[float], list[int]]:
        """Centre vertex followed by the rim vertices, and the fan indices."""
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, *_WHITE_RGBA]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx = math.cos(angle)
            ry = math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, *_WHITE_RGBA))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return vertices, indices


@dataclass(frozen=True)
class CustomMeshShape:
    """A user-supplied mesh in the same vertex layout as the built-in shapes."""

    vertices: tuple[float, ...] = field(default_factory=tuple)
    indices: tuple[int, ...] = field(default_factory=tuple)

    def geometry(self) -> tuple[list[float], list[int]]:
        """Copies of the supplied vertices and indices."""
        return list(self.vertices), list(self.indices)


ParticleShape = RectangleShape | CircleShape | CustomMeshShape


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet of `n` columns by `m` rows, animated over a frame range."""

    n: int
    m: int
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas must have at least one row and one column")

    @classmethod
    def from_range(cls, n: int, m: int, start: int | None = None,
                   stop: int | None = None) -> AtlasConfig:
        """Atlas animating frames `start` up to (not including) `stop`.

        A missing start means the first frame; a missing stop means past the last.
        """
        return cls(
            n=n,
            m=m,
            start_index=0 if start is None else start,
            end_index=n * m if stop is None else stop,
        )

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle `(u, v, width, height)` of a frame."""
        column = frame % self.n
        row = frame // self.n
        return (column / self.n, row / self.m, 1.0 / self.n, 1.0 / self.m)