"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class CellState(Enum):
    """State of one cell."""

    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        if neighbors < 2 or neighbors > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE
    return cell


_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass
class LifeGrid:
    """A `width` by `height` grid whose cells are stored row by row.

    Cells outside the grid count as dead; the edges do not wrap.
    """

    width: int
    height: int
    cells: list[CellState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if not self.cells:
            self.cells = [CellState.DEAD] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random | None = None) -> LifeGrid:
        """A grid where each cell is alive with probability one in five."""
        rng = rng if rng is not None else random.Random()
        cells = [
            CellState.ALIVE if rng.randrange(0, 5) == 0 else CellState.DEAD
            for _ in range(width * height)
        ]
        return cls(width, height, cells)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, position: tuple[int, int]) -> CellState:
        x, y = position
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self.cells[y * self.width + x]

    def __setitem__(self, position: tuple[int, int], state: CellState) -> None:
        x, y = position
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self.cells[y * self.width + x] = state

    def alive_cells(self) -> Iterator[tuple[int, int]]:
        """Coordinates of every live cell, row by row."""
        for index, cell in enumerate(self.cells):
            if cell is CellState.ALIVE:
                yield index % self.width, index // self.width

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the eight around `(x, y)`."""
        return sum(
            1
            for dx, dy in _OFFSETS
            if self._in_bounds(x + dx, y + dy)
            and self.cells[(y + dy) * self.width + x + dx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            next_state(self.cells[y * self.width + x], self.neighbors(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]