"""
Game of Life Universe - Conway's B3/S23 on a fixed toroidal grid

The grid is a flat, row-major buffer of one byte per cell (0 dead,
1 alive). Every step computes the whole next generation from the
previous buffer, then swaps it in, so no cell ever sees a neighbor
that was already updated in the same generation.

Each step is timed with a wall-clock counter; the cost of the most
recent step is kept in `last_step_duration_ms` for display.
"""

import dataclasses
import enum
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .engine_base import GridEngine


WIDTH = 50
HEIGHT = 50

# Signed Moore offsets; -1 is the same as adding size - 1 then wrapping.
_OFFSETS = tuple(
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)
)


class Cell(enum.IntEnum):
    DEAD = 0
    ALIVE = 1


@dataclass
class UniverseConfig:
    width: int = WIDTH
    height: int = HEIGHT
    density: float = 0.5
    seed: Optional[int] = None


def next_state(cell, live_neighbors):
    """Apply the B3/S23 rule table to a single cell."""
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"Live neighbor count must be 0-8, got {live_neighbors}")
    cell = Cell(cell)
    if cell is Cell.ALIVE:
        if live_neighbors < 2:
            return Cell.DEAD   # underpopulation
        if live_neighbors in (2, 3):
            return Cell.ALIVE  # survives
        return Cell.DEAD       # overpopulation
    if live_neighbors == 3:
        return Cell.ALIVE      # reproduction
    return cell


def count_neighbors(grid):
    """Count Moore neighborhood (8 neighbors) using np.roll with periodic boundaries."""
    grid = np.asarray(grid, dtype=np.uint8)
    n = np.zeros(grid.shape, dtype=np.uint8)
    for dy, dx in _OFFSETS:
        n += np.roll(np.roll(grid, dy, axis=0), dx, axis=1)
    return n


def _check_density(density):
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be within [0, 1], got {density}")


class Universe(GridEngine):

    engine_label = "Game of Life"

    def __init__(self, config=None, **overrides):
        """
        Args:
            config: UniverseConfig; defaults to a random 50x50 grid
            **overrides: field overrides applied on top of config
                (width, height, density, seed)
        """
        config = config or UniverseConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        super().__init__(config.width, config.height)
        _check_density(config.density)
        self.config = config
        self.rng = np.random.default_rng(config.seed)
        self.last_step_duration_ms = 0.0
        self._commit(self._random_cells(config.density))

    @classmethod
    def new(cls):
        """Random 50x50 universe."""
        return cls()

    @classmethod
    def from_cells(cls, width, height, cells, density=0.5, seed=None):
        """Build a universe from an explicit starting buffer.

        Args:
            width, height: Grid dimensions
            cells: Flat row-major sequence of length width*height, or a
                (height, width) array, holding only 0 and 1
            density, seed: Used by later calls to seed()
        """
        universe = cls(width=width, height=height, density=density, seed=seed)
        arr = np.asarray(cells)
        if arr.shape not in ((width * height,), (height, width)):
            raise ValueError(
                f"Expected {width * height} cells or shape ({height}, {width}), "
                f"got shape {arr.shape}")
        if not np.isin(arr, (Cell.DEAD, Cell.ALIVE)).all():
            raise ValueError("Cell values must be 0 (dead) or 1 (alive)")
        universe._commit(arr.astype(np.uint8).reshape(-1))
        return universe

    def _random_cells(self, density):
        return (self.rng.random(self._width * self._height) < density).astype(np.uint8)

    def _commit(self, buffer):
        # Readers keep the old generation; the buffer itself is never written again.
        if buffer.base is not None:
            buffer = buffer.copy()
        buffer.flags.writeable = False
        self._cells = buffer

    def index(self, row, col):
        """Row-major index of (row, col)."""
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self._width}x{self._height} grid")
        return row * self._width + col

    def neighbor_count(self, row, col):
        """Live cells among the 8 neighbors of (row, col), wrapping at the edges."""
        self.index(row, col)
        count = 0
        for dy, dx in _OFFSETS:
            r = (row + dy) % self._height
            c = (col + dx) % self._width
            count += int(self._cells[r * self._width + c])
        return count

    def step(self):
        """Advance one generation. Returns the elapsed time in milliseconds."""
        start = time.perf_counter()

        current = self._cells.reshape(self._height, self._width)
        neighbors = count_neighbors(current)
        alive = current.astype(bool)

        born = ~alive & (neighbors == 3)
        survives = alive & ((neighbors == 2) | (neighbors == 3))
        self._commit((born | survives).astype(np.uint8).reshape(-1))

        self.generation += 1
        self.last_step_duration_ms = (time.perf_counter() - start) * 1000.0
        return self.last_step_duration_ms

    def cells(self):
        """Read-only flat view of the current generation.

        The view stays valid until the next step, which installs a new
        buffer; an old view keeps showing the generation it was taken from.
        """
        return self._cells.view()

    def grid(self):
        """Read-only (height, width) view of the current generation."""
        return self._cells.reshape(self._height, self._width)

    def snapshot(self):
        """Writeable copy of the current generation."""
        return self._cells.copy()

    def seed(self, density=None, seed=None):
        """Re-randomize every cell and restart the generation count."""
        if density is None:
            density = self.config.density
        _check_density(density)
        if seed is not None:
            self.rng = np.random.default_rng(seed)
        self.config = dataclasses.replace(self.config, density=density)
        self._commit(self._random_cells(density))
        self.generation = 0
        self.last_step_duration_ms = 0.0

    def clear(self):
        self._commit(np.zeros(self._width * self._height, dtype=np.uint8))
        self.generation = 0
        self.last_step_duration_ms = 0.0

    def get_params(self):
        return {
            "width": self._width,
            "height": self._height,
            "density": self.config.density,
        }

    @property
    def stats(self):
        alive_count = int(self._cells.sum())
        total = self._width * self._height
        return {
            "generation": self.generation,
            "alive": alive_count,
            "alive_pct": alive_count / total * 100,
            "last_step_ms": self.last_step_duration_ms,
        }

    def __repr__(self):
        return (f"Universe({self._width}x{self._height}, "
                f"generation={self.generation})")
