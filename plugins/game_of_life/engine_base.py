"""
Abstract Base Class for Grid Engines

The Universe implements this interface so the viewer and the CLI can
drive it without knowing how the grid is stored or updated.
"""

from abc import ABC, abstractmethod
import numbers


class GridEngine(ABC):
    """Base class for fixed-size grid engines."""

    engine_label = ""  # e.g. "Game of Life"

    def __init__(self, width, height):
        if not all(isinstance(d, numbers.Integral) and not isinstance(d, bool)
                   for d in (width, height)):
            raise ValueError(
                f"Grid dimensions must be integers, got {width!r}x{height!r}")
        if width < 1 or height < 1:
            raise ValueError(
                f"Grid dimensions must be >= 1, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self.generation = 0

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @abstractmethod
    def step(self):
        """Advance one generation. Returns the elapsed time in ms."""

    def step_n(self, n):
        """Advance n generations. Returns the list of per-step timings."""
        return [self.step() for _ in range(n)]

    @abstractmethod
    def seed(self, density=None, seed=None):
        """Re-randomize the grid."""

    @abstractmethod
    def clear(self):
        """Kill every cell."""

    @abstractmethod
    def get_params(self):
        """Return dict of current parameter values."""

    @property
    @abstractmethod
    def stats(self):
        """Return current grid statistics."""
