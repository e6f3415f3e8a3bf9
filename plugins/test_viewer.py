"""Tests for the viewer's display-free parts (no window is opened)."""

import numpy as np
import pytest

pytest.importorskip("pygame")

from game_of_life.patterns import pattern_cells
from game_of_life.universe import Universe
from game_of_life.viewer import ALIVE_COLOR, DEAD_COLOR, Viewer


def test_render_colors_cells():
    u = Universe.from_cells(6, 4, pattern_cells("block", 6, 4))
    rgb = Viewer(u).render()
    assert rgb.shape == (4, 6, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[1, 2]) == ALIVE_COLOR
    assert tuple(rgb[0, 0]) == DEAD_COLOR
    assert (rgb == ALIVE_COLOR).all(axis=2).sum() == 4


def test_hud_line():
    u = Universe(width=20, height=10, seed=1)
    viewer = Viewer(u)
    u.step()
    line = viewer.hud_line()
    assert line.startswith("Game of Life")
    assert "Gen: 1" in line
    assert "20x10" in line
    assert "ms" in line
    viewer.paused = True
    assert viewer.hud_line().startswith("[PAUSED]")


if __name__ == "__main__":
    print("\n=== Testing Viewer ===\n")

    test_render_colors_cells()
    test_hud_line()

    print("\n✓ All tests passed!\n")
