"""
Named Game of Life Patterns

Each pattern lists the (row, col) offsets of its live cells, relative
to the top-left corner of its bounding box. The "kind" field groups
patterns for listing (still_life, oscillator, spaceship, methuselah).
"""

import numpy as np


PATTERNS = {
    # =====================================================================
    # STILL LIFES
    # =====================================================================
    "block": {
        "kind": "still_life",
        "name": "Block",
        "description": "2x2 square, the smallest still life",
        "cells": [(0, 0), (0, 1), (1, 0), (1, 1)],
    },
    "beehive": {
        "kind": "still_life",
        "name": "Beehive",
        "description": "Six-cell hexagonal still life",
        "cells": [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
    },
    "loaf": {
        "kind": "still_life",
        "name": "Loaf",
        "description": "Seven-cell still life",
        "cells": [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
    },

    # =====================================================================
    # OSCILLATORS
    # =====================================================================
    "blinker": {
        "kind": "oscillator",
        "name": "Blinker",
        "description": "Period 2, flips between a row and a column of three",
        "cells": [(0, 0), (0, 1), (0, 2)],
    },
    "toad": {
        "kind": "oscillator",
        "name": "Toad",
        "description": "Period 2, two offset rows of three",
        "cells": [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
    },
    "beacon": {
        "kind": "oscillator",
        "name": "Beacon",
        "description": "Period 2, two diagonal blocks blinking at the corners",
        "cells": [(0, 0), (0, 1), (1, 0), (1, 1),
                  (2, 2), (2, 3), (3, 2), (3, 3)],
    },

    # =====================================================================
    # SPACESHIPS
    # =====================================================================
    "glider": {
        "kind": "spaceship",
        "name": "Glider",
        "description": "Moves one cell diagonally every 4 generations",
        "cells": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    },
    "lwss": {
        "kind": "spaceship",
        "name": "Lightweight Spaceship",
        "description": "Moves two cells horizontally every 4 generations",
        "cells": [(0, 1), (0, 4), (1, 0), (2, 0), (2, 4),
                  (3, 0), (3, 1), (3, 2), (3, 3)],
    },

    # =====================================================================
    # METHUSELAHS
    # =====================================================================
    "r_pentomino": {
        "kind": "methuselah",
        "name": "R-pentomino",
        "description": "Five cells that keep evolving for over a thousand generations",
        "cells": [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
    },
}

PATTERN_ORDER = [
    "block", "beehive", "loaf",
    "blinker", "toad", "beacon",
    "glider", "lwss",
    "r_pentomino",
]

KIND_ORDER = ["still_life", "oscillator", "spaceship", "methuselah"]


def get_pattern(name):
    """Get a pattern by name. Returns None if not found."""
    return PATTERNS.get(name)


def list_patterns(kind=None):
    """Return list of (key, name, description) for patterns.
    If kind is specified, filter to that kind only."""
    return [(k, PATTERNS[k]["name"], PATTERNS[k]["description"])
            for k in PATTERN_ORDER
            if kind is None or PATTERNS[k]["kind"] == kind]


def pattern_size(name):
    """Return the (rows, cols) bounding box of a pattern."""
    pattern = PATTERNS[name]
    rows = max(r for r, _ in pattern["cells"]) + 1
    cols = max(c for _, c in pattern["cells"]) + 1
    return rows, cols


def pattern_cells(name, width, height, row=None, col=None):
    """Place a pattern on an empty (height, width) grid.

    Args:
        name: Pattern key
        width, height: Grid dimensions
        row, col: Top-left corner of the bounding box (default: centered).
            Cells past an edge wrap around to the opposite edge.

    Raises:
        KeyError: unknown pattern
        ValueError: bounding box larger than the grid
    """
    if name not in PATTERNS:
        raise KeyError(f"Unknown pattern: {name!r}. "
                       f"Available: {', '.join(PATTERN_ORDER)}")
    rows, cols = pattern_size(name)
    if rows > height or cols > width:
        raise ValueError(
            f"Pattern {name!r} ({cols}x{rows}) does not fit a {width}x{height} grid")
    if row is None:
        row = (height - rows) // 2
    if col is None:
        col = (width - cols) // 2

    grid = np.zeros((height, width), dtype=np.uint8)
    for r, c in PATTERNS[name]["cells"]:
        grid[(row + r) % height, (col + c) % width] = 1
    return grid
