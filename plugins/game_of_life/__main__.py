"""
Game of Life - Entry Point

Usage:
    python -m game_of_life [pattern] [--size WxH] [--window WxH]
                           [--density P] [--seed N] [--headless N]

Examples:
    python -m game_of_life
    python -m game_of_life glider --size 20x20
    python -m game_of_life --seed 7 --headless 100
    python -m game_of_life r_pentomino --size 80x80 --window 800x800

Without a pattern the grid starts random (each cell alive with
probability --density, default 0.5). --headless runs N steps without
opening a window and prints the time spent in each step.

Use --list to see all available patterns.
"""

import sys

from .patterns import KIND_ORDER, PATTERNS, list_patterns, pattern_cells
from .universe import HEIGHT, WIDTH, Universe, UniverseConfig


def _parse_dims(value):
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Expected WxH, got {value!r}")
    return int(parts[0]), int(parts[1])


def build_universe(pattern, width, height, density, seed):
    """Random universe, or an empty one holding a centered pattern.

    density and seed apply to the random fill, and to later reseeds of a
    pattern universe.
    """
    if pattern is not None:
        return Universe.from_cells(width, height,
                                   pattern_cells(pattern, width, height),
                                   density=density, seed=seed)
    return Universe(UniverseConfig(width=width, height=height,
                                   density=density, seed=seed))


def headless(universe, steps):
    """Run N steps without a display, printing per-step timing."""
    print(f"[Life] Headless: {universe.width}x{universe.height}, {steps} steps")
    timings = []
    for _ in range(steps):
        ms = universe.step()
        timings.append(ms)
        stats = universe.stats
        print(f"  gen {stats['generation']:>6}: {ms:8.3f} ms  "
              f"alive {stats['alive']:>6} ({stats['alive_pct']:.1f}%)")
    if timings:
        total = sum(timings)
        print(f"[Life] Average step: {total / len(timings):.3f} ms")
        print(f"[Life] Total for {len(timings)} steps: {total:.3f} ms")
    return timings


def main(argv=None):
    pattern = None
    width, height = WIDTH, HEIGHT
    win_w, win_h = 600, 600
    density = 0.5
    seed = None
    headless_steps = 0

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--size" and i + 1 < len(args):
                width, height = _parse_dims(args[i + 1])
                i += 2
            elif arg == "--window" and i + 1 < len(args):
                win_w, win_h = _parse_dims(args[i + 1])
                i += 2
            elif arg == "--density" and i + 1 < len(args):
                density = float(args[i + 1])
                i += 2
            elif arg == "--seed" and i + 1 < len(args):
                seed = int(args[i + 1])
                i += 2
            elif arg == "--headless" and i + 1 < len(args):
                headless_steps = int(args[i + 1])
                i += 2
            elif arg == "--list":
                print("\nAvailable patterns:")
                for kind in KIND_ORDER:
                    print(f"\n  [{kind}]")
                    for key, name, desc in list_patterns(kind):
                        print(f"    {key:14s} {name:24s} {desc}")
                print()
                return 0
            elif arg in ("--help", "-h"):
                print(__doc__)
                return 0
            elif arg in PATTERNS:
                pattern = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print("Use --list to see available patterns")
                return 2

        universe = build_universe(pattern, width, height, density, seed)
    except (ValueError, KeyError) as e:
        print(f"[Life] {e}")
        return 2

    if headless_steps > 0:
        headless(universe, headless_steps)
        return 0

    print("Starting Game of Life Viewer")
    print(f"  Pattern: {pattern or 'random'}")
    print(f"  Grid: {width}x{height}")
    print(f"  Window: {win_w}x{win_h}")
    print()

    from .viewer import Viewer
    Viewer(universe, width=win_w, height=win_h).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
