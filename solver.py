"""Top-level hill-climbing solve interface.

Expose `solve_puzzle(puzzle)` that accepts a pre-built HeightMap, raw grid text,
or a puzzle record dictionary as produced by `src.hills.loader.load_puzzles`.
"""

from typing import Any, Dict, Optional

from src.hills.model import HeightMap
from src.hills.parser import parse_heightmap
from src.hills.pathfinder import climb_to_summit, descend_to_lowland
from src.utils.trace import Tracer


def solve_puzzle(puzzle: Any, tracer: Optional[Tracer] = None) -> Dict[str, int]:
    """
    Solve a puzzle and return both answers:
      - "summit": fewest steps from S to E
      - "trailhead": fewest steps from any lowest cell to E
    Both walks log into `tracer` when one is given.
    Raises NoPathError when either walk finds no path.
    """
    if isinstance(puzzle, HeightMap):
        heightmap = puzzle
    elif isinstance(puzzle, str):
        heightmap = parse_heightmap(puzzle)
    elif isinstance(puzzle, dict):
        heightmap = parse_heightmap(puzzle.get("grid", ""))
    else:
        raise TypeError("solve_puzzle expects a HeightMap, grid text or puzzle dictionary")

    return {
        "summit": climb_to_summit(heightmap, tracer=tracer),
        "trailhead": descend_to_lowland(heightmap, tracer=tracer),
    }


__all__ = ["solve_puzzle"]
