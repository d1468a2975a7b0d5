"""Shortest climbs over a height map using the breadth-first walk engine."""

from typing import Callable, Optional

from src.walk import DistanceVisitor, Generator, Item, walk
from src.walk.model import Sink
from src.utils.trace import Tracer

from .model import END, LOWEST, START, Cell, HeightMap

# Successors are always enumerated down, right, up, left.
DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

Goal = Callable[[Cell], bool]


class NoPathError(RuntimeError):
    """Raised when a walk that must succeed exhausts its frontier."""


def can_step(current: int, target: int, uphill: bool) -> bool:
    """Uphill: climb at most one level. Downhill: the same move, reversed."""
    if uphill:
        return target <= current + 1
    return current <= target + 1


class StepGenerator(Generator):
    def __init__(self, heightmap: HeightMap, source: Item, uphill: bool):
        self.heightmap = heightmap
        self.source = source
        self.uphill = uphill

    def generate(self, sink: Sink) -> None:
        row, col = self.source.state
        current = self.heightmap.elevation((row, col))
        for drow, dcol in DIRECTIONS:
            target = (row + drow, col + dcol)
            if not self.heightmap.in_bounds(target):
                continue
            if can_step(current, self.heightmap.elevation(target), self.uphill):
                sink(self.source.advance(target))


class PathFinder(DistanceVisitor):
    """Stops at the first cell satisfying `goal`; deduplicates on the cell."""

    def __init__(self, heightmap: HeightMap, goal: Goal, uphill: bool = True):
        super().__init__()
        self.heightmap = heightmap
        self.goal = goal
        self.uphill = uphill

    def is_goal(self, item: Item) -> bool:
        return self.goal(item.state)

    def expand(self, item: Item) -> Generator:
        return StepGenerator(self.heightmap, item, self.uphill)


def _walk_from(
    heightmap: HeightMap,
    start: Cell,
    goal: Goal,
    uphill: bool,
    tracer: Optional[Tracer] = None,
) -> Optional[int]:
    finder = PathFinder(heightmap, goal, uphill=uphill)
    return walk(finder, Item(0, start), tracer=tracer)


def climb_to_summit(heightmap: HeightMap, tracer: Optional[Tracer] = None) -> int:
    """Fewest steps from S to E, climbing at most one level per step."""
    start = heightmap.find(START)
    summit = heightmap.find(END)
    steps = _walk_from(heightmap, start, lambda cell: cell == summit, True, tracer)
    if steps is None:
        raise NoPathError(f"There should be a path from {start} to {summit}")
    return steps


def descend_to_lowland(heightmap: HeightMap, tracer: Optional[Tracer] = None) -> int:
    """
    Fewest steps from any lowest cell to E, found by walking backward from E
    with the inverted step rule.
    """
    summit = heightmap.find(END)
    steps = _walk_from(
        heightmap,
        summit,
        lambda cell: heightmap.elevation(cell) == LOWEST,
        False,
        tracer,
    )
    if steps is None:
        raise NoPathError(f"There should be a path from {summit} down to elevation {LOWEST}")
    return steps


def best_trailhead_forward(heightmap: HeightMap, tracer: Optional[Tracer] = None) -> int:
    """Same answer as `descend_to_lowland`, by one forward walk per lowest cell."""
    summit = heightmap.find(END)
    best: Optional[int] = None
    for start in heightmap.cells_at_elevation(LOWEST):
        steps = _walk_from(heightmap, start, lambda cell: cell == summit, True, tracer)
        if steps is not None and (best is None or steps < best):
            best = steps
    if best is None:
        raise NoPathError(f"No cell at elevation {LOWEST} reaches {summit}")
    return best
