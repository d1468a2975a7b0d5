"""Hill-climbing puzzle: parsing, dataset loading and shortest-climb search."""

from .model import HeightMap, elevation_of
from .parser import parse_heightmap
from .pathfinder import (
    NoPathError,
    PathFinder,
    StepGenerator,
    best_trailhead_forward,
    climb_to_summit,
    descend_to_lowland,
)

__all__ = [
    "HeightMap",
    "elevation_of",
    "parse_heightmap",
    "NoPathError",
    "PathFinder",
    "StepGenerator",
    "climb_to_summit",
    "descend_to_lowland",
    "best_trailhead_forward",
]
