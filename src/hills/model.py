"""Elevation grid data structures."""

from dataclasses import dataclass
from typing import List, Tuple

START = "S"
END = "E"
LOWEST = 0
HIGHEST = ord("z") - ord("a")

Cell = Tuple[int, int]


def elevation_of(marker: str) -> int:
    """Map a grid character to its elevation: S is 0, E is 25, a-z are 0-25."""
    if marker == START:
        return LOWEST
    if marker == END:
        return HIGHEST
    if len(marker) == 1 and "a" <= marker <= "z":
        return ord(marker) - ord("a")
    raise ValueError(f"Unknown elevation marker {marker!r}")


@dataclass(frozen=True)
class HeightMap:
    rows: Tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def char_at(self, cell: Cell) -> str:
        row, col = cell
        return self.rows[row][col]

    def elevation(self, cell: Cell) -> int:
        return elevation_of(self.char_at(cell))

    def find(self, marker: str) -> Cell:
        for row_idx, row in enumerate(self.rows):
            col_idx = row.find(marker)
            if col_idx >= 0:
                return (row_idx, col_idx)
        raise ValueError(f"Marker {marker!r} not found in height map")

    def cells_at_elevation(self, elevation: int) -> List[Cell]:
        """All cells with the given elevation, in row-major order."""
        return [
            (row_idx, col_idx)
            for row_idx, row in enumerate(self.rows)
            for col_idx, marker in enumerate(row)
            if elevation_of(marker) == elevation
        ]
