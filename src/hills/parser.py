"""Height map parser: convert puzzle text into a HeightMap."""

from __future__ import annotations

from typing import List

from .model import END, START, HeightMap, elevation_of


def parse_heightmap(text: str) -> HeightMap:
    """
    Parse a rectangular grid of `S`, `E` and `a`-`z` characters.
    Surrounding blank lines and trailing whitespace are ignored.
    """
    rows: List[str] = [line.rstrip() for line in str(text or "").splitlines()]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()

    if not rows:
        raise ValueError("Height map is empty")

    width = len(rows[0])
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Row {row_idx} has {len(row)} columns, expected {width}"
            )
        for col_idx, marker in enumerate(row):
            try:
                elevation_of(marker)
            except ValueError:
                raise ValueError(
                    f"Unexpected character {marker!r} at row {row_idx}, column {col_idx}"
                ) from None

    for marker in (START, END):
        count = sum(row.count(marker) for row in rows)
        if count != 1:
            raise ValueError(f"Expected exactly one {marker!r} marker, found {count}")

    return HeightMap(rows=tuple(rows))
