from typing import List, Tuple

from .tiles import Tile

Coord = Tuple[int, int]
Grid = List[List[Tile]]


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def iter_coords(rows: int, columns: int):
    for r in range(rows):
        for c in range(columns):
            yield (r, c)


__all__ = ["Coord", "Grid", "in_bounds", "iter_coords"]
