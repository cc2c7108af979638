"""Public maze package interface: tiles, configuration, generator and pipeline."""

from .cells import Coord, Grid, in_bounds  # noqa: F401
from .config import MIN_DIMENSION, MazeConfig  # noqa: F401
from .generator import MazeGenerator, PlacementBudgets, carve_path, compute_budgets  # noqa: F401
from .pipeline import Maze  # noqa: F401
from .render import render_grid  # noqa: F401
from .tiles import EMPTY, EXIT, WALL, Tile, TileKind  # noqa: F401

__all__ = [
    "Coord",
    "Grid",
    "in_bounds",
    "MIN_DIMENSION",
    "MazeConfig",
    "MazeGenerator",
    "PlacementBudgets",
    "carve_path",
    "compute_budgets",
    "Maze",
    "render_grid",
    "EMPTY",
    "EXIT",
    "WALL",
    "Tile",
    "TileKind",
]
