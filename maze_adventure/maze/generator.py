"""Core generation phases: grid init, path carving, budgets and entity scatter.

Phases must run in order (each reads what the previous one wrote):
    init_grid -> carve_path -> place_player / place_exit -> compute_budgets
    -> place_walls -> place_monsters -> place_weapons -> place_potions

The carved path is a monotonic staircase from (0, 0) to the bottom-right
corner: every step goes down or right, so it never revisits a cell and always
terminates. Walls are never placed on path cells, which keeps the exit
reachable however the remaining cells are filled.
"""
from __future__ import annotations

import random
from typing import Callable, List, NamedTuple, Optional, Set

from ..errors import PlacementError
from ..loot import brew_potion, forge_weapon
from ..models import Player
from ..services.spawn_service import spawn_monster
from .cells import Coord, Grid, iter_coords
from .config import MazeConfig
from .tiles import EMPTY, EXIT, WALL, Tile, monster_tile, player_tile, potion_tile, weapon_tile


class PlacementBudgets(NamedTuple):
    walls: int
    monsters: int
    weapons: int
    potions: int


class GenerationOutputs(NamedTuple):
    grid: Grid
    path: List[Coord]
    budgets: PlacementBudgets
    player: Player
    player_position: Coord
    exit_position: Coord


def carve_path(rows: int, columns: int, rng: random.Random) -> List[Coord]:
    """Return the ordered, duplicate-free staircase path from (0,0) to (rows-1, columns-1)."""
    exit_row, exit_col = rows - 1, columns - 1
    row, col = 0, 0
    path = [(row, col)]
    seen = {(row, col)}
    while (row, col) != (exit_row, exit_col):
        vertical = rng.randrange(2) == 0
        if vertical and row < exit_row:
            row += 1
        elif col < exit_col:
            col += 1
        else:
            row += 1
        if (row, col) not in seen:
            seen.add((row, col))
            path.append((row, col))
    return path


def compute_budgets(rows: int, columns: int, path_length: int) -> PlacementBudgets:
    total = rows * columns
    non_path = total - path_length
    walls = min(total // 2, non_path // 2)
    remaining = non_path - walls
    return PlacementBudgets(walls=walls, monsters=remaining // 5, weapons=remaining // 10, potions=remaining // 10)


class MazeGenerator:
    def __init__(self, config: MazeConfig, rng: random.Random):
        self.config = config
        self.rows = config.rows
        self.columns = config.columns
        self.rng = rng
        self.grid: Grid = []
        self.path: List[Coord] = []
        self.path_cells: Set[Coord] = set()
        self.budgets: Optional[PlacementBudgets] = None
        self.player: Optional[Player] = None
        self.player_position: Coord = (0, 0)
        self.exit_position: Coord = (self.rows - 1, self.columns - 1)
        self.placement_attempts = 0

    def init_grid(self) -> Grid:
        self.grid = [[EMPTY for _ in range(self.columns)] for _ in range(self.rows)]
        return self.grid

    def carve_path(self) -> List[Coord]:
        self.path = carve_path(self.rows, self.columns, self.rng)
        self.path_cells = set(self.path)
        return self.path

    def place_player(self) -> Player:
        self.player = Player(self.config.player_name)
        r, c = self.player_position
        self.grid[r][c] = player_tile(self.player)
        return self.player

    def place_exit(self) -> Coord:
        r, c = self.exit_position
        self.grid[r][c] = EXIT
        return self.exit_position

    def compute_budgets(self) -> PlacementBudgets:
        self.budgets = compute_budgets(self.rows, self.columns, len(self.path))
        return self.budgets

    def _scatter(self, count: int, make_tile: Callable[[], Tile], allow_path: bool) -> int:
        """Rejection-sample ``count`` random cells and fill them with ``make_tile()``.

        A cell qualifies when it is currently empty (and, for walls, not on the
        path). Raises ``PlacementError`` up front when fewer qualifying cells
        exist than requested so the retry loop always terminates.
        """

        def eligible(r: int, c: int) -> bool:
            return self.grid[r][c].is_empty and (allow_path or (r, c) not in self.path_cells)

        available = sum(1 for r, c in iter_coords(self.rows, self.columns) if eligible(r, c))
        if count > available:
            raise PlacementError(f"cannot place {count} tiles: only {available} eligible cells")
        placed = 0
        while placed < count:
            self.placement_attempts += 1
            r = self.rng.randrange(self.rows)
            c = self.rng.randrange(self.columns)
            if eligible(r, c):
                self.grid[r][c] = make_tile()
                placed += 1
        return placed

    def place_walls(self) -> int:
        return self._scatter(self.budgets.walls, lambda: WALL, allow_path=False)

    def place_monsters(self) -> int:
        return self._scatter(self.budgets.monsters, lambda: monster_tile(spawn_monster(self.rng)), allow_path=True)

    def place_weapons(self) -> int:
        return self._scatter(self.budgets.weapons, lambda: weapon_tile(forge_weapon(self.rng)), allow_path=True)

    def place_potions(self) -> int:
        return self._scatter(self.budgets.potions, lambda: potion_tile(brew_potion(self.rng)), allow_path=True)

    def outputs(self) -> GenerationOutputs:
        return GenerationOutputs(
            self.grid, self.path, self.budgets, self.player, self.player_position, self.exit_position
        )

    def run(self) -> GenerationOutputs:
        self.init_grid()
        self.carve_path()
        self.place_player()
        self.place_exit()
        self.compute_budgets()
        self.place_walls()
        self.place_monsters()
        self.place_weapons()
        self.place_potions()
        return self.outputs()


__all__ = ["MazeGenerator", "PlacementBudgets", "GenerationOutputs", "carve_path", "compute_budgets"]
