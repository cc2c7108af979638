"""Pipeline orchestration for maze generation.

Provides the public ``Maze`` class: resolves the seed, owns the random
generator, runs the ``MazeGenerator`` phases in order with lightweight
per-phase timing, and exposes the finished grid for the game engine to take
over.
"""
from __future__ import annotations

import dataclasses
import os
import random
import time
from typing import Any, Dict, List

from ..logging_utils import get_logger
from ..models import Player
from .cells import Coord, Grid
from .config import MazeConfig
from .generator import MazeGenerator, PlacementBudgets
from .metrics import init_metrics
from .render import render_grid

log = get_logger("maze.pipeline")


def _metrics_enabled_from_env() -> bool:
    val = os.environ.get("MAZE_ENABLE_GENERATION_METRICS")
    if val is None:
        return True
    return val.lower() not in {"0", "false", "no", ""}


class Maze:
    """A generated maze: grid, carved path, budgets, player and exit positions.

    Accepts either a ``MazeConfig`` or the ``rows``/``columns``/``seed``
    keywords. The same seed always yields the same grid.
    """

    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        rows: int | None = None,
        columns: int | None = None,
        seed: int | None = None,
        enable_metrics: bool | None = None,
    ):
        if config is None:
            config = MazeConfig(
                rows=rows if rows is not None else MazeConfig.rows,
                columns=columns if columns is not None else MazeConfig.columns,
                seed=seed,
            )
        elif seed is not None:
            config = dataclasses.replace(config, seed=seed)
        # None => random; 0 is a valid deterministic seed
        if config.seed is None:
            config = dataclasses.replace(config, seed=random.randint(0, 2**31 - 1))
        self.config = config
        self.seed = config.seed
        self._rng = random.Random(self.seed)
        self.enable_metrics = _metrics_enabled_from_env() if enable_metrics is None else enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self._run_pipeline()

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    def _run_pipeline(self):
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r

        else:

            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        gen = MazeGenerator(self.config, self._rng)
        _phase("init_grid", gen.init_grid)
        _phase("carve_path", gen.carve_path)
        _phase("place_player", gen.place_player)
        _phase("place_exit", gen.place_exit)
        _phase("compute_budgets", gen.compute_budgets)
        walls = _phase("place_walls", gen.place_walls)
        monsters = _phase("place_monsters", gen.place_monsters)
        weapons = _phase("place_weapons", gen.place_weapons)
        potions = _phase("place_potions", gen.place_potions)

        outputs = gen.outputs()
        self.grid: Grid = outputs.grid
        self.path: List[Coord] = outputs.path
        self.budgets: PlacementBudgets = outputs.budgets
        self.player: Player = outputs.player
        self.player_position: Coord = outputs.player_position
        self.exit_position: Coord = outputs.exit_position

        if self.enable_metrics:
            self.metrics["path_length"] = len(self.path)
            self.metrics["walls_placed"] = walls
            self.metrics["monsters_placed"] = monsters
            self.metrics["weapons_placed"] = weapons
            self.metrics["potions_placed"] = potions
            self.metrics["placement_attempts"] = gen.placement_attempts
            self.metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
            self.metrics["phase_ms"] = phase_times
        log.info(
            event="maze_generated",
            seed=self.seed,
            rows=self.rows,
            columns=self.columns,
            path_length=len(self.path),
            walls=self.budgets.walls,
            monsters=self.budgets.monsters,
            weapons=self.budgets.weapons,
            potions=self.budgets.potions,
            runtime_ms=self.metrics.get("runtime_ms"),
        )

    def render(self) -> str:
        return render_grid(self.grid)

    def count(self, kind) -> int:
        return sum(1 for row in self.grid for tile in row if tile.kind is kind)
