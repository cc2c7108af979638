"""Headless Textual run: key presses reach the engine and the map follows."""

import asyncio

from maze_adventure.maze import MazeConfig
from maze_adventure.maze.tiles import WALL
from maze_adventure.services.game_engine import GameEngine, GameState
from maze_adventure.tui import MazeApp
from tests.maze_test_utils import build_grid


def _app_with_grid(placements=None, player_at=(0, 0)):
    app = MazeApp(MazeConfig(seed=1))
    grid = build_grid(placements=placements, player_at=player_at)
    app.engine = GameEngine(grid, player_at, listener=app.on_game_event)
    return app


def test_keys_move_player():
    app = _app_with_grid(placements={(1, 0): WALL})

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("d")
            await pilot.press("right")
            await pilot.press("s")
            await pilot.pause()

    asyncio.run(scenario())
    # The wall at (1, 0) is never touched; two steps right then one down
    assert app.engine.player_position == (1, 2)
    assert app.engine.moves == 3


def test_reaching_exit_in_tui_wins():
    app = _app_with_grid(player_at=(8, 9))

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("s")
            await pilot.press("w")
            await pilot.pause()

    asyncio.run(scenario())
    assert app.engine.state is GameState.WON
    assert app.engine.player_position == (9, 9)
