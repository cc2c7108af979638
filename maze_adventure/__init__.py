"""
project: Maze Adventure
module: __init__.py
License: MIT

Single-player, turn-based maze adventure.

The core is the maze generator (``maze_adventure.maze``) and the movement &
combat engine (``maze_adventure.services.game_engine``); ``console`` and
``tui`` are thin front-ends over it. Settings are read from ``MAZE_*``
environment variables, optionally supplied through a local ``.env`` file.
"""

from dotenv import load_dotenv

# Load .env if present so MAZE_ROWS, MAZE_SEED, etc. can be supplied without
# exporting shell variables.
load_dotenv()

__version__ = "0.1.0"

from .errors import InvalidArgument, PlacementError  # noqa: E402
from .maze import Maze, MazeConfig  # noqa: E402
from .services.game_engine import GameEngine, GameState  # noqa: E402

__all__ = ["InvalidArgument", "PlacementError", "Maze", "MazeConfig", "GameEngine", "GameState", "__version__"]
