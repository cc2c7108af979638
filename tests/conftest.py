import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from maze_adventure.maze import Maze, MazeConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_maze_env(monkeypatch):
    """Keep developer MAZE_* variables (or a local .env) from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("MAZE_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def small_maze():
    return Maze(MazeConfig(rows=10, columns=10, seed=42))


@pytest.fixture(params=[(10, 10), (10, 17), (23, 11), (30, 30)])
def sized_maze(request):
    rows, columns = request.param
    return Maze(MazeConfig(rows=rows, columns=columns, seed=rows * 1000 + columns))
