from maze_adventure.maze import Maze, MazeConfig


def test_metrics_populated(small_maze):
    m = small_maze.metrics
    assert m["path_length"] == len(small_maze.path) == 19
    assert m["walls_placed"] == small_maze.budgets.walls
    assert m["monsters_placed"] == small_maze.budgets.monsters
    assert m["weapons_placed"] == small_maze.budgets.weapons
    assert m["potions_placed"] == small_maze.budgets.potions
    placed = m["walls_placed"] + m["monsters_placed"] + m["weapons_placed"] + m["potions_placed"]
    assert m["placement_attempts"] >= placed
    assert m["runtime_ms"] >= 0
    assert set(m["phase_ms"]) == {
        "init_grid",
        "carve_path",
        "place_player",
        "place_exit",
        "compute_budgets",
        "place_walls",
        "place_monsters",
        "place_weapons",
        "place_potions",
    }


def test_metrics_can_be_disabled_by_env(monkeypatch):
    monkeypatch.setenv("MAZE_ENABLE_GENERATION_METRICS", "0")
    assert Maze(MazeConfig(seed=1)).metrics == {}


def test_metrics_can_be_disabled_by_argument():
    assert Maze(MazeConfig(seed=1), enable_metrics=False).metrics == {}
