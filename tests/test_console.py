"""Console front-end driven by scripted input."""

from maze_adventure.console import ConsoleGame, prompt_dimension, prompt_name, run_console_game
from maze_adventure.maze import MazeConfig
from maze_adventure.services.game_engine import GameState


def scripted(*answers):
    it = iter(answers)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


def test_prompt_dimension_reprompts_until_valid():
    out = []
    value = prompt_dimension("rows", scripted("abc", "9", "-4", "", "12"), out.append)
    assert value == 12
    assert out.count("Invalid input. Try again") == 4
    assert out[0].startswith("Enter number of rows")


def test_prompt_name_falls_back_to_default():
    assert prompt_name(scripted("   "), lambda s: None) == "Hero"
    assert prompt_name(scripted(" Ada "), lambda s: None) == "Ada"


def test_full_session_setup_and_quit():
    out = []
    state = run_console_game(read=scripted("5", "10", "11", "Tester", "q"), write=out.append, seed=3)
    assert state is GameState.PLAYING
    assert "Invalid input. Try again" in out
    grid_lines = [line for line in out if line.startswith("@")]
    assert grid_lines, "grid was never printed"
    assert any(line.startswith("Tester  HP 100") for line in out)


def test_unknown_token_prints_invalid_movement():
    out = []
    game = ConsoleGame(MazeConfig(seed=8), read=scripted("jump", "quit"), write=out.append)
    assert game.play() is GameState.PLAYING
    assert "Invalid Movement." in out


def test_eof_ends_session_cleanly():
    out = []
    game = ConsoleGame(MazeConfig(seed=8), read=scripted(), write=out.append)
    assert game.play() is GameState.PLAYING


def test_grid_reprinted_only_after_a_move():
    out = []
    game = ConsoleGame(MazeConfig(seed=8), read=scripted("x", "q"), write=out.append)
    game.play()
    status_lines = [line for line in out if "HP" in line]
    assert len(status_lines) == 1


def test_colored_output_wraps_glyphs():
    out = []
    game = ConsoleGame(MazeConfig(seed=8), read=scripted("q"), write=out.append, color=True)
    game.play()
    assert any("\x1b[" in line for line in out)
