import pytest

from maze_adventure import cli
from maze_adventure.services.game_engine import GameState

# Exercise parse_args + main with the game front-ends patched so nothing
# waits on a terminal.


@pytest.fixture()
def fake_console(monkeypatch):
    import maze_adventure.console as console_mod

    calls = {}

    def fake_run_console_game(**kwargs):
        calls.update(kwargs)
        return GameState.WON

    monkeypatch.setattr(console_mod, "run_console_game", fake_run_console_game)
    return calls


def test_version_flag_outputs_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert cli.__version__ in out
    assert "Maze Adventure" in out


def test_default_command_is_play():
    ns = cli.parse_args([])
    assert ns.command == "play"
    assert ns.rows is None and ns.columns is None


def test_rows_below_minimum_rejected():
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["play", "--rows", "9"])
    assert exc.value.code == 2


def test_play_passes_flags_through(fake_console, capsys):
    code = cli.main(["play", "--rows", "12", "--columns", "15", "--seed", "4", "--name", "Ada"])
    assert code == 0
    assert fake_console["rows"] == 12
    assert fake_console["columns"] == 15
    assert fake_console["seed"] == 4
    assert fake_console["name"] == "Ada"
    assert "Maze Adventure" in capsys.readouterr().out


def test_env_values_fill_missing_flags(fake_console, monkeypatch):
    monkeypatch.setenv("MAZE_ROWS", "20")
    monkeypatch.setenv("MAZE_SEED", "99")
    cli.main(["play"])
    assert fake_console["rows"] == 20
    assert fake_console["columns"] is None
    assert fake_console["seed"] == 99


def test_env_file_argument(fake_console, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MAZE_COLUMNS=13\nMAZE_PLAYER_NAME=Envy\n")
    cli.main(["--env-file", str(env_file), "play"])
    assert fake_console["columns"] == 13
    assert fake_console["name"] == "Envy"


def test_tui_mode_invokes_tui(monkeypatch):
    import maze_adventure.tui as tui_mod

    seen = {}

    def fake_run_tui(config):
        seen["config"] = config
        return GameState.LOST

    monkeypatch.setattr(tui_mod, "run_tui", fake_run_tui)
    assert cli.main(["tui", "--seed", "5"]) == 0
    assert seen["config"].seed == 5
    assert seen["config"].rows == 10


def test_interrupt_exits_cleanly(monkeypatch):
    import maze_adventure.console as console_mod

    def interrupted(**kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(console_mod, "run_console_game", interrupted)
    assert cli.main(["play", "--rows", "10", "--columns", "10"]) == 0
