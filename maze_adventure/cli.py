"""
project: Maze Adventure
module: cli.py
License: MIT

Command-line entry point.

Provides subcommands for playing in the plain console or in the Textual
terminal UI. Accepts configuration via flags and environment variables, with
optional .env loading.

Installed as the `maze-adventure` console script; `python run.py` from a
source checkout does the same. Run with `--help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from . import __version__
from .logging_utils import get_logger
from .maze.config import MIN_DIMENSION, MazeConfig, parse_dimension

log = get_logger("maze.cli")

just_fix_windows_console()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _dimension(raw: str) -> int:
    value = parse_dimension(raw)
    if value is None:
        raise argparse.ArgumentTypeError(f"must be an integer >= {MIN_DIMENSION}, got {raw!r}")
    return value


def _add_game_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rows", type=_dimension, default=None, help="Maze rows (default: env MAZE_ROWS or prompt)")
    p.add_argument(
        "--columns", type=_dimension, default=None, help="Maze columns (default: env MAZE_COLUMNS or prompt)"
    )
    p.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible maze (default: env MAZE_SEED)")
    p.add_argument("--name", default=None, help="Player name (default: env MAZE_PLAYER_NAME or prompt)")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Adventure

    Find your way from the top-left corner to the exit (E) in the bottom-right
    corner of a randomly generated maze. Fight monsters (M), collect weapons (W)
    and drink potions (P) on the way. Configuration can be provided via CLI
    flags or environment variables. If both are present, CLI flags take
    precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_ROWS          Maze rows, at least 10 (default: prompt)
          MAZE_COLUMNS       Maze columns, at least 10 (default: prompt)
          MAZE_SEED          Random seed (default: random)
          MAZE_PLAYER_NAME   Player name (default: prompt)
          MAZE_LOG_LEVEL     debug | info | warn | error (default: warn)
          MAZE_LOG_JSON      1 to emit JSON log records on stderr

        Examples:
          # Play in the console, answering the size prompts
          python run.py play

          # A reproducible 15x20 maze
          python run.py play --rows 15 --columns 20 --seed 42

          # Load variables from .env then launch the terminal UI
          python run.py --env-file .env tui
        """
    )

    parser = argparse.ArgumentParser(
        prog="maze-adventure",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Maze Adventure {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    play_parser = subparsers.add_parser(
        "play",
        help="Play in the console (line-based input)",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Play one game in the console. Type w/a/s/d or up/down/left/right then Enter; q quits.",
    )
    _add_game_options(play_parser)
    play_parser.set_defaults(command="play")

    tui_parser = subparsers.add_parser(
        "tui",
        help="Play in the Textual terminal UI (arrow keys / WASD)",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the terminal UI: maze panel and event log.",
    )
    _add_game_options(tui_parser)
    tui_parser.set_defaults(command="tui")

    # If no subcommand provided, default to play
    if not any(a in ("play", "tui") for a in argv) and not any(a in ("-h", "--help", "--version") for a in argv):
        argv = list(argv) + ["play"]

    return parser.parse_args(argv)


def _env_dimension(key: str):
    return parse_dimension(os.getenv(key))


def _env_seed():
    raw = os.getenv("MAZE_SEED")
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "play").lower()
    rows = args.rows or _env_dimension("MAZE_ROWS")
    columns = args.columns or _env_dimension("MAZE_COLUMNS")
    seed = args.seed if args.seed is not None else _env_seed()
    name = args.name or os.getenv("MAZE_PLAYER_NAME") or None

    title = f"{Fore.CYAN}{Style.BRIGHT}Maze Adventure{Style.RESET_ALL}" if _COLOR_ENABLED else "Maze Adventure"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    size = f"{rows or '?'} x {columns or '?'}"
    lines = [
        divider,
        f"  {title} {__version__}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Size:'):12} {value(size)}",
        f"  {label('Seed:'):12} {value(seed if seed is not None else 'random')}",
        divider,
        "",
    ]
    print("\n".join(lines))

    log.info(event="startup", mode=mode, rows=rows, columns=columns, seed=seed)

    try:
        if mode == "tui":
            from .tui import run_tui

            config = MazeConfig.from_env(rows=rows, columns=columns, seed=seed, player_name=name)
            state = run_tui(config)
        else:
            from .console import run_console_game

            state = run_console_game(
                rows=rows, columns=columns, seed=seed, name=name, color=_COLOR_ENABLED
            )
    except (EOFError, KeyboardInterrupt):
        print("\n[INFO] Bye.")
        return 0
    log.info(event="shutdown", mode=mode, state=state.value)
    return 0


def cli() -> int:
    return main(sys.argv[1:])
