"""Line-based console front-end.

Thin I/O collaborator around the core: prompts for the maze size and the
player name, prints the grid after every move that changed it, prints event
messages as the engine reports them, and feeds one direction token per line
back into the engine. ``read``/``write`` are injectable so the loop can be
driven from tests.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from colorama import Fore, Style

from .logging_utils import get_logger
from .maze import Maze, MazeConfig
from .maze.config import DEFAULT_PLAYER_NAME, MIN_DIMENSION, parse_dimension
from .maze.render import render_grid_colored
from .maze.tiles import TileKind
from .services.events import EventKind, GameEvent
from .services.game_engine import GameEngine, GameState

Reader = Callable[[str], str]
Writer = Callable[[str], None]

QUIT_TOKENS = {"q", "quit", "exit"}

GLYPH_COLORS: Dict[TileKind, str] = {
    TileKind.WALL: Style.DIM + Fore.WHITE,
    TileKind.EXIT: Fore.GREEN + Style.BRIGHT,
    TileKind.PLAYER: Fore.CYAN + Style.BRIGHT,
    TileKind.MONSTER: Fore.RED,
    TileKind.WEAPON: Fore.YELLOW,
    TileKind.POTION: Fore.MAGENTA,
}

EVENT_COLORS: Dict[EventKind, str] = {
    EventKind.INVALID_MOVE: Fore.YELLOW,
    EventKind.BATTLE_STARTED: Fore.RED,
    EventKind.BATTLE_WON: Fore.GREEN,
    EventKind.ITEM_PICKUP: Fore.CYAN,
    EventKind.GAME_WON: Fore.GREEN + Style.BRIGHT,
    EventKind.GAME_LOST: Fore.RED + Style.BRIGHT,
}

log = get_logger("maze.console")


def prompt_dimension(label: str, read: Reader = input, write: Writer = print) -> int:
    """Ask until the answer parses as an integer >= MIN_DIMENSION."""
    while True:
        write(f"Enter number of {label} you want for the maze (must be at least {MIN_DIMENSION})")
        value = parse_dimension(read("> "))
        if value is not None:
            return value
        write("Invalid input. Try again")


def prompt_name(read: Reader = input, write: Writer = print) -> str:
    write("Enter your player name:")
    name = read("> ").strip()
    return name or DEFAULT_PLAYER_NAME


class ConsoleGame:
    def __init__(self, config: MazeConfig, read: Reader = input, write: Writer = print, color: bool = False):
        self.config = config
        self.read = read
        self.write = write
        self.color = color
        self.maze = Maze(config)
        self.engine = GameEngine.from_maze(self.maze, listener=self.on_event)
        self.log = log.bind(seed=self.maze.seed, player=config.player_name)

    def paint(self, text: str, prefix: str | None) -> str:
        if self.color and prefix:
            return f"{prefix}{text}{Style.RESET_ALL}"
        return text

    def show_grid(self) -> None:
        palette = GLYPH_COLORS if self.color else None
        self.write(render_grid_colored(self.engine.grid, palette, Style.RESET_ALL).rstrip("\n"))
        p = self.engine.player
        self.write(f"{p.name}  HP {p.health}  weapons {len(p.inventory)}  best +{p.inventory.strongest_weapon_damage()}")

    def on_event(self, event: GameEvent) -> None:
        if event.message:
            self.write(self.paint(event.message, EVENT_COLORS.get(event.kind)))

    def play(self) -> GameState:
        self.write(f"Seed {self.maze.seed}. Move with w/a/s/d (or up/down/left/right), q to quit.")
        self.show_grid()
        while not self.engine.is_over:
            try:
                token = self.read("move> ")
            except (EOFError, KeyboardInterrupt):
                self.write("")
                break
            if token.strip().lower() in QUIT_TOKENS:
                break
            result = self.engine.handle_input(token)
            if result.moved:
                self.show_grid()
        self.log.info(event="session_end", state=self.engine.state, moves=self.engine.moves)
        return self.engine.state


def run_console_game(
    rows: Optional[int] = None,
    columns: Optional[int] = None,
    seed: Optional[int] = None,
    name: Optional[str] = None,
    read: Reader = input,
    write: Writer = print,
    color: bool = False,
) -> GameState:
    """Prompt for whatever was not supplied, then play one game to its end."""
    if rows is None:
        rows = prompt_dimension("rows", read, write)
    if columns is None:
        columns = prompt_dimension("columns", read, write)
    if name is None:
        name = prompt_name(read, write)
    config = MazeConfig(rows=rows, columns=columns, seed=seed, player_name=name)
    return ConsoleGame(config, read=read, write=write, color=color).play()


__all__ = ["ConsoleGame", "prompt_dimension", "prompt_name", "run_console_game"]
