"""Textual front-end for the maze.

Panels:
 - Maze (the rendered grid plus a status line)
 - Event Log (battle rounds, pickups, win/lose banners)

Run with: `python run.py tui`
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Log, Static

from .maze import Maze, MazeConfig
from .services.events import GameEvent
from .services.game_engine import GameEngine, GameState


class MazeApp(App):
    """Interactive Textual maze game.

    Arrow keys or WASD move the player; every engine event is appended to the
    event log and the map is re-rendered after each move that changed it.
    Once the game is won or lost further key presses are ignored by the
    engine and only ``q`` remains useful.
    """

    CSS = """
    Screen { layout: vertical; }
    .panel { border: tall $primary; padding: 0 1; }
    .panel-title { content-align: center middle; text-style: bold; }
    #maze-panel { width: 2fr; }
    #log-panel { width: 1fr; }
    """

    BINDINGS = [
        Binding("up", "move('up')", "Up", show=False, priority=True),
        Binding("down", "move('down')", "Down", show=False, priority=True),
        Binding("left", "move('left')", "Left", show=False, priority=True),
        Binding("right", "move('right')", "Right", show=False, priority=True),
        Binding("w", "move('w')", "Up", priority=True),
        Binding("a", "move('a')", "Left", priority=True),
        Binding("s", "move('s')", "Down", priority=True),
        Binding("d", "move('d')", "Right", priority=True),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config: MazeConfig | None = None) -> None:
        super().__init__()
        self.config = config or MazeConfig()
        self.maze = Maze(self.config)
        self.engine = GameEngine.from_maze(self.maze, listener=self.on_game_event)
        self._pending: list[GameEvent] = []

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header(show_clock=False)
        with Horizontal():
            with Vertical(id="maze-panel", classes="panel"):
                yield Static(f"Maze (seed {self.maze.seed})", classes="panel-title")
                self.map_view = Static(self._map_text(), id="map")
                yield self.map_view
                self.status_line = Static(self._status_text(), id="status")
                yield self.status_line
            with Vertical(id="log-panel", classes="panel"):
                yield Static("Event Log", classes="panel-title")
                self.event_log = Log()
                yield self.event_log
        yield Footer()

    def on_mount(self) -> None:
        self.event_log.write_line("Find the exit (E). Arrow keys / WASD to move.")

    def on_game_event(self, event: GameEvent) -> None:
        # The engine may report events before the widgets are mounted.
        self._pending.append(event)

    def _flush_events(self) -> None:
        for event in self._pending:
            if event.message:
                self.event_log.write_line(event.message)
        self._pending.clear()

    def _map_text(self) -> str:
        return self.engine.render()

    def _status_text(self) -> str:
        p = self.engine.player
        banner = {GameState.WON: "  YOU WON", GameState.LOST: "  GAME OVER"}.get(self.engine.state, "")
        return f"{p.name}  HP {p.health}  weapons {len(p.inventory)}{banner}"

    def action_move(self, direction: str) -> None:
        result = self.engine.handle_input(direction)
        self._flush_events()
        if result.moved:
            self.map_view.update(self._map_text())
        self.status_line.update(self._status_text())


def run_tui(config: MazeConfig | None = None) -> GameState:  # pragma: no cover (interactive)
    app = MazeApp(config)
    app.run()
    return app.engine.state


__all__ = ["MazeApp", "run_tui"]
