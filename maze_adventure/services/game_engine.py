"""Movement & combat loop.

``GameEngine`` takes ownership of a generated grid and resolves move intents
against it. The state machine is ``PLAYING -> WON | LOST``; both end states
are terminal and any later move is refused without touching the grid.

Move resolution order:
    1. Destination = player position + delta.
    2. Out of bounds or a wall: rejected, nothing changes.
    3. Monster: battle to the death. A loss ends the game and leaves the
       monster's tile as it is; a win moves the player onto the monster's cell.
    4. Weapon / potion: item is consumed into the inventory / drunk.
    5. Exit: the game is won once the player has stepped onto it.
    6. Positional update: origin becomes empty, destination holds the player.

Every branch reports ``GameEvent`` values, both in the returned
``MoveResult`` and to an optional listener callback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..errors import InvalidArgument
from ..logging_utils import get_logger
from ..maze.cells import Coord, Grid, in_bounds
from ..maze.render import render_grid
from ..maze.tiles import EMPTY, TileKind, player_tile
from ..models import Player
from .combat_service import BattleResult, resolve_battle
from .events import EventKind, EventListener, GameEvent
from .movement import direction_to_delta, is_unit_step

log = get_logger("maze.engine")


class GameState(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class MoveResult:
    accepted: bool
    moved: bool
    state: GameState
    events: List[GameEvent] = field(default_factory=list)
    battle: Optional[BattleResult] = None

    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]


class GameEngine:
    def __init__(
        self,
        grid: Grid,
        player_position: Coord = (0, 0),
        exit_position: Optional[Coord] = None,
        listener: Optional[EventListener] = None,
    ):
        r, c = player_position
        player = grid[r][c].player
        if player is None:
            raise InvalidArgument(f"no player on tile {player_position}")
        self._grid = grid
        self._player = player
        self._position: Coord = player_position
        self._exit: Coord = exit_position if exit_position is not None else (len(grid) - 1, len(grid[0]) - 1)
        self._state = GameState.PLAYING
        self._listener = listener
        self.moves = 0

    @classmethod
    def from_maze(cls, maze, listener: Optional[EventListener] = None) -> "GameEngine":
        return cls(maze.grid, maze.player_position, maze.exit_position, listener=listener)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is not GameState.PLAYING

    @property
    def player(self) -> Player:
        return self._player

    @property
    def player_position(self) -> Coord:
        return self._position

    @property
    def exit_position(self) -> Coord:
        return self._exit

    @property
    def grid(self) -> Grid:
        return self._grid

    def tile_at(self, row: int, col: int):
        return self._grid[row][col]

    def render(self) -> str:
        return render_grid(self._grid)

    # ------------------------------------------------------------------
    # Move resolution
    # ------------------------------------------------------------------
    def _emit(self, result: MoveResult, kind: EventKind, message: str, **data) -> None:
        event = GameEvent(kind, message, data)
        result.events.append(event)
        if self._listener is not None:
            self._listener(event)

    def _reject(self, result: MoveResult, reason: str, **data) -> MoveResult:
        self._emit(result, EventKind.INVALID_MOVE, "Invalid Movement.", reason=reason, **data)
        log.debug(event="move_rejected", reason=reason, position=self._position)
        return result

    def handle_input(self, token: str | None) -> MoveResult:
        """Map a direction token and move; unknown tokens are reported as invalid moves."""
        delta = direction_to_delta(token)
        if delta is None:
            if self.is_over:
                return MoveResult(accepted=False, moved=False, state=self._state)
            result = MoveResult(accepted=True, moved=False, state=self._state)
            return self._reject(result, "unknown_direction", token=token)
        return self.move(*delta)

    def move(self, row_delta: int, col_delta: int) -> MoveResult:
        if self.is_over:
            log.debug(event="move_after_game_over", state=self._state.value)
            return MoveResult(accepted=False, moved=False, state=self._state)

        result = MoveResult(accepted=True, moved=False, state=self._state)
        if not is_unit_step(row_delta, col_delta):
            return self._reject(result, "not_a_unit_step", delta=(row_delta, col_delta))

        row, col = self._position[0] + row_delta, self._position[1] + col_delta
        if not in_bounds(self._grid, row, col):
            return self._reject(result, "out_of_bounds", target=(row, col))
        tile = self._grid[row][col]
        kind = tile.kind

        if kind is TileKind.WALL:
            return self._reject(result, "wall", target=(row, col))
        if kind is TileKind.PLAYER:
            # Only one player tile exists, so a unit step never lands on one.
            return self._reject(result, "occupied", target=(row, col))

        if kind is TileKind.MONSTER:
            return self._fight(result, tile.monster, (row, col))

        if kind is TileKind.WEAPON:
            weapon = tile.weapon
            self._player.pick_up_weapon(weapon)
            self._emit(
                result, EventKind.ITEM_PICKUP, weapon.pickup_message(), item="weapon", name=weapon.name, value=weapon.damage
            )
            log.info(event="item_picked_up", item="weapon", name=weapon.name, damage=weapon.damage)
        elif kind is TileKind.POTION:
            potion = tile.potion
            self._player.drink(potion)
            self._emit(
                result, EventKind.ITEM_PICKUP, potion.pickup_message(), item="potion", name=potion.name, value=potion.heal_amount
            )
            log.info(event="item_picked_up", item="potion", name=potion.name, health=self._player.health)

        self._step_to(result, (row, col))

        if kind is TileKind.EXIT:
            self._state = GameState.WON
            result.state = self._state
            self._emit(result, EventKind.GAME_WON, "Maze completed. YOU WON", moves=self.moves)
            log.info(event="game_won", moves=self.moves, health=self._player.health)
        elif kind is TileKind.EMPTY:
            self._emit(result, EventKind.PLAYER_MOVED, "", position=self._position)
        return result

    def _step_to(self, result: MoveResult, target: Coord) -> None:
        r, c = self._position
        self._grid[r][c] = EMPTY
        tr, tc = target
        self._grid[tr][tc] = player_tile(self._player)
        self._position = target
        self.moves += 1
        result.moved = True

    def _fight(self, result: MoveResult, monster, target: Coord) -> MoveResult:
        self._emit(result, EventKind.BATTLE_STARTED, "You have entered a battle with a monster.", target=target)
        battle = resolve_battle(self._player, monster)
        result.battle = battle
        for rnd in battle.rounds:
            self._emit(
                result,
                EventKind.BATTLE_ROUND,
                rnd.describe(),
                round=rnd.number,
                player_damage=rnd.player_damage,
                monster_health=rnd.monster_health,
                monster_damage=rnd.monster_damage,
                player_health=rnd.player_health,
            )
        log.info(
            event="battle_resolved",
            outcome=battle.outcome.value,
            rounds=len(battle.rounds),
            player_health=self._player.health,
        )
        if not battle.player_won:
            self._state = GameState.LOST
            result.state = self._state
            self._emit(result, EventKind.GAME_LOST, f"{self._player.name} has died. GAME OVER", rounds=len(battle.rounds))
            log.info(event="game_lost", moves=self.moves, position=self._position)
            return result
        self._emit(result, EventKind.BATTLE_WON, "You won the battle against the monster.", rounds=len(battle.rounds))
        self._step_to(result, target)
        return result


__all__ = ["GameEngine", "GameState", "MoveResult"]
