from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict


class EventKind(str, Enum):
    INVALID_MOVE = "invalid-move"
    PLAYER_MOVED = "player-moved"
    BATTLE_STARTED = "battle-started"
    BATTLE_ROUND = "battle-round"
    BATTLE_WON = "battle-won"
    ITEM_PICKUP = "item-pickup"
    GAME_WON = "game-won"
    GAME_LOST = "game-lost"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    message: str
    data: Dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[GameEvent], None]

__all__ = ["EventKind", "GameEvent", "EventListener"]
