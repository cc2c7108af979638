"""Turn-based combat resolution.

A battle is a blocking sequence of exchanges: the player strikes first and,
if the monster is still standing, the monster strikes back. Exchanges repeat
until one side is dead. ``resolve_battle`` applies the damage to the two
combatants it is given and returns every exchange as a ``BattleRound`` so a
front-end can replay them at whatever pace it likes; it performs no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..models import Monster, Player


class BattleOutcome(str, Enum):
    PLAYER_WON = "player_won"
    PLAYER_LOST = "player_lost"


@dataclass(frozen=True)
class BattleRound:
    number: int
    player_damage: int
    monster_health: int
    # None when the monster died before it could strike back
    monster_damage: Optional[int]
    player_health: int

    def describe(self) -> str:
        text = f"You have attacked the monster for {self.player_damage} damage."
        if self.monster_damage is None:
            return text
        return f"{text} The monster has attacked you for {self.monster_damage} damage."


@dataclass
class BattleResult:
    outcome: BattleOutcome
    player: Player
    monster: Monster
    rounds: List[BattleRound] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        return self.outcome is BattleOutcome.PLAYER_WON


def exchange(player: Player, monster: Monster, number: int) -> BattleRound:
    """Play a single exchange and describe it."""
    dealt = player.attack(monster)
    taken = None
    if not monster.is_dead():
        taken = monster.attack(player)
    return BattleRound(number, dealt, monster.health, taken, player.health)


def resolve_battle(player: Player, monster: Monster) -> BattleResult:
    rounds: List[BattleRound] = []
    while not monster.is_dead() and not player.is_dead():
        rounds.append(exchange(player, monster, len(rounds) + 1))
    outcome = BattleOutcome.PLAYER_LOST if player.is_dead() else BattleOutcome.PLAYER_WON
    return BattleResult(outcome, player, monster, rounds)


__all__ = ["BattleOutcome", "BattleRound", "BattleResult", "exchange", "resolve_battle"]
