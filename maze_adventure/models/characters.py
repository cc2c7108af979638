"""
project: Maze Adventure
module: models/characters.py
License: MIT

Combat participants: health pool, player and monster.

Both sides share a single ``attack`` operation from ``Character``; what
differs is the damage hook (``attack_power``): a player hits for the base
unarmed damage plus the bonus of their strongest weapon, a monster hits for
its fixed damage stat.
"""

from __future__ import annotations

from typing import Optional

from ..errors import InvalidArgument
from .items import Inventory, Potion, Weapon

MAX_HEALTH = 150
PLAYER_START_HEALTH = 100
BASE_ATTACK = 10

MONSTER_HEALTH_RANGE = (30, 50)
MONSTER_DAMAGE_RANGE = (10, 30)


class Health:
    """Hit point pool with a hard ceiling and no floor.

    Damage is subtracted unconditionally, so ``current`` may go negative;
    anything at or below zero counts as dead.
    """

    __slots__ = ("current", "maximum")

    def __init__(self, current: int, maximum: int = MAX_HEALTH):
        self.current = current
        self.maximum = maximum

    def take_damage(self, amount: int) -> None:
        self.current -= amount

    def heal(self, amount: int) -> None:
        self.current = min(self.current + amount, self.maximum)

    def is_dead(self) -> bool:
        return self.current <= 0

    def __repr__(self):
        return f"Health({self.current}/{self.maximum})"


class Character:
    """Anything that can trade blows: owns a ``Health`` and an attack hook."""

    def __init__(self, health: Health):
        self.hp = health

    @property
    def health(self) -> int:
        return self.hp.current

    def attack_power(self) -> int:
        raise NotImplementedError

    def attack(self, opponent: "Character") -> int:
        """Hit ``opponent`` once and return the damage dealt."""
        amount = self.attack_power()
        opponent.take_damage(amount)
        return amount

    def take_damage(self, amount: int) -> None:
        self.hp.take_damage(amount)

    def is_dead(self) -> bool:
        return self.hp.is_dead()


class Player(Character):
    def __init__(self, name: str, health: int = PLAYER_START_HEALTH, inventory: Optional[Inventory] = None):
        super().__init__(Health(health))
        self._name = name
        self.inventory = inventory if inventory is not None else Inventory()

    @property
    def name(self) -> str:
        return self._name

    def attack_power(self) -> int:
        return BASE_ATTACK + self.inventory.strongest_weapon_damage()

    def heal(self, amount: int) -> None:
        self.hp.heal(amount)

    def pick_up_weapon(self, weapon: Weapon) -> None:
        self.inventory.add_weapon(weapon)

    def drink(self, potion: Potion) -> None:
        self.heal(potion.heal_amount)

    def __repr__(self):
        return f"Player({self._name!r}, hp={self.health}, weapons={len(self.inventory)})"


class Monster(Character):
    def __init__(self, health: int, damage: int):
        lo, hi = MONSTER_HEALTH_RANGE
        if not lo <= health <= hi:
            raise InvalidArgument(f"Health points must be in between {lo} and {hi}.")
        lo, hi = MONSTER_DAMAGE_RANGE
        if not lo <= damage <= hi:
            raise InvalidArgument(f"Damage points must be in between {lo} and {hi}.")
        super().__init__(Health(health))
        self._damage = damage

    @property
    def damage(self) -> int:
        return self._damage

    def attack_power(self) -> int:
        return self._damage

    def __repr__(self):
        return f"Monster(hp={self.health}, damage={self._damage})"


__all__ = [
    "Health",
    "Character",
    "Player",
    "Monster",
    "MAX_HEALTH",
    "PLAYER_START_HEALTH",
    "BASE_ATTACK",
    "MONSTER_HEALTH_RANGE",
    "MONSTER_DAMAGE_RANGE",
]
