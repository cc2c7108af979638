"""Items a player can pick up: weapons (kept in the inventory) and potions (drunk on pickup)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

WEAPON_DAMAGE_RANGE = (10, 30)
POTION_HEAL_AMOUNT = 20


@dataclass(frozen=True)
class Weapon:
    name: str
    damage: int

    def pickup_message(self) -> str:
        return f"You just picked up {self.name}, it has {self.damage} in damage points."


@dataclass(frozen=True)
class Potion:
    name: str
    heal_amount: int = POTION_HEAL_AMOUNT

    def pickup_message(self) -> str:
        return f"You just picked up {self.name}, it has {self.heal_amount} in health points."


@dataclass
class Inventory:
    """Append-only weapon list, ordered by acquisition. Duplicates are allowed."""

    weapons: List[Weapon] = field(default_factory=list)

    def add_weapon(self, weapon: Weapon) -> None:
        self.weapons.append(weapon)

    def strongest_weapon_damage(self) -> int:
        return max((w.damage for w in self.weapons), default=0)

    def __len__(self) -> int:
        return len(self.weapons)

    def __iter__(self) -> Iterator[Weapon]:
        return iter(self.weapons)


__all__ = ["Weapon", "Potion", "Inventory", "WEAPON_DAMAGE_RANGE", "POTION_HEAL_AMOUNT"]
