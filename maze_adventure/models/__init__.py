"""Entity model: characters (player, monster, health) and items (weapons, potions)."""

from .characters import (  # noqa: F401
    BASE_ATTACK,
    MAX_HEALTH,
    MONSTER_DAMAGE_RANGE,
    MONSTER_HEALTH_RANGE,
    PLAYER_START_HEALTH,
    Character,
    Health,
    Monster,
    Player,
)
from .items import POTION_HEAL_AMOUNT, WEAPON_DAMAGE_RANGE, Inventory, Potion, Weapon  # noqa: F401

__all__ = [
    "Character",
    "Health",
    "Monster",
    "Player",
    "Inventory",
    "Potion",
    "Weapon",
    "BASE_ATTACK",
    "MAX_HEALTH",
    "MONSTER_DAMAGE_RANGE",
    "MONSTER_HEALTH_RANGE",
    "PLAYER_START_HEALTH",
    "POTION_HEAL_AMOUNT",
    "WEAPON_DAMAGE_RANGE",
]
