"""Loot generation utilities.

Weapons get a two-word name (adjective + weapon type) and a damage roll;
potions get a one-word adjective and the fixed ``elixir`` suffix. Every pick
is uniform over its list, drawn from the caller's random generator.
"""
from __future__ import annotations

import random
from typing import Sequence

from ..models import WEAPON_DAMAGE_RANGE, Potion, Weapon

WEAPON_ADJECTIVES: Sequence[str] = ("ancient", "blazing", "mystic")
WEAPON_TYPES: Sequence[str] = ("sword", "hammer", "spear")
POTION_ADJECTIVES: Sequence[str] = ("gold", "dark", "silver")
POTION_SUFFIX = "elixir"


def forge_weapon(rng: random.Random) -> Weapon:
    name = f"{rng.choice(WEAPON_ADJECTIVES)} {rng.choice(WEAPON_TYPES)}"
    return Weapon(name, rng.randint(*WEAPON_DAMAGE_RANGE))


def brew_potion(rng: random.Random) -> Potion:
    return Potion(f"{rng.choice(POTION_ADJECTIVES)} {POTION_SUFFIX}")


__all__ = [
    "forge_weapon",
    "brew_potion",
    "WEAPON_ADJECTIVES",
    "WEAPON_TYPES",
    "POTION_ADJECTIVES",
    "POTION_SUFFIX",
]
