"""Monster spawn service.

Draws monster stats uniformly from the configured health/damage bands. The
caller owns the random generator so generation stays reproducible per seed.
"""

from __future__ import annotations

import random
from typing import Dict

from ..models import MONSTER_DAMAGE_RANGE, MONSTER_HEALTH_RANGE, Monster


def spawn_monster(rng: random.Random) -> Monster:
    health = rng.randint(*MONSTER_HEALTH_RANGE)
    damage = rng.randint(*MONSTER_DAMAGE_RANGE)
    return Monster(health, damage)


def sample_distribution(rng: random.Random, samples: int = 200) -> Dict[str, Dict[int, int]]:
    """Return frequency tables of spawned health and damage values (diagnostics / tests)."""
    health: Dict[int, int] = {}
    damage: Dict[int, int] = {}
    for _ in range(samples):
        m = spawn_monster(rng)
        health[m.health] = health.get(m.health, 0) + 1
        damage[m.damage] = damage.get(m.damage, 0) + 1
    return {"health": health, "damage": damage}


__all__ = ["spawn_monster", "sample_distribution"]
