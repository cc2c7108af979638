import random

from maze_adventure.loot.generator import (
    POTION_ADJECTIVES,
    WEAPON_ADJECTIVES,
    WEAPON_TYPES,
    brew_potion,
    forge_weapon,
)
from maze_adventure.services.spawn_service import sample_distribution, spawn_monster


def test_weapon_names_and_damage(rng):
    for _ in range(100):
        w = forge_weapon(rng)
        adjective, kind = w.name.split(" ")
        assert adjective in WEAPON_ADJECTIVES
        assert kind in WEAPON_TYPES
        assert 10 <= w.damage <= 30


def test_potion_names(rng):
    for _ in range(50):
        p = brew_potion(rng)
        adjective, suffix = p.name.split(" ")
        assert adjective in POTION_ADJECTIVES
        assert suffix == "elixir"
        assert p.heal_amount == 20


def test_spawned_monsters_cover_the_bands():
    freq = sample_distribution(random.Random(5), samples=2000)
    assert set(freq["health"]) <= set(range(30, 51))
    assert set(freq["damage"]) <= set(range(10, 31))
    # Both ends of each band are reachable
    assert {30, 50} <= set(freq["health"])
    assert {10, 30} <= set(freq["damage"])


def test_spawn_is_reproducible():
    a = spawn_monster(random.Random(11))
    b = spawn_monster(random.Random(11))
    assert (a.health, a.damage) == (b.health, b.damage)
