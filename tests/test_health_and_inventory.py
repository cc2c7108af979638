import itertools

from maze_adventure.models import (
    BASE_ATTACK,
    MAX_HEALTH,
    PLAYER_START_HEALTH,
    Health,
    Inventory,
    Player,
    Potion,
    Weapon,
)


def test_take_damage_goes_negative_without_floor():
    h = Health(10)
    h.take_damage(25)
    assert h.current == -15
    assert h.is_dead()


def test_is_dead_iff_at_or_below_zero():
    assert Health(0).is_dead()
    assert Health(-1).is_dead()
    assert not Health(1).is_dead()


def test_heal_is_capped_at_ceiling():
    h = Health(140)
    h.heal(20)
    assert h.current == MAX_HEALTH == 150
    for _ in range(50):
        h.heal(20)
    assert h.current == 150


def test_heal_below_cap_adds_exactly():
    h = Health(50)
    h.heal(20)
    assert h.current == 70


def test_empty_inventory_strongest_is_zero():
    assert Inventory().strongest_weapon_damage() == 0


def test_strongest_weapon_independent_of_insertion_order():
    weapons = [Weapon("ancient sword", 12), Weapon("blazing hammer", 29), Weapon("mystic spear", 17)]
    for order in itertools.permutations(weapons):
        inv = Inventory()
        for w in order:
            inv.add_weapon(w)
        assert inv.strongest_weapon_damage() == 29


def test_inventory_is_append_only_and_keeps_duplicates():
    inv = Inventory()
    w = Weapon("mystic spear", 15)
    inv.add_weapon(w)
    inv.add_weapon(w)
    assert len(inv) == 2
    assert list(inv) == [w, w]


def test_player_defaults():
    p = Player("Ada")
    assert p.name == "Ada"
    assert p.health == PLAYER_START_HEALTH
    assert p.attack_power() == BASE_ATTACK


def test_player_attack_power_adds_strongest_weapon():
    p = Player("Ada")
    p.pick_up_weapon(Weapon("ancient sword", 12))
    p.pick_up_weapon(Weapon("blazing hammer", 21))
    assert p.attack_power() == BASE_ATTACK + 21


def test_player_drinks_potion_for_fixed_amount():
    p = Player("Ada", health=60)
    p.drink(Potion("gold elixir"))
    assert p.health == 80


def test_pickup_messages():
    assert Weapon("ancient sword", 12).pickup_message() == "You just picked up ancient sword, it has 12 in damage points."
    assert Potion("dark elixir").pickup_message() == "You just picked up dark elixir, it has 20 in health points."
