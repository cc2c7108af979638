import pytest

from maze_adventure.errors import InvalidArgument
from maze_adventure.models import Monster, Player


@pytest.mark.parametrize("health", [29, 51, 0, -5])
def test_monster_health_out_of_range_rejected(health):
    with pytest.raises(InvalidArgument):
        Monster(health, 15)


@pytest.mark.parametrize("damage", [9, 31])
def test_monster_damage_out_of_range_rejected(damage):
    with pytest.raises(InvalidArgument):
        Monster(40, damage)


@pytest.mark.parametrize("health,damage", [(30, 10), (50, 30), (30, 30), (50, 10)])
def test_monster_boundaries_accepted(health, damage):
    m = Monster(health, damage)
    assert m.health == health
    assert m.damage == damage


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError, match="between 30 and 50"):
        Monster(51, 10)


def test_monster_attack_deals_fixed_damage():
    p = Player("Ada")
    m = Monster(40, 17)
    assert m.attack(p) == 17
    assert p.health == 100 - 17


def test_player_attack_hits_monster():
    m = Monster(30, 10)
    Player("Ada").attack(m)
    assert m.health == 20
    assert not m.is_dead()
