import pytest

from maze_adventure.services.movement import DOWN, LEFT, RIGHT, UP, direction_to_delta, is_unit_step


@pytest.mark.parametrize(
    "token,delta",
    [
        ("w", UP),
        ("W", UP),
        ("up", UP),
        ("s", DOWN),
        ("down", DOWN),
        ("a", LEFT),
        ("Left", LEFT),
        ("d", RIGHT),
        (" right ", RIGHT),
    ],
)
def test_direction_tokens(token, delta):
    assert direction_to_delta(token) == delta


@pytest.mark.parametrize("token", ["", None, "x", "north", "ww", "q"])
def test_unknown_tokens_map_to_none(token):
    assert direction_to_delta(token) is None


def test_deltas_are_axis_aligned_units():
    assert UP == (-1, 0) and DOWN == (1, 0) and LEFT == (0, -1) and RIGHT == (0, 1)
    assert is_unit_step(0, 1)
    assert not is_unit_step(0, 0)
    assert not is_unit_step(1, 1)
