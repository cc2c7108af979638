"""Tile model: a closed set of cell variants, each with a fixed display glyph.

A tile is a ``TileKind`` tag plus an optional occupant (the player, monster,
weapon or potion wrapped by the cell). Tiles are immutable; grid state changes
by replacing a cell's tile wholesale, never by editing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..errors import InvalidArgument
from ..models import Monster, Player, Potion, Weapon


class TileKind(Enum):
    EMPTY = "."
    WALL = "#"
    EXIT = "E"
    PLAYER = "@"
    MONSTER = "M"
    WEAPON = "W"
    POTION = "P"

    @property
    def glyph(self) -> str:
        return self.value


Occupant = Union[Player, Monster, Weapon, Potion]

_OCCUPANT_TYPES = {
    TileKind.PLAYER: Player,
    TileKind.MONSTER: Monster,
    TileKind.WEAPON: Weapon,
    TileKind.POTION: Potion,
}


@dataclass(frozen=True)
class Tile:
    kind: TileKind
    occupant: Optional[Occupant] = None

    def __post_init__(self):
        expected = _OCCUPANT_TYPES.get(self.kind)
        if expected is None:
            if self.occupant is not None:
                raise InvalidArgument(f"{self.kind.name} tiles do not hold an occupant")
        elif not isinstance(self.occupant, expected):
            raise InvalidArgument(f"{self.kind.name} tile requires a {expected.__name__}, got {self.occupant!r}")

    @property
    def glyph(self) -> str:
        return self.kind.glyph

    # Typed accessors; each returns None for tiles of another kind.
    @property
    def player(self) -> Optional[Player]:
        return self.occupant if self.kind is TileKind.PLAYER else None

    @property
    def monster(self) -> Optional[Monster]:
        return self.occupant if self.kind is TileKind.MONSTER else None

    @property
    def weapon(self) -> Optional[Weapon]:
        return self.occupant if self.kind is TileKind.WEAPON else None

    @property
    def potion(self) -> Optional[Potion]:
        return self.occupant if self.kind is TileKind.POTION else None

    @property
    def is_empty(self) -> bool:
        return self.kind is TileKind.EMPTY

    @property
    def is_wall(self) -> bool:
        return self.kind is TileKind.WALL


EMPTY = Tile(TileKind.EMPTY)
WALL = Tile(TileKind.WALL)
EXIT = Tile(TileKind.EXIT)


def player_tile(player: Player) -> Tile:
    return Tile(TileKind.PLAYER, player)


def monster_tile(monster: Monster) -> Tile:
    return Tile(TileKind.MONSTER, monster)


def weapon_tile(weapon: Weapon) -> Tile:
    return Tile(TileKind.WEAPON, weapon)


def potion_tile(potion: Potion) -> Tile:
    return Tile(TileKind.POTION, potion)


def kind_to_name(kind: TileKind) -> str:
    return kind.name.lower()


__all__ = [
    "TileKind",
    "Tile",
    "EMPTY",
    "WALL",
    "EXIT",
    "player_tile",
    "monster_tile",
    "weapon_tile",
    "potion_tile",
    "kind_to_name",
]
