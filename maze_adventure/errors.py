"""Exception types raised by the maze core.

``InvalidArgument`` is the contract error for constructor-level validation
(monster stat ranges, maze dimensions, tile occupants, engine start cell).
``PlacementError`` guards the rejection-sampling scatter phases against
budgets that cannot be satisfied.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A value passed to a constructor is outside its valid range."""


class PlacementError(RuntimeError):
    """A placement budget exceeds the number of eligible cells."""


__all__ = ["InvalidArgument", "PlacementError"]
