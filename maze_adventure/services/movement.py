"""Direction input mapping.

Translates a raw direction token (console word, WASD letter or Textual key
name) into one of the four axis-aligned unit deltas ``(row_delta, col_delta)``.
Rows grow downward, so "up" is ``(-1, 0)``.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

Delta = Tuple[int, int]

UP: Delta = (-1, 0)
DOWN: Delta = (1, 0)
LEFT: Delta = (0, -1)
RIGHT: Delta = (0, 1)

DIRECTIONS: Dict[str, Delta] = {
    "w": UP,
    "up": UP,
    "s": DOWN,
    "down": DOWN,
    "a": LEFT,
    "left": LEFT,
    "d": RIGHT,
    "right": RIGHT,
}

UNIT_STEPS = frozenset(DIRECTIONS.values())


def direction_to_delta(token: str | None) -> Optional[Delta]:
    """Return the delta for ``token`` or None when it is not a direction."""
    if not token:
        return None
    return DIRECTIONS.get(token.strip().lower())


def is_unit_step(row_delta: int, col_delta: int) -> bool:
    return (row_delta, col_delta) in UNIT_STEPS


__all__ = ["Delta", "UP", "DOWN", "LEFT", "RIGHT", "DIRECTIONS", "direction_to_delta", "is_unit_step"]
