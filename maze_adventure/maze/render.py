"""Text rendering of a maze grid: one glyph per cell, newline-terminated rows."""

from __future__ import annotations

from typing import Dict, Optional

from .cells import Grid
from .tiles import TileKind


def render_grid(grid: Grid) -> str:
    return "".join("".join(tile.glyph for tile in row) + "\n" for row in grid)


def render_grid_colored(grid: Grid, palette: Optional[Dict[TileKind, str]] = None, reset: str = "") -> str:
    """Like ``render_grid`` but wraps each glyph in a per-kind prefix (e.g. ANSI colors)."""
    if not palette:
        return render_grid(grid)
    lines = []
    for row in grid:
        parts = []
        for tile in row:
            prefix = palette.get(tile.kind, "")
            parts.append(f"{prefix}{tile.glyph}{reset}" if prefix else tile.glyph)
        lines.append("".join(parts) + "\n")
    return "".join(lines)


__all__ = ["render_grid", "render_grid_colored"]
