from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..errors import InvalidArgument
from ..logging_utils import get_logger

MIN_DIMENSION = 10
DEFAULT_PLAYER_NAME = "Hero"

log = get_logger("maze.config")


def validate_dimension(label: str, value) -> int:
    """Return ``value`` as an int or raise ``InvalidArgument`` when below MIN_DIMENSION."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{label} must be an integer, got {value!r}")
    if value < MIN_DIMENSION:
        raise InvalidArgument(f"{label} must be at least {MIN_DIMENSION}, got {value}")
    return value


def parse_dimension(raw: str | None) -> Optional[int]:
    """Parse user/env text into a valid dimension, or None when it is not one."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= MIN_DIMENSION else None


@dataclass
class MazeConfig:
    rows: int = MIN_DIMENSION
    columns: int = MIN_DIMENSION
    seed: Optional[int] = None
    player_name: str = DEFAULT_PLAYER_NAME

    def __post_init__(self):
        self.rows = validate_dimension("rows", self.rows)
        self.columns = validate_dimension("columns", self.columns)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "MazeConfig":
        """Build a config from ``MAZE_*`` environment variables.

        Explicit keyword overrides (e.g. CLI flags) win over the environment;
        ``None`` overrides are ignored. Unparseable env values are logged and
        skipped so a bad ``.env`` never prevents a game from starting.
        """
        env = os.environ if environ is None else environ
        values = {}
        for key, attr in (("MAZE_ROWS", "rows"), ("MAZE_COLUMNS", "columns")):
            if key in env:
                parsed = parse_dimension(env[key])
                if parsed is None:
                    log.warn(event="config_ignored", key=key, value=env[key])
                else:
                    values[attr] = parsed
        if env.get("MAZE_SEED"):
            try:
                values["seed"] = int(env["MAZE_SEED"])
            except ValueError:
                log.warn(event="config_ignored", key="MAZE_SEED", value=env["MAZE_SEED"])
        if env.get("MAZE_PLAYER_NAME"):
            values["player_name"] = env["MAZE_PLAYER_NAME"]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MazeConfig", "MIN_DIMENSION", "DEFAULT_PLAYER_NAME", "validate_dimension", "parse_dimension"]
