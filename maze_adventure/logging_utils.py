"""Structured logging for the maze game.

Records are single lines of ``key=value`` pairs (or JSON objects when
``MAZE_LOG_JSON`` is set) written to stderr, so they never interleave with a
maze rendered on stdout.

Usage:
    from .logging_utils import get_logger
    log = get_logger("maze.engine")
    log.info(event="game_won", moves=42, position=(9, 9))

Coordinates render as ``row,col`` and enum members as their value.
Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time
from enum import Enum
from typing import Any, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_ALIASES = {"warning": "warn", "err": "error", "dbg": "debug"}


def _parse_level(raw: Optional[str], fallback: int) -> int:
    if not raw:
        return fallback
    name = raw.strip().lower()
    return LEVELS.get(_ALIASES.get(name, name), fallback)


CURRENT_LEVEL = _parse_level(os.getenv("MAZE_LOG_LEVEL"), LEVELS["warn"])
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _text_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool) or isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, tuple):
        return ",".join(_text_value(v) for v in value)
    return str(value).replace(" ", "_")


def _json_default(value: Any):
    if isinstance(value, Enum):
        return value.value
    return repr(value)


def _format(level: str, fields: Dict[str, Any]) -> str:
    ts = int(time.time())
    present = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        return json.dumps({"level": level, "ts": ts, **present}, separators=(",", ":"), default=_json_default)
    return " ".join([f"level={level}", f"ts={ts}"] + [f"{k}={_text_value(v)}" for k, v in present.items()])


def set_level(level: str) -> None:
    """Change the process-wide threshold; unknown names leave it unchanged."""
    global CURRENT_LEVEL
    CURRENT_LEVEL = _parse_level(level, CURRENT_LEVEL)


class _Logger:
    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **context) -> "_Logger":
        """Child logger that adds ``context`` to every record."""
        return _Logger(self.name, {**self.context, **context})

    def enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= CURRENT_LEVEL

    def _log(self, lvl: str, fields: Dict[str, Any]) -> None:
        if not self.enabled(lvl):
            return
        record = {"logger": self.name, **self.context, **fields}
        print(_format(lvl, record), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_LOGGER_CACHE: Dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("maze")
