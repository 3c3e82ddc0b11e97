# app/config.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional
import json

from app.errors import ConfigError

DEFAULT_TICK_MS = 1000


class Mode(str, Enum):
    TIME = "time"
    WORDS = "words"
    QUOTE = "quote"

    @property
    def is_time_bounded(self) -> bool:
        return self is Mode.TIME


@dataclass(frozen=True)
class SessionConfig:
    mode: Mode
    mode_option: int
    text: str
    tick_ms: int = DEFAULT_TICK_MS

    @property
    def ceiling(self) -> Optional[int]:
        """Stopping second for time-bounded modes, None otherwise."""
        return self.mode_option if self.mode.is_time_bounded else None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SessionConfig":
        required = {"mode", "mode_option", "text"}
        missing = required - set(d.keys())
        if missing:
            raise ConfigError(f"Missing session keys: {', '.join(sorted(missing))}")

        try:
            mode = Mode(str(d["mode"]).lower())
        except ValueError:
            raise ConfigError(f"Unknown mode: {d['mode']!r}") from None

        option = d["mode_option"]
        if isinstance(option, bool) or not isinstance(option, int):
            raise ConfigError(f"mode_option must be an integer, got {option!r}")
        if mode.is_time_bounded and option <= 0:
            raise ConfigError("time mode needs a positive number of seconds")

        tick_ms = d.get("tick_ms", DEFAULT_TICK_MS)
        if isinstance(tick_ms, bool) or not isinstance(tick_ms, int) or tick_ms <= 0:
            raise ConfigError(f"tick_ms must be a positive integer, got {tick_ms!r}")

        text = d["text"]
        if not isinstance(text, str):
            raise ConfigError("text must be a string")
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        return cls(mode=mode, mode_option=option, text=text, tick_ms=tick_ms)


def load_session_config(path: str | Path) -> SessionConfig:
    """Read a session description from a JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read session config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Session config {path} must hold a JSON object")
    return SessionConfig.from_dict(data)
