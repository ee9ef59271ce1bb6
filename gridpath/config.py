# gridpath/config.py
#!/usr/bin/env python3
"""
Settings for the visualizer.

Resolution order (same as the viewer's old mode switch):
- defaults below
- ENV: GRIDPATH_CELL_SIZE, GRIDPATH_STEP_MS, GRIDPATH_LOG_LEVEL
- CLI: --cell-size=N, --step-ms=N, --log-level=NAME
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from loguru import logger

# ---------- Fixed grid constants ----------
GRID_COLS = 50
GRID_ROWS = 30
CELL_SIZE = 20
ANIMATION_SPEED_MS = 10          # ms between visited frames
DEFAULT_START: Tuple[int, int] = (5, 15)   # (col, row)
DEFAULT_END:   Tuple[int, int] = (44, 15)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_ENV_KEYS = {
    "cell_size": "GRIDPATH_CELL_SIZE",
    "step_ms":   "GRIDPATH_STEP_MS",
    "log_level": "GRIDPATH_LOG_LEVEL",
}
_CLI_KEYS = {
    "--cell-size": "cell_size",
    "--step-ms":   "step_ms",
    "--log-level": "log_level",
}


@dataclass(frozen=True)
class Settings:
    cell_size: int = CELL_SIZE
    step_ms: int = ANIMATION_SPEED_MS
    log_level: str = "INFO"

    @property
    def path_step_ms(self) -> int:
        """Path frames play at half the speed of visited frames."""
        return self.step_ms * 2


def _parse_int(key: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {value}")
    return value


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables, then --key=value arguments."""
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    raw = {}
    for field_name, env_key in _ENV_KEYS.items():
        if env.get(env_key):
            raw[field_name] = env[env_key]
    for arg in argv:
        if "=" not in arg:
            continue
        key, value = arg.split("=", 1)
        if key in _CLI_KEYS:
            raw[_CLI_KEYS[key]] = value

    kwargs = {}
    if "cell_size" in raw:
        kwargs["cell_size"] = _parse_int("cell_size", raw["cell_size"], minimum=4)
    if "step_ms" in raw:
        kwargs["step_ms"] = _parse_int("step_ms", raw["step_ms"], minimum=0)
    if "log_level" in raw:
        kwargs["log_level"] = _parse_level(raw["log_level"])
    return Settings(**kwargs)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a single stderr sink at `level`."""
    level = _parse_level(level)
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
               "<cyan>{name}</cyan> - <level>{message}</level>",
    )
