"""Loading and resolving solver configuration.

Settings come from ``config.toml`` shipped with the package (or the file named
by ``SUDOKU_CONFIG``), can be overridden by ``SUDOKU_*`` environment
variables, and finally by command-line flags.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped,no-redef]

from .step_runner import TRACE_LEVELS


CONFIG_ENV_VAR = "SUDOKU_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_CONFIG_FILENAME = "config.toml"

_MISSING = object()

_LOGGER = logging.getLogger(__name__)


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the configuration as a dictionary."""

    path = _config_path()
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        raise RuntimeError(f"Configuration file '{path}' was not found") from exc


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not _MISSING:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _choice(env: Mapping[str, str], name: str, choices: Tuple[str, ...], default: str) -> str:
    """Return the entry of ``choices`` named by ``env[name]``, ignoring case."""

    raw = env.get(name)
    if not raw:
        return default
    for choice in choices:
        if choice.lower() == raw.strip().lower():
            return choice
    _LOGGER.warning("Ignoring %s=%r; expected one of %s", name, raw, ", ".join(choices))
    return default


def _coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class Settings:
    """Finalised settings after precedence resolution."""

    max_steps: int
    console_level: str
    log_file: str
    file_level: str
    log_format: str
    trace_level: str
    events_enabled: bool
    events_dir: str
    events_max_bytes: int

    def override(self, **changes: Any) -> "Settings":
        """Apply command-line overrides; ``None`` values are ignored."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def resolve_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Merge TOML values with ``SUDOKU_*`` environment overrides."""

    env = os.environ if env is None else env

    max_steps = _coerce_int(get_section("solver.max_steps", 1000)) or 1000
    env_steps = _coerce_int(env.get("SUDOKU_MAX_STEPS"))
    if env_steps is not None and env_steps > 0:
        max_steps = env_steps

    events_enabled = bool(get_section("events.enabled", False))
    env_enabled = _coerce_bool(env.get("SUDOKU_EVENTS_ENABLED"))
    if env_enabled is not None:
        events_enabled = env_enabled
    events_dir = str(get_section("events.dir", "logs/solve"))
    if env.get("SUDOKU_EVENTS_DIR"):
        events_dir = env["SUDOKU_EVENTS_DIR"]
        if env_enabled is None:
            events_enabled = True

    return Settings(
        max_steps=max_steps,
        console_level=_choice(
            env,
            "SUDOKU_LOG_LEVEL",
            LOG_LEVELS,
            str(get_section("logging.console_level", "INFO")).upper(),
        ),
        log_file=str(env.get("SUDOKU_LOG_FILE", get_section("logging.file", "sudoku.log"))),
        file_level=str(get_section("logging.file_level", "DEBUG")).upper(),
        log_format=str(
            get_section("logging.format", "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s")
        ),
        trace_level=_choice(
            env,
            "SUDOKU_TRACE_LEVEL",
            TRACE_LEVELS,
            str(get_section("trace.level", "none")).lower(),
        ),
        events_enabled=events_enabled,
        events_dir=events_dir,
        events_max_bytes=_coerce_int(get_section("events.max_bytes", 0)) or 100 * 1024 * 1024,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_LEVELS",
    "Settings",
    "get_config",
    "get_section",
    "reload",
    "resolve_settings",
]
