# src/text_splitter/utils/load_config.py

"""Load a JSON object from the <data/> directory, validate it, cache it.

The data dir comes from TEXT_SPLITTER_DATA_DIR when set, otherwise from the
first 'data' directory found walking up from this file (the one shipped in
the package). Results are cached per (path, mtime, validator).

Used by settings.py.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

DATA_DIR_ENV_VAR = "TEXT_SPLITTER_DATA_DIR"
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "DATA_DIR_ENV_VAR",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file does not exist or cannot be read."""


class ConfigParseError(ValueError):
    """Raise when the JSON is malformed or the validator rejects it."""


class ConfigTypeError(TypeError):
    """Raise when the top-level JSON value is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _find_data_dir(start: Path) -> Path:
    tried: list[Path] = []
    for p in [start, *start.parents]:
        cand = p / "data"
        if cand.is_dir():
            return cand
        tried.append(cand)
    raise DataDirNotFound("No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried)))


def resolve_data_dir(start: Path | None = None) -> Path:
    """Env override first, then the nearest 'data' dir above `start`."""
    env = os.environ.get(DATA_DIR_ENV_VAR)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return _find_data_dir((start or Path(__file__)).resolve().parent)


def load_config(
    name: str,
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<name>.json as a dict, run `validator` on it, cache the result."""
    data_dir = (base_dir or resolve_data_dir()).resolve()
    file_name = name if name.endswith(".json") else f"{name}.json"
    path = (data_dir / file_name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    key = (path, mtime, validator)
    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[key]

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point TEXT_SPLITTER_DATA_DIR at `path` for the duration of the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV_VAR)
        os.environ[DATA_DIR_ENV_VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV_VAR, None)
        else:
            os.environ[DATA_DIR_ENV_VAR] = self._old
        clear_config_cache()
