# text_splitter/settings.py
"""
settings.

Does: Load splitter_settings.json through load_config, validate it, and expose
      it as a frozen SplitterSettings value.
Returns: get_settings() -> SplitterSettings; reload_settings() drops caches.
Used by: split_core (empty delimiter policy) and pattern (timeout, cache size).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Any, Literal

from text_splitter.utils import (
    ConfigFileNotFound,
    DataDirNotFound,
    clear_config_cache,
    debug,
    load_config,
)

__all__ = [
    "EmptyDelimiterPolicy",
    "SETTINGS_FILE",
    "SplitterSettings",
    "get_settings",
    "reload_settings",
    "validate_settings",
]

log = logging.getLogger(__name__)

EmptyDelimiterPolicy = Literal["noop", "raise"]
SETTINGS_FILE = "splitter_settings"
_POLICIES = ("noop", "raise")


@dataclass(frozen=True)
class SplitterSettings:
    """Runtime knobs for the splitters.

    Attributes:
        empty_delimiter_policy: "noop" returns the input as one token when the
            substring or character set is empty; "raise" raises InvalidArgument.
        pattern_timeout_sec: Time budget per pattern split, None for no limit.
        pattern_cache_size: Max number of compiled patterns kept in memory.
    """

    empty_delimiter_policy: EmptyDelimiterPolicy = "noop"
    pattern_timeout_sec: float | None = 1.0
    pattern_cache_size: int = 256


def validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    """Does: Reject unknown keys and bad values. Returns: a cleaned copy."""
    known = {f.name for f in fields(SplitterSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"unknown settings: {', '.join(unknown)}")

    out = dict(raw)
    policy = out.get("empty_delimiter_policy", "noop")
    if policy not in _POLICIES:
        raise ValueError(f"empty_delimiter_policy must be one of {_POLICIES}, got {policy!r}")

    timeout = out.get("pattern_timeout_sec", 1.0)
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError(f"pattern_timeout_sec must be a positive number or null, got {timeout!r}")
        out["pattern_timeout_sec"] = float(timeout)

    size = out.get("pattern_cache_size", 256)
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"pattern_cache_size must be a positive integer, got {size!r}")
    return out


@lru_cache(maxsize=1)
def get_settings() -> SplitterSettings:
    """
    Does: Read and validate splitter_settings.json once.
    Returns: SplitterSettings; the dataclass defaults when the data dir or
             the settings file is missing. Malformed files still raise.
    """
    try:
        data = load_config(SETTINGS_FILE, validator=validate_settings)
    except (ConfigFileNotFound, DataDirNotFound) as e:
        log.debug("No settings file (%s), using defaults", e)
        data = {}
    settings = SplitterSettings(**data)
    log.debug("Loaded splitter settings: %s", settings)
    debug(f"settings loaded: {settings}", topic="settings")
    return settings


def reload_settings() -> SplitterSettings:
    """Does: Drop cached config/settings and re-read them."""
    clear_config_cache()
    get_settings.cache_clear()
    return get_settings()
