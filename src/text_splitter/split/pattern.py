# text_splitter/split/pattern.py
"""
pattern
=======

Does: Split a string on the matches of a regular expression, discarding the
      matched text (capture groups included), under a time budget.
Returns: split_by_pattern() -> list[str]; compile_pattern() -> compiled pattern.
Used by: Callers whose separators are not a fixed string (runs of spaces,
         "," or ";" with optional padding, ...).
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Union

import regex

from text_splitter.errors import InvalidArgument, PatternError, PatternTimeout
from text_splitter.settings import get_settings
from text_splitter.utils import debug

__all__ = ["PatternLike", "compile_pattern", "split_by_pattern", "USE_SETTINGS"]

logger = logging.getLogger(__name__)

PatternLike = Union[str, "regex.Pattern[str]", "re.Pattern[str]"]

# re and regex share flag names but not every bit value (re.ASCII != regex.ASCII)
_RE_FLAG_NAMES = ("IGNORECASE", "LOCALE", "MULTILINE", "DOTALL", "UNICODE", "VERBOSE", "ASCII")

# Sentinel: take the timeout from SplitterSettings
USE_SETTINGS: Any = object()


def _compile(pattern: str, flags: int) -> regex.Pattern[str]:
    debug(f"compile {pattern!r} flags={flags}", topic="pattern")
    try:
        return regex.compile(pattern, flags)
    except regex.error as e:
        raise PatternError(pattern, str(e)) from e


@lru_cache(maxsize=None)
def _compiler_for(cache_size: int):
    """One LRU-wrapped compiler per configured cache size."""
    return lru_cache(maxsize=cache_size)(_compile)


def _regex_flags_of(compiled: re.Pattern[str]) -> int:
    """Translate the flags of a stdlib pattern into `regex` flags."""
    out = 0
    for name in _RE_FLAG_NAMES:
        if compiled.flags & getattr(re, name):
            out |= getattr(regex, name)
    return out


def compile_pattern(pattern: PatternLike, flags: int = 0) -> regex.Pattern[str]:
    """
    Does: Compile `pattern` with the `regex` engine, reusing cached results.
          A regex.Pattern is returned unchanged; a stdlib re.Pattern is
          recompiled with `regex` using the same source and flags.
    Returns: Compiled pattern object.
    Raises: PatternError on invalid syntax; InvalidArgument when flags are
            given together with a compiled pattern.
    """
    if isinstance(pattern, regex.Pattern):
        if flags:
            raise InvalidArgument("flags cannot be combined with a compiled pattern")
        return pattern
    compiler = _compiler_for(get_settings().pattern_cache_size)
    if isinstance(pattern, re.Pattern):
        if flags:
            raise InvalidArgument("flags cannot be combined with a compiled pattern")
        if not isinstance(pattern.pattern, str):
            raise TypeError("bytes patterns cannot split str text")
        return compiler(pattern.pattern, _regex_flags_of(pattern))
    if not isinstance(pattern, str):
        raise TypeError(
            f"pattern must be str, regex.Pattern or re.Pattern, got {type(pattern).__name__}"
        )
    return compiler(pattern, flags)


def split_by_pattern(
    text: str,
    pattern: PatternLike,
    *,
    flags: int = 0,
    timeout: float | None = USE_SETTINGS,
) -> list[str]:
    """
    Does: Return the text between successive non-overlapping matches of
          `pattern`. Zero-width matches cut like Python's re.split.
    Returns: [text] when nothing matches; ["", ""] when one match covers the
             whole input.
    Raises: PatternError for an invalid pattern; PatternTimeout when matching
            runs past `timeout` seconds (defaults to pattern_timeout_sec,
            None disables the limit).

    Example:
        >>> split_by_pattern("a1b22c", r"\\d+")
        ['a', 'b', 'c']
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    compiled = compile_pattern(pattern, flags)
    if timeout is USE_SETTINGS:
        timeout = get_settings().pattern_timeout_sec

    tokens: list[str] = []
    start = 0
    try:
        for m in compiled.finditer(text, timeout=timeout):
            tokens.append(text[start : m.start()])
            start = m.end()
    except TimeoutError as e:
        logger.debug("Pattern %r timed out after %ss", compiled.pattern, timeout)
        raise PatternTimeout(
            f"pattern {compiled.pattern!r} exceeded {timeout}s on input of length {len(text)}"
        ) from e
    tokens.append(text[start:])
    return tokens
