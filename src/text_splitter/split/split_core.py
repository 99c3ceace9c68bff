# text_splitter/split/split_core.py

"""
split_core.py.

Does: Split a string on one character, on any of a set of characters, or on
      a separator substring, keeping empty tokens.
Returns: list[str] with len == count_delimiters(text, delim) + 1; joining the
         tokens with the delimiter gives back the input.
Used by: Anything that needs a plain, predictable tokenizer.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from text_splitter.errors import InvalidArgument
from text_splitter.settings import get_settings

__all__ = [
    "split_by_char",
    "split_by_chars",
    "split_by_substring",
    "count_delimiters",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Argument checks
# ─────────────────────────────────────────────────────────────────────────────


def _check_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")


def _check_char(ch: str, what: str = "delimiter") -> None:
    if not isinstance(ch, str):
        raise TypeError(f"{what} must be str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise InvalidArgument(f"{what} must be a single character, got {ch!r}")


def _char_set(delimiters: Iterable[str]) -> frozenset[str]:
    """
    Does: Turn the delimiter iterable into a frozenset of single characters.
    Returns: frozenset[str] (may be empty).
    """
    if isinstance(delimiters, str):
        return frozenset(delimiters)
    out = frozenset(delimiters)
    for ch in out:
        _check_char(ch, "delimiter set member")
    return out


def _empty_delimiter(text: str, what: str) -> list[str]:
    """Apply the configured policy for an empty substring / character set."""
    if get_settings().empty_delimiter_policy == "raise":
        raise InvalidArgument(f"{what} is empty; no cut point can be defined")
    log.debug("Empty %s, returning input as a single token", what)
    return [text]


# ─────────────────────────────────────────────────────────────────────────────
# Splitters
# ─────────────────────────────────────────────────────────────────────────────


def split_by_char(text: str, delimiter: str, *, drop_trailing_empty: bool = False) -> list[str]:
    """
    Does: Cut `text` before and after every occurrence of `delimiter`.
          Consecutive, leading and trailing delimiters give empty tokens.
    Returns: Tokens in input order; [text] when the delimiter is absent and
             [""] for empty input. With drop_trailing_empty=True a single
             trailing "" is dropped, so "" -> [] and "a," -> ["a"].
    Raises: InvalidArgument if `delimiter` is not exactly one character.

    Example:
        >>> split_by_char("Hello,world", ",")
        ['Hello', 'world']
    """
    _check_text(text)
    _check_char(delimiter)

    tokens: list[str] = []
    start = 0
    end = text.find(delimiter)
    while end != -1:
        tokens.append(text[start:end])
        start = end + 1
        end = text.find(delimiter, start)
    tokens.append(text[start:])

    if drop_trailing_empty and tokens[-1] == "":
        tokens.pop()
    return tokens


def split_by_chars(text: str, delimiters: Iterable[str]) -> list[str]:
    """
    Does: Cut `text` at every character that belongs to `delimiters`.
          Order inside `delimiters` does not matter; two delimiters in a row
          (of any kind) give an empty token.
    Returns: Tokens in input order; [text] when nothing matches.
    Raises: InvalidArgument for a member that is not a single character, or
            for an empty set when empty_delimiter_policy is "raise".

    Example:
        >>> split_by_chars("Hello,world|open|close", {",", "|"})
        ['Hello', 'world', 'open', 'close']
    """
    _check_text(text)
    cuts = _char_set(delimiters)
    if not cuts:
        return _empty_delimiter(text, "delimiter set")

    tokens: list[str] = []
    start = 0
    for i, ch in enumerate(text):
        if ch in cuts:
            tokens.append(text[start:i])
            start = i + 1
    tokens.append(text[start:])
    return tokens


def split_by_substring(text: str, delimiter: str) -> list[str]:
    """
    Does: Cut `text` at every non-overlapping occurrence of `delimiter`,
          left to right; the search resumes after the whole matched span.
    Returns: Tokens in input order; [text] when the delimiter is absent.
             An empty delimiter returns [text] unless empty_delimiter_policy
             is "raise".
    Raises: InvalidArgument for an empty delimiter under the "raise" policy.

    Example:
        >>> split_by_substring("aXXbXXc", "XX")
        ['a', 'b', 'c']
    """
    _check_text(text)
    if not isinstance(delimiter, str):
        raise TypeError(f"delimiter must be str, got {type(delimiter).__name__}")
    if not delimiter:
        return _empty_delimiter(text, "delimiter substring")

    step = len(delimiter)
    tokens: list[str] = []
    start = 0
    end = text.find(delimiter)
    while end != -1:
        tokens.append(text[start:end])
        start = end + step
        end = text.find(delimiter, start)
    tokens.append(text[start:])
    return tokens


def count_delimiters(
    text: str, delimiter: str | Iterable[str], *, chars: bool = False
) -> int:
    """
    Does: Count cut points the way the splitters see them. A str is a
          substring (non-overlapping; a 1-char str is a character) unless
          chars=True, which reads it as a character set like split_by_chars
          does. Any other iterable is always a character set.
    Returns: Number of cuts; 0 for an empty substring or empty set.

    Example:
        >>> count_delimiters("a+b=c", "+=", chars=True)
        2
    """
    _check_text(text)
    if isinstance(delimiter, str) and not chars:
        return text.count(delimiter) if delimiter else 0
    cuts = _char_set(delimiter)
    return sum(1 for ch in text if ch in cuts)
