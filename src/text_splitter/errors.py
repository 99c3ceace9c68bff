# text_splitter/errors.py
"""
errors.py.

Does: Define the exception hierarchy raised by the splitting functions.
Used by: split_core, pattern, settings; callers catching SplitError.
"""

from __future__ import annotations

__all__ = [
    "SplitError",
    "InvalidArgument",
    "PatternError",
    "PatternTimeout",
]


class SplitError(ValueError):
    """Base class for every error raised by text_splitter."""


class InvalidArgument(SplitError):
    """Raise when a delimiter cannot define a cut point (empty, wrong length)."""


class PatternError(SplitError):
    """Raise when a regular expression fails to compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class PatternTimeout(SplitError, TimeoutError):
    """Raise when matching a pattern exceeds its time budget."""
