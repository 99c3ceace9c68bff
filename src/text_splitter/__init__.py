"""
text_splitter
=============

Does: Root package for the string-splitting utilities.
Returns: Re-exports the split functions, settings access and error classes.
Used by: `from text_splitter import split_by_char` style imports.
"""

from .errors import InvalidArgument, PatternError, PatternTimeout, SplitError
from .settings import SplitterSettings, get_settings, reload_settings
from .split import (
    compile_pattern,
    count_delimiters,
    split_by_char,
    split_by_chars,
    split_by_pattern,
    split_by_substring,
)

__all__ = [
    # split
    "split_by_char",
    "split_by_chars",
    "split_by_substring",
    "split_by_pattern",
    "compile_pattern",
    "count_delimiters",
    # settings
    "SplitterSettings",
    "get_settings",
    "reload_settings",
    # errors
    "SplitError",
    "InvalidArgument",
    "PatternError",
    "PatternTimeout",
]
__docformat__ = "google"
