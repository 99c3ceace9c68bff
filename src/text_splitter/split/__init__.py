# text_splitter/split/__init__.py
"""
split
=====

Does: Expose the splitting functions.
Exports: split_by_char, split_by_chars, split_by_substring, split_by_pattern,
         compile_pattern, count_delimiters
Used by: text_splitter package root and library callers.
"""

from .pattern import (
    compile_pattern,
    split_by_pattern,
)
from .split_core import (
    count_delimiters,
    split_by_char,
    split_by_chars,
    split_by_substring,
)

__all__ = [
    "split_by_char",
    "split_by_chars",
    "split_by_substring",
    "split_by_pattern",
    "compile_pattern",
    "count_delimiters",
]
