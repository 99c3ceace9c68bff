"""
log.py.

Does: Topic-gated debug printer controlled by TEXT_SPLITTER_DEBUG_TOPICS
      (comma-separated topic names, or 'all').
Returns: Timestamped "[ts] [topic][LEVEL] msg" lines on stderr.
Used by: pattern compilation and settings loading when tracing is wanted.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "is_enabled", "reload_topics", "ENV_VAR"]

ENV_VAR = "TEXT_SPLITTER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read enabled topics from TEXT_SPLITTER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on. Nothing is on by default."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "split",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line for `topic` when that topic is enabled."""
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
