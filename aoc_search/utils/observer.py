"""Runtime timing helpers for searches."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

# Rolling history of the last 1000 search durations in seconds
_HISTORY_LEN = 1000
_search_durations: Deque[float] = deque(maxlen=_HISTORY_LEN)


def record_search(duration: float) -> None:
    """Append a search ``duration`` in seconds to the rolling history."""

    _search_durations.append(duration)


def average_search_time() -> Optional[float]:
    """Return the mean recorded duration, or ``None`` without samples."""

    if not _search_durations:
        return None
    return sum(_search_durations) / len(_search_durations)


def last_search_time() -> Optional[float]:
    return _search_durations[-1] if _search_durations else None


def clear_history() -> None:
    _search_durations.clear()


__all__ = [
    "record_search",
    "average_search_time",
    "last_search_time",
    "clear_history",
    "_search_durations",
]
