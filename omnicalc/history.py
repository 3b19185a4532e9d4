"""Bounded calculation history, newest first."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from omnicalc.models import HistoryEntry

DEFAULT_CAPACITY = 10


class HistoryLog:
    """Most-recent-first log of successful calculations.

    Backed by a deque with ``maxlen`` so prepending past capacity evicts the
    oldest entry from the tail.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or DEFAULT_CAPACITY

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def prepend(self, entry: HistoryEntry) -> None:
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def latest(self) -> Optional[HistoryEntry]:
        return self._entries[0] if self._entries else None

    @staticmethod
    def replay(entry: HistoryEntry) -> str:
        """Text to load back into the buffer for a past calculation."""
        return entry.result
