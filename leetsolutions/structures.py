"""Small data structures shared by the solutions."""

from __future__ import annotations

import bisect
import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Optional


class AllOne:
    """Counts keys and reports a key with the highest or lowest count.

    Keys are kept ordered by count, highest first. A new key joins at the
    back with a count of one.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._order: list[str] = []

    def _rank(self, key: str) -> int:
        return -self._counts[key]

    def inc(self, key: str) -> None:
        """Add one to the count of ``key``, creating it if needed."""
        count = self._counts.get(key)
        if count is None:
            self._counts[key] = 1
            self._order.append(key)
            return
        self._order.remove(key)
        self._counts[key] = count + 1
        position = bisect.bisect_right(self._order, -(count + 1), key=self._rank)
        self._order.insert(position, key)

    def dec(self, key: str) -> None:
        """Take one from the count of ``key``; drop it when it reaches zero."""
        count = self._counts.get(key)
        if count is None:
            return
        self._order.remove(key)
        if count == 1:
            del self._counts[key]
            return
        self._counts[key] = count - 1
        position = bisect.bisect_left(self._order, -(count - 1), key=self._rank)
        self._order.insert(position, key)

    def get_max_key(self) -> str:
        """Return a key with the highest count, or an empty string."""
        return self._order[0] if self._order else ""

    def get_min_key(self) -> str:
        """Return a key with the lowest count, or an empty string."""
        return self._order[-1] if self._order else ""


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class MaxPriorityQueue:
    """A priority queue that hands out the largest value first.

    Entries of equal value come out in the order they were pushed.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Any]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, value: int, payload: Any = None) -> None:
        """Add ``value`` with an optional ``payload``."""
        heapq.heappush(self._heap, (-value, next(self._sequence), payload))

    def pop(self) -> tuple[int, Any]:
        """Remove and return ``(value, payload)`` for the largest value."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        negated, _, payload = heapq.heappop(self._heap)
        return -negated, payload

    def peek(self) -> tuple[int, Any]:
        """Return ``(value, payload)`` for the largest value without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        negated, _, payload = self._heap[0]
        return -negated, payload