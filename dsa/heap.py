"""A thread-safe binary heap ordered by item keys."""

from __future__ import annotations

import operator
import threading
from enum import IntEnum
from typing import Callable, Iterable

from dsa.element import Keyed


class CompareType(IntEnum):
    """Which end of the key order sits at the root of the heap."""

    MIN_HEAP = 0
    MAX_HEAP = 1


class Heap:
    """Binary heap of keyed items.

    A min-heap keeps the smallest key at the root, a max-heap the largest.
    Any compare type other than ``MAX_HEAP`` yields a min-heap.
    """

    def __init__(self, compare_type: CompareType | int = CompareType.MIN_HEAP) -> None:
        self._lock = threading.Lock()
        self._items: list[Keyed] = []
        self._before: Callable[[int, int], bool] = (
            operator.gt if compare_type == CompareType.MAX_HEAP else operator.lt
        )

    def peek(self) -> Keyed | None:
        """Return the root item without removing it, or None if empty."""
        with self._lock:
            return self._items[0] if self._items else None

    def pop(self) -> Keyed | None:
        """Remove and return the root item, or None if empty."""
        with self._lock:
            if not self._items:
                return None
            root = self._items[0]
            last = self._items.pop()
            if self._items:
                self._items[0] = last
                self._sift_down(0)
            return root

    def push(self, item: Keyed) -> None:
        """Insert an item and restore the heap order."""
        with self._lock:
            self._items.append(item)
            self._sift_up(len(self._items) - 1)

    def is_empty(self) -> bool:
        """Return True when the heap holds no items."""
        with self._lock:
            return not self._items

    def heapify(self, items: Iterable[Keyed]) -> None:
        """Push every item in turn, keeping what is already in the heap."""
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __str__(self) -> str:
        with self._lock:
            if not self._items:
                return "[]"
            return " -> ".join(f"[{item.key}]" for item in self._items)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            if left >= size:
                return
            current = items[index].key
            if right < size:
                left_key, right_key = items[left].key, items[right].key
                if self._before(left_key, right_key) and self._before(left_key, current):
                    target = left
                elif self._before(right_key, current):
                    target = right
                else:
                    return
            elif self._before(items[left].key, current):
                target = left
            else:
                return
            items[index], items[target] = items[target], items[index]
            index = target

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(items[index].key, items[parent].key):
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent