"""A thread-safe first-in, first-out queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class Queue:
    """FIFO queue holding values of any type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add an item to the back of the queue."""
        with self._lock:
            self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item, or None if empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def peek(self) -> Any:
        """Return the front item without removing it, or None if empty."""
        with self._lock:
            return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __str__(self) -> str:
        with self._lock:
            if not self._items:
                return "[]"
            return " -> ".join(f"[{item}]" for item in self._items)