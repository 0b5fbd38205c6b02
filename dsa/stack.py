"""A thread-safe last-in, first-out stack."""

from __future__ import annotations

import threading
from typing import Any


class Stack:
    """LIFO stack holding values of any type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        with self._lock:
            self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item, or None if empty."""
        with self._lock:
            return self._items.pop() if self._items else None

    def peek(self) -> Any:
        """Return the top item without removing it, or None if empty."""
        with self._lock:
            return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __str__(self) -> str:
        """Render the items from top to bottom."""
        with self._lock:
            if not self._items:
                return "[]"
            return " -> ".join(f"[{item}]" for item in reversed(self._items))