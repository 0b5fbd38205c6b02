"""Protocols for items that carry an integer ordering key."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Keyed(Protocol):
    """An item that exposes a read-only integer ``key``."""

    @property
    def key(self) -> int:
        """The integer used to order the item."""
        ...


@runtime_checkable
class MutableKeyed(Keyed, Protocol):
    """An item whose integer ``key`` can also be reassigned."""

    @property
    def key(self) -> int:
        """The integer used to order the item."""
        ...

    @key.setter
    def key(self, value: int) -> None: ...