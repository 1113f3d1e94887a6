"""Binary min-heap whose entries remember their own position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

E = TypeVar("E")


class HeapInterface(ABC, Generic[E]):
    """Ordering and position bookkeeping for the entries of a Heap."""

    @abstractmethod
    def less(self, a: E, b: E) -> bool:
        """Whether ``a`` should come before ``b``."""

    @abstractmethod
    def greater(self, a: E, b: E) -> bool:
        """Whether ``a`` should come after ``b``."""

    @abstractmethod
    def get_heap_position(self, h: E) -> int:
        """Stored heap position of ``h``, or -1 if it is not in the heap."""

    @abstractmethod
    def set_heap_position(self, h: E, pos: int) -> None:
        """Record the heap position of ``h`` (-1 for not stored)."""


class Heap(Generic[E]):
    """A min-heap that supports removal and key updates of arbitrary entries."""

    def __init__(self, interface: HeapInterface[E]) -> None:
        self._interface = interface
        self._entries: list[E] = []

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def reset_heap_position(self, h: E) -> None:
        """Mark ``h`` as not stored in the heap."""
        self._interface.set_heap_position(h, -1)

    def is_stored(self, h: E) -> bool:
        return self._interface.get_heap_position(h) != -1

    def insert(self, h: E) -> None:
        self._entries.append(h)
        self._upheap(len(self._entries) - 1)

    def front(self) -> E:
        """Return the smallest entry."""
        if not self._entries:
            raise IndexError("front of an empty heap")
        return self._entries[0]

    def pop_front(self) -> None:
        """Remove the smallest entry."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        self._interface.set_heap_position(self._entries[0], -1)
        last = self._entries.pop()
        if self._entries:
            self._set(0, last)
            self._downheap(0)

    def remove(self, h: E) -> None:
        """Remove an arbitrary stored entry."""
        pos = self._position(h)
        self._interface.set_heap_position(h, -1)
        last = self._entries.pop()
        if pos < len(self._entries):
            self._set(pos, last)
            self._downheap(pos)
            self._upheap(pos)

    def update(self, h: E) -> None:
        """Restore the heap property after the key of ``h`` changed."""
        pos = self._position(h)
        self._downheap(pos)
        self._upheap(pos)

    def check(self) -> bool:
        """Whether every parent is not greater than its children."""
        n = len(self._entries)
        greater = self._interface.greater
        return not any(
            greater(self._entries[i], self._entries[j])
            for i in range(n)
            for j in (2 * i + 1, 2 * i + 2)
            if j < n
        )

    def _position(self, h: Any) -> int:
        pos = self._interface.get_heap_position(h)
        if pos == -1 or pos >= len(self._entries):
            raise ValueError("entry is not stored in the heap")
        return pos

    def _set(self, idx: int, h: E) -> None:
        self._entries[idx] = h
        self._interface.set_heap_position(h, idx)

    def _upheap(self, idx: int) -> None:
        h = self._entries[idx]
        less = self._interface.less
        while idx > 0:
            parent = (idx - 1) >> 1
            if not less(h, self._entries[parent]):
                break
            self._set(idx, self._entries[parent])
            idx = parent
        self._set(idx, h)

    def _downheap(self, idx: int) -> None:
        h = self._entries[idx]
        less = self._interface.less
        size = len(self._entries)
        while True:
            child = 2 * idx + 1
            if child >= size:
                break
            if child + 1 < size and less(self._entries[child + 1], self._entries[child]):
                child += 1
            if less(h, self._entries[child]):
                break
            self._set(idx, self._entries[child])
            idx = child
        self._set(idx, h)