"""A double-ended queue stored in a growable ring buffer."""

from collections.abc import Iterable, Iterator
from itertools import chain, islice
from typing import Any

DEFAULT_CAPACITY = 4


class Queue:
    """Double-ended queue on a ring buffer that doubles its capacity when full."""

    def __init__(self, items: Iterable[Any] | None = None, capacity: int | None = None) -> None:
        values = list(items) if items is not None else []
        if capacity is None:
            capacity = len(values) if items is not None else DEFAULT_CAPACITY
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        capacity = max(capacity, len(values))
        self._slots: list[Any] = values + [None] * (capacity - len(values))
        self._front = 0
        self._size = len(values)

    @classmethod
    def with_capacity(cls, capacity: int) -> "Queue":
        """Create an empty queue with room for ``capacity`` items."""
        return cls(capacity=capacity)

    def capacity(self) -> int:
        """Number of items the queue can hold before it grows."""
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        ring = chain(self._slots[self._front:], self._slots[: self._front])
        return islice(ring, self._size)

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def _grow(self) -> None:
        new_capacity = max(1, self.capacity() * 2)
        self._slots = list(self) + [None] * (new_capacity - self._size)
        self._front = 0

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self._size == self.capacity():
            self._grow()
        self._slots[(self._front + self._size) % self.capacity()] = value
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        if self._size == self.capacity():
            self._grow()
        self._front = (self._front - 1) % self.capacity()
        self._slots[self._front] = value
        self._size += 1

    def _require_items(self, action: str) -> None:
        if self._size == 0:
            raise IndexError(f"{action} an empty queue")

    def pop_front(self) -> Any:
        """Remove and return the front item; raise IndexError if empty."""
        self._require_items("pop from")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity()
        self._size -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the back item; raise IndexError if empty."""
        self._require_items("pop from")
        index = (self._front + self._size - 1) % self.capacity()
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value

    def front(self) -> Any:
        """Return the front item without removing it."""
        self._require_items("peek into")
        return self._slots[self._front]

    def back(self) -> Any:
        """Return the back item without removing it."""
        self._require_items("peek into")
        return self._slots[(self._front + self._size - 1) % self.capacity()]