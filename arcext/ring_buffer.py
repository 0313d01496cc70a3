"""Fixed-capacity ring buffer that overwrites its oldest element when full."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

__all__ = ["RingBuffer"]

_T = TypeVar("_T")


class RingBuffer(Generic[_T]):
    """Sequence of at most ``capacity`` items, ordered from oldest to newest.

    Pushing onto a full buffer drops the oldest item.
    """

    def __init__(self, capacity: int) -> None:
        self._items: deque[_T] = deque(maxlen=self._check_capacity(capacity))

    @staticmethod
    def _check_capacity(capacity: int) -> int:
        capacity = int(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        return capacity

    @classmethod
    def _from_items(cls, items: Iterable[_T], capacity: int) -> RingBuffer[_T]:
        buffer: RingBuffer[_T] = cls(capacity)
        buffer._items.extend(items)
        return buffer

    @property
    def capacity(self) -> int:
        """Number of items the buffer holds before it starts overwriting."""
        maxlen = self._items.maxlen
        return 0 if maxlen is None else maxlen

    def push_back(self, item: _T) -> None:
        """Append ``item`` as the newest element, dropping the oldest if full.

        Raises ValueError on a buffer with no capacity.
        """
        if self.capacity == 0:
            raise ValueError("cannot push onto a ring buffer with no capacity")
        self._items.append(item)

    def back(self) -> _T:
        """Return the newest element; raises IndexError when empty."""
        if not self._items:
            raise IndexError("back() on an empty ring buffer")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every element; the capacity stays the same."""
        self._items.clear()

    def resize(self, capacity: int) -> None:
        """Change the capacity, keeping the newest elements that still fit."""
        self._items = deque(self._items, maxlen=self._check_capacity(capacity))

    def copy(self) -> RingBuffer[_T]:
        """Return a new buffer holding the same elements.

        The copy's capacity equals the number of elements copied.
        """
        return self._from_items(self._items, len(self._items))

    def __copy__(self) -> RingBuffer[_T]:
        return self.copy()

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> int:
        size = len(self._items)
        if not -size <= index < size:
            raise IndexError(f"ring buffer index {index} out of range for size {size}")
        return index

    def __getitem__(self, index: int) -> _T:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: _T) -> None:
        self._items[self._check_index(index)] = value

    def __iter__(self) -> Iterator[_T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[_T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"