"""A binary max-heap."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class BinHeap:
    """Max-heap over any mutually comparable values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data: list[Any] = list(items)
        self.rebuild()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._data:
            raise IndexError("pop from empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        largest = data.pop()
        self._sift_down(0)
        return largest

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("peek at empty heap")
        return self._data[0]

    def rebuild(self) -> None:
        """Restore heap order over all stored values."""
        for index in reversed(range(len(self._data) // 2)):
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        data = self._data
        child = index
        while child > 0:
            parent = (child - 1) // 2
            if data[child] <= data[parent]:
                break
            data[child], data[parent] = data[parent], data[child]
            child = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        parent = index
        while 2 * parent + 1 < size:
            child = 2 * parent + 1
            if child + 1 < size and data[child] < data[child + 1]:
                child += 1
            if data[parent] >= data[child]:
                break
            data[parent], data[child] = data[child], data[parent]
            parent = child