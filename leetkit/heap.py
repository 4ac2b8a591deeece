"""A binary max-heap priority queue keyed on a separate priority."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class PriorityQueue(Generic[K, V]):
    """Max-priority queue of ``(key, value)`` pairs ordered by key alone.

    Values are never compared, so they may be of any type.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[K, V]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._heap!r})"

    def push(self, key: K, value: V) -> None:
        """Insert ``value`` with priority ``key``."""
        self._heap.append((key, value))
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> tuple[K, V]:
        """Remove and return the pair with the largest key."""
        if not self._heap:
            raise IndexError("PriorityQueue underflow")
        last = self._heap.pop()
        if not self._heap:
            return last
        top, self._heap[0] = self._heap[0], last
        self._sift_down(0)
        return top

    def top(self) -> tuple[K, V]:
        """Return the pair with the largest key without removing it."""
        if not self._heap:
            raise IndexError("PriorityQueue is empty")
        return self._heap[0]

    def _greater(self, i: int, j: int) -> bool:
        key_i: Any = self._heap[i][0]
        key_j: Any = self._heap[j][0]
        return key_i > key_j

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) >> 1
            if not self._greater(index, parent):
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            if left >= size:
                return
            largest = left if self._greater(left, index) else index
            right = left + 1
            if right < size and self._greater(right, largest):
                largest = right
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest