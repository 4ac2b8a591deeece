"""Sequence containers: a single-ended list and a double-ended list."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ForwardList(Generic[T]):
    """A list that grows and shrinks at its back end only.

    Iteration runs from front (oldest element) to back (newest element).
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def to_list(self) -> list[T]:
        """Return the elements from front to back."""
        return list(self._items)

    def push_back(self, value: T) -> None:
        """Append ``value`` at the back."""
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the back element."""
        if not self._items:
            raise IndexError("List underflow")
        return self._items.pop()

    def back(self) -> T:
        """Return the back element."""
        if not self._items:
            raise IndexError("List underflow")
        return self._items[-1]

    def front(self) -> T:
        """Return the front element."""
        if not self._items:
            raise IndexError("List underflow")
        return self._items[0]


class DualList(Generic[T]):
    """A list that grows and shrinks at both ends.

    Iteration runs from front to back.
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def to_list(self) -> list[T]:
        """Return the elements from front to back."""
        return list(self._items)

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("DualList underflow")

    def push_back(self, value: T) -> None:
        """Append ``value`` at the back."""
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the back element."""
        self._require_items()
        return self._items.pop()

    def back(self) -> T:
        """Return the back element."""
        self._require_items()
        return self._items[-1]

    def push_front(self, value: T) -> None:
        """Prepend ``value`` at the front."""
        self._items.appendleft(value)

    def pop_front(self) -> T:
        """Remove and return the front element."""
        self._require_items()
        return self._items.popleft()

    def front(self) -> T:
        """Return the front element."""
        self._require_items()
        return self._items[0]