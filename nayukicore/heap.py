"""Binary heap ordered by a user-supplied "less than" predicate."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]


class Heap(Generic[T]):
    """A binary heap whose top is the greatest element under ``less``.

    With the default ``operator.lt`` the heap is a max-heap; pass
    ``operator.gt`` for a min-heap.  Unlike :mod:`heapq`, arbitrary
    elements can be located and removed.
    """

    def __init__(self, items: Iterable[T] = (), less: Less = operator.lt) -> None:
        self._less = less
        self._items: list[T] = list(items)
        for index in reversed(range(len(self._items) // 2)):
            self._sift_down(index)

    def push(self, elem: T) -> None:
        """Insert an element."""
        self._items.append(elem)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        top, self._items[0] = self._items[0], last
        self._sift_down(0)
        return top

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def remove(self, elem: T) -> bool:
        """Remove one element equal to ``elem``; return whether one was found."""
        index = self.index_of(elem)
        if index is None:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_down(index)
            self._sift_up(index)
        return True

    def index_of(self, elem: T) -> int | None:
        """Return the position of ``elem`` in the heap layout, or None."""
        if not self._items:
            return None
        size = len(self._items)
        pending = [0]
        while pending:
            index = pending.pop()
            node = self._items[index]
            if node == elem:
                return index
            # Every descendant is "not greater" than node, so elem cannot be below.
            if self._less(node, elem):
                continue
            left, right = 2 * index + 1, 2 * index + 2
            if right < size:
                pending.append(right)
            if left < size:
                pending.append(left)
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in their internal heap layout."""
        return iter(list(self._items))

    def _sift_up(self, index: int) -> None:
        items, less = self._items, self._less
        elem = items[index]
        while index > 0:
            parent = (index - 1) // 2
            if not less(items[parent], elem):
                break
            items[index] = items[parent]
            index = parent
        items[index] = elem

    def _sift_down(self, index: int) -> None:
        items, less = self._items, self._less
        size = len(items)
        elem = items[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and less(items[child], items[right]):
                child = right
            if not less(elem, items[child]):
                break
            items[index] = items[child]
            index = child
        items[index] = elem