"""Sparse set: non-negative integer keys mapped onto a densely packed value list."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

V = TypeVar("V")


class SparseArray(Generic[V]):
    """Values stored contiguously, looked up through a sparse key table.

    Adding an existing key leaves its value unchanged.  Removal swaps the
    last value into the freed slot, so value order is not preserved.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._dense: list[V] = []
        self._dense_keys: list[int] = []
        self._sparse: list[int | None] = [None] * size

    @staticmethod
    def _check_key(key: int) -> None:
        if key < 0:
            raise ValueError(f"key must be non-negative, got {key}")

    def _slot(self, key: int) -> int | None:
        self._check_key(key)
        if key < len(self._sparse):
            return self._sparse[key]
        return None

    def add(self, key: int, value: V) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        self._check_key(key)
        if key >= len(self._sparse):
            self._sparse.extend([None] * (key + 1 - len(self._sparse)))
        if self._sparse[key] is None:
            self._sparse[key] = len(self._dense)
            self._dense.append(value)
            self._dense_keys.append(key)

    def remove(self, key: int) -> V | None:
        """Remove ``key`` and return its value, or None if it was absent."""
        slot = self._slot(key)
        if slot is None:
            return None
        last_key = self._dense_keys[-1]
        self._dense[slot], self._dense[-1] = self._dense[-1], self._dense[slot]
        self._dense_keys[slot] = last_key
        self._sparse[last_key] = slot
        self._sparse[key] = None
        self._dense_keys.pop()
        return self._dense.pop()

    def try_get(self, key: int) -> V | None:
        """Return the value for ``key``, or None if it is absent."""
        slot = self._slot(key)
        return None if slot is None else self._dense[slot]

    def get(self, key: int) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        slot = self._slot(key)
        if slot is None:
            raise KeyError(key)
        return self._dense[slot]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key >= 0 and self._slot(key) is not None

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._dense))

    def __len__(self) -> int:
        return len(self._dense)

    def capacity(self) -> int:
        """Number of key slots currently allocated."""
        return len(self._sparse)

    def clear(self) -> None:
        """Drop every value and every key slot."""
        self._dense.clear()
        self._dense_keys.clear()
        self._sparse.clear()