"""Allocation statistics and a block allocator that reports into them."""

from __future__ import annotations

import threading
from collections import Counter

__all__ = ["MemoryTracker", "TrackingAllocator"]


class MemoryTracker:
    """Counts allocations and frees, in number and in bytes.

    It also records how many live blocks there are of each size.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        """Set every counter back to zero and forget all recorded sizes."""
        with self._lock:
            self.total_allocated_count = 0
            self.total_free_count = 0
            self.current_allocated_count = 0
            self.total_size = 0
            self.total_free_size = 0
            self.current_size = 0
            self._size_counts: Counter[int] = Counter()

    @property
    def size_counts(self) -> dict[int, int]:
        """Number of live blocks of each size, including sizes now at zero."""
        with self._lock:
            return dict(self._size_counts)

    def malloc(self, size: int) -> None:
        """Record an allocation of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        with self._lock:
            self.total_allocated_count += 1
            self.current_allocated_count += 1
            self.total_size += size
            self.current_size += size
            self._size_counts[size] += 1

    def free(self, size: int) -> None:
        """Record the release of a block of ``size`` bytes."""
        with self._lock:
            if self._size_counts.get(size, 0) <= 0:
                raise ValueError(f"no live allocation of size {size} is recorded")
            self.total_free_count += 1
            self.current_allocated_count -= 1
            self.total_free_size += size
            self.current_size -= size
            self._size_counts[size] -= 1

    def __str__(self) -> str:
        with self._lock:
            return (
                f"MemoryTracker: TotalAllocatedMemoryCount: {self.total_allocated_count}, "
                f"TotalFreeMemoryCount: {self.total_free_count}, "
                f"CurrentAllocatedMemoryCount: {self.current_allocated_count}, "
                f"TotalMemorySize: {self.total_size}, "
                f"TotalFreeMemorySize: {self.total_free_size}, "
                f"CurrentMemorySize: {self.current_size} "
                f"MemorySizeCountMap: {len(self._size_counts)}"
            )


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


class TrackingAllocator:
    """Hands out zero-filled ``bytearray`` blocks.

    Between :meth:`init` and :meth:`shutdown` every allocation and release
    is reported to the tracker; outside that window blocks are handed out
    untracked.
    """

    def __init__(self, tracker: MemoryTracker | None = None) -> None:
        self._tracker = tracker if tracker is not None else MemoryTracker()
        self._initted = False
        self._lock = threading.Lock()

    @property
    def tracker(self) -> MemoryTracker:
        return self._tracker

    def init(self) -> None:
        """Start tracking; raise RuntimeError if already started."""
        with self._lock:
            if self._initted:
                raise RuntimeError("allocator is already initialised")
            self._initted = True

    def shutdown(self) -> None:
        """Stop tracking; raise RuntimeError if not started."""
        with self._lock:
            if not self._initted:
                raise RuntimeError("allocator is not initialised")
            self._initted = False

    def is_initted(self) -> bool:
        return self._initted

    def _tracked(self, size: int) -> bytearray:
        block = bytearray(max(size, 1))
        self._tracker.malloc(len(block))
        return block

    def malloc(self, size: int) -> bytearray:
        """Allocate ``size`` bytes; zero-sized requests get one byte when tracked."""
        _check_size(size)
        if not self._initted:
            return bytearray(size)
        return self._tracked(size)

    def aligned_alloc(self, size: int, alignment: int) -> bytearray:
        """Allocate ``size`` bytes for an ``alignment`` that is a power of two."""
        _check_size(size)
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError(f"alignment must be a power of two, got {alignment}")
        if not self._initted:
            return bytearray((size + alignment - 1) & ~(alignment - 1))
        return self._tracked(size)

    def calloc(self, num: int, size: int) -> bytearray | None:
        """Allocate ``num`` elements of ``size`` bytes; None for an empty tracked request."""
        _check_size(num)
        _check_size(size)
        if not self._initted:
            return bytearray(num * size)
        if num == 0 or size == 0:
            return None
        return self._tracked(num * size)

    def realloc(self, block: bytearray | None, size: int) -> bytearray:
        """Return a block of ``size`` bytes holding the start of ``block``."""
        _check_size(size)
        if not self._initted:
            resized = bytearray(size)
        else:
            if block is not None:
                self._tracker.free(len(block))
            resized = self._tracked(size)
        if block is not None:
            keep = min(len(block), len(resized))
            resized[:keep] = block[:keep]
        return resized

    def free(self, block: bytearray | None) -> None:
        """Release ``block``; a tracked release is reported by its size."""
        if block is None or not self._initted:
            return
        self._tracker.free(len(block))