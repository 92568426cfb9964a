"""Timers that fire delegates once or repeatedly as game time advances."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from nayukicore.delegate import SingleDelegate
from nayukicore.heap import Heap

__all__ = ["TimerState", "TimerHandle", "TimerData", "TimerManager"]

_INDEX_LIMIT = 2**64 - 1


class _IndexSource:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def next_index(self) -> int:
        with self._lock:
            if self._last >= _INDEX_LIMIT - 1:
                self._last = 0
            self._last += 1
            return self._last


_indices = _IndexSource()


class TimerState(enum.Enum):
    NONE = "none"
    ACTIVE = "active"
    PAUSED = "paused"


class TimerHandle:
    """Identifies a timer owned by a :class:`TimerManager`."""

    __slots__ = ("_index",)

    def __init__(self) -> None:
        self._index: int | None = None

    @classmethod
    def _generate(cls) -> "TimerHandle":
        handle = cls()
        handle._index = _indices.next_index()
        return handle

    def is_valid(self) -> bool:
        return self._index is not None

    def invalidate(self) -> None:
        self._index = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimerHandle):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __repr__(self) -> str:
        return f"TimerHandle({self._index})"


@dataclass
class TimerData:
    """State of one timer; ``expire_time`` is relative while paused."""

    loop: bool = False
    interval_time: float = 0.0
    expire_time: float = 0.0
    timer_delegate: SingleDelegate = field(default_factory=SingleDelegate)
    timer_state: TimerState = TimerState.NONE

    def is_valid(self) -> bool:
        return self.timer_state is not TimerState.NONE


class TimerManager:
    """Owns timers and fires those whose expiry time has been reached."""

    _instance: ClassVar["TimerManager | None"] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._data: dict[int, TimerData] = {}
        self._active: Heap[int] = Heap(less=self._expires_later)
        self._paused: set[int] = set()
        self._time = 0.0

    @classmethod
    def get_instance(cls) -> "TimerManager":
        """Return the process-wide manager, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def internal_time(self) -> float:
        return self._time

    def _expires_later(self, lhs: int, rhs: int) -> bool:
        return self._expiry(lhs) > self._expiry(rhs)

    def _expiry(self, index: int) -> float:
        data = self._data.get(index)
        return data.expire_time if data is not None else 0.0

    def tick(self, delta_seconds: float) -> None:
        """Advance time and fire every timer that has expired."""
        self._time += delta_seconds

        due: list[int] = []
        while len(self._active) > 0:
            if self._data[self._active.top()].expire_time > self._time:
                break
            due.append(self._active.pop())

        for index in due:
            data = self._data.get(index)
            if data is None:
                continue
            count = 1
            if data.loop:
                count += int((self._time - data.expire_time) / data.interval_time)
            for _ in range(count):
                data.timer_delegate.execute()

            if data.loop:
                data.expire_time += count * data.interval_time
                self._active.push(index)
            else:
                self._data.pop(index, None)

    def set_timer(
        self,
        interval_time: float,
        timer_delegate: SingleDelegate | Callable[[], Any],
        loop: bool = False,
        active: bool = True,
    ) -> TimerHandle:
        """Create a timer firing after ``interval_time`` seconds and return its handle."""
        if loop and interval_time <= 0:
            raise ValueError("a looping timer needs a positive interval")
        if not isinstance(timer_delegate, SingleDelegate):
            func = timer_delegate
            timer_delegate = SingleDelegate()
            timer_delegate.bind(func)

        handle = TimerHandle._generate()
        index = handle._index
        assert index is not None
        self._data[index] = TimerData(
            loop=loop,
            interval_time=interval_time,
            expire_time=self._time + interval_time,
            timer_delegate=timer_delegate,
            timer_state=TimerState.ACTIVE if active else TimerState.PAUSED,
        )
        if active:
            self._active.push(index)
        else:
            self._paused.add(index)
        return handle

    def invalid_timer(self, handle: TimerHandle) -> None:
        """Remove a timer entirely."""
        index = handle._index
        if index is None:
            return
        self._active.remove(index)
        self._paused.discard(index)
        self._data.pop(index, None)

    def pause_timer(self, handle: TimerHandle) -> None:
        """Suspend an active timer, keeping the time it has left."""
        index = handle._index
        if index is None or not self._active.remove(index):
            return
        self._paused.add(index)
        data = self._data[index]
        data.timer_state = TimerState.PAUSED
        data.expire_time -= self._time

    def active_timer(self, handle: TimerHandle) -> None:
        """Resume a paused timer."""
        index = handle._index
        if index is None or index not in self._paused:
            return
        self._paused.discard(index)
        data = self._data[index]
        data.timer_state = TimerState.ACTIVE
        data.expire_time += self._time
        self._active.push(index)

    def timer_data(self, handle: TimerHandle) -> TimerData:
        """Return the timer's data, or an invalid TimerData if there is none."""
        if handle._index is not None:
            data = self._data.get(handle._index)
            if data is not None:
                return data
        return TimerData()