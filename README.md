# nayukicore

Small, dependency-free building blocks for game loops and engine-style code:
containers, delegates, timers, finite state machines, category logging and
allocation bookkeeping. Everything uses only the standard library.

## Installation

    pip install nayukicore

To run the test suite:

    pip install "nayukicore[test]"
    pytest

## Modules

### `nayukicore.heap`

`Heap(items=(), less=operator.lt)` is a binary heap whose top is the greatest
element under `less`; pass `operator.gt` for a min-heap. It offers `push`,
`pop`, `top` (both raise `IndexError` when empty), `remove(elem)` which
returns whether an equal element was found and removed, `index_of(elem)`
which returns the element's position in the heap layout or `None`, `len()`
and iteration in heap layout order.

    from nayukicore.heap import Heap

    heap = Heap([5, 1, 7])
    heap.push(3)
    heap.remove(7)
    heap.top()           # 5

### `nayukicore.sparse_array`

`SparseArray(size=0)` maps non-negative integer keys onto a densely packed
list of values. `add(key, value)` leaves an existing key untouched;
`remove(key)` returns the removed value or `None`; `try_get(key)` returns the
value or `None`; `get(key)` raises `KeyError` for a missing key. Negative keys
raise `ValueError`. It also supports `in`, iteration over values, `len()`,
`capacity()` (number of key slots) and `clear()`. Removal moves the last value
into the freed slot, so value order is not kept.

### `nayukicore.delegate`

- `DelegateHandle` identifies one binding. `DelegateHandle.generate()` gives a
  fresh non-zero id; a default handle is invalid (`is_valid()` and `bool()`
  are false); `invalidate()` resets it.
- `MultipleDelegate` holds any number of bindings called in insertion order
  by `broadcast(*args)`. `add(func)` binds a callable, `add_method(method, obj)`
  calls `method(obj, *args)` keeping `obj` alive, and `add_weak(method, obj)`
  holds `obj` through a weak reference and skips the call once it is gone.
  `remove(handle)` and `remove_all()` return whether anything was removed;
  `copy()` gives an independent delegate with the same handles.
- `SingleDelegate` holds at most one binding. `bind`, `bind_method` and
  `bind_weak` raise `DelegateError` if something is already bound.
  `execute(*args)` returns the bound callable's result and raises
  `DelegateError` when nothing is bound. `unbind(handle=None)` drops the
  binding (only a matching one when a handle is given), `is_bound()` reports
  it, `copy()` duplicates it, and `take()` moves it into a new delegate,
  leaving the original unbound.

    from nayukicore.delegate import MultipleDelegate

    on_hit = MultipleDelegate()
    handle = on_hit.add(lambda damage: print("hit for", damage))
    on_hit.broadcast(10)
    on_hit.remove(handle)    # True

### `nayukicore.game_timer`

`GameTimer(state=GameTimerState.RUNNING, clock=time.monotonic)` measures the
time between calls to `tick()`. `delta_time()`, `running_total_time()`,
`paused_total_time()` and `total_time()` return seconds. `stop()` and
`start()` only request a change of `state`; it happens on the next `tick()`,
and the interval that tick measures still counts towards the old state. Any
zero-argument callable returning seconds can serve as the clock, which makes
the timer easy to drive in tests.

### `nayukicore.timer_manager`

`TimerManager` fires delegates as its internal time advances with
`tick(delta_seconds)`. `TimerManager.get_instance()` returns a shared
instance; separate managers can also be created directly.

- `set_timer(interval_time, timer_delegate, loop=False, active=True)` accepts
  a `SingleDelegate` or a plain callable and returns a `TimerHandle`. A
  looping timer needs a positive interval (`ValueError` otherwise). A looping
  timer that fell behind fires once for every interval that has passed.
- `pause_timer(handle)` keeps the remaining time; `active_timer(handle)`
  resumes it; `invalid_timer(handle)` removes the timer.
- `timer_data(handle)` returns the `TimerData` (loop flag, interval, expiry,
  delegate, `TimerState`), or a `TimerData` whose `is_valid()` is false when
  the handle names no timer. One-shot timers are dropped once they fire.

    from nayukicore.timer_manager import TimerManager

    count = 0

    def bump():
        global count
        count += 1

    manager = TimerManager()
    manager.set_timer(1.0, bump, loop=True)
    manager.tick(79.7)   # count == 79
    manager.tick(20.3)   # count == 100

### `nayukicore.math_helper`

`clamp(x, low, high)`, `lerp(a, b, t)`, `angle_from_xy(x, y)` (polar angle in
`[0, 2*PI)`), `rand_f(a=0.0, b=1.0)`, `rand_int(a, b)` (inclusive),
`rand_unit_vec3()` (a uniformly distributed unit vector as a 3-tuple), the
constants `PI` and `INFINITY`, and the frozen dataclass `Extent2D(width,
height)`, whose fields must fit in an unsigned 32-bit integer.

### `nayukicore.logger`

`LoggerCategory(name, logger_type=LoggerType.SYNC, registry=None)` registers
itself with `registry` or with `Logger.get_instance()`. Synchronous names
must start with `Log`, asynchronous ones with `ALog`; otherwise
`LoggerCategoryError` is raised. Registering the same name twice prints a
notice on stderr and keeps the first logger.

`Logger(log_dir=".")` gives each category a standard `logging.Logger` with a
console handler on stdout at WARNING and a file handler, truncated when
created, that takes every level: `<name>.log` for synchronous categories and
`<name>.alog` for asynchronous ones, which write through a background queue.
`get(category)` returns the logger or `None`; `close()` flushes and closes
every handler and forgets all categories. The extra level `TRACE` (5) is
below DEBUG.

    import logging
    from nayukicore.logger import Logger, LoggerCategory

    registry = Logger("logs")
    log_game = LoggerCategory("LogGame", registry=registry)
    registry.get(log_game).log(logging.WARNING, "low health")
    registry.close()

### `nayukicore.fsm`

`State` and `Transition` are abstract bases with enter/update/leave hooks and
`can_transition` / `start_transition` / `end_transition`. `FSM` holds lists of
`states` and `transitions`; subclasses fill them in `build()`, and
`execute(context)` starts every transition whose guard passes. `FSMBuilder`
creates each kind of machine once, keyed by its `fsm_id()` (`FSMId`), and
shares it through `find_or_create(fsm_class)` and `find(fsm_id)`.
`FSMInstance(context_class, fsm_class, builder=None)` pairs a shared machine
with a context of its own after `build()`; `execute()` returns `False` while
no machine is attached.

### `nayukicore.memory_tracker`

`MemoryTracker` counts allocations and frees, in number and in bytes, and the
number of live blocks per size (`size_counts`). `free(size)` raises
`ValueError` when no live block of that size is recorded; `reset()` clears
everything; `str()` gives a one-line summary.

`TrackingAllocator(tracker=None)` hands out zero-filled `bytearray` blocks
through `malloc`, `aligned_alloc`, `calloc` and `realloc`, and takes them back
with `free`. Between `init()` and `shutdown()` every allocation and release is
reported to its tracker; outside that window blocks are handed out untracked.
Calling `init()` twice or `shutdown()` without `init()` raises `RuntimeError`.

### `nayukicore.platform_memory`

`cache_line_size()` reads the level-1 data cache line size on Linux and falls
back to 64 bytes elsewhere or when it cannot be read. `page_size()` returns
4096 on macOS and the system page size otherwise.

## What this package does not do

- It has no command-line program, window, renderer or main loop; it only
  provides the pieces such a loop would use.
- `TrackingAllocator` manages its own `bytearray` blocks. It does not replace
  or observe Python's own memory allocation, so ordinary objects are never
  counted by `MemoryTracker`.