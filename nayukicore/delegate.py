"""Single-cast and multi-cast delegates identified by opaque handles."""

from __future__ import annotations

import threading
import weakref
from typing import Any, Callable

__all__ = ["DelegateError", "DelegateHandle", "MultipleDelegate", "SingleDelegate"]

_ID_LIMIT = 2**64


class DelegateError(RuntimeError):
    """Raised when a delegate is used in a way its contract forbids."""


class _IdSource:
    """Thread-safe source of 64-bit handle ids that never hands out zero."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next = 0

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next = (self._next + 1) % _ID_LIMIT
            if value == 0:
                value = self._next
                self._next = (self._next + 1) % _ID_LIMIT
            return value


_ids = _IdSource()


class DelegateHandle:
    """Identifies one binding inside a delegate; id 0 means invalid."""

    __slots__ = ("_id",)

    def __init__(self) -> None:
        self._id = 0

    @classmethod
    def generate(cls) -> "DelegateHandle":
        """Return a handle with a fresh, non-zero id."""
        handle = cls()
        handle._id = _ids.next_id()
        return handle

    def is_valid(self) -> bool:
        return self._id != 0

    def invalidate(self) -> None:
        self._id = 0

    def __bool__(self) -> bool:
        return self.is_valid()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self._id})"


class _Binding:
    """A callable target together with the handle it was registered under."""

    def __init__(self, handle: DelegateHandle) -> None:
        self.handle = handle

    def __call__(self, *args: Any) -> Any:
        raise NotImplementedError

    def clone(self) -> "_Binding":
        raise NotImplementedError


class _FunctionBinding(_Binding):
    def __init__(self, func: Callable[..., Any], handle: DelegateHandle) -> None:
        super().__init__(handle)
        self._func = func

    def __call__(self, *args: Any) -> Any:
        return self._func(*args)

    def clone(self) -> _Binding:
        return _FunctionBinding(self._func, self.handle)


class _MethodBinding(_Binding):
    """Calls ``method(obj, *args)`` while holding a strong reference to ``obj``."""

    def __init__(self, method: Callable[..., Any], obj: Any, handle: DelegateHandle) -> None:
        super().__init__(handle)
        self._method = method
        self._obj = obj

    def __call__(self, *args: Any) -> Any:
        if self._obj is None:
            return None
        return self._method(self._obj, *args)

    def clone(self) -> _Binding:
        return _MethodBinding(self._method, self._obj, self.handle)


class _WeakMethodBinding(_Binding):
    """Calls ``method(obj, *args)`` only while ``obj`` is still alive."""

    def __init__(
        self, method: Callable[..., Any], ref: "weakref.ReferenceType[Any]", handle: DelegateHandle
    ) -> None:
        super().__init__(handle)
        self._method = method
        self._ref = ref

    def __call__(self, *args: Any) -> Any:
        obj = self._ref()
        if obj is None:
            return None
        return self._method(obj, *args)

    def clone(self) -> _Binding:
        return _WeakMethodBinding(self._method, self._ref, self.handle)


class MultipleDelegate:
    """Any number of bound callables, invoked in the order they were added."""

    def __init__(self) -> None:
        self._bindings: list[_Binding] = []

    def _register(self, binding: _Binding) -> DelegateHandle:
        self._bindings.append(binding)
        return binding.handle

    def add(self, func: Callable[..., Any]) -> DelegateHandle:
        """Bind a plain callable."""
        return self._register(_FunctionBinding(func, DelegateHandle.generate()))

    def add_method(self, method: Callable[..., Any], obj: Any) -> DelegateHandle:
        """Bind ``method`` to be called on ``obj``, keeping ``obj`` alive."""
        return self._register(_MethodBinding(method, obj, DelegateHandle.generate()))

    def add_weak(self, method: Callable[..., Any], obj: Any) -> DelegateHandle:
        """Bind ``method`` on ``obj`` through a weak reference; skipped once ``obj`` dies."""
        return self._register(
            _WeakMethodBinding(method, weakref.ref(obj), DelegateHandle.generate())
        )

    def remove(self, handle: DelegateHandle) -> bool:
        """Remove the binding with ``handle``; return whether one was removed."""
        for position, binding in enumerate(self._bindings):
            if binding.handle == handle:
                del self._bindings[position]
                return True
        return False

    def remove_all(self) -> bool:
        """Remove every binding; return whether there were any."""
        had_any = bool(self._bindings)
        self._bindings.clear()
        return had_any

    def broadcast(self, *args: Any) -> None:
        """Call every binding with ``args``."""
        for binding in list(self._bindings):
            binding(*args)

    def copy(self) -> "MultipleDelegate":
        """Return an independent delegate with the same bindings and handles."""
        duplicate = MultipleDelegate()
        duplicate._bindings = [binding.clone() for binding in self._bindings]
        return duplicate

    def __len__(self) -> int:
        return len(self._bindings)


class SingleDelegate:
    """At most one bound callable whose return value is passed back."""

    def __init__(self) -> None:
        self._binding: _Binding | None = None

    def _bind(self, binding: _Binding) -> DelegateHandle:
        if self._binding is not None:
            raise DelegateError("SingleDelegate only binds once")
        self._binding = binding
        return binding.handle

    def bind(self, func: Callable[..., Any]) -> DelegateHandle:
        """Bind a plain callable; raise DelegateError if already bound."""
        return self._bind(_FunctionBinding(func, DelegateHandle.generate()))

    def bind_method(self, method: Callable[..., Any], obj: Any) -> DelegateHandle:
        """Bind ``method`` to be called on ``obj``, keeping ``obj`` alive."""
        return self._bind(_MethodBinding(method, obj, DelegateHandle.generate()))

    def bind_weak(self, method: Callable[..., Any], obj: Any) -> DelegateHandle:
        """Bind ``method`` on ``obj`` through a weak reference."""
        return self._bind(_WeakMethodBinding(method, weakref.ref(obj), DelegateHandle.generate()))

    def unbind(self, handle: DelegateHandle | None = None) -> bool:
        """Drop the binding (only if it matches ``handle`` when given)."""
        if self._binding is None:
            return False
        if handle is not None and self._binding.handle != handle:
            return False
        self._binding = None
        return True

    def is_bound(self) -> bool:
        return self._binding is not None

    def execute(self, *args: Any) -> Any:
        """Call the binding; raise DelegateError if nothing is bound."""
        if self._binding is None:
            raise DelegateError("SingleDelegate must bind a function")
        return self._binding(*args)

    def copy(self) -> "SingleDelegate":
        """Return an independent delegate with the same binding and handle."""
        duplicate = SingleDelegate()
        if self._binding is not None:
            duplicate._binding = self._binding.clone()
        return duplicate

    def take(self) -> "SingleDelegate":
        """Move the binding into a new delegate, leaving this one unbound."""
        moved = SingleDelegate()
        moved._binding, self._binding = self._binding, None
        return moved