"""Finite state machine building blocks: states, transitions, shared FSMs."""

from __future__ import annotations

import abc
import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

__all__ = [
    "FSMId",
    "NULL_FSM_ID",
    "FSMContext",
    "FSMInterface",
    "State",
    "Transition",
    "FSM",
    "FSMBuilder",
    "FSMInstance",
]


@dataclass(frozen=True)
class FSMId:
    """Identifies a kind of state machine."""

    id: str = ""


NULL_FSM_ID = FSMId()


class FSMContext:
    """Per-instance data a state machine operates on."""


class FSMInterface(abc.ABC):
    """Base of every state machine that an :class:`FSMBuilder` can share."""

    @classmethod
    def fsm_id(cls) -> FSMId:
        """Identifier of this kind of machine."""
        return NULL_FSM_ID

    @abc.abstractmethod
    def build(self) -> None:
        """Populate states and transitions."""


class State(abc.ABC):
    """A state with update, enter and leave hooks."""

    @classmethod
    def state_id(cls) -> Any:
        """Identifier of this state; None unless a subclass overrides it."""
        return None

    def update(self, context: Any, delta_seconds: float) -> None:
        self.on_update(context, delta_seconds)

    def enter(self, context: Any) -> None:
        self.on_enter_pre(context)
        self.on_enter(context)
        self.on_enter_post(context)

    def leave(self, context: Any) -> None:
        self.on_leave_pre(context)
        self.on_leave(context)
        self.on_leave_post(context)

    @abc.abstractmethod
    def on_update(self, context: Any, delta_seconds: float) -> None: ...

    @abc.abstractmethod
    def on_enter_pre(self, context: Any) -> None: ...

    @abc.abstractmethod
    def on_enter(self, context: Any) -> None: ...

    @abc.abstractmethod
    def on_enter_post(self, context: Any) -> None: ...

    @abc.abstractmethod
    def on_leave_pre(self, context: Any) -> None: ...

    @abc.abstractmethod
    def on_leave(self, context: Any) -> None: ...

    @abc.abstractmethod
    def on_leave_post(self, context: Any) -> None: ...


class Transition(abc.ABC):
    """A move from one state to another, guarded by :meth:`can_transition`."""

    def __init__(self, enter_state_id: Any = None, leave_state_id: Any = None) -> None:
        self._enter_state_id = enter_state_id
        self._leave_state_id = leave_state_id
        self.transition_interval = 0.0
        self.transition_priority = 0

    @property
    def enter_state_id(self) -> Any:
        return self._enter_state_id

    @property
    def leave_state_id(self) -> Any:
        return self._leave_state_id

    @abc.abstractmethod
    def transition_id(self) -> Any: ...

    @abc.abstractmethod
    def start_transition(self, context: Any) -> None: ...

    @abc.abstractmethod
    def end_transition(self, context: Any) -> None: ...

    @abc.abstractmethod
    def can_transition(self, context: Any) -> bool: ...


class FSM(FSMInterface):
    """A machine holding states and transitions; subclasses fill them in :meth:`build`."""

    def __init__(self) -> None:
        self.states: list[State] = []
        self.transitions: list[Transition | None] = []

    @classmethod
    def fsm_id(cls) -> FSMId:
        return FSMId("FSM")

    def execute(self, context: Any) -> bool:
        """Start every transition whose guard passes for ``context``."""
        for transition in self.transitions:
            if transition is not None and transition.can_transition(context):
                transition.start_transition(context)
        return False


F = TypeVar("F", bound=FSMInterface)
C = TypeVar("C")


class FSMBuilder:
    """Creates each kind of machine once and shares it between instances."""

    _instance: ClassVar["FSMBuilder | None"] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._fsms: list[FSMInterface] = []

    @classmethod
    def get_instance(cls) -> "FSMBuilder":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def find_or_create(self, fsm_class: type[F]) -> FSMInterface:
        """Return the machine with ``fsm_class``'s id, building one if needed."""
        existing = self.find(fsm_class.fsm_id())
        if existing is not None:
            return existing
        machine = fsm_class()
        machine.build()
        self._fsms.append(machine)
        return machine

    def find(self, fsm_id: FSMId) -> FSMInterface | None:
        """Return the machine registered under ``fsm_id``, or None."""
        return next((m for m in self._fsms if m.fsm_id() == fsm_id), None)


class FSMInstance(Generic[C, F]):
    """A shared machine paired with a context of its own."""

    def __init__(
        self,
        context_class: type[C],
        fsm_class: type[F],
        builder: FSMBuilder | None = None,
    ) -> None:
        self._context_class = context_class
        self._fsm_class = fsm_class
        self._builder = builder
        self._context: C | None = None
        self._fsm: F | None = None

    def build(self) -> None:
        """Fetch the shared machine and create the context if missing."""
        if self._fsm is None:
            builder = self._builder if self._builder is not None else FSMBuilder.get_instance()
            machine = builder.find_or_create(self._fsm_class)
            if isinstance(machine, self._fsm_class):
                self._fsm = machine
        if self._context is None:
            self._context = self._context_class()

    def execute(self) -> bool:
        """Run the machine on this instance's context; False if there is none."""
        if self._fsm is None:
            return False
        return self._fsm.execute(self._context)

    def context(self) -> C | None:
        return self._context

    def fsm(self) -> F | None:
        return self._fsm