"""Finite state machine with pluggable machine states."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class SdServerState(Enum):
    """Service discovery server state."""

    NOT_READY = auto()
    INITIAL_WAIT_PHASE = auto()
    REPETITION_PHASE = auto()
    MAIN_PHASE = auto()


class SdClientState(Enum):
    """Service discovery client state."""

    SERVICE_NOT_SEEN = auto()
    SERVICE_SEEN = auto()
    SERVICE_READY = auto()
    STOPPED = auto()
    INITIAL_WAIT_PHASE = auto()
    REPETITION_PHASE = auto()


class PubSubState(Enum):
    """Publish-subscribe server state."""

    SERVICE_DOWN = auto()
    NOT_SUBSCRIBED = auto()
    SUBSCRIBED = auto()


class AbstractStateMachine(ABC, Generic[T]):
    """A machine that moves between states."""

    @abstractmethod
    def transit(self, previous_state: T, next_state: T) -> None:
        """Move from ``previous_state`` to ``next_state``."""


class MachineState(ABC, Generic[T]):
    """One state of a finite state machine."""

    def __init__(self, state: T) -> None:
        self._state = state
        self._machine: AbstractStateMachine[T] | None = None

    @property
    def state(self) -> T:
        return self._state

    @abstractmethod
    def activate(self, previous_state: T) -> None:
        """Enter this state, coming from ``previous_state``."""

    @abstractmethod
    def deactivate(self, next_state: T) -> None:
        """Leave this state before ``next_state`` is entered."""

    def transit(self, next_state: T) -> None:
        """Deactivate this state and ask the owning machine to move on."""
        self.deactivate(next_state)
        if self._machine is not None:
            self._machine.transit(self._state, next_state)

    def register(self, machine: AbstractStateMachine[T]) -> None:
        """Attach this state to the machine that owns it."""
        self._machine = machine


class FiniteStateMachine(AbstractStateMachine[T]):
    """Controller that switches between registered machine states."""

    def __init__(self) -> None:
        self._states: dict[T, MachineState[T]] = {}
        self._current: T | None = None

    def initialize(self, states: Iterable[MachineState[T]], entrypoint: T) -> None:
        """Register ``states`` and activate the one for ``entrypoint``."""
        for machine_state in states:
            self._states[machine_state.state] = machine_state
            machine_state.register(self)
        initial = self._states[entrypoint]
        # At the entrypoint the previous and the next state are the same.
        initial.activate(entrypoint)
        self._current = entrypoint

    @property
    def state(self) -> T | None:
        return self._current

    @property
    def machine_state(self) -> MachineState[T]:
        return self._states[self._current]

    def transit(self, previous_state: T, next_state: T) -> None:
        # Only the current state may hand over to another state.
        if previous_state == self._current:
            next_machine_state = self._states[next_state]
            self._current = next_state
            next_machine_state.activate(previous_state)