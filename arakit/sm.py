"""State management: function group states, power modes, triggers and notifiers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Generic, TypeVar

T = TypeVar("T")

NotificationHandler = Callable[[T], None]
TriggerHandler = Callable[[], None]


class FunctionGroupStates(IntEnum):
    """State of a function group."""

    OFF = 0
    RUNNING = 1
    UPDATE = 2
    VERIFY = 3


class PowerModeMsg(Enum):
    """Requested power mode."""

    ON = auto()
    OFF = auto()
    SUSPEND = auto()


class PowerModeRespMsg(Enum):
    """Response to a power mode request."""

    DONE = auto()
    FAILED = auto()
    BUSY = auto()
    NOT_SUPPORTED = auto()


@dataclass
class StateCell(Generic[T]):
    """Mutable holder of a state shared between triggers and notifiers."""

    value: T


class Notifier(Generic[T]):
    """Tells subscribers about the current value of a shared state."""

    def __init__(self, cell: StateCell[T]) -> None:
        self._cell = cell
        self._subscribers: list[NotificationHandler[T]] = []

    def read(self) -> T:
        """Return the current state."""
        return self._cell.value

    def subscribe(self, handler: NotificationHandler[T]) -> None:
        """Add ``handler`` to be called on every notification."""
        self._subscribers.append(handler)

    def notify(self) -> None:
        """Call every subscriber, in subscription order, with the current state.

        This has to be called explicitly when the state changes.
        """
        for subscriber in list(self._subscribers):
            subscriber(self._cell.value)


class Trigger(Generic[T]):
    """Writes a shared state and calls a handler when it actually changes."""

    def __init__(self, cell: StateCell[T], handler: TriggerHandler) -> None:
        self._cell = cell
        self._handler = handler

    def write(self, state: T) -> None:
        """Store ``state``; call the handler only if it differs from the old one."""
        if self._cell.value != state:
            self._cell.value = state
            self._handler()


class TriggerIn(Generic[T]):
    """State input: a trigger only."""

    def __init__(self, cell: StateCell[T], handler: TriggerHandler) -> None:
        self._trigger = Trigger(cell, handler)

    @property
    def trigger(self) -> Trigger[T]:
        return self._trigger


class TriggerOut(Generic[T]):
    """State output: a notifier only."""

    def __init__(self, cell: StateCell[T]) -> None:
        self._notifier = Notifier(cell)

    @property
    def notifier(self) -> Notifier[T]:
        return self._notifier


class TriggerInOut(Generic[T]):
    """State input and output: a trigger and a notifier over the same state."""

    def __init__(self, cell: StateCell[T], handler: TriggerHandler) -> None:
        self._trigger = Trigger(cell, handler)
        self._notifier = Notifier(cell)

    @property
    def trigger(self) -> Trigger[T]:
        return self._trigger

    @property
    def notifier(self) -> Notifier[T]:
        return self._notifier