"""Abstract network layer that dispatches received payloads to receivers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class NetworkLayer(ABC, Generic[T]):
    """Sends messages and hands received ones to registered receivers."""

    def __init__(self, deserializer: Callable[[Sequence[int]], T]) -> None:
        self._deserializer = deserializer
        self._receivers: dict[int, tuple[Any, Callable[[T], None]]] = {}

    @abstractmethod
    def send(self, message: T) -> None:
        """Send ``message`` through the network."""

    def set_receiver(self, owner: Any, receiver: Callable[[T], None]) -> None:
        """Register ``receiver`` for ``owner``, replacing any earlier one."""
        self._receivers[id(owner)] = (owner, receiver)

    def reset_receiver(self, owner: Any) -> None:
        """Remove the receiver registered for ``owner``, if any."""
        self._receivers.pop(id(owner), None)

    def fire_receiver_callbacks(self, payload: Sequence[int]) -> None:
        """Deserialize ``payload`` afresh for each receiver and call it."""
        for _, receiver in list(self._receivers.values()):
            receiver(self._deserializer(payload))