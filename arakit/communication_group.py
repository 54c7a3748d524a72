"""Communication group client and server endpoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

RequestHandler = Callable[[T], None]
ResponseHandler = Callable[[int, R], None]

_MAX_CLIENT_ID = 0xFFFFFFFF


class CommunicationGroupClient(Generic[T, R]):
    """Client side of a communication group; receives requests from the server."""

    def __init__(self, request_handler: RequestHandler[T]) -> None:
        self._request_handler = request_handler

    def message(self, msg: T) -> None:
        """Hand a request message received from the server to the handler."""
        self._request_handler(msg)


class CommunicationGroupServer(Generic[T, R]):
    """Server side of a communication group; receives responses from clients."""

    def __init__(self, response_handler: ResponseHandler[R]) -> None:
        self._response_handler = response_handler

    def response(self, client_id: int, response_msg: R) -> None:
        """Hand a response from client ``client_id`` to the handler."""
        if not 0 <= client_id <= _MAX_CLIENT_ID:
            raise ValueError(f"client ID {client_id} is out of range")
        self._response_handler(client_id, response_msg)