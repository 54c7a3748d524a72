"""Time-to-live countdown timer."""

from __future__ import annotations

import threading


class TtlTimer:
    """Countdown timer that waiters can block on until it is reset or expires."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._disposing = False
        self._ttl: float = 0

    @property
    def ttl(self) -> float:
        """Time to live in seconds."""
        return self._ttl

    @property
    def disposing(self) -> bool:
        return self._disposing

    def wait_for_signal(self) -> None:
        """Block until ``set``, ``cancel`` or ``dispose`` is called."""
        if self._disposing:
            return
        with self._condition:
            self._condition.wait()

    def wait(self) -> bool:
        """Wait up to the TTL; return True if signalled, False on expiry."""
        if self._disposing:
            return False
        with self._condition:
            return self._condition.wait(timeout=self._ttl)

    def set(self, ttl: float) -> None:
        """Set the TTL in seconds and wake one waiter."""
        if ttl < 0:
            raise ValueError("TTL cannot be negative")
        self._ttl = ttl
        self._notify()

    def cancel(self) -> None:
        """Wake one waiter immediately."""
        self._notify()

    def dispose(self) -> None:
        """Make all current and later waits return at once; irreversible."""
        self._disposing = True
        self._notify()

    def _notify(self) -> None:
        with self._condition:
            self._condition.notify()