import threading
import time

import pytest

from arakit.ttl_timer import TtlTimer


def _run_until_released(target, release, deadline=5.0):
    results = []
    thread = threading.Thread(target=lambda: results.append(target()), daemon=True)
    thread.start()
    end = time.monotonic() + deadline
    while thread.is_alive() and time.monotonic() < end:
        release()
        thread.join(0.01)
    return thread, results


def test_set_updates_ttl():
    timer = TtlTimer()
    timer.set(5)
    assert timer.ttl == 5


def test_negative_ttl_rejected():
    timer = TtlTimer()
    with pytest.raises(ValueError):
        timer.set(-1)


def test_wait_times_out_with_zero_ttl():
    timer = TtlTimer()
    timer.set(0)
    assert timer.wait() is False


def test_wait_returns_true_when_signalled():
    timer = TtlTimer()
    timer.set(30)
    thread, results = _run_until_released(timer.wait, timer.cancel)
    assert not thread.is_alive()
    assert results == [True]


def test_wait_for_signal_released_by_cancel():
    timer = TtlTimer()
    thread, results = _run_until_released(timer.wait_for_signal, timer.cancel)
    assert not thread.is_alive()
    assert results == [None]


def test_wait_for_signal_released_by_set():
    timer = TtlTimer()
    thread, results = _run_until_released(
        timer.wait_for_signal, lambda: timer.set(3)
    )
    assert not thread.is_alive()
    assert timer.ttl == 3


def test_dispose_releases_blocked_waiter():
    timer = TtlTimer()
    thread, results = _run_until_released(timer.wait_for_signal, timer.dispose)
    assert not thread.is_alive()
    assert timer.disposing is True


def test_wait_after_dispose_returns_false_at_once():
    timer = TtlTimer()
    timer.set(60)
    timer.dispose()
    started = time.monotonic()
    assert timer.wait() is False
    assert time.monotonic() - started < 1.0


def test_wait_for_signal_after_dispose_returns_at_once():
    timer = TtlTimer()
    timer.dispose()
    started = time.monotonic()
    assert timer.wait_for_signal() is None
    assert time.monotonic() - started < 1.0
    assert timer.disposing is True