"""Tests for the inactivity watchdog."""
from __future__ import annotations

import pytest

from core.watchdog import IdleWatchdog


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms / 1000


def _make(timeout_ms: int = 60_000):
    clock = FakeClock()
    fired: list[int] = []
    watchdog = IdleWatchdog(timeout_ms, lambda: fired.append(1), clock=clock)
    return watchdog, clock, fired


def test_fires_once_after_timeout() -> None:
    watchdog, clock, fired = _make(1000)
    watchdog.start()

    clock.advance(750)
    assert watchdog.poll() is False
    clock.advance(250)
    assert watchdog.poll() is True
    clock.advance(5000)
    assert watchdog.poll() is False

    assert fired == [1]
    assert not watchdog.active


def test_reset_postpones_deadline() -> None:
    watchdog, clock, fired = _make(1000)
    watchdog.start()

    clock.advance(750)
    watchdog.reset()
    clock.advance(750)
    assert watchdog.poll() is False
    assert watchdog.remaining_ms == 250
    clock.advance(250)
    assert watchdog.poll() is True
    assert fired == [1]


def test_stopped_watchdog_never_fires() -> None:
    watchdog, clock, fired = _make(1000)
    watchdog.start()
    watchdog.stop()

    clock.advance(10_000)
    watchdog.reset()

    assert watchdog.poll() is False
    assert fired == []
    assert watchdog.remaining_ms is None


def test_not_started_watchdog_is_inactive() -> None:
    watchdog, clock, fired = _make()
    clock.advance(120_000)
    assert watchdog.poll() is False
    assert not watchdog.active


def test_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError):
        IdleWatchdog(0, lambda: None)
