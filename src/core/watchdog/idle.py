"""Inactivity watchdog polled from the UI loop."""
from __future__ import annotations

import time
from typing import Callable, Optional


class IdleWatchdog:
    """Fires ``on_expire`` once after ``timeout_ms`` without a ``reset()``.

    The owner drives it: ``start()`` when its screen is shown, ``reset()`` on every
    keyboard/pointer event, ``poll()`` once per frame and ``stop()`` on teardown.
    """

    def __init__(
        self,
        timeout_ms: int,
        on_expire: Callable[[], None],
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be greater than zero")
        self.timeout_ms = timeout_ms
        self._on_expire = on_expire
        self._clock = clock
        self._deadline: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._deadline is not None

    @property
    def remaining_ms(self) -> Optional[int]:
        if self._deadline is None:
            return None
        return max(0, round((self._deadline - self._clock()) * 1000))

    def start(self) -> None:
        self._deadline = self._clock() + self.timeout_ms / 1000

    def reset(self) -> None:
        if self._deadline is not None:
            self.start()

    def stop(self) -> None:
        self._deadline = None

    def poll(self) -> bool:
        if self._deadline is None or self._clock() < self._deadline:
            return False
        self._deadline = None
        self._on_expire()
        return True
