from collections.abc import Callable
from typing import Any

import pytest


class FakeTimerHandle:
    def __init__(
        self,
        when: float,
        callback: Callable[[], Any],
    ) -> None:
        self.when: float = when
        self.callback: Callable[[], Any] = callback
        self.cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimer:
    """
    Virtual clock driving scheduled callbacks only when time is advanced.
    """

    def __init__(self) -> None:
        self.now: float = 0
        self._scheduled: list[FakeTimerHandle] = []

    @property
    def scheduled(self) -> list[FakeTimerHandle]:
        return [handle for handle in self._scheduled if not handle.cancelled]

    def time(self) -> float:
        return self.now

    def call_later(
        self,
        delay: float,
        callback: Callable[[], Any],
        /,
    ) -> FakeTimerHandle:
        handle = FakeTimerHandle(self.now + delay, callback)
        self._scheduled.append(handle)
        return handle

    def advance_to(
        self,
        moment: float,
    ) -> None:
        while due := [handle for handle in self.scheduled if handle.when <= moment]:
            handle: FakeTimerHandle = min(due, key=lambda handle: handle.when)
            self._scheduled.remove(handle)
            self.now = handle.when
            handle.callback()

        self.now = moment


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()
