from asyncio import get_running_loop
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

__all__ = (
    "Timer",
    "TimerHandle",
    "resolve_timer",
    "seconds",
)


@runtime_checkable
class TimerHandle(Protocol):
    """
    Handle of a scheduled callback which allows cancelling it before it fires.
    """

    def cancel(self) -> None: ...


@runtime_checkable
class Timer(Protocol):
    """
    Facility scheduling callbacks after a delay.

    Any asyncio event loop implements this protocol, custom implementations
    may be used to drive time manually, e.g. in tests.
    """

    def time(self) -> float: ...

    def call_later(
        self,
        delay: float,
        callback: Callable[[], Any],
        /,
    ) -> TimerHandle: ...


def resolve_timer(
    timer: Timer | None,
    /,
) -> Timer:
    """
    Return the provided timer or the currently running event loop.

    Raises
    ------
    RuntimeError
        If no timer was provided and there is no running event loop.
    """
    if timer is not None:
        return timer

    return get_running_loop()


def seconds(
    duration: timedelta | float,
    /,
) -> float:
    match duration:
        case timedelta() as delta:
            return delta.total_seconds()

        case value:
            return float(value)
