from collections.abc import Callable
from datetime import timedelta
from logging import Logger, getLogger
from types import MethodType
from typing import Any, overload

from utils_support.helpers.timers import Timer, TimerHandle, resolve_timer, seconds
from utils_support.utils.mimic import mimic_function

__all__ = (
    "Debounced",
    "debounce",
)

_logger: Logger = getLogger(__name__)


@overload
def debounce[**Args](
    function: Callable[Args, Any],
    /,
    *,
    wait: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> "Debounced[Args]": ...


@overload
def debounce[**Args](
    *,
    wait: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> Callable[[Callable[Args, Any]], "Debounced[Args]"]: ...


def debounce[**Args](
    function: Callable[Args, Any] | None = None,
    /,
    *,
    wait: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> "Callable[[Callable[Args, Any]], Debounced[Args]] | Debounced[Args]":
    """
    Delay function execution until calls stop arriving for the wait period.

    Every call cancels the previously scheduled execution and schedules a new
    one, so a burst of calls results in a single execution, wait after the
    last call of the burst, using the arguments of that last call.

    Can be used as a simple decorator (@debounce), with configuration
    parameters (@debounce(wait=0.5)) or as a plain function call.

    Parameters
    ----------
    function: Callable[Args, Any] | None
        The function to debounce. When used as a simple decorator,
        this parameter is provided automatically.
    wait: timedelta | float
        Quiet period required before executing, float values are seconds.
        Default is 0.3 seconds.
    timer: Timer | None
        Facility used to schedule the execution. The running asyncio event
        loop is used when not provided.
    on_error: Callable[[Exception], None] | None
        Receiver of exceptions raised by deferred executions. When not
        provided exceptions propagate to the timer (asyncio event loop
        reports them through its exception handler).

    Returns
    -------
    Debounced[Args] | Callable[[Callable[Args, Any]], Debounced[Args]]
        Wrapper returning None from each call, or a decorator producing one.

    Notes
    -----
    - Results of the wrapped function are discarded.
    - Not thread-safe, should only be used within a single event loop.
    - Use ``cancel()`` on the wrapper to drop a scheduled execution.
    - Decorated methods are bound per instance, every instance gets its own
      wrapper with separate pending execution state.

    Examples
    --------
    >>> @debounce(wait=0.2)
    ... def save(draft: str) -> None:
    ...     storage.write(draft)
    """

    def _wrap(
        function: Callable[Args, Any],
    ) -> Debounced[Args]:
        return Debounced(
            function,
            wait=seconds(wait),
            timer=timer,
            on_error=on_error,
        )

    if function := function:
        return _wrap(function)

    else:
        return _wrap


class Debounced[**Args]:
    __slots__ = (
        "__defaults__",
        "__doc__",
        "__globals__",
        "__kwdefaults__",
        "__name__",
        "__qualname__",
        "__wrapped__",
        "_function",
        "_on_error",
        "_pending",
        "_timer",
        "_wait",
    )

    def __init__(
        self,
        function: Callable[Args, Any],
        /,
        *,
        wait: float,
        timer: Timer | None,
        on_error: Callable[[Exception], None] | None,
    ) -> None:
        self._function: Callable[Args, Any] = function
        self._wait: float = wait
        self._timer: Timer | None = timer
        self._on_error: Callable[[Exception], None] | None = on_error
        self._pending: TimerHandle | None = None

        # mimic function attributes if able
        mimic_function(function, within=self)

    def __get__(
        self,
        instance: object | None,
        owner: type | None = None,
        /,
    ) -> "Debounced[...]":
        if instance is None:
            return self  # accessed through the class

        # each instance keeps its own pending call
        attribute: str = f"_debounced_{id(self)}"
        bound: Debounced[...] | None = instance.__dict__.get(attribute)
        if bound is None:
            bound = Debounced(
                MethodType(self._function, instance),
                wait=self._wait,
                timer=self._timer,
                on_error=self._on_error,
            )
            instance.__dict__[attribute] = bound

        return bound

    @property
    def wait(self) -> float:
        return self._wait

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(
        self,
        *args: Args.args,
        **kwargs: Args.kwargs,
    ) -> None:
        timer: Timer = resolve_timer(self._timer)
        if self._pending is not None:
            self._pending.cancel()

        def fire() -> None:
            self._pending = None
            self._execute(args, kwargs)

        self._pending = timer.call_later(self._wait, fire)

    def cancel(self) -> None:
        if self._pending is None:
            return  # nothing scheduled

        self._pending.cancel()
        self._pending = None
        _logger.debug("Cancelled pending debounced call of %s", self._function)

    def _execute(
        self,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        try:
            self._function(*args, **kwargs)

        except Exception as exc:
            if self._on_error is None:
                raise

            _logger.debug(
                "Debounced call of %s failed, passing error to handler",
                self._function,
                exc_info=exc,
            )
            self._on_error(exc)
