from collections.abc import Callable
from datetime import timedelta
from logging import Logger, getLogger
from types import MethodType
from typing import Any, overload

from utils_support.helpers.timers import Timer, TimerHandle, resolve_timer, seconds
from utils_support.utils.mimic import mimic_function

__all__ = (
    "Throttled",
    "throttle",
)

_logger: Logger = getLogger(__name__)


@overload
def throttle[**Args](
    function: Callable[Args, Any],
    /,
    *,
    limit: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> "Throttled[Args]": ...


@overload
def throttle[**Args](
    *,
    limit: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> Callable[[Callable[Args, Any]], "Throttled[Args]"]: ...


def throttle[**Args](
    function: Callable[Args, Any] | None = None,
    /,
    *,
    limit: timedelta | float = 0.3,
    timer: Timer | None = None,
    on_error: Callable[[Exception], None] | None = None,
) -> "Callable[[Callable[Args, Any]], Throttled[Args]] | Throttled[Args]":
    """
    Limit function execution to the leading call and a trailing call per period.

    The very first call executes immediately. Every following call cancels
    the pending trailing execution and schedules a new one for the moment
    when the limit period since the last execution elapses. The trailing
    execution uses the arguments of the call which scheduled it and runs only
    if the limit period since the last execution has really elapsed.

    Can be used as a simple decorator (@throttle), with configuration
    parameters (@throttle(limit=1)) or as a plain function call.

    Parameters
    ----------
    function: Callable[Args, Any] | None
        The function to throttle. When used as a simple decorator,
        this parameter is provided automatically.
    limit: timedelta | float
        Minimal period between executions, float values are seconds.
        Default is 0.3 seconds.
    timer: Timer | None
        Facility used to read time and schedule trailing executions.
        The running asyncio event loop is used when not provided.
    on_error: Callable[[Exception], None] | None
        Receiver of exceptions raised by trailing executions. When not
        provided exceptions propagate to the timer. Exceptions of the
        leading execution always propagate to the caller.

    Returns
    -------
    Throttled[Args] | Callable[[Callable[Args, Any]], Throttled[Args]]
        Wrapper returning None from each call, or a decorator producing one.

    Notes
    -----
    - Results of the wrapped function are discarded.
    - Not thread-safe, should only be used within a single event loop.
    - Use ``cancel()`` on the wrapper to drop a pending trailing execution.
    - Decorated methods are bound per instance, every instance gets its own
      wrapper with separate last execution time and pending execution.

    Examples
    --------
    >>> @throttle(limit=timedelta(milliseconds=100))
    ... def on_scroll(position: int) -> None:
    ...     render(position)
    """

    def _wrap(
        function: Callable[Args, Any],
    ) -> Throttled[Args]:
        return Throttled(
            function,
            limit=seconds(limit),
            timer=timer,
            on_error=on_error,
        )

    if function := function:
        return _wrap(function)

    else:
        return _wrap


class Throttled[**Args]:
    __slots__ = (
        "__defaults__",
        "__doc__",
        "__globals__",
        "__kwdefaults__",
        "__name__",
        "__qualname__",
        "__wrapped__",
        "_function",
        "_last_ran_at",
        "_limit",
        "_on_error",
        "_pending",
        "_timer",
    )

    def __init__(
        self,
        function: Callable[Args, Any],
        /,
        *,
        limit: float,
        timer: Timer | None,
        on_error: Callable[[Exception], None] | None,
    ) -> None:
        self._function: Callable[Args, Any] = function
        self._limit: float = limit
        self._timer: Timer | None = timer
        self._on_error: Callable[[Exception], None] | None = on_error
        self._last_ran_at: float | None = None
        self._pending: TimerHandle | None = None

        # mimic function attributes if able
        mimic_function(function, within=self)

    def __get__(
        self,
        instance: object | None,
        owner: type | None = None,
        /,
    ) -> "Throttled[...]":
        if instance is None:
            return self  # accessed through the class

        # each instance keeps its own timestamp and pending call
        attribute: str = f"_throttled_{id(self)}"
        bound: Throttled[...] | None = instance.__dict__.get(attribute)
        if bound is None:
            bound = Throttled(
                MethodType(self._function, instance),
                limit=self._limit,
                timer=self._timer,
                on_error=self._on_error,
            )
            instance.__dict__[attribute] = bound

        return bound

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def last_ran_at(self) -> float | None:
        return self._last_ran_at

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(
        self,
        *args: Args.args,
        **kwargs: Args.kwargs,
    ) -> None:
        timer: Timer = resolve_timer(self._timer)
        last_ran_at: float | None = self._last_ran_at
        if last_ran_at is None:  # leading call
            self._function(*args, **kwargs)
            self._last_ran_at = timer.time()
            return

        if self._pending is not None:
            self._pending.cancel()

        def fire() -> None:
            self._pending = None
            assert self._last_ran_at is not None  # nosec: B101
            if timer.time() - self._last_ran_at < self._limit:
                _logger.debug(
                    "Dropped throttled call of %s fired before the limit period elapsed",
                    self._function,
                )
                return

            self._execute(args, kwargs)
            self._last_ran_at = timer.time()

        self._pending = timer.call_later(
            max(self._limit - (timer.time() - last_ran_at), 0.0),
            fire,
        )

    def cancel(self) -> None:
        if self._pending is None:
            return  # nothing scheduled

        self._pending.cancel()
        self._pending = None
        _logger.debug("Cancelled pending throttled call of %s", self._function)

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
                "Throttled call of %s failed, passing error to handler",
                self._function,
                exc_info=exc,
            )
            self._on_error(exc)
