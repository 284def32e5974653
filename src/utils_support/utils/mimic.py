from collections.abc import Callable
from typing import Any, cast, overload

__all__ = ("mimic_function",)

_MIMICKED_ATTRIBUTES: tuple[str, ...] = (
    "__module__",
    "__name__",
    "__qualname__",
    "__doc__",
    "__defaults__",
    "__kwdefaults__",
    "__globals__",
)


@overload
def mimic_function[**Args, Result](
    function: Callable[Args, Result],
    /,
    within: Callable[..., Any],
) -> Callable[Args, Result]: ...


@overload
def mimic_function[**Args, Result](
    function: Callable[Args, Result],
    /,
) -> Callable[[Callable[..., Any]], Callable[Args, Result]]: ...


def mimic_function[**Args, Result](
    function: Callable[Args, Result],
    /,
    within: Callable[..., Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[Args, Result]] | Callable[Args, Result]:
    """
    Make a wrapper look like the function it wraps.

    Copies the identifying attributes of the function onto the wrapper and
    points ``__wrapped__`` at the original so that introspection tools
    (``inspect.signature``, ``help``) describe the wrapped function.
    Attributes which can't be set on the wrapper are left out.

    Parameters
    ----------
    function : Callable[Args, Result]
        The function to mimic
    within : Callable[..., Any] | None, optional
        The wrapper to update, when omitted a decorator is returned instead

    Returns
    -------
    Callable
        The updated wrapper or a decorator updating one.
    """

    def mimic(
        target: Callable[..., Any],
    ) -> Callable[Args, Result]:
        for attribute in _MIMICKED_ATTRIBUTES:
            try:
                value: Any = getattr(function, attribute)

            except AttributeError:
                continue  # function-like objects may lack some attributes

            try:
                setattr(target, attribute, value)

            except (AttributeError, TypeError):
                continue  # slotted wrappers declare only what they can hold

        target.__wrapped__ = function  # pyright: ignore[reportFunctionMemberAccess]
        return cast(Callable[Args, Result], target)

    if within is not None:
        return mimic(within)

    else:
        return mimic
