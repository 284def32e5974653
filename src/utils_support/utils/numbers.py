import math
import random
from collections.abc import Iterable

__all__ = (
    "average",
    "clamp",
    "format_currency",
    "format_percent",
    "format_thousands",
    "is_even",
    "is_odd",
    "map_range",
    "random_between",
    "random_int",
    "round_to",
    "total",
)


def clamp[Number: (int, float)](
    value: Number,
    minimum: Number,
    maximum: Number,
    /,
) -> Number:
    return min(max(value, minimum), maximum)


def format_thousands(
    value: float,
    /,
    separator: str = ",",
) -> str:
    """
    Format a number grouping the integer part digits by thousands.

    Examples
    --------
    >>> format_thousands(1234567.5, separator=" ")
    '1 234 567.5'
    """
    return f"{value:,}".replace(",", separator)


def format_currency(
    value: float,
    /,
    currency: str = "$",
    decimals: int = 2,
) -> str:
    return f"{currency}{value:,.{decimals}f}"


def format_percent(
    value: float,
    /,
    decimals: int = 0,
) -> str:
    """
    Format a fraction as percentage, 0.25 becomes '25%'.
    """
    return f"{value * 100:.{decimals}f}%"


def round_to(
    value: float,
    /,
    decimals: int = 0,
) -> float:
    """
    Round a number to the given count of decimal places.

    Halves are rounded up towards positive infinity instead of the
    banker's rounding used by the builtin ``round``.

    Parameters
    ----------
    value : float
        The number to round
    decimals : int, default=0
        Count of decimal places to keep, negative values round to tens,
        hundreds and so on.

    Returns
    -------
    float
        Rounded number.
    """
    factor: float = 10.0**decimals
    return math.floor(value * factor + 0.5) / factor


def is_even(
    value: int,
    /,
) -> bool:
    return value % 2 == 0


def is_odd(
    value: int,
    /,
) -> bool:
    return value % 2 != 0


def random_between(
    minimum: float,
    maximum: float,
    /,
    *,
    generator: random.Random | None = None,
) -> float:
    """
    Random float from the half-open range [minimum, maximum).
    """
    sample: float = generator.random() if generator else random.random()
    return sample * (maximum - minimum) + minimum


def random_int(
    minimum: int,
    maximum: int,
    /,
    *,
    generator: random.Random | None = None,
) -> int:
    """
    Random integer from the closed range [minimum, maximum].
    """
    if generator:
        return generator.randint(minimum, maximum)

    else:
        return random.randint(minimum, maximum)


def total(
    values: Iterable[float],
    /,
) -> float:
    return math.fsum(values)


def average(
    values: Iterable[float],
    /,
) -> float:
    """
    Arithmetic mean of values, 0 for no values.
    """
    collected: list[float] = list(values)
    if not collected:
        return 0

    return math.fsum(collected) / len(collected)


def map_range(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
    /,
) -> float:
    """
    Linearly map a number from one range onto another.

    Values outside of the input range are extrapolated, not clamped.
    """
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min
