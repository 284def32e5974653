import math
import re
from collections.abc import Callable, Mapping, Sequence, Sized
from datetime import UTC, date, datetime
from typing import Any, Final
from urllib.parse import urlsplit

from typing_extensions import TypeIs

from utils_support.types.plain import PlainKind, classify

__all__ = (
    "has_length_between",
    "is_between",
    "is_blank",
    "is_boolean",
    "is_callable",
    "is_email",
    "is_mapping",
    "is_none",
    "is_number",
    "is_sequence",
    "is_string",
    "is_url",
    "is_valid_date",
    "matches",
)

_EMAIL: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# schemes which are meaningless without a host
_HOST_SCHEMES: Final[frozenset[str]] = frozenset(("http", "https", "ftp", "ws", "wss"))


def is_none(
    value: Any,
    /,
) -> TypeIs[None]:
    return value is None


def is_number(
    value: Any,
    /,
) -> TypeIs[int | float]:
    """
    Check if a value is a real number.

    Booleans and NaN are not considered numbers, infinities are.
    """
    match value:
        case bool():
            return False

        case int():
            return True

        case float():
            return not math.isnan(value)

        case _:
            return False


def is_string(
    value: Any,
    /,
) -> TypeIs[str]:
    return isinstance(value, str)


def is_boolean(
    value: Any,
    /,
) -> TypeIs[bool]:
    return isinstance(value, bool)


def is_sequence(
    value: Any,
    /,
) -> TypeIs[Sequence[Any]]:
    """
    Check if a value is a sequence, text and binary values are not sequences here.
    """
    return classify(value) is PlainKind.SEQUENCE


def is_mapping(
    value: Any,
    /,
) -> TypeIs[Mapping[Any, Any]]:
    return classify(value) is PlainKind.MAPPING


def is_callable(
    value: Any,
    /,
) -> TypeIs[Callable[..., Any]]:
    return callable(value)


def is_blank(
    value: Any,
    /,
) -> bool:
    """
    Check if a value carries no content.

    None, whitespace only strings and empty sequences or mappings are blank,
    any other value including zero and False is not.
    """
    if value is None:
        return True

    if isinstance(value, str):
        return not value.strip()

    if classify(value) is not PlainKind.PRIMITIVE:
        sized: Sized = value
        return len(sized) == 0

    return False


def is_email(
    value: str,
    /,
) -> bool:
    return _EMAIL.match(value) is not None


def is_url(
    value: str,
    /,
) -> bool:
    """
    Check if text is an absolute URL.

    A scheme is always required, common network schemes like http or ftp
    additionally require a host.
    """
    try:
        parts = urlsplit(value)

    except ValueError:
        return False

    if not parts.scheme:
        return False

    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)

    return bool(parts.netloc or parts.path)


def is_valid_date(
    value: date | str | float,
    /,
) -> bool:
    """
    Check if a value describes a valid point in time.

    Parameters
    ----------
    value : date | str | float
        Date or datetime object, ISO 8601 text or POSIX timestamp in seconds.

    Returns
    -------
    bool
        True if the value can be interpreted as a date.
    """
    match value:
        case date():
            return True

        case bool():
            return False

        case str():
            try:
                datetime.fromisoformat(value)

            except ValueError:
                return False

            return True

        case int() | float():
            try:
                datetime.fromtimestamp(value, UTC)

            except (OverflowError, OSError, ValueError):
                return False

            return True

        case _:
            return False


def matches(
    value: str,
    pattern: str | re.Pattern[str],
    /,
) -> bool:
    """
    Check if the pattern can be found anywhere in the value.
    """
    return re.search(pattern, value) is not None


def is_between(
    value: float,
    minimum: float,
    maximum: float,
    /,
) -> bool:
    return minimum <= value <= maximum


def has_length_between(
    value: Sized,
    minimum: int,
    maximum: int,
    /,
) -> bool:
    return minimum <= len(value) <= maximum
