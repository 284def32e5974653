from collections.abc import Callable
from os import getenv as os_getenv
from typing import Literal, overload

__all__ = (
    "getenv",
    "getenv_bool",
    "getenv_float",
    "getenv_int",
    "getenv_str",
)

_TRUTHY: frozenset[str] = frozenset(("true", "1", "t", "yes", "on"))


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
) -> Value | None: ...


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    default: Value,
) -> Value: ...


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    required: Literal[True],
) -> Value: ...


def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    default: Value | None = None,
    required: bool = False,
) -> Value | None:
    """
    Read an environment variable and convert it with the provided mapping.

    Empty values are treated the same as unset variables.

    Parameters
    ----------
    key : str
        Name of the environment variable
    mapping : Callable[[str], Value]
        Conversion of the raw text into the expected value
    default : Value | None, optional
        Value used when the variable is not set
    required : bool, default=False
        Fail instead of returning None when the variable is not set and
        no default is provided

    Returns
    -------
    Value | None
        Converted value, the default or None

    Raises
    ------
    ValueError
        If the conversion fails or a required variable is missing
    """
    if value := os_getenv(key):
        try:
            return mapping(value)

        except Exception as exc:
            raise ValueError(f"Failed to convert environment value `{key}`: {value}") from exc

    elif required and default is None:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return default


def _as_bool(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


@overload
def getenv_bool(
    key: str,
    /,
) -> bool | None: ...


@overload
def getenv_bool(
    key: str,
    /,
    default: bool,
) -> bool: ...


def getenv_bool(
    key: str,
    /,
    default: bool | None = None,
    *,
    required: bool = False,
) -> bool | None:
    """
    Read a boolean environment variable.

    'true', '1', 't', 'yes' and 'on' (case-insensitive) are True, any other
    non-empty value is False.
    """
    return getenv(key, _as_bool, default=default, required=required)


@overload
def getenv_int(
    key: str,
    /,
) -> int | None: ...


@overload
def getenv_int(
    key: str,
    /,
    default: int,
) -> int: ...


def getenv_int(
    key: str,
    /,
    default: int | None = None,
    *,
    required: bool = False,
) -> int | None:
    return getenv(key, int, default=default, required=required)


@overload
def getenv_float(
    key: str,
    /,
) -> float | None: ...


@overload
def getenv_float(
    key: str,
    /,
    default: float,
) -> float: ...


def getenv_float(
    key: str,
    /,
    default: float | None = None,
    *,
    required: bool = False,
) -> float | None:
    return getenv(key, float, default=default, required=required)


@overload
def getenv_str(
    key: str,
    /,
) -> str | None: ...


@overload
def getenv_str(
    key: str,
    /,
    default: str,
) -> str: ...


def getenv_str(
    key: str,
    /,
    default: str | None = None,
    *,
    required: bool = False,
) -> str | None:
    return getenv(key, str, default=default, required=required)
