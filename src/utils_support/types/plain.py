from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any, TypeGuard

__all__ = (
    "PlainKind",
    "PlainValue",
    "classify",
    "is_plain_container",
)

type PlainValue = None | bool | int | float | str | Sequence[PlainValue] | Mapping[str, PlainValue]


class PlainKind(StrEnum):
    """
    Closed set of structural categories of a plain value.

    Every recursive structural operation dispatches on this tag instead of
    inspecting runtime types on its own.
    """

    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def classify(
    value: Any,
    /,
) -> PlainKind:
    """
    Classify a value into its structural category.

    Parameters
    ----------
    value : Any
        The value to classify

    Returns
    -------
    PlainKind
        MAPPING for any Mapping, SEQUENCE for any Sequence other than text
        and binary types, PRIMITIVE for everything else including None.
    """
    match value:
        case str() | bytes() | bytearray():
            return PlainKind.PRIMITIVE

        case Mapping():
            return PlainKind.MAPPING

        case Sequence():
            return PlainKind.SEQUENCE

        case _:
            return PlainKind.PRIMITIVE


def is_plain_container(
    value: Any,
    /,
) -> TypeGuard[Mapping[Any, Any]]:
    """
    Check if a value is a mapping-like composite that should be recursed into.

    Sequences, strings, numbers, booleans and None are never plain containers.
    """
    return classify(value) is PlainKind.MAPPING
