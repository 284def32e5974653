from collections.abc import Generator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, cast

from utils_support.types.plain import PlainKind, classify, is_plain_container

__all__ = (
    "CyclicStructureError",
    "deep_clone",
    "deep_merge",
    "flatten_object",
    "is_equal",
)


class CyclicStructureError(ValueError):
    """
    Raised when a structural operation reaches a container which contains itself.

    Shared references which do not form a cycle are allowed, only containers
    present on the current recursion path are reported.
    """


def deep_clone[Value](
    value: Value,
    /,
) -> Value:
    """
    Create a structural copy of a plain value.

    Every mapping and sequence node at every depth is freshly allocated,
    primitive leaves are returned as they are.

    Parameters
    ----------
    value : Value
        The value to clone

    Returns
    -------
    Value
        A copy sharing no mapping or sequence node with the input. Lists are
        cloned into lists, tuples into tuples, other sequences into lists and
        all mappings into dicts.

    Raises
    ------
    CyclicStructureError
        If the value contains a reference cycle.
    """
    return cast(
        Value,
        _clone(
            value,
            visiting=set(),
        ),
    )


def deep_merge(
    target: Mapping[str, Any],
    source: Mapping[str, Any],
    /,
    *,
    clone_new_branches: bool = False,
) -> dict[str, Any]:
    """
    Recursively merge source mapping into target mapping.

    The result starts as a shallow copy of target. For every key of source:
    nested mappings present in both inputs are merged recursively, nested
    mappings present only in source are attached, and any other value
    (including sequences) replaces the target value wholesale.

    A source mapping meeting a target value which is not a mapping is merged
    into an empty mapping, so the result holds a copy of the source branch.
    Primitive or sequence target values are not turned into mappings with
    their own fields or indices.

    Parameters
    ----------
    target : Mapping[str, Any]
        The base mapping with the lower priority
    source : Mapping[str, Any]
        The mapping with values taking precedence
    clone_new_branches : bool, default=False
        When False, nested mappings introduced from source under keys absent
        in target are shared by reference with source. When True they are
        deep cloned so that the result is independent of source.

    Returns
    -------
    dict[str, Any]
        A new mapping, neither of the inputs is mutated. Levels which were
        merged are always freshly allocated.

    Raises
    ------
    CyclicStructureError
        If source contains a reference cycle on a merged path.
    """
    return _merge(
        target,
        source,
        clone_new_branches=clone_new_branches,
        visiting=set(),
    )


def flatten_object(
    mapping: Mapping[str, Any],
    /,
    prefix: str = "",
    *,
    separator: str = ".",
) -> dict[str, Any]:
    """
    Flatten nested mappings into a single level mapping with joined key paths.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        The mapping to flatten
    prefix : str, default=""
        Path prepended to all produced keys
    separator : str, default="."
        Text joining consecutive path elements

    Returns
    -------
    dict[str, Any]
        Mapping of paths to leaf values. Sequences and empty mappings are
        treated as leaves and are not descended into.

    Examples
    --------
    >>> flatten_object({"a": {"b": {"c": 1}}, "d": {}})
    {'a.b.c': 1, 'd': {}}
    """
    flattened: dict[str, Any] = {}
    _flatten(
        mapping,
        prefix=prefix,
        separator=separator,
        into=flattened,
        visiting=set(),
    )
    return flattened


def is_equal(
    lhs: Any,
    rhs: Any,
    /,
) -> bool:
    """
    Check structural equality of two plain values.

    Mappings are equal when they have the same key set and equal values
    under every key, regardless of key order. Sequences are equal when they
    have the same length and equal elements at every position. A mapping is
    never equal to a sequence and a composite is never equal to a primitive.
    Primitives are compared with ``==``.

    Parameters
    ----------
    lhs : Any
        First value to compare
    rhs : Any
        Second value to compare

    Returns
    -------
    bool
        True if both values are structurally equal

    Raises
    ------
    CyclicStructureError
        If either value contains a reference cycle on a compared path.
    """
    return _equal(
        lhs,
        rhs,
        visiting_lhs=set(),
        visiting_rhs=set(),
    )


@contextmanager
def _entering(
    container: Mapping[Any, Any] | Sequence[Any],
    /,
    *,
    visiting: set[int],
) -> Generator[None]:
    identifier: int = id(container)
    if identifier in visiting:
        raise CyclicStructureError(
            f"Reference cycle detected through {type(container).__name__} container"
        )

    visiting.add(identifier)
    try:
        yield

    finally:
        visiting.discard(identifier)


def _clone(
    value: Any,
    /,
    *,
    visiting: set[int],
) -> Any:
    match classify(value):
        case PlainKind.PRIMITIVE:
            return value

        case PlainKind.SEQUENCE:
            with _entering(value, visiting=visiting):
                elements: list[Any] = [
                    _clone(
                        element,
                        visiting=visiting,
                    )
                    for element in value
                ]

            if isinstance(value, tuple):
                return tuple(elements)

            else:
                return elements

        case PlainKind.MAPPING:
            with _entering(value, visiting=visiting):
                return {
                    key: _clone(
                        element,
                        visiting=visiting,
                    )
                    for key, element in value.items()
                }


def _merge(
    target: Mapping[str, Any],
    source: Mapping[str, Any],
    /,
    *,
    clone_new_branches: bool,
    visiting: set[int],
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(target)
    with _entering(source, visiting=visiting):
        for key, value in source.items():
            if not is_plain_container(value):
                merged[key] = value  # primitives and sequences replace wholesale

            elif key not in target:
                merged[key] = deep_clone(value) if clone_new_branches else value

            else:
                current: Any = target[key]
                merged[key] = _merge(
                    current if is_plain_container(current) else {},
                    value,
                    clone_new_branches=clone_new_branches,
                    visiting=visiting,
                )

    return merged


def _flatten(
    mapping: Mapping[str, Any],
    /,
    *,
    prefix: str,
    separator: str,
    into: dict[str, Any],
    visiting: set[int],
) -> None:
    with _entering(mapping, visiting=visiting):
        for key, value in mapping.items():
            path: str = f"{prefix}{separator}{key}" if prefix else str(key)
            if is_plain_container(value) and len(value) > 0:
                _flatten(
                    value,
                    prefix=path,
                    separator=separator,
                    into=into,
                    visiting=visiting,
                )

            else:
                into[path] = value


def _equal(  # noqa: PLR0911
    lhs: Any,
    rhs: Any,
    /,
    *,
    visiting_lhs: set[int],
    visiting_rhs: set[int],
) -> bool:
    if lhs is rhs:
        return True

    match (classify(lhs), classify(rhs)):
        case (PlainKind.MAPPING, PlainKind.MAPPING):
            if len(lhs) != len(rhs):
                return False

            with (
                _entering(lhs, visiting=visiting_lhs),
                _entering(rhs, visiting=visiting_rhs),
            ):
                return all(
                    key in rhs
                    and _equal(
                        value,
                        rhs[key],
                        visiting_lhs=visiting_lhs,
                        visiting_rhs=visiting_rhs,
                    )
                    for key, value in lhs.items()
                )

        case (PlainKind.SEQUENCE, PlainKind.SEQUENCE):
            if len(lhs) != len(rhs):
                return False

            with (
                _entering(lhs, visiting=visiting_lhs),
                _entering(rhs, visiting=visiting_rhs),
            ):
                return all(
                    _equal(
                        left,
                        right,
                        visiting_lhs=visiting_lhs,
                        visiting_rhs=visiting_rhs,
                    )
                    for left, right in zip(lhs, rhs, strict=True)
                )

        case (PlainKind.PRIMITIVE, PlainKind.PRIMITIVE):
            return bool(lhs == rhs)

        case _:  # composite against primitive or mapping against sequence
            return False
