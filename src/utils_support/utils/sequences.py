import random
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, Literal

__all__ = (
    "chunk",
    "count",
    "difference",
    "first",
    "flatten",
    "group_by",
    "intersection",
    "key_by",
    "last",
    "partition",
    "sample",
    "shuffle",
    "sort_by",
    "unique",
)


def chunk[T](
    sequence: Sequence[T],
    size: int,
    /,
) -> list[list[T]]:
    """
    Split a sequence into consecutive chunks of the given size.

    Parameters
    ----------
    sequence : Sequence[T]
        The sequence to split.
    size : int
        Maximal size of each chunk, the last chunk may be shorter.

    Returns
    -------
    list[list[T]]
        List of chunks, empty when the sequence is empty or size is below 1.
    """
    if not sequence or size < 1:
        return []

    return [list(sequence[idx : idx + size]) for idx in range(0, len(sequence), size)]


def unique[T: Hashable](
    elements: Iterable[T],
    /,
) -> list[T]:
    """
    Remove duplicated elements preserving the order of first occurrence.
    """
    return list(dict.fromkeys(elements))


def shuffle[T](
    sequence: Sequence[T],
    /,
    *,
    generator: random.Random | None = None,
) -> list[T]:
    """
    Shuffle a copy of a sequence using the Fisher-Yates algorithm.

    Parameters
    ----------
    sequence : Sequence[T]
        The sequence to shuffle, it is not modified.
    generator : random.Random | None, default=None
        Source of randomness, the shared module generator is used when omitted.

    Returns
    -------
    list[T]
        A new list with the same elements in random order.
    """
    randrange: Callable[[int], int] = generator.randrange if generator else random.randrange
    shuffled: list[T] = list(sequence)
    for idx in range(len(shuffled) - 1, 0, -1):
        swap: int = randrange(idx + 1)
        shuffled[idx], shuffled[swap] = shuffled[swap], shuffled[idx]

    return shuffled


def difference[T](
    sequence: Iterable[T],
    values: Iterable[T],
    /,
) -> list[T]:
    """
    Elements of the sequence which are not present in values.
    """
    excluded: list[T] = list(values)
    return [element for element in sequence if element not in excluded]


def intersection[T](
    sequence: Iterable[T],
    values: Iterable[T],
    /,
) -> list[T]:
    """
    Elements of the sequence which are also present in values.
    """
    included: list[T] = list(values)
    return [element for element in sequence if element in included]


def flatten[T](
    sequence: Iterable[T | Sequence[T]],
    /,
) -> list[T]:
    """
    Flatten a sequence by a single level.

    Only nested lists and tuples are expanded, strings and other values are
    kept as they are.
    """
    flattened: list[T] = []
    for element in sequence:
        if isinstance(element, list | tuple):
            flattened.extend(element)  # pyright: ignore[reportUnknownArgumentType]

        else:
            flattened.append(element)  # pyright: ignore[reportArgumentType]

    return flattened


def first[T](
    sequence: Sequence[T],
    /,
) -> T | None:
    return sequence[0] if sequence else None


def last[T](
    sequence: Sequence[T],
    /,
) -> T | None:
    return sequence[-1] if sequence else None


def group_by[T](
    elements: Iterable[T],
    key: Callable[[T], Any],
    /,
) -> dict[str, list[T]]:
    """
    Group elements by the string form of a computed key.

    Parameters
    ----------
    elements : Iterable[T]
        Elements to group.
    key : Callable[[T], Any]
        Function computing the group of each element.

    Returns
    -------
    dict[str, list[T]]
        Groups in the order of their first appearance.
    """
    groups: dict[str, list[T]] = {}
    for element in elements:
        groups.setdefault(str(key(element)), []).append(element)

    return groups


def key_by[T](
    elements: Iterable[T],
    key: Callable[[T], Any],
    /,
) -> dict[str, T]:
    """
    Index elements by the string form of a computed key, later elements win.
    """
    return {str(key(element)): element for element in elements}


def sort_by[T](
    elements: Iterable[T],
    key: Callable[[T], Any] | str,
    /,
    order: Literal["asc", "desc"] = "asc",
) -> list[T]:
    """
    Sort elements by a computed or named key.

    Parameters
    ----------
    elements : Iterable[T]
        Elements to sort, the input is not modified.
    key : Callable[[T], Any] | str
        Function computing the sort key or a name of the key to read from
        mapping elements or of the attribute to read from other elements.
    order : Literal["asc", "desc"], default="asc"
        Sorting direction.

    Returns
    -------
    list[T]
        New sorted list, the sort is stable in both directions.

    Raises
    ------
    ValueError
        If the order is not recognized.
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort order: {order}")

    sort_key: Callable[[T], Any]
    if callable(key):
        sort_key = key

    else:

        def sort_key(element: T) -> Any:
            if isinstance(element, Mapping):
                return element[key]  # pyright: ignore[reportUnknownVariableType]

            else:
                return getattr(element, key)

    return sorted(elements, key=sort_key, reverse=order == "desc")


def count(
    elements: Iterable[Any],
    /,
) -> dict[str, int]:
    """
    Count occurrences of elements keyed by their string form.
    """
    counts: dict[str, int] = {}
    for element in elements:
        counts[str(element)] = counts.get(str(element), 0) + 1

    return counts


def partition[T](
    elements: Iterable[T],
    predicate: Callable[[T], bool],
    /,
) -> tuple[list[T], list[T]]:
    """
    Split elements into those matching the predicate and the rest.

    Returns
    -------
    tuple[list[T], list[T]]
        Matching elements first, remaining elements second, both in input order.
    """
    matching: list[T] = []
    rest: list[T] = []
    for element in elements:
        if predicate(element):
            matching.append(element)

        else:
            rest.append(element)

    return (matching, rest)


def sample[T](
    sequence: Sequence[T],
    /,
    *,
    generator: random.Random | None = None,
) -> T | None:
    if not sequence:
        return None

    return generator.choice(sequence) if generator else random.choice(sequence)
