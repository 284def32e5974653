from collections.abc import Callable, Iterable, Mapping

__all__ = (
    "from_pairs",
    "is_empty_mapping",
    "map_values",
    "omit",
    "pick",
    "to_pairs",
)


def pick[K, V](
    mapping: Mapping[K, V],
    keys: Iterable[K],
    /,
) -> dict[K, V]:
    """
    Select only the given keys of a mapping.

    Parameters
    ----------
    mapping : Mapping[K, V]
        The source mapping.
    keys : Iterable[K]
        Keys to keep, keys absent from the mapping are skipped.

    Returns
    -------
    dict[K, V]
        A new dict containing only the selected items, in the order of keys.
    """
    return {key: mapping[key] for key in keys if key in mapping}


def omit[K, V](
    mapping: Mapping[K, V],
    keys: Iterable[K],
    /,
) -> dict[K, V]:
    """
    Copy a mapping without the given keys.

    Parameters
    ----------
    mapping : Mapping[K, V]
        The source mapping.
    keys : Iterable[K]
        Keys to drop.

    Returns
    -------
    dict[K, V]
        A new dict with all remaining items of the source mapping.
    """
    omitted: set[K] = set(keys)
    return {key: value for key, value in mapping.items() if key not in omitted}


def map_values[K, V, R](
    mapping: Mapping[K, V],
    transform: Callable[[V, K], R],
    /,
) -> dict[K, R]:
    """
    Transform every value of a mapping, keeping its keys.

    The transform receives the value and its key.
    """
    return {key: transform(value, key) for key, value in mapping.items()}


def to_pairs[K, V](
    mapping: Mapping[K, V],
    /,
) -> list[tuple[K, V]]:
    return list(mapping.items())


def from_pairs[K, V](
    pairs: Iterable[tuple[K, V]],
    /,
) -> dict[K, V]:
    # later pairs override earlier ones
    return dict(pairs)


def is_empty_mapping(
    mapping: Mapping[object, object],
    /,
) -> bool:
    return len(mapping) == 0
