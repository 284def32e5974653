import random
from dataclasses import dataclass

import pytest

from utils_support import (
    chunk,
    count,
    difference,
    first,
    flatten,
    from_pairs,
    group_by,
    intersection,
    is_empty_mapping,
    key_by,
    last,
    map_values,
    omit,
    partition,
    pick,
    sample,
    shuffle,
    sort_by,
    to_pairs,
    unique,
)


def test_pick_selects_existing_keys() -> None:
    assert pick({"a": 1, "b": 2, "c": 3}, ["c", "a", "missing"]) == {"c": 3, "a": 1}


def test_omit_drops_keys_without_mutating() -> None:
    source = {"a": 1, "b": 2}

    assert omit(source, ["a"]) == {"b": 2}
    assert source == {"a": 1, "b": 2}


def test_map_values_receives_value_and_key() -> None:
    assert map_values({"a": 1, "b": 2}, lambda value, key: f"{key}={value}") == {
        "a": "a=1",
        "b": "b=2",
    }


def test_pairs_conversions() -> None:
    assert to_pairs({"a": 1, "b": 2}) == [("a", 1), ("b", 2)]
    assert from_pairs([("a", 1), ("b", 2), ("a", 3)]) == {"a": 3, "b": 2}


def test_is_empty_mapping() -> None:
    assert is_empty_mapping({})
    assert not is_empty_mapping({"a": None})


def test_chunk_splits_with_shorter_tail() -> None:
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([], 2) == []
    assert chunk([1, 2], 0) == []


def test_unique_preserves_first_occurrence_order() -> None:
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_shuffle_returns_permutation_copy() -> None:
    source = list(range(20))
    shuffled = shuffle(source, generator=random.Random(7))

    assert sorted(shuffled) == source
    assert source == list(range(20))
    assert shuffled == shuffle(source, generator=random.Random(7))


def test_difference_and_intersection() -> None:
    assert difference([1, 2, 3, 4], [2, 4]) == [1, 3]
    assert intersection([1, 2, 3, 4], [4, 2, 9]) == [2, 4]


def test_flatten_single_level() -> None:
    assert flatten([1, [2, 3], (4,), [[5]], "ab"]) == [1, 2, 3, 4, [5], "ab"]


def test_first_and_last() -> None:
    assert first([1, 2, 3]) == 1
    assert last([1, 2, 3]) == 3
    assert first([]) is None
    assert last([]) is None


def test_group_by_and_key_by_stringify_keys() -> None:
    words = ["apple", "avocado", "banana"]

    assert group_by(words, lambda word: word[0]) == {
        "a": ["apple", "avocado"],
        "b": ["banana"],
    }
    assert key_by([1, 2, 3], lambda number: number % 2) == {"1": 3, "0": 2}


@dataclass
class Person:
    name: str
    age: int


def test_sort_by_key_name_and_function() -> None:
    people = [{"name": "bob", "age": 30}, {"name": "ann", "age": 25}]

    assert [person["name"] for person in sort_by(people, "age")] == ["ann", "bob"]
    assert [person["name"] for person in sort_by(people, "name", "desc")] == ["bob", "ann"]

    objects = [Person("bob", 30), Person("ann", 25)]
    assert [person.name for person in sort_by(objects, "age")] == ["ann", "bob"]
    assert sort_by([3, 1, 2], lambda value: -value) == [3, 2, 1]


def test_sort_by_rejects_unknown_order() -> None:
    with pytest.raises(ValueError):
        sort_by([1], lambda value: value, "sideways")  # pyright: ignore[reportArgumentType]


def test_count_occurrences() -> None:
    assert count(["a", "b", "a", 1, "1"]) == {"a": 2, "b": 1, "1": 2}


def test_partition_by_predicate() -> None:
    assert partition([1, 2, 3, 4], lambda value: value % 2 == 0) == ([2, 4], [1, 3])


def test_sample_picks_element() -> None:
    assert sample([]) is None
    assert sample([1, 2, 3], generator=random.Random(1)) in (1, 2, 3)
