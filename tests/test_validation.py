import re
from datetime import date, datetime

import pytest

from utils_support import (
    has_length_between,
    is_between,
    is_blank,
    is_boolean,
    is_callable,
    is_email,
    is_mapping,
    is_none,
    is_number,
    is_sequence,
    is_string,
    is_url,
    is_valid_date,
    matches,
)


def test_type_predicates() -> None:
    assert is_none(None)
    assert not is_none(0)
    assert is_string("")
    assert not is_string(b"")
    assert is_boolean(False)
    assert not is_boolean(0)
    assert is_callable(len)
    assert not is_callable("len")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, True),
        (-1.5, True),
        (float("inf"), True),
        (float("nan"), False),
        (True, False),
        ("1", False),
        (None, False),
    ],
)
def test_is_number(value: object, expected: bool) -> None:
    assert is_number(value) is expected


def test_container_predicates() -> None:
    assert is_sequence([1])
    assert is_sequence(())
    assert not is_sequence("abc")
    assert not is_sequence({"a": 1})
    assert is_mapping({})
    assert not is_mapping([])


@pytest.mark.parametrize("value", [None, "", "   ", [], {}, ()])
def test_blank_values(value: object) -> None:
    assert is_blank(value)


@pytest.mark.parametrize("value", [0, False, "a", [None], {"a": None}])
def test_non_blank_values(value: object) -> None:
    assert not is_blank(value)


def test_is_email() -> None:
    assert is_email("ann@example.com")
    assert not is_email("ann@example")
    assert not is_email("ann lee@example.com")
    assert not is_email("@example.com")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://example.com", True),
        ("http://localhost:8000/path?q=1", True),
        ("mailto:ann@example.com", True),
        ("http://", False),
        ("example.com", False),
        ("", False),
        ("http://[::1", False),
    ],
)
def test_is_url(value: str, expected: bool) -> None:
    assert is_url(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 2, 29), True),
        (datetime(2024, 2, 29, 12), True),
        ("2024-02-29", True),
        ("2024-02-29T12:30:00+02:00", True),
        ("2023-02-29", False),
        ("yesterday", False),
        (0, True),
        (1_700_000_000.5, True),
        (1e20, False),
        (True, False),
    ],
)
def test_is_valid_date(value: date | str | float, expected: bool) -> None:
    assert is_valid_date(value) is expected


def test_matches_searches_anywhere() -> None:
    assert matches("order-123", r"\d+")
    assert matches("order-123", re.compile("^order"))
    assert not matches("order", r"\d")


def test_range_checks() -> None:
    assert is_between(5, 1, 5)
    assert not is_between(5.1, 1, 5)
    assert has_length_between("abc", 1, 3)
    assert not has_length_between([], 1, 3)
