import random

import pytest

from utils_support import (
    average,
    camel_case,
    capitalize,
    clamp,
    contains,
    escape_html,
    format_currency,
    format_percent,
    format_thousands,
    is_even,
    is_odd,
    is_palindrome,
    kebab_case,
    map_range,
    pad,
    random_between,
    random_int,
    random_string,
    render_template,
    reverse,
    round_to,
    safe_json_parse,
    slugify,
    snake_case,
    total,
    truncate,
    word_count,
)


def test_truncate() -> None:
    assert truncate("Hello world", 8) == "Hello..."
    assert truncate("Hello world", 8, "~") == "Hello w~"
    assert truncate("Hi", 5) == "Hi"


def test_case_conversions() -> None:
    assert camel_case("hello big-world") == "helloBigWorld"
    assert camel_case("foo_bar baz") == "fooBarBaz"
    assert kebab_case("helloWorld Foo_bar") == "hello-world-foo-bar"
    assert snake_case("helloWorld foo-bar") == "hello_world_foo_bar"


def test_capitalize_keeps_remaining_case() -> None:
    assert capitalize("hELLO") == "HELLO"
    assert capitalize("") == ""


def test_contains_respects_case_flag() -> None:
    assert contains("Hello", "ell")
    assert not contains("Hello", "hell")
    assert contains("Hello", "hell", case_sensitive=False)


def test_random_string_uses_given_characters() -> None:
    generated = random_string(16, generator=random.Random(3))

    assert len(generated) == 16
    assert generated.isalnum()
    assert random_string(5, "a") == "aaaaa"
    assert random_string(0) == ""


def test_escape_html() -> None:
    assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
    )


def test_slugify() -> None:
    assert slugify("  Hello, World_again! ") == "hello-world-again"
    assert slugify("--Already-slug--") == "already-slug"


def test_word_count() -> None:
    assert word_count("  one two  three ") == 3
    assert word_count("") == 0


def test_is_palindrome_ignores_punctuation() -> None:
    assert is_palindrome("A man, a plan, a canal: Panama")
    assert not is_palindrome("palindrome")


def test_render_template() -> None:
    assert render_template("Hi {{ name }}, {{missing}}!", {"name": "Ann"}) == "Hi Ann, !"
    assert render_template("{{n}}+{{ n }}", {"n": 2}) == "2+2"


def test_reverse_and_pad() -> None:
    assert reverse("abc") == "cba"
    assert pad("ab", 5) == " ab  "
    assert pad("ab", 5, "*") == "*ab**"
    assert pad("abcdef", 3) == "abcdef"


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-1.5, 0.0, 3.0) == 0.0
    assert clamp(2, 0, 3) == 2


def test_number_formatting() -> None:
    assert format_thousands(1234567) == "1,234,567"
    assert format_thousands(1234567.5, separator=" ") == "1 234 567.5"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(3, "€", 0) == "€3"
    assert format_percent(0.256) == "26%"
    assert format_percent(0.125, 1) == "12.5%"


def test_round_to_rounds_halves_up() -> None:
    assert round_to(2.5) == 3
    assert round_to(-2.5) == -2
    assert round_to(1.25, 1) == pytest.approx(1.3)
    assert round_to(1234, -2) == pytest.approx(1200)


def test_parity() -> None:
    assert is_even(4)
    assert is_even(0)
    assert is_odd(-3)
    assert not is_odd(2)


def test_random_numbers_stay_in_range() -> None:
    generator = random.Random(11)

    for _ in range(100):
        assert 1 <= random_between(1, 2, generator=generator) < 2
        assert 1 <= random_int(1, 3, generator=generator) <= 3


def test_total_and_average() -> None:
    assert total([0.1] * 10) == 1.0
    assert average([1, 2, 3, 4]) == 2.5
    assert average([]) == 0


def test_map_range_extrapolates() -> None:
    assert map_range(5, 0, 10, 0, 100) == 50
    assert map_range(15, 0, 10, 0, 100) == 150


def test_safe_json_parse() -> None:
    assert safe_json_parse('{"a": [1, null]}', None) == {"a": [1, None]}
    assert safe_json_parse("{broken", {}) == {}
    assert safe_json_parse(b"\xff", "fallback") == "fallback"
