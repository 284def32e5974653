import random
import re
import string
from collections.abc import Callable, Mapping
from typing import Any, Final

__all__ = (
    "camel_case",
    "capitalize",
    "contains",
    "escape_html",
    "is_palindrome",
    "kebab_case",
    "pad",
    "random_string",
    "render_template",
    "reverse",
    "slugify",
    "snake_case",
    "truncate",
    "word_count",
)

_WORD_START: Final[re.Pattern[str]] = re.compile(r"(?:^\w|[A-Z]|\b\w)")
_CASE_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"([a-z])([A-Z])")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[-_]+")
_TEMPLATE_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\{\{([^}]+)\}\}")
_HTML_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("&", "&amp;"),  # must go first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def truncate(
    text: str,
    length: int,
    /,
    suffix: str = "...",
) -> str:
    """
    Shorten text to the given length, including the suffix.

    Text which already fits is returned unchanged.
    """
    if len(text) <= length:
        return text

    return text[: max(length - len(suffix), 0)] + suffix


def camel_case(
    text: str,
    /,
) -> str:
    """
    Convert text to camelCase.

    Words may be separated by whitespace, hyphens or underscores, existing
    upper case letters start new words.

    Examples
    --------
    >>> camel_case("hello big-world")
    'helloBigWorld'
    """
    spaced: str = _SEPARATORS.sub(" ", text)
    return _WHITESPACE.sub(
        "",
        _WORD_START.sub(
            lambda match: match.group(0).lower()
            if match.start() == 0
            else match.group(0).upper(),
            spaced,
        ),
    )


def kebab_case(
    text: str,
    /,
) -> str:
    return _WHITESPACE.sub("-", _CASE_BOUNDARY.sub(r"\1-\2", text)).replace("_", "-").lower()


def snake_case(
    text: str,
    /,
) -> str:
    return _WHITESPACE.sub("_", _CASE_BOUNDARY.sub(r"\1_\2", text)).replace("-", "_").lower()


def capitalize(
    text: str,
    /,
) -> str:
    """
    Upper case the first character leaving the rest untouched.

    Unlike ``str.capitalize`` the remaining characters keep their case.
    """
    return text[:1].upper() + text[1:]


def contains(
    text: str,
    search: str,
    /,
    case_sensitive: bool = True,
) -> bool:
    if case_sensitive:
        return search in text

    else:
        return search.casefold() in text.casefold()


def random_string(
    length: int,
    /,
    chars: str = string.ascii_letters + string.digits,
    *,
    generator: random.Random | None = None,
) -> str:
    """
    Generate a random text of the given length.

    This is not suitable for secrets, use the ``secrets`` module for those.
    """
    choice: Callable[[str], str] = generator.choice if generator else random.choice
    return "".join(choice(chars) for _ in range(length))


def escape_html(
    text: str,
    /,
) -> str:
    escaped: str = text
    for character, entity in _HTML_ESCAPES:
        escaped = escaped.replace(character, entity)

    return escaped


def slugify(
    text: str,
    /,
) -> str:
    """
    Create an URL friendly slug from text.

    Examples
    --------
    >>> slugify("  Hello, World_again! ")
    'hello-world-again'
    """
    slug: str = re.sub(r"[^\w\s-]", "", text.lower().strip())
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def word_count(
    text: str,
    /,
) -> int:
    return len(text.split())


def is_palindrome(
    text: str,
    /,
) -> bool:
    """
    Check if text reads the same backwards ignoring case and non alphanumerics.
    """
    normalized: str = re.sub(r"[^a-z0-9]", "", text.lower())
    return normalized == normalized[::-1]


def render_template(
    template: str,
    data: Mapping[str, Any],
    /,
) -> str:
    """
    Substitute ``{{ name }}`` placeholders with values from data.

    Parameters
    ----------
    template : str
        Text containing placeholders, whitespace around names is ignored.
    data : Mapping[str, Any]
        Values to render, placeholders without a matching key render empty.

    Returns
    -------
    str
        Rendered text.
    """

    def substitute(match: re.Match[str]) -> str:
        key: str = match.group(1).strip()
        if key in data:
            return str(data[key])

        else:
            return ""

    return _TEMPLATE_PLACEHOLDER.sub(substitute, template)


def reverse(
    text: str,
    /,
) -> str:
    return text[::-1]


def pad(
    text: str,
    length: int,
    /,
    chars: str = " ",
) -> str:
    """
    Center text by padding both sides up to the given length.

    Extra padding goes to the right side when it can't be split evenly.
    """
    missing: int = max(0, length - len(text))
    left: int = missing // 2
    return chars * left + text + chars * (missing - left)
