from collections.abc import Mapping

from httpx import URL, InvalidURL, QueryParams

__all__ = (
    "QueryValue",
    "build_url",
    "parse_query_params",
)

type QueryValue = str | int | float | bool | None


def parse_query_params(
    url: str,
    /,
) -> dict[str, str]:
    """
    Extract query parameters from an URL.

    Parameters
    ----------
    url : str
        Absolute URL, relative URL with a query or a bare query string.

    Returns
    -------
    dict[str, str]
        Decoded parameters, the last value wins for repeated names and
        names without a value map to an empty string.
    """
    parsed: URL | None
    try:
        parsed = URL(url)

    except InvalidURL:
        parsed = None

    params: QueryParams
    if parsed is not None and parsed.is_absolute_url:
        params = parsed.params

    else:  # relative or malformed, take whatever follows the question mark
        _, separator, query = url.partition("?")
        params = QueryParams(query if separator else url)

    return dict(params.multi_items())


def build_url(
    base_url: str,
    params: Mapping[str, QueryValue],
    /,
) -> str:
    """
    Append query parameters to an URL.

    Parameters already present in the base URL are kept, None values are
    skipped and booleans are rendered as 'true' or 'false'.

    Raises
    ------
    httpx.InvalidURL
        If the base URL can't be parsed.
    """
    url: URL = URL(base_url)
    for key, value in params.items():
        if value is None:
            continue

        url = url.copy_add_param(key, value)

    return str(url)
