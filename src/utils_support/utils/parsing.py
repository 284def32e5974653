import json
from typing import Any

__all__ = ("safe_json_parse",)


def safe_json_parse[Fallback](
    text: str | bytes,
    /,
    fallback: Fallback,
) -> Any | Fallback:
    """
    Decode JSON returning the fallback instead of failing on malformed input.

    Parameters
    ----------
    text : str | bytes
        JSON document to decode.
    fallback : Fallback
        Value returned when the document can't be decoded.

    Returns
    -------
    Any | Fallback
        Decoded document or the fallback.
    """
    try:
        return json.loads(text)

    except ValueError:  # JSONDecodeError and invalid text encoding
        return fallback
