from utils_support.types.plain import PlainKind, PlainValue, classify, is_plain_container

__all__ = (
    "PlainKind",
    "PlainValue",
    "classify",
    "is_plain_container",
)
