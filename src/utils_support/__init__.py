from utils_support.helpers import (
    Debounced,
    Throttled,
    Timer,
    TimerHandle,
    debounce,
    throttle,
)
from utils_support.types import PlainKind, PlainValue, classify, is_plain_container
from utils_support.utils import (
    ColorFormatter,
    CyclicStructureError,
    add_time,
    average,
    camel_case,
    capitalize,
    chunk,
    clamp,
    colorize,
    contains,
    count,
    date_diff,
    deep_clone,
    deep_merge,
    difference,
    escape_html,
    first,
    flatten,
    flatten_object,
    format_currency,
    format_date,
    format_percent,
    format_thousands,
    from_now,
    from_pairs,
    getenv,
    getenv_bool,
    getenv_float,
    getenv_int,
    getenv_str,
    group_by,
    has_length_between,
    intersection,
    is_between,
    is_blank,
    is_boolean,
    is_callable,
    is_date_between,
    is_email,
    is_empty_mapping,
    is_equal,
    is_even,
    is_mapping,
    is_none,
    is_number,
    is_odd,
    is_palindrome,
    is_sequence,
    is_string,
    is_url,
    is_valid_date,
    kebab_case,
    key_by,
    last,
    map_range,
    map_values,
    matches,
    mimic_function,
    month_name,
    omit,
    pad,
    partition,
    pick,
    random_between,
    random_int,
    random_string,
    render_template,
    reverse,
    round_to,
    safe_json_parse,
    sample,
    setup_logging,
    shuffle,
    slugify,
    snake_case,
    sort_by,
    start_of,
    supports_color,
    to_iso_date,
    to_pairs,
    total,
    truncate,
    unique,
    word_count,
)

__all__ = (
    "ColorFormatter",
    "CyclicStructureError",
    "Debounced",
    "PlainKind",
    "PlainValue",
    "Throttled",
    "Timer",
    "TimerHandle",
    "add_time",
    "average",
    "camel_case",
    "capitalize",
    "chunk",
    "clamp",
    "classify",
    "colorize",
    "contains",
    "count",
    "date_diff",
    "debounce",
    "deep_clone",
    "deep_merge",
    "difference",
    "escape_html",
    "first",
    "flatten",
    "flatten_object",
    "format_currency",
    "format_date",
    "format_percent",
    "format_thousands",
    "from_now",
    "from_pairs",
    "getenv",
    "getenv_bool",
    "getenv_float",
    "getenv_int",
    "getenv_str",
    "group_by",
    "has_length_between",
    "intersection",
    "is_between",
    "is_blank",
    "is_boolean",
    "is_callable",
    "is_date_between",
    "is_email",
    "is_empty_mapping",
    "is_equal",
    "is_even",
    "is_mapping",
    "is_none",
    "is_number",
    "is_odd",
    "is_palindrome",
    "is_plain_container",
    "is_sequence",
    "is_string",
    "is_url",
    "is_valid_date",
    "kebab_case",
    "key_by",
    "last",
    "map_range",
    "map_values",
    "matches",
    "mimic_function",
    "month_name",
    "omit",
    "pad",
    "partition",
    "pick",
    "random_between",
    "random_int",
    "random_string",
    "render_template",
    "reverse",
    "round_to",
    "safe_json_parse",
    "sample",
    "setup_logging",
    "shuffle",
    "slugify",
    "snake_case",
    "sort_by",
    "start_of",
    "supports_color",
    "throttle",
    "to_iso_date",
    "to_pairs",
    "total",
    "truncate",
    "unique",
    "word_count",
)
