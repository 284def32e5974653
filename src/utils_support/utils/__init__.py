from utils_support.utils.coloring import ColorFormatter, colorize, supports_color
from utils_support.utils.dates import (
    add_time,
    date_diff,
    format_date,
    from_now,
    is_date_between,
    month_name,
    start_of,
    to_iso_date,
)
from utils_support.utils.env import getenv, getenv_bool, getenv_float, getenv_int, getenv_str
from utils_support.utils.logs import setup_logging
from utils_support.utils.mappings import (
    from_pairs,
    is_empty_mapping,
    map_values,
    omit,
    pick,
    to_pairs,
)
from utils_support.utils.mimic import mimic_function
from utils_support.utils.numbers import (
    average,
    clamp,
    format_currency,
    format_percent,
    format_thousands,
    is_even,
    is_odd,
    map_range,
    random_between,
    random_int,
    round_to,
    total,
)
from utils_support.utils.parsing import safe_json_parse
from utils_support.utils.sequences import (
    chunk,
    count,
    difference,
    first,
    flatten,
    group_by,
    intersection,
    key_by,
    last,
    partition,
    sample,
    shuffle,
    sort_by,
    unique,
)
from utils_support.utils.strings import (
    camel_case,
    capitalize,
    contains,
    escape_html,
    is_palindrome,
    kebab_case,
    pad,
    random_string,
    render_template,
    reverse,
    slugify,
    snake_case,
    truncate,
    word_count,
)
from utils_support.utils.structures import (
    CyclicStructureError,
    deep_clone,
    deep_merge,
    flatten_object,
    is_equal,
)
from utils_support.utils.validation import (
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

__all__ = (
    "ColorFormatter",
    "CyclicStructureError",
    "add_time",
    "average",
    "camel_case",
    "capitalize",
    "chunk",
    "clamp",
    "colorize",
    "contains",
    "count",
    "date_diff",
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
    "to_iso_date",
    "to_pairs",
    "total",
    "truncate",
    "unique",
    "word_count",
)
