import logging
from collections.abc import Iterable, Mapping
from typing import Final, Literal, TextIO

from utils_support.utils.env import getenv_bool, getenv_str

__all__ = (
    "BACKGROUND_CODES",
    "FOREGROUND_CODES",
    "STYLE_CODES",
    "Color",
    "ColorFormatter",
    "Style",
    "colorize",
    "supports_color",
)

type Color = Literal[
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "gray",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
]

type Style = Literal[
    "bold",
    "dim",
    "italic",
    "underline",
    "inverse",
    "hidden",
    "strikethrough",
]

FOREGROUND_CODES: Final[Mapping[str, int]] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "gray": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}

# background codes are the foreground ones shifted by 10
BACKGROUND_CODES: Final[Mapping[str, int]] = {
    name: code + 10 for name, code in FOREGROUND_CODES.items()
}

STYLE_CODES: Final[Mapping[str, int]] = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "inverse": 7,
    "hidden": 8,
    "strikethrough": 9,
}

_RESET: Final[str] = "\x1b[0m"


def colorize(
    text: str,
    /,
    color: Color | None = None,
    background: Color | None = None,
    styles: Iterable[Style] = (),
) -> str:
    """
    Wrap text in ANSI escape codes.

    Parameters
    ----------
    text : str
        The text to style
    color : Color | None, optional
        Foreground color name
    background : Color | None, optional
        Background color name
    styles : Iterable[Style], default=()
        Text styles applied in the given order

    Returns
    -------
    str
        Styled text, an empty string for empty text, or the unchanged text
        when no known color or style was requested.

    Examples
    --------
    >>> colorize("done", "green", styles=("bold",))
    '\\x1b[32;1mdone\\x1b[0m'
    """
    if not text:
        return ""

    codes: list[int] = []
    if color is not None and (code := FOREGROUND_CODES.get(color)) is not None:
        codes.append(code)

    if background is not None and (code := BACKGROUND_CODES.get(background)) is not None:
        codes.append(code)

    for style in styles:
        if (code := STYLE_CODES.get(style)) is not None:
            codes.append(code)

    if not codes:
        return text

    return f"\x1b[{';'.join(str(code) for code in codes)}m{text}{_RESET}"


def supports_color(
    stream: TextIO,
    /,
) -> bool:
    """
    Decide if colored output should be written to the given stream.

    NO_COLOR disables colors whenever set, FORCE_COLOR enables them,
    otherwise colors are used only for interactive terminals.
    """
    if getenv_str("NO_COLOR") is not None:
        return False

    if getenv_bool("FORCE_COLOR", False):
        return True

    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


class ColorFormatter(logging.Formatter):
    """
    Logging formatter coloring whole records according to their level.
    """

    level_colors: Mapping[int, tuple[Color, tuple[Style, ...]]] = {
        logging.DEBUG: ("magenta", ()),
        logging.INFO: ("blue", ()),
        logging.WARNING: ("yellow", ()),
        logging.ERROR: ("red", ()),
        logging.CRITICAL: ("red", ("bold",)),
    }

    def format(
        self,
        record: logging.LogRecord,
    ) -> str:
        formatted: str = super().format(record)
        match self.level_colors.get(record.levelno):
            case None:
                return formatted

            case (color, styles):
                return colorize(formatted, color, styles=styles)
