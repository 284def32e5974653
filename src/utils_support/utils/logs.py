import sys
from logging.config import dictConfig
from typing import Any

from utils_support.utils.coloring import supports_color
from utils_support.utils.env import getenv_bool

__all__ = ("setup_logging",)


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool = getenv_bool("DEBUG_LOGGING", __debug__),
    colored: bool | None = None,
    disable_existing_loggers: bool = True,
) -> None:
    """\
    Setup logging configuration and prepare specified loggers.

    Parameters
    ----------
    *loggers: str
        names of additional loggers to configure.
    time: bool = True
        include timestamps in logs (emits local timezone offset).
    debug: bool = __debug__
        include debug logs, can be set with DEBUG_LOGGING env variable.
    colored: bool | None = None
        color records by level, detected from the console when not provided \
        (NO_COLOR and FORCE_COLOR env variables are respected).
    disable_existing_loggers: bool = True
        disable other loggers which were created before calling the setup.

    NOTE: this function should be run only once on application start
    """
    level: str = "DEBUG" if debug else "INFO"
    formatter: dict[str, Any] = {
        "fmt": "%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s",
        "datefmt": "%d/%b/%Y:%H:%M:%S %z",
    }
    if not time:
        formatter = {"fmt": "[%(levelname)-4s] [%(name)s] %(message)s"}

    if colored if colored is not None else supports_color(sys.stdout):
        formatter["()"] = "utils_support.utils.coloring.ColorFormatter"

    else:
        formatter["()"] = "logging.Formatter"

    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": disable_existing_loggers,
            "formatters": {
                "standard": formatter,
            },
            "handlers": {
                "console": {
                    "level": level,
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                name: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
                for name in loggers
            },
            "root": {  # root logger
                "handlers": ["console"],
                "level": level,
            },
        },
    )
