from utils_support.helpers.debouncing import Debounced, debounce
from utils_support.helpers.throttling import Throttled, throttle
from utils_support.helpers.timers import Timer, TimerHandle

__all__ = (
    "Debounced",
    "Throttled",
    "Timer",
    "TimerHandle",
    "debounce",
    "throttle",
)
