import calendar
import re
from datetime import UTC, datetime, timedelta
from typing import Final, Literal

from utils_support.utils.numbers import round_to

__all__ = (
    "DateUnit",
    "PeriodUnit",
    "add_time",
    "date_diff",
    "format_date",
    "from_now",
    "is_date_between",
    "month_name",
    "start_of",
    "to_iso_date",
)

type DateUnit = Literal["years", "months", "days", "hours", "minutes", "seconds"]
type PeriodUnit = Literal["year", "month", "week", "day", "hour", "minute", "second"]

_FORMAT_TOKENS: Final[re.Pattern[str]] = re.compile(r"YYYY|MM|DD|HH|mm|ss")
_UNIT_SECONDS: Final[dict[str, int]] = {
    "days": 86400,
    "hours": 3600,
    "minutes": 60,
    "seconds": 1,
}
_MONTHS: Final[tuple[tuple[str, str], ...]] = (
    ("January", "Jan"),
    ("February", "Feb"),
    ("March", "Mar"),
    ("April", "Apr"),
    ("May", "May"),
    ("June", "Jun"),
    ("July", "Jul"),
    ("August", "Aug"),
    ("September", "Sep"),
    ("October", "Oct"),
    ("November", "Nov"),
    ("December", "Dec"),
)


def format_date(
    date: datetime,
    pattern: str,
    /,
) -> str:
    """
    Format a datetime using a simple token pattern.

    Supported tokens are YYYY (year), MM (month), DD (day), HH (hour),
    mm (minute) and ss (second), all zero padded. Every occurrence of a
    token is replaced, any other text is kept as it is.

    Examples
    --------
    >>> format_date(datetime(2024, 3, 7, 9, 5, 1), "YYYY-MM-DD HH:mm:ss")
    '2024-03-07 09:05:01'
    """
    values: dict[str, str] = {
        "YYYY": f"{date.year:04d}",
        "MM": f"{date.month:02d}",
        "DD": f"{date.day:02d}",
        "HH": f"{date.hour:02d}",
        "mm": f"{date.minute:02d}",
        "ss": f"{date.second:02d}",
    }
    return _FORMAT_TOKENS.sub(lambda match: values[match.group(0)], pattern)


def add_time(
    date: datetime,
    amount: int,
    unit: DateUnit,
    /,
) -> datetime:
    """
    Shift a datetime by the given amount of units.

    Parameters
    ----------
    date : datetime
        The base datetime, it is not modified.
    amount : int
        Count of units to add, negative values move backwards.
    unit : DateUnit
        Unit of the amount.

    Returns
    -------
    datetime
        Shifted datetime. Adding months or years keeps the day of month
        when possible and clamps it to the last day of shorter months.

    Raises
    ------
    ValueError
        If the unit is not supported.
    """
    match unit:
        case "years":
            return _shift_months(date, amount * 12)

        case "months":
            return _shift_months(date, amount)

        case "days" | "hours" | "minutes" | "seconds":
            return date + timedelta(seconds=amount * _UNIT_SECONDS[unit])

        case other:
            raise ValueError(f"Unsupported time unit: {other}")


def _shift_months(
    date: datetime,
    months: int,
) -> datetime:
    year, month_index = divmod(date.month - 1 + months, 12)
    year += date.year
    month: int = month_index + 1
    day: int = min(date.day, calendar.monthrange(year, month)[1])
    return date.replace(year=year, month=month, day=day)


def date_diff(
    start: datetime,
    end: datetime,
    unit: DateUnit,
    /,
) -> int:
    """
    Difference from start to end expressed in whole units.

    Years and months compare calendar fields only, remaining units are
    floored from the exact elapsed time.
    """
    match unit:
        case "years":
            return end.year - start.year

        case "months":
            return (end.year - start.year) * 12 + end.month - start.month

        case "days" | "hours" | "minutes" | "seconds":
            return int((end - start).total_seconds() // _UNIT_SECONDS[unit])

        case other:
            raise ValueError(f"Unsupported time unit: {other}")


def is_date_between(
    date: datetime,
    start: datetime,
    end: datetime,
    /,
    inclusive: bool = True,
) -> bool:
    if inclusive:
        return start <= date <= end

    else:
        return start < date < end


def start_of(
    date: datetime,
    unit: PeriodUnit,
    /,
) -> datetime:
    """
    Truncate a datetime to the beginning of the given period.

    Weeks start on Sunday.
    """
    match unit:
        case "year":
            return date.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)

        case "month":
            return date.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        case "week":
            days_since_sunday: int = (date.weekday() + 1) % 7
            return (date - timedelta(days=days_since_sunday)).replace(
                hour=0,
                minute=0,
                second=0,
                microsecond=0,
            )

        case "day":
            return date.replace(hour=0, minute=0, second=0, microsecond=0)

        case "hour":
            return date.replace(minute=0, second=0, microsecond=0)

        case "minute":
            return date.replace(second=0, microsecond=0)

        case "second":
            return date.replace(microsecond=0)

        case other:
            raise ValueError(f"Unsupported period unit: {other}")


def to_iso_date(
    date: datetime,
    /,
) -> str:
    """
    Format the calendar date part as YYYY-MM-DD.

    Timezone aware datetimes are converted to UTC first.
    """
    if date.tzinfo is not None:
        date = date.astimezone(UTC)

    return date.date().isoformat()


def from_now(
    date: datetime,
    /,
    base: datetime | None = None,
) -> str:
    """
    Describe a datetime relative to the base one in plain words.

    Parameters
    ----------
    date : datetime
        The described datetime.
    base : datetime | None, optional
        Reference point, current time in the timezone of date when omitted.

    Returns
    -------
    str
        Text like '2 days ago' or '3 hours from now' using the largest unit
        which amounts to at least one. Months are counted as 30 days and
        years as 12 months.
    """
    reference: datetime = base if base is not None else datetime.now(date.tzinfo)
    elapsed_seconds: float = (date - reference).total_seconds()
    suffix: str = "from now" if elapsed_seconds > 0 else "ago"

    seconds: float = round_to(elapsed_seconds)
    minutes: float = round_to(seconds / 60)
    hours: float = round_to(minutes / 60)
    days: float = round_to(hours / 24)
    months: float = round_to(days / 30)
    years: float = round_to(months / 12)

    for amount, name in (
        (years, "year"),
        (months, "month"),
        (days, "day"),
        (hours, "hour"),
        (minutes, "minute"),
    ):
        if abs(amount) >= 1:
            return _describe(abs(amount), name, suffix)

    return _describe(abs(seconds), "second", suffix)


def _describe(
    amount: float,
    name: str,
    suffix: str,
) -> str:
    count: int = int(amount)
    return f"{count} {name if count == 1 else name + 's'} {suffix}"


def month_name(
    date: datetime,
    /,
    short: bool = False,
) -> str:
    full, abbreviated = _MONTHS[date.month - 1]
    return abbreviated if short else full
