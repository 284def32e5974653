from datetime import UTC, datetime, timedelta, timezone

import pytest

from utils_support import (
    add_time,
    date_diff,
    format_date,
    from_now,
    is_date_between,
    month_name,
    start_of,
    to_iso_date,
)

MOMENT = datetime(2024, 3, 7, 9, 5, 1, 250)


def test_format_date_replaces_all_tokens() -> None:
    assert format_date(MOMENT, "YYYY-MM-DD HH:mm:ss") == "2024-03-07 09:05:01"
    assert format_date(MOMENT, "DD/MM/YYYY (DD)") == "07/03/2024 (07)"


def test_add_time_units() -> None:
    assert add_time(MOMENT, 2, "days") == datetime(2024, 3, 9, 9, 5, 1, 250)
    assert add_time(MOMENT, -5, "minutes") == datetime(2024, 3, 7, 9, 0, 1, 250)
    assert add_time(MOMENT, 10, "months") == datetime(2025, 1, 7, 9, 5, 1, 250)


def test_add_time_clamps_day_of_month() -> None:
    assert add_time(datetime(2024, 1, 31), 1, "months") == datetime(2024, 2, 29)
    assert add_time(datetime(2024, 2, 29), 1, "years") == datetime(2025, 2, 28)
    assert add_time(datetime(2024, 3, 31), -1, "months") == datetime(2024, 2, 29)


def test_add_time_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        add_time(MOMENT, 1, "weeks")  # pyright: ignore[reportArgumentType]


def test_date_diff() -> None:
    start = datetime(2024, 1, 1)
    end = datetime(2024, 1, 3, 12)

    assert date_diff(start, end, "days") == 2
    assert date_diff(start, end, "hours") == 60
    assert date_diff(end, start, "days") == -3
    assert date_diff(datetime(2023, 11, 15), datetime(2024, 2, 1), "months") == 3
    assert date_diff(datetime(2023, 12, 31), datetime(2024, 1, 1), "years") == 1


def test_is_date_between() -> None:
    start = datetime(2024, 1, 1)
    end = datetime(2024, 12, 31)

    assert is_date_between(start, start, end)
    assert not is_date_between(start, start, end, inclusive=False)
    assert is_date_between(MOMENT, start, end, inclusive=False)


def test_start_of_periods() -> None:
    assert start_of(MOMENT, "year") == datetime(2024, 1, 1)
    assert start_of(MOMENT, "month") == datetime(2024, 3, 1)
    assert start_of(MOMENT, "week") == datetime(2024, 3, 3)
    assert start_of(MOMENT, "day") == datetime(2024, 3, 7)
    assert start_of(MOMENT, "hour") == datetime(2024, 3, 7, 9)
    assert start_of(MOMENT, "minute") == datetime(2024, 3, 7, 9, 5)
    assert start_of(MOMENT, "second") == datetime(2024, 3, 7, 9, 5, 1)


def test_start_of_week_on_sunday_stays() -> None:
    assert start_of(datetime(2024, 3, 3, 18), "week") == datetime(2024, 3, 3)


def test_to_iso_date_converts_to_utc() -> None:
    assert to_iso_date(MOMENT) == "2024-03-07"
    assert to_iso_date(datetime(2024, 3, 7, 23, 30, tzinfo=timezone(timedelta(hours=-2)))) == (
        "2024-03-08"
    )


def test_from_now_descriptions() -> None:
    base = datetime(2024, 3, 7, 12, tzinfo=UTC)

    assert from_now(base - timedelta(days=2), base) == "2 days ago"
    assert from_now(base + timedelta(hours=3), base) == "3 hours from now"
    assert from_now(base - timedelta(minutes=1), base) == "1 minute ago"
    assert from_now(base - timedelta(days=400), base) == "1 year ago"
    assert from_now(base, base) == "0 seconds ago"


def test_from_now_defaults_to_current_time() -> None:
    assert from_now(datetime.now(UTC) - timedelta(hours=5)) == "5 hours ago"


def test_month_name() -> None:
    assert month_name(MOMENT) == "March"
    assert month_name(datetime(2024, 9, 1), short=True) == "Sep"
