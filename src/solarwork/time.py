# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def datetime_to_local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """Calendar date of a timestamp in local time."""
    return datetime.in_tz("local").date()


def date_to_str(date: pendulum.Date) -> str:
    return date.isoformat()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string, or the date part of an ISO timestamp."""
    return cast(pendulum.DateTime, pendulum.parse(date_str[:10])).date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def hours_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    return (end - start).total_seconds() / 3600


def hours_to_str(hours: float) -> str:
    """Render fractional hours as H:mm."""
    total_minutes = int(round(hours * 60))
    return f"{total_minutes // 60}:{total_minutes % 60:02d}"


def month_boundaries(month: str) -> tuple[pendulum.Date, pendulum.Date]:
    """First and last day of a 'YYYY-MM' month."""
    first = cast(pendulum.DateTime, pendulum.parse(f"{month}-01")).date()
    return first, first.end_of("month")
