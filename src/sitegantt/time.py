# SPDX-License-Identifier: MIT

import datetime
import logging
import re
from typing import Iterable, Optional

import pendulum

logger = logging.getLogger(__name__)

SITE_UTC_OFFSET_HOURS = 8

_DATE_SPLIT_P = re.compile(r"[-T ]")


class DateParseError(ValueError):
    """Raised when a calendar date string cannot be split into year, month and day."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: cannot parse {value!r} as a calendar date")


def site_timezone(offset_hours: int = SITE_UTC_OFFSET_HOURS) -> pendulum.FixedTimezone:
    return pendulum.fixed_timezone(offset_hours * 3600)


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today(offset_hours: int = SITE_UTC_OFFSET_HOURS) -> pendulum.Date:
    """
    Today's calendar date as seen in a fixed UTC offset zone.

    The host's local timezone is never consulted: the UTC instant is moved into
    the fixed offset and the time of day is dropped.
    """
    site_today = now_utc().in_tz(site_timezone(offset_hours)).date()
    logger.debug("sampled site clock: %s (UTC%+d)", site_today, offset_hours)
    return site_today


def to_date(value: datetime.date) -> pendulum.Date:
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def parse_calendar_date(
    value: str | datetime.date, field: str = "date"
) -> pendulum.Date:
    """
    Parse a 'YYYY-MM-DD' prefixed string into a calendar date.

    A trailing time component is discarded, not interpreted, so a stored date is
    never shifted by an offset conversion.

    Raises:
        DateParseError: if the value does not hold three numeric components or
            they do not form a real calendar date
    """
    if isinstance(value, datetime.date):
        return to_date(value)
    if not isinstance(value, str):
        raise DateParseError(field, value)

    parts = _DATE_SPLIT_P.split(value.strip())
    if len(parts) < 3:
        raise DateParseError(field, value)

    try:
        year, month, day = (int(part) for part in parts[:3])
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise DateParseError(field, value) from e


def parse_calendar_date_optional(
    value: Optional[str | datetime.date], field: str = "date"
) -> Optional[pendulum.Date]:
    if value is None or value == "":
        return None
    return parse_calendar_date(value, field)


def parse_instant_optional(
    value: Optional[str | datetime.datetime], field: str = "created_at"
) -> Optional[pendulum.DateTime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="UTC")
    try:
        instant = pendulum.parse(value, tz="UTC")
    except ValueError as e:
        raise DateParseError(field, value) from e
    # bare times and ISO durations parse too but are not instants
    if not isinstance(instant, pendulum.DateTime):
        raise DateParseError(field, value)
    return instant


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Signed number of whole days from start to end."""
    return end.toordinal() - start.toordinal()


def sunday_weekday(value: datetime.date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return value.isoweekday() % 7


def start_of_week(value: pendulum.Date) -> pendulum.Date:
    return value.subtract(days=sunday_weekday(value))


def end_of_week(value: pendulum.Date) -> pendulum.Date:
    return start_of_week(value).add(days=6)


def start_of_month(value: pendulum.Date) -> pendulum.Date:
    return value.start_of("month")


def end_of_month(value: pendulum.Date) -> pendulum.Date:
    return value.end_of("month")


def start_of_quarter(value: pendulum.Date) -> pendulum.Date:
    return pendulum.date(value.year, 3 * ((value.month - 1) // 3) + 1, 1)


def end_of_quarter(value: pendulum.Date) -> pendulum.Date:
    return end_of_month(start_of_quarter(value).add(months=2))


def add_months(value: pendulum.Date, months: int) -> pendulum.Date:
    """Shift a first-of-month date by a number of months."""
    return start_of_month(value).add(months=months)


def months_between(start: datetime.date, end: datetime.date) -> int:
    """Inclusive count of calendar months touched by [start, end]."""
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def quarter_of(value: datetime.date) -> int:
    return (value.month - 1) // 3 + 1


def min_date(values: Iterable[pendulum.Date]) -> pendulum.Date:
    values = list(values)
    if not values:
        raise ValueError("min_date() requires at least one date")
    return min(values)


def max_date(values: Iterable[pendulum.Date]) -> pendulum.Date:
    values = list(values)
    if not values:
        raise ValueError("max_date() requires at least one date")
    return max(values)


def date_to_iso_str(value: datetime.date) -> str:
    return value.isoformat()


def date_to_display_str(value: pendulum.Date) -> str:
    return value.format("MMM D, YYYY")


def date_to_display_str_optional(value: Optional[pendulum.Date]) -> str:
    if value is None:
        return "N/A"
    return date_to_display_str(value)
