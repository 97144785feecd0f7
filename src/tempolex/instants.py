"""Instant coercion, decomposition and composition.

An instant is a naive ``datetime`` read as local wall-clock time (aware
datetimes are accepted and keep their own wall clock). This module is the
boundary between loose caller input and the template engine:

- to_datetime(): Accept datetime, date, epoch milliseconds or ISO 8601 text
- decompose_instant(): Split an instant into the fields tokens display
- compose_instant(): Build an instant from fields, carrying overflow
- to_iso(), to_time(), to_iso_string(): Fixed machine formats

Python 3.11+. Zero external dependencies.
"""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import TypeAlias

from tempolex.diagnostics import ErrorTemplate, InvalidInstantError

__all__ = [
    "DateInput",
    "InstantFields",
    "compose_instant",
    "decompose_instant",
    "to_datetime",
    "to_iso",
    "to_iso_string",
    "to_time",
]

DateInput: TypeAlias = datetime | date | int | float | str


@dataclass(frozen=True, slots=True)
class InstantFields:
    """Calendar fields of an instant as seen by template tokens.

    Attributes:
        year: Full year
        month: Month index, 0 = January
        day: Day of month, 1-based
        weekday: Weekday index, 0 = Sunday
        hour: Hour, 0-23
        minute: Minute, 0-59
        second: Second, 0-59
        millisecond: Millisecond, 0-999 (microseconds are truncated)
    """

    year: int
    month: int
    day: int
    weekday: int
    hour: int
    minute: int
    second: int
    millisecond: int


def to_datetime(value: DateInput) -> datetime:
    """Convert loose input to a datetime.

    Args:
        value: datetime (returned as is), date (midnight), int/float epoch
            milliseconds (converted to local time), or ISO 8601 string

    Returns:
        datetime for the value

    Raises:
        InvalidInstantError: For unsupported types, malformed strings and
            timestamps outside the datetime range

    Examples:
        >>> to_datetime(date(2024, 1, 15))
        datetime.datetime(2024, 1, 15, 0, 0)
        >>> to_datetime("2024-01-15T10:30:00")
        datetime.datetime(2024, 1, 15, 10, 30)
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_epoch_milliseconds(value)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidInstantError(
                ErrorTemplate.invalid_instant_string(value), value=value
            ) from e
    raise InvalidInstantError(ErrorTemplate.unsupported_instant_type(value), value=repr(value))


def _from_epoch_milliseconds(value: int | float) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInstantError(ErrorTemplate.invalid_timestamp(value), value=repr(value))
    seconds, millis = divmod(value, 1000)
    try:
        return datetime.fromtimestamp(seconds) + timedelta(milliseconds=millis)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInstantError(
            ErrorTemplate.invalid_timestamp(value), value=repr(value)
        ) from e


def decompose_instant(instant: datetime) -> InstantFields:
    """Split an instant into template fields.

    Examples:
        >>> fields = decompose_instant(datetime(2024, 1, 15, 13, 5, 9, 250000))
        >>> (fields.month, fields.weekday, fields.millisecond)
        (0, 1, 250)
    """
    return InstantFields(
        year=instant.year,
        month=instant.month - 1,
        day=instant.day,
        weekday=instant.isoweekday() % 7,
        hour=instant.hour,
        minute=instant.minute,
        second=instant.second,
        millisecond=instant.microsecond // 1000,
    )


def compose_instant(
    year: int,
    month: int = 0,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Build a naive instant from calendar fields.

    Fields outside their usual range carry into the next larger unit instead
    of failing: month 12 is January of the following year, day 31 of a
    30-day month is the 1st of the next month, hour 24 is the next midnight.

    Args:
        year: Full year
        month: Month index, 0 = January
        day: Day of month, 1-based
        hour: Hour of day
        minute: Minute
        second: Second
        millisecond: Millisecond

    Returns:
        The composed datetime

    Raises:
        ValueError: If the year (after month carry) is outside 1..9999
        OverflowError: If carried fields leave the datetime range

    Examples:
        >>> compose_instant(2024, 5, 15)
        datetime.datetime(2024, 6, 15, 0, 0)
        >>> compose_instant(2023, 1, 29)  # Feb 29 in a common year
        datetime.datetime(2023, 3, 1, 0, 0)
    """
    year_carry, month_index = divmod(month, 12)
    start_of_month = datetime(year + year_carry, month_index + 1, 1)
    return start_of_month + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        milliseconds=millisecond,
    )


def to_iso(value: DateInput) -> str:
    """Format as ISO 8601 calendar date (YYYY-MM-DD)."""
    instant = to_datetime(value)
    return f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"


def to_time(value: DateInput) -> str:
    """Format as 24-hour time (HH:MM:SS)."""
    instant = to_datetime(value)
    return f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"


def to_iso_string(value: DateInput) -> str:
    """Format as UTC ISO 8601 datetime with milliseconds.

    Naive instants are read as local time before conversion to UTC.

    Examples:
        >>> to_iso_string(datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
        '2024-01-15T10:30:00.000Z'
    """
    instant = to_datetime(value).astimezone(UTC)
    return f"{to_iso(instant)}T{to_time(instant)}.{instant.microsecond // 1000:03d}Z"
