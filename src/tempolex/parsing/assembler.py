"""Instant assembler: calendar field record -> datetime.

Python 3.11+.
"""

import logging
from datetime import datetime

from tempolex.instants import compose_instant

from .fields import CalendarFields
from .tokens import Meridiem

__all__ = ["assemble_instant", "merge_hour"]

logger = logging.getLogger(__name__)


def merge_hour(fields: CalendarFields) -> int:
    """Final 24-hour value from hour, hour12 and meridiem.

    Rules:
        - hour12 with meridiem: 12 AM -> 0, 1-11 PM -> +12, otherwise as is
        - hour12 without meridiem: hour12 as is
        - no hour12: the 24-hour field

    Examples:
        >>> merge_hour(CalendarFields(hour12=1, meridiem=Meridiem.PM))
        13
        >>> merge_hour(CalendarFields(hour12=12, meridiem=Meridiem.AM))
        0
        >>> merge_hour(CalendarFields(hour=18))
        18
    """
    if fields.hour12 is None:
        return fields.hour
    if fields.meridiem is Meridiem.AM and fields.hour12 == 12:
        return 0
    if fields.meridiem is Meridiem.PM and fields.hour12 != 12:
        return fields.hour12 + 12
    return fields.hour12


def assemble_instant(fields: CalendarFields) -> datetime:
    """Compose the record into a naive datetime.

    Out-of-range fields carry over (see compose_instant). The weekday hint
    never changes the result.

    Raises:
        ValueError: If the year is outside the datetime range
        OverflowError: If carried fields leave the datetime range
    """
    instant = compose_instant(
        fields.year,
        fields.month,
        fields.day,
        merge_hour(fields),
        fields.minute,
        fields.second,
        fields.millisecond,
    )
    if fields.weekday is not None and fields.weekday != instant.isoweekday() % 7:
        logger.debug(
            "Weekday hint %d does not match %s; ignoring hint",
            fields.weekday,
            instant.date().isoformat(),
        )
    return instant
