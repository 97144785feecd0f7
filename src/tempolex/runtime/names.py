"""Locale month and weekday name tables.

Names are never hard-coded. For each locale they are rendered once through
the display formatter from a synthetic reference range (the 15th of every
month of 2024, and the week starting Sunday 2024-01-07), then cached for the
life of the process:

- get_month_names() / get_weekday_names(): display names in index order
- get_month_table() / get_weekday_table(): lower-cased name -> index maps
- name_alternation(): regex alternation matching any name, longest first

Caches are keyed by the resolved locale identifier (not the caller's tag), so
unknown tags that fall back share one entry with their fallback locale.

Python 3.11+. Uses Babel for i18n.
"""

import functools
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum
from types import MappingProxyType

from tempolex.constants import REFERENCE_MONTH_DAY, REFERENCE_WEEK_START, REFERENCE_YEAR

from .display import FormatOptions, get_formatter
from .locale_context import LocaleContext

__all__ = [
    "LocaleNameTable",
    "NameKind",
    "NameWidth",
    "clear_name_caches",
    "get_month_names",
    "get_month_table",
    "get_weekday_names",
    "get_weekday_table",
    "name_alternation",
]

logger = logging.getLogger(__name__)


class NameKind(StrEnum):
    """Calendar unit a name denotes."""

    MONTH = "month"
    WEEKDAY = "weekday"


class NameWidth(StrEnum):
    """Rendered name width (option value understood by FormatOptions)."""

    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True, slots=True)
class LocaleNameTable:
    """Lower-cased display names mapped to 0-based indices.

    Attributes:
        long: Full names (e.g. 'january' -> 0)
        short: Abbreviated names (e.g. 'jan' -> 0)
    """

    long: Mapping[str, int]
    short: Mapping[str, int]

    def lookup(self, name: str, width: NameWidth) -> int | None:
        """Index for a rendered name in any letter case, or None if unknown."""
        table = self.long if width is NameWidth.LONG else self.short
        return table.get(name.lower())


def _reference_dates(kind: NameKind) -> tuple[date, ...]:
    if kind is NameKind.MONTH:
        return tuple(date(REFERENCE_YEAR, month, REFERENCE_MONTH_DAY) for month in range(1, 13))
    return tuple(REFERENCE_WEEK_START + timedelta(days=offset) for offset in range(7))


@functools.cache
def _render_names(identifier: str, kind: NameKind, width: NameWidth) -> tuple[str, ...]:
    """Render every name of one kind and width for a resolved locale."""
    if kind is NameKind.MONTH:
        options = FormatOptions(locale=identifier, month=width.value)
    else:
        options = FormatOptions(locale=identifier, weekday=width.value)
    formatter = get_formatter(options)
    names = tuple(
        formatter.format(datetime(day.year, day.month, day.day)) for day in _reference_dates(kind)
    )
    logger.debug("Rendered %s %s names for %s: %s", width, kind, identifier, names)
    return names


def _index_names(names: Iterable[str]) -> Mapping[str, int]:
    table: dict[str, int] = {}
    for index, name in enumerate(names):
        # First occurrence wins when a locale renders two indices alike
        table.setdefault(name.lower(), index)
    return MappingProxyType(table)


@functools.cache
def _build_table(identifier: str, kind: NameKind) -> LocaleNameTable:
    return LocaleNameTable(
        long=_index_names(_render_names(identifier, kind, NameWidth.LONG)),
        short=_index_names(_render_names(identifier, kind, NameWidth.SHORT)),
    )


def get_month_names(context: LocaleContext, width: NameWidth) -> tuple[str, ...]:
    """Month names in calendar order (index 0 = January).

    Examples:
        >>> get_month_names(LocaleContext.create("en-US"), NameWidth.SHORT)[:3]
        ('Jan', 'Feb', 'Mar')
    """
    return _render_names(context.identifier, NameKind.MONTH, width)


def get_weekday_names(context: LocaleContext, width: NameWidth) -> tuple[str, ...]:
    """Weekday names starting with Sunday (index 0 = Sunday).

    Examples:
        >>> get_weekday_names(LocaleContext.create("en-US"), NameWidth.LONG)[1]
        'Monday'
    """
    return _render_names(context.identifier, NameKind.WEEKDAY, width)


def get_month_table(context: LocaleContext) -> LocaleNameTable:
    """Month name table for a locale (built once per locale)."""
    return _build_table(context.identifier, NameKind.MONTH)


def get_weekday_table(context: LocaleContext) -> LocaleNameTable:
    """Weekday name table for a locale (built once per locale)."""
    return _build_table(context.identifier, NameKind.WEEKDAY)


def name_alternation(names: Iterable[str]) -> str:
    """Build a regex alternation matching any of the names.

    Names are de-duplicated and ordered longest first so a name that is a
    prefix of another (e.g. 'Jun' of 'June') never wins too early; each name
    is escaped. Callers wrap the result in a group.

    Examples:
        >>> name_alternation(["May", "March", "Mar."])
        'March|Mar\\\\.|May'
    """
    unique = dict.fromkeys(names)
    ordered = sorted(unique, key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered)


def clear_name_caches() -> None:
    """Clear rendered name and table caches (for tests)."""
    _render_names.cache_clear()
    _build_table.cache_clear()
