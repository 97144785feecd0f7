"""Locale-aware display formatting with a process-wide formatter cache.

Options describe which fields to show and how wide, in the vocabulary of
JavaScript's Intl.DateTimeFormat ("numeric", "2-digit", "long", "short",
"narrow"). Each distinct option shape is turned into a CLDR pattern once and
kept in a process-wide cache:

    FormatOptions --(cache_key)--> DisplayFormatter --(format)--> str

A single month or weekday field renders the stand-alone CLDR form (LLLL,
cccc), which is what name tables and template tokens are built from. Any
other combination is resolved through the locale's CLDR skeletons.

Cache semantics:
    Entries are never evicted. Keys are bounded by the handful of option
    shapes an application uses times its locales.

Python 3.11+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass, replace
from datetime import tzinfo
from threading import RLock
from typing import Literal, TypeAlias

from babel import dates as babel_dates

from tempolex.constants import DEFAULT_LOCALE
from tempolex.instants import DateInput, to_datetime
from tempolex.locale_utils import normalize_locale

from .locale_context import LocaleContext

__all__ = [
    "DisplayFormatter",
    "FormatOptions",
    "clear_formatter_cache",
    "format_date",
    "format_datetime",
    "format_instant",
    "format_time",
    "formatter_cache_size",
    "get_formatter",
]

logger = logging.getLogger(__name__)

NameStyle: TypeAlias = Literal["long", "short", "narrow"]
NumericStyle: TypeAlias = Literal["numeric", "2-digit"]

_WEEKDAY_SKELETON: dict[str, str] = {"long": "EEEE", "short": "EEE", "narrow": "EEEEE"}
_WEEKDAY_STANDALONE: dict[str, str] = {"long": "cccc", "short": "ccc", "narrow": "ccccc"}
_YEAR_SKELETON: dict[str, str] = {"numeric": "y", "2-digit": "yy"}
_MONTH_SKELETON: dict[str, str] = {
    "numeric": "M",
    "2-digit": "MM",
    "long": "MMMM",
    "short": "MMM",
    "narrow": "MMMMM",
}
_MONTH_STANDALONE: dict[str, str] = {"long": "LLLL", "short": "LLL", "narrow": "LLLLL"}
_DAY_SKELETON: dict[str, str] = {"numeric": "d", "2-digit": "dd"}

# Intl.DateTimeFormat with no field options shows year, month and day.
_DEFAULT_SKELETON = "yMd"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Which fields to display and how.

    Attributes:
        locale: BCP 47 or POSIX locale tag (default: en-US)
        weekday: Weekday name width
        year: Year digits
        month: Month digits or name width
        day: Day digits
        hour: Hour digits
        minute: Minute digits
        second: Second digits
        hour12: Force 12-hour (True) or 24-hour (False) clock; None uses
            the locale's preference
        time_zone: IANA zone name to display the instant in
    """

    locale: str = DEFAULT_LOCALE
    weekday: NameStyle | None = None
    year: NumericStyle | None = None
    month: NumericStyle | NameStyle | None = None
    day: NumericStyle | None = None
    hour: NumericStyle | None = None
    minute: NumericStyle | None = None
    second: NumericStyle | None = None
    hour12: bool | None = None
    time_zone: str | None = None

    def cache_key(self) -> "FormatOptions":
        """Canonical form used as the formatter cache key.

        Locale tags are normalized so 'en-US' and 'en_US' share an entry.
        """
        normalized = normalize_locale(self.locale)
        if normalized == self.locale:
            return self
        return replace(self, locale=normalized)

    def has_fields(self) -> bool:
        """Whether any date or time field was requested."""
        return any(
            value is not None
            for value in (
                self.weekday,
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
            )
        )


@dataclass(frozen=True, slots=True)
class DisplayFormatter:
    """Ready-to-use formatter for one option shape.

    Build through get_formatter() so instances are shared.

    Attributes:
        options: Canonical options this formatter was built for
        context: Resolved locale
        pattern: CLDR pattern applied to instants
        zone: Zone to convert to before rendering (None keeps wall time)
    """

    options: FormatOptions
    context: LocaleContext
    pattern: str
    zone: tzinfo | None = None

    @classmethod
    def build(cls, options: FormatOptions) -> "DisplayFormatter":
        """Resolve options into a pattern for their locale."""
        context = LocaleContext.create(options.locale)
        return cls(
            options=options,
            context=context,
            pattern=_resolve_pattern(options, context),
            zone=_resolve_zone(options.time_zone),
        )

    def format(self, value: DateInput) -> str:
        """Render an instant.

        Naive instants are shown as their own wall-clock time; when a time
        zone is configured they are read as UTC and converted to it.

        Raises:
            InvalidInstantError: If value cannot be converted to an instant
        """
        instant = to_datetime(value)
        return str(
            babel_dates.format_datetime(
                instant,
                format=self.pattern,
                tzinfo=self.zone,
                locale=self.context.babel_locale,
            )
        )


_formatter_cache: dict[FormatOptions, DisplayFormatter] = {}
_formatter_cache_lock = RLock()


def get_formatter(options: FormatOptions | None = None) -> DisplayFormatter:
    """Fetch the cached formatter for options, building it on first use.

    Thread-safe. Two threads racing on a new key may both build a formatter;
    the first insert wins and both callers receive it.
    """
    key = (options or FormatOptions()).cache_key()

    with _formatter_cache_lock:
        cached = _formatter_cache.get(key)
    if cached is not None:
        return cached

    formatter = DisplayFormatter.build(key)
    logger.debug("Built display formatter %r for %s", formatter.pattern, key)

    with _formatter_cache_lock:
        return _formatter_cache.setdefault(key, formatter)


def clear_formatter_cache() -> None:
    """Drop all cached formatters (for tests and locale data reloads)."""
    with _formatter_cache_lock:
        _formatter_cache.clear()


def formatter_cache_size() -> int:
    """Number of cached formatters."""
    with _formatter_cache_lock:
        return len(_formatter_cache)


def format_instant(value: DateInput, options: FormatOptions | None = None) -> str:
    """Format an instant with display options.

    Examples:
        >>> format_instant("2024-01-15", FormatOptions(month="long", day="numeric"))
        'January 15'
    """
    return get_formatter(options).format(value)


def format_date(value: DateInput, locale_code: str = DEFAULT_LOCALE) -> str:
    """Medium-length date, e.g. 'Jan 15, 2024'."""
    return format_instant(
        value, FormatOptions(locale=locale_code, year="numeric", month="short", day="numeric")
    )


def format_datetime(value: DateInput, locale_code: str = DEFAULT_LOCALE) -> str:
    """Medium-length date with hours and minutes."""
    return format_instant(
        value,
        FormatOptions(
            locale=locale_code,
            year="numeric",
            month="short",
            day="numeric",
            hour="2-digit",
            minute="2-digit",
        ),
    )


def format_time(value: DateInput, locale_code: str = DEFAULT_LOCALE) -> str:
    """Hours and minutes in the locale's clock convention."""
    return format_instant(
        value, FormatOptions(locale=locale_code, hour="2-digit", minute="2-digit")
    )


def _resolve_pattern(options: FormatOptions, context: LocaleContext) -> str:
    """Turn options into a CLDR pattern for the context's locale.

    CLDR keeps date and time skeletons apart, so each half is matched on its
    own and the halves are joined with the locale's medium date-time glue
    (e.g. "{1}, {0}" in English).
    """
    standalone = _standalone_pattern(options)
    if standalone is not None:
        return standalone
    if not options.has_fields():
        return _skeleton_pattern(_DEFAULT_SKELETON, context)

    date_skeleton = _date_skeleton(options)
    time_skeleton = _time_skeleton(options, context)
    if date_skeleton and time_skeleton:
        glue = str(context.babel_locale.datetime_formats["medium"])
        return glue.replace("{1}", _skeleton_pattern(date_skeleton, context)).replace(
            "{0}", _skeleton_pattern(time_skeleton, context)
        )
    return _skeleton_pattern(date_skeleton or time_skeleton, context)


def _skeleton_pattern(skeleton: str, context: LocaleContext) -> str:
    """Pattern for the available skeleton closest to the requested one."""
    skeletons = context.babel_locale.datetime_skeletons
    if skeleton in skeletons:
        return str(skeletons[skeleton].pattern)

    matched = babel_dates.match_skeleton(skeleton, skeletons)
    if matched is not None:
        return str(skeletons[matched].pattern)

    logger.debug(
        "No CLDR skeleton close to %r for %s; using medium date format",
        skeleton,
        context.identifier,
    )
    return str(context.babel_locale.date_formats["medium"].pattern)


def _standalone_pattern(options: FormatOptions) -> str | None:
    """Pattern for a lone month or weekday name, else None."""
    others = (
        options.year,
        options.day,
        options.hour,
        options.minute,
        options.second,
    )
    if any(value is not None for value in others):
        return None
    if options.weekday is None and options.month in _MONTH_STANDALONE:
        return _MONTH_STANDALONE[options.month]
    if options.month is None and options.weekday is not None:
        return _WEEKDAY_STANDALONE[options.weekday]
    return None


def _date_skeleton(options: FormatOptions) -> str:
    """Date half of the skeleton in canonical field order ("" if none)."""
    parts: list[str] = []
    if options.year is not None:
        parts.append(_YEAR_SKELETON[options.year])
    if options.month is not None:
        parts.append(_MONTH_SKELETON[options.month])
    if options.weekday is not None:
        parts.append(_WEEKDAY_SKELETON[options.weekday])
    if options.day is not None:
        parts.append(_DAY_SKELETON[options.day])
    return "".join(parts)


def _time_skeleton(options: FormatOptions, context: LocaleContext) -> str:
    """Time half of the skeleton ("" if none).

    The hour symbol follows hour12, or the locale's clock when hour12 is None.
    """
    parts: list[str] = []
    if options.hour is not None:
        twelve = options.hour12 if options.hour12 is not None else context.prefers_12_hour()
        symbol = "h" if twelve else "H"
        parts.append(symbol * 2 if options.hour == "2-digit" else symbol)
    if options.minute is not None:
        parts.append("mm" if options.minute == "2-digit" else "m")
    if options.second is not None:
        parts.append("ss" if options.second == "2-digit" else "s")
    return "".join(parts)


def _resolve_zone(time_zone: str | None) -> tzinfo | None:
    """Look up a zone name; unknown zones degrade to wall-clock display."""
    if time_zone is None:
        return None
    try:
        return babel_dates.get_timezone(time_zone)
    except LookupError:
        logger.warning("Unknown time zone '%s'; displaying wall-clock time", time_zone)
        return None
