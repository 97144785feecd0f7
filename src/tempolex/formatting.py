"""Template formatting: render an instant through a token template.

Forward direction of the template engine (inverse of
tempolex.parsing.parse_with_template). Every token occurrence is replaced in
one regex pass over the template; the alternation lists tokens longest first
so "MMMM" is never consumed as "MM" + "MM". Text that is not a token is
copied unchanged, and substituted values are never rescanned.

Month and weekday names come from the same locale name lists the parser
matches against, which keeps format -> parse round trips exact.

Python 3.11+. Uses Babel CLDR names + stdlib re.
"""

import re

from tempolex.constants import DEFAULT_LOCALE, DEFAULT_TEMPLATE
from tempolex.instants import DateInput, InstantFields, decompose_instant, to_datetime
from tempolex.parsing.tokens import TOKENS_LONGEST_FIRST
from tempolex.runtime.locale_context import LocaleContext
from tempolex.runtime.names import NameWidth, get_month_names, get_weekday_names

__all__ = ["format_with_template", "token_values"]

_TOKEN_PATTERN: re.Pattern[str] = re.compile(
    "|".join(re.escape(definition.token) for definition in TOKENS_LONGEST_FIRST)
)


def token_values(fields: InstantFields, context: LocaleContext) -> dict[str, str]:
    """Display value for every token text.

    Args:
        fields: Decomposed instant
        context: Locale providing month and weekday names

    Returns:
        Mapping from token text (e.g. "MMMM") to rendered value
    """
    hour12 = fields.hour % 12 or 12
    is_am = fields.hour < 12
    return {
        "YYYY": f"{fields.year:04d}",
        "YY": f"{fields.year % 100:02d}",
        "MMMM": get_month_names(context, NameWidth.LONG)[fields.month],
        "MMM": get_month_names(context, NameWidth.SHORT)[fields.month],
        "MM": f"{fields.month + 1:02d}",
        "M": str(fields.month + 1),
        "DD": f"{fields.day:02d}",
        "D": str(fields.day),
        "dddd": get_weekday_names(context, NameWidth.LONG)[fields.weekday],
        "ddd": get_weekday_names(context, NameWidth.SHORT)[fields.weekday],
        "HH": f"{fields.hour:02d}",
        "H": str(fields.hour),
        "hh": f"{hour12:02d}",
        "h": str(hour12),
        "mm": f"{fields.minute:02d}",
        "m": str(fields.minute),
        "ss": f"{fields.second:02d}",
        "s": str(fields.second),
        "SSS": f"{fields.millisecond:03d}",
        "A": "AM" if is_am else "PM",
        "a": "am" if is_am else "pm",
    }


def format_with_template(
    instant: DateInput,
    template: str = DEFAULT_TEMPLATE,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Render an instant through a token template.

    Unknown letters and all other characters pass through literally; unknown
    locales fall back to the system locale (then en_US).

    Args:
        instant: datetime, date, epoch milliseconds or ISO 8601 string
        template: Token template (e.g. "dddd, MMMM D, YYYY")
        locale_code: BCP 47 or POSIX locale for month and weekday names

    Returns:
        Formatted string

    Raises:
        InvalidInstantError: Only when instant is not a datetime/date and
            cannot be converted to one

    Examples:
        >>> format_with_template(datetime(2024, 1, 15), "dddd, MMMM D, YYYY", "en-US")
        'Monday, January 15, 2024'
        >>> format_with_template(datetime(2024, 1, 15, 13, 5), "h:mm a")
        '1:05 pm'
    """
    fields = decompose_instant(to_datetime(instant))
    values = token_values(fields, LocaleContext.create(locale_code))
    return _TOKEN_PATTERN.sub(lambda matched: values[matched.group(0)], template)
