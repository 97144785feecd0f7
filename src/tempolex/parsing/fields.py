"""Field resolver: captured substrings -> calendar field record.

Python 3.11+.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from tempolex.runtime.locale_context import LocaleContext

from .compiler import LocatedToken
from .tokens import Meridiem, TokenField

__all__ = ["CalendarFields", "resolve_fields"]


def _current_year() -> int:
    return date.today().year


@dataclass(slots=True)
class CalendarFields:
    """Working record filled while resolving a match.

    Fields the template does not mention keep their defaults: the current
    year, January, the 1st, midnight.

    Attributes:
        year: Full year
        month: Month index, 0 = January
        day: Day of month
        hour: 24-hour value from H/HH
        hour12: 12-hour value from h/hh, None when the template has none
        minute: Minute
        second: Second
        millisecond: Millisecond
        meridiem: AM/PM, None when the template has no meridiem token
        weekday: Weekday index (0 = Sunday) from dddd/ddd; informational only
    """

    year: int = field(default_factory=_current_year)
    month: int = 0
    day: int = 1
    hour: int = 0
    hour12: int | None = None
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    meridiem: Meridiem | None = None
    weekday: int | None = None

    def store(self, target: TokenField, value: int) -> None:
        """Store a converted token value into its field."""
        match target:
            case TokenField.MERIDIEM:
                self.meridiem = Meridiem(value)
            case _:
                setattr(self, target.value, value)


def resolve_fields(
    tokens: Sequence[LocatedToken],
    groups: Sequence[str],
    context: LocaleContext,
) -> CalendarFields:
    """Convert captured groups into a calendar field record.

    Group i belongs to token i. When a field is fed by more than one token
    (e.g. "M/MM"), the last one in template order wins.

    Args:
        tokens: Located tokens in template order
        groups: Captured substrings in the same order
        context: Locale used for name lookups

    Returns:
        Populated CalendarFields

    Examples:
        >>> compiled = compile_template("DD.MM.YYYY", "de-DE")
        >>> fields = resolve_fields(compiled.tokens, compiled.match("15.06.2024"), ctx)
        >>> (fields.year, fields.month, fields.day)
        (2024, 5, 15)
    """
    fields = CalendarFields()
    for located, raw in zip(tokens, groups, strict=True):
        definition = located.token
        fields.store(definition.field, definition.convert(raw, context))
    return fields
