"""Template token catalog.

Every token is a run of one repeated letter. The catalog is an ordered tuple,
not a mapping: token discovery and substitution both walk it longest token
first, and tokens of equal length keep catalog order.

Token | Matches            | Field       | Value
------|--------------------|-------------|---------------------------
YYYY  | 4 digits           | year        | as is
YY    | 2 digits           | year        | 2000 + value
MMMM  | long month name    | month       | name table index (0-11)
MMM   | short month name   | month       | name table index (0-11)
MM    | 2 digits           | month       | value - 1
M     | 1-2 digits         | month       | value - 1
dddd  | long weekday name  | weekday     | name table index (0 = Sunday)
ddd   | short weekday name | weekday     | name table index (0 = Sunday)
DD    | 2 digits           | day         | as is
D     | 1-2 digits         | day         | as is
HH/H  | 2 / 1-2 digits     | hour        | as is (0-23)
hh/h  | 2 / 1-2 digits     | hour12      | as is (1-12)
mm/m  | 2 / 1-2 digits     | minute      | as is
ss/s  | 2 / 1-2 digits     | second      | as is
SSS   | 3 digits           | millisecond | as is
A     | AM or PM           | meridiem    | AM -> 0, PM -> 1
a     | am or pm           | meridiem    | am -> 0, pm -> 1

Matching is case-insensitive, so A and a accept either case. Digit fragments
accept ASCII digits only.

Python 3.11+.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TypeAlias

from tempolex.constants import TWO_DIGIT_YEAR_BASE
from tempolex.runtime.locale_context import LocaleContext
from tempolex.runtime.names import (
    LocaleNameTable,
    NameKind,
    NameWidth,
    get_month_names,
    get_month_table,
    get_weekday_names,
    get_weekday_table,
    name_alternation,
)

__all__ = [
    "TOKENS_LONGEST_FIRST",
    "TOKEN_CATALOG",
    "Meridiem",
    "TokenDefinition",
    "TokenField",
]

logger = logging.getLogger(__name__)

TokenTransform: TypeAlias = Callable[[str, LocaleContext], int]


class TokenField(StrEnum):
    """Calendar field a token feeds."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"
    HOUR = "hour"
    HOUR12 = "hour12"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MERIDIEM = "meridiem"


class Meridiem(IntEnum):
    """Half of the day a 12-hour value belongs to."""

    AM = 0
    PM = 1


@dataclass(frozen=True, slots=True)
class TokenDefinition:
    """One recognized template token.

    Attributes:
        token: Literal token text (e.g. "YYYY")
        field: Calendar field the captured value feeds
        fragment: Regex fragment for locale-independent tokens
        transform: Converts captured text to the field value; None parses
            a base-10 integer
        name_kind: Month or weekday, for name tokens
        width: Long or short, for name tokens
    """

    token: str
    field: TokenField
    fragment: str | None = None
    transform: TokenTransform | None = None
    name_kind: NameKind | None = None
    width: NameWidth | None = None

    @property
    def is_name(self) -> bool:
        """Whether the token matches locale-rendered names."""
        return self.name_kind is not None

    def match_fragment(self, context: LocaleContext) -> str:
        """Regex fragment (without capture group) for this token in a locale."""
        if self.name_kind is None or self.width is None:
            return self.fragment or ""
        if self.name_kind is NameKind.MONTH:
            return name_alternation(get_month_names(context, self.width))
        return name_alternation(get_weekday_names(context, self.width))

    def convert(self, raw: str, context: LocaleContext) -> int:
        """Turn captured text into the value stored in the token's field."""
        if self.transform is None:
            return int(raw, 10)
        return self.transform(raw, context)


def _two_digit_year(raw: str, _context: LocaleContext) -> int:
    return TWO_DIGIT_YEAR_BASE + int(raw, 10)


def _one_based_month(raw: str, _context: LocaleContext) -> int:
    return int(raw, 10) - 1


def _meridiem(raw: str, _context: LocaleContext) -> int:
    return Meridiem.PM if raw.upper() == "PM" else Meridiem.AM


def _name_lookup(kind: NameKind, width: NameWidth) -> TokenTransform:
    """Build a transform resolving a captured name to its index.

    A name absent from the table resolves to index 0 instead of failing.
    """
    table_for: Callable[[LocaleContext], LocaleNameTable] = (
        get_month_table if kind is NameKind.MONTH else get_weekday_table
    )

    def lookup(raw: str, context: LocaleContext) -> int:
        index = table_for(context).lookup(raw, width)
        if index is None:
            logger.debug(
                "%s name %r not in %s %s table; using index 0",
                kind,
                raw,
                context.identifier,
                width,
            )
            return 0
        return index

    return lookup


def _name_token(token: str, field: TokenField, kind: NameKind, width: NameWidth) -> TokenDefinition:
    return TokenDefinition(
        token=token,
        field=field,
        transform=_name_lookup(kind, width),
        name_kind=kind,
        width=width,
    )


_TWO_DIGITS = "[0-9]{2}"
_ONE_OR_TWO_DIGITS = "[0-9]{1,2}"

TOKEN_CATALOG: tuple[TokenDefinition, ...] = (
    TokenDefinition("YYYY", TokenField.YEAR, "[0-9]{4}"),
    TokenDefinition("YY", TokenField.YEAR, _TWO_DIGITS, _two_digit_year),
    _name_token("MMMM", TokenField.MONTH, NameKind.MONTH, NameWidth.LONG),
    _name_token("MMM", TokenField.MONTH, NameKind.MONTH, NameWidth.SHORT),
    TokenDefinition("MM", TokenField.MONTH, _TWO_DIGITS, _one_based_month),
    TokenDefinition("M", TokenField.MONTH, _ONE_OR_TWO_DIGITS, _one_based_month),
    _name_token("dddd", TokenField.WEEKDAY, NameKind.WEEKDAY, NameWidth.LONG),
    _name_token("ddd", TokenField.WEEKDAY, NameKind.WEEKDAY, NameWidth.SHORT),
    TokenDefinition("DD", TokenField.DAY, _TWO_DIGITS),
    TokenDefinition("D", TokenField.DAY, _ONE_OR_TWO_DIGITS),
    TokenDefinition("HH", TokenField.HOUR, _TWO_DIGITS),
    TokenDefinition("H", TokenField.HOUR, _ONE_OR_TWO_DIGITS),
    TokenDefinition("hh", TokenField.HOUR12, _TWO_DIGITS),
    TokenDefinition("h", TokenField.HOUR12, _ONE_OR_TWO_DIGITS),
    TokenDefinition("mm", TokenField.MINUTE, _TWO_DIGITS),
    TokenDefinition("m", TokenField.MINUTE, _ONE_OR_TWO_DIGITS),
    TokenDefinition("ss", TokenField.SECOND, _TWO_DIGITS),
    TokenDefinition("s", TokenField.SECOND, _ONE_OR_TWO_DIGITS),
    TokenDefinition("SSS", TokenField.MILLISECOND, "[0-9]{3}"),
    TokenDefinition("A", TokenField.MERIDIEM, "AM|PM", _meridiem),
    TokenDefinition("a", TokenField.MERIDIEM, "am|pm", _meridiem),
)

# sorted() is stable: equal-length tokens keep catalog order
TOKENS_LONGEST_FIRST: tuple[TokenDefinition, ...] = tuple(
    sorted(TOKEN_CATALOG, key=lambda definition: len(definition.token), reverse=True)
)
