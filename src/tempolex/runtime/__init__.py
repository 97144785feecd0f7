"""Tempolex runtime package.

Locale resolution, display formatting and locale name tables. Shared by the
template parser and formatter; depends on neither.

Python 3.11+.
"""

from .display import (
    DisplayFormatter,
    FormatOptions,
    clear_formatter_cache,
    format_date,
    format_datetime,
    format_instant,
    format_time,
    formatter_cache_size,
    get_formatter,
)
from .locale_context import LocaleContext
from .names import (
    LocaleNameTable,
    NameKind,
    NameWidth,
    clear_name_caches,
    get_month_names,
    get_month_table,
    get_weekday_names,
    get_weekday_table,
)

__all__ = [
    "DisplayFormatter",
    "FormatOptions",
    "LocaleContext",
    "LocaleNameTable",
    "NameKind",
    "NameWidth",
    "clear_formatter_cache",
    "clear_name_caches",
    "format_date",
    "format_datetime",
    "format_instant",
    "format_time",
    "formatter_cache_size",
    "get_formatter",
    "get_month_names",
    "get_month_table",
    "get_weekday_names",
    "get_weekday_table",
]
