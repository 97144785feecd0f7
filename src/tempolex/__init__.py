"""Tempolex - bidirectional, locale-aware date templates.

Formats instants through token templates ("dddd, MMMM D, YYYY") and parses
text laid out the same way back into instants. Month and weekday names come
from CLDR data via Babel, so templates work in any locale Babel knows.

Public API:
    format_with_template - Instant -> text through a token template
    parse_with_template - Text -> (datetime | None, errors) through a token template
    is_valid_instant - TypeGuard guard for parse results
    format_instant, format_date, format_datetime, format_time - Locale display presets
    FormatOptions - Display options for format_instant
    to_datetime, to_iso, to_time, to_iso_string - Instant coercion and fixed formats

Exceptions:
    TempolexError - Base exception class
    TemplateParseError - Parse failures (returned, never raised)
    InvalidInstantError - Value cannot be converted to an instant

Submodules:
    tempolex.parsing - Token catalog, template compiler, field resolver, assembler
    tempolex.formatting - Template formatter
    tempolex.runtime - Locale context, display formatter cache, name tables
    tempolex.diagnostics - Error types, codes and templates
"""

from .diagnostics import InvalidInstantError, TemplateParseError, TempolexError
from .formatting import format_with_template
from .instants import to_datetime, to_iso, to_iso_string, to_time
from .parsing import is_valid_instant, parse_with_template
from .runtime import (
    FormatOptions,
    format_date,
    format_datetime,
    format_instant,
    format_time,
)

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("tempolex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatOptions",
    "InvalidInstantError",
    "TemplateParseError",
    "TempolexError",
    "__version__",
    "format_date",
    "format_datetime",
    "format_instant",
    "format_time",
    "format_with_template",
    "is_valid_instant",
    "parse_with_template",
    "to_datetime",
    "to_iso",
    "to_iso_string",
    "to_time",
]
