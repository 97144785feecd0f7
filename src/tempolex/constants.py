"""Shared constants for Tempolex.

Centralized configuration constants used across the parsing and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale defaults: Locale tags used when the caller passes none or an unknown one
- Reference dates: Synthetic dates used to render month and weekday names
- Token semantics: Fixed offsets applied by numeric tokens
- Cache limits: Memory bounds for caching subsystems

Python 3.11+. Zero external dependencies.
"""

from datetime import date

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    # Reference dates
    "REFERENCE_YEAR",
    "REFERENCE_MONTH_DAY",
    "REFERENCE_WEEK_START",
    # Token semantics
    "DEFAULT_TEMPLATE",
    "TWO_DIGIT_YEAR_BASE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_TEMPLATE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used by the public API when the caller does not pass one.
DEFAULT_LOCALE: str = "en-US"

# Last-resort locale when neither the requested locale nor the system locale
# is known to Babel.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# REFERENCE DATES
# ============================================================================
#
# Month and weekday names are never hard-coded. They are rendered from CLDR
# data by formatting a synthetic reference range:
# - Months: the 15th of every month of REFERENCE_YEAR (mid-month avoids any
#   zone shift landing in a neighbouring month)
# - Weekdays: the seven days starting at REFERENCE_WEEK_START, a Sunday, so
#   weekday index 0 is always Sunday

REFERENCE_YEAR: int = 2024
REFERENCE_MONTH_DAY: int = 15
REFERENCE_WEEK_START: date = date(2024, 1, 7)

# ============================================================================
# TOKEN SEMANTICS
# ============================================================================

DEFAULT_TEMPLATE: str = "YYYY-MM-DD"

# Two-digit years (YY) always land in the 21st century: "24" -> 2024.
TWO_DIGIT_YEAR_BASE: int = 2000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances kept for reuse.
# Typical applications use fewer than 20 locales.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum number of compiled (template, locale) matchers.
# Applications usually parse a handful of fixed templates.
MAX_TEMPLATE_CACHE_SIZE: int = 128
