"""Type guard for parsing result type narrowing.

parse_with_template() returns tuple[datetime | None, tuple[TemplateParseError, ...]].
The guard checks the result component so mypy narrows it to datetime.

The guard accepts None and returns False, so
`if not errors and is_valid_instant(result)` reduces to `if is_valid_instant(result)`.

Example:
    >>> result, errors = parse_with_template("2024-06-15", "YYYY-MM-DD")
    >>> if is_valid_instant(result):
    ...     # mypy knows result is datetime
    ...     year = result.year
"""

from datetime import datetime
from typing import TypeGuard

__all__ = ["is_valid_instant"]


def is_valid_instant(value: datetime | None) -> TypeGuard[datetime]:
    """Type guard: Check if a parsed instant is valid (not the None sentinel).

    Args:
        value: Datetime from parse_with_template() result tuple (None on error)

    Returns:
        True if value is a datetime object, False otherwise
    """
    return isinstance(value, datetime)
