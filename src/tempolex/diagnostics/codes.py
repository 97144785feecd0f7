"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for Tempolex errors.

    Categories:
        PARSE: Template parsing failure (input does not match, bad input type)
        INSTANT: Value cannot be converted to or composed into an instant
        LOCALE: Locale tag could not be resolved
    """

    PARSE = "parse"
    INSTANT = "instant"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Template parsing errors
        4100-4199: Instant conversion errors
        4200-4299: Locale errors
    """

    # Template parsing errors (4000-4099)
    PARSE_TEMPLATE_MISMATCH = 4001
    PARSE_INPUT_INVALID = 4002
    PARSE_INSTANT_OUT_OF_RANGE = 4003

    # Instant conversion errors (4100-4199)
    INSTANT_UNSUPPORTED_TYPE = 4101
    INSTANT_STRING_INVALID = 4102
    INSTANT_TIMESTAMP_INVALID = 4103

    # Locale errors (4200-4299)
    LOCALE_UNKNOWN = 4201

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 4100:
            return ErrorCategory.PARSE
        if self.value < 4200:
            return ErrorCategory.INSTANT
        return ErrorCategory.LOCALE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        template: Date template involved in the failure (parse errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    template: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_TEMPLATE_MISMATCH]: Input 'x' does not match template 'YYYY'
              = template: YYYY
              = help: Check that the input uses the same layout as the template

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
