"""Tempolex exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidInstantError",
    "TemplateParseError",
    "TempolexError",
]


class TempolexError(Exception):
    """Base exception for all Tempolex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TempolexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TemplateParseError(TempolexError):
    """Error during template-based parsing.

    Returned (never raised) by parse_with_template() when the input cannot be
    turned into an instant.

    Attributes:
        input_value: The string that failed to parse
        template: The template the input was matched against
        locale_code: The locale used for parsing

    Example:
        >>> result, errors = parse_with_template("invalid", "YYYY-MM-DD", "en_US")
        >>> for error in errors:
        ...     print(f"Parse failed: {error.input_value} ({error.template})")
        Parse failed: invalid (YYYY-MM-DD)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        template: str = "",
        locale_code: str = "",
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.template = template
        self.locale_code = locale_code


class InvalidInstantError(TempolexError, ValueError):
    """Value cannot be converted to an instant.

    Raised by instant coercion helpers for unsupported types, malformed
    ISO 8601 strings and out-of-range timestamps. Subclasses ValueError so
    callers treating it as a bad argument keep working.

    Attributes:
        value: Representation of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, value: str = "") -> None:
        super().__init__(message)
        self.value = value
