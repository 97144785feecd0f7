"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    Every diagnostic raised or returned by Tempolex is built by one of these
    factories, so wording, codes and hints stay consistent and testable.
    """

    @staticmethod
    def template_mismatch(value: str, template: str, locale_code: str) -> Diagnostic:
        """Input text does not match the compiled template.

        Args:
            value: The input string that failed to match
            template: The template used for matching
            locale_code: The locale used for name tokens

        Returns:
            Diagnostic for PARSE_TEMPLATE_MISMATCH
        """
        msg = (
            f"Input '{value}' does not match template '{template}' "
            f"for locale '{locale_code}'"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_TEMPLATE_MISMATCH,
            message=msg,
            hint=(
                "Check that the input uses the same layout as the template; "
                "month and weekday names must be spelled as in the locale"
            ),
            template=template,
        )

    @staticmethod
    def input_invalid(argument: str, value: object, template: object) -> Diagnostic:
        """Input, template or locale tag is not a string.

        Args:
            argument: Name of the rejected argument ("value", "template" or "locale_code")
            value: The rejected argument value
            template: The template the caller asked for

        Returns:
            Diagnostic for PARSE_INPUT_INVALID
        """
        msg = f"Expected string {argument}, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_INVALID,
            message=msg,
            hint=f"Convert the {argument} to str before parsing",
            template=str(template),
        )

    @staticmethod
    def instant_out_of_range(value: str, template: str, reason: str) -> Diagnostic:
        """Matched fields cannot be composed into a datetime.

        Args:
            value: The input string whose fields were captured
            template: The template used for matching
            reason: Underlying composition failure

        Returns:
            Diagnostic for PARSE_INSTANT_OUT_OF_RANGE
        """
        msg = f"Fields parsed from '{value}' do not form a representable instant: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INSTANT_OUT_OF_RANGE,
            message=msg,
            hint="Years must lie between 1 and 9999",
            template=template,
        )

    @staticmethod
    def unsupported_instant_type(value: object) -> Diagnostic:
        """Value type cannot be converted to an instant.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INSTANT_UNSUPPORTED_TYPE
        """
        msg = f"Cannot convert {type(value).__name__} to an instant"
        return Diagnostic(
            code=DiagnosticCode.INSTANT_UNSUPPORTED_TYPE,
            message=msg,
            hint="Pass a datetime, date, epoch milliseconds, or an ISO 8601 string",
        )

    @staticmethod
    def invalid_instant_string(value: str) -> Diagnostic:
        """String is not ISO 8601.

        Args:
            value: The rejected string

        Returns:
            Diagnostic for INSTANT_STRING_INVALID
        """
        msg = f"Invalid instant string '{value}': not ISO 8601 format"
        return Diagnostic(
            code=DiagnosticCode.INSTANT_STRING_INVALID,
            message=msg,
            hint="Use ISO 8601 (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS), or parse_with_template()",
        )

    @staticmethod
    def invalid_timestamp(value: float) -> Diagnostic:
        """Epoch timestamp is NaN, infinite or outside the datetime range.

        Args:
            value: The rejected timestamp in milliseconds

        Returns:
            Diagnostic for INSTANT_TIMESTAMP_INVALID
        """
        msg = f"Timestamp {value!r} ms cannot be represented as a datetime"
        return Diagnostic(
            code=DiagnosticCode.INSTANT_TIMESTAMP_INVALID,
            message=msg,
            hint="Timestamps are milliseconds since the Unix epoch",
        )

    @staticmethod
    def locale_unknown(locale_code: str, fallback: str) -> Diagnostic:
        """Unknown locale, fallback in use.

        Args:
            locale_code: The unknown locale code
            fallback: The locale used instead

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}', using '{fallback}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en-US', 'de-DE', 'fr-FR')",
            severity="warning",
        )
