"""Template-based date parsing with locale awareness.

- parse_with_template() returns tuple[datetime | None, tuple[TemplateParseError, ...]]
- Never raises: failures are returned in the error tuple, result is None
- Compiled templates and locale name tables are cached

Pipeline:
    text --compile_template--> regex match --resolve_fields-->
    CalendarFields --assemble_instant--> datetime

Failure modes:
    PARSE_INPUT_INVALID: value, template or locale_code is not a string
    PARSE_TEMPLATE_MISMATCH: value does not match the whole template
    PARSE_INSTANT_OUT_OF_RANGE: matched fields leave the datetime range
        (e.g. year 0000)

Lenient by design of the token vocabulary:
    - A name that matched the pattern but is missing from the name table
      (possible only with unusual case folding) resolves to index 0
    - hh/h without A/a is used as the hour unchanged
    - dddd/ddd never influence the result

Thread-safe. Uses Babel CLDR names + stdlib re.

Python 3.11+.
"""

import logging
from datetime import datetime

from tempolex.constants import DEFAULT_LOCALE, DEFAULT_TEMPLATE
from tempolex.diagnostics import Diagnostic, ErrorTemplate, TemplateParseError
from tempolex.runtime.locale_context import LocaleContext

from .assembler import assemble_instant
from .compiler import compile_template
from .fields import resolve_fields

__all__ = ["parse_with_template"]

logger = logging.getLogger(__name__)


def parse_with_template(
    value: str,
    template: str = DEFAULT_TEMPLATE,
    locale_code: str = DEFAULT_LOCALE,
) -> tuple[datetime | None, tuple[TemplateParseError, ...]]:
    """Parse text laid out as a token template into a datetime.

    Args:
        value: Text to parse (e.g. "January 15, 2024")
        template: Token template (e.g. "MMMM D, YYYY")
        locale_code: BCP 47 or POSIX locale for month and weekday names

    Returns:
        Tuple of (result, errors):
        - result: Naive datetime, or None if parsing failed
        - errors: Tuple of TemplateParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_with_template("2024-06-15", "YYYY-MM-DD", "en-US")
        >>> result
        datetime.datetime(2024, 6, 15, 0, 0)
        >>> errors
        ()

        >>> result, errors = parse_with_template("01:30 PM", "hh:mm A", "en-US")
        >>> (result.hour, result.minute)
        (13, 30)

        >>> result, errors = parse_with_template("not-a-date", "YYYY-MM-DD", "en-US")
        >>> result is None
        True
        >>> len(errors)
        1
    """
    # Runtime defense for untyped callers
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.input_invalid(  # type: ignore[unreachable]
            "value", value, template
        )
        return (None, (_error(diagnostic, str(value), str(template), str(locale_code)),))
    if not isinstance(template, str):
        diagnostic = ErrorTemplate.input_invalid(  # type: ignore[unreachable]
            "template", template, template
        )
        return (None, (_error(diagnostic, value, str(template), str(locale_code)),))
    if not isinstance(locale_code, str):
        diagnostic = ErrorTemplate.input_invalid(  # type: ignore[unreachable]
            "locale_code", locale_code, template
        )
        return (None, (_error(diagnostic, value, template, str(locale_code)),))

    compiled = compile_template(template, locale_code)
    groups = compiled.match(value)
    if groups is None:
        logger.debug("Input %r does not match template %r", value, template)
        diagnostic = ErrorTemplate.template_mismatch(value, template, locale_code)
        return (None, (_error(diagnostic, value, template, locale_code),))

    context = LocaleContext.create(locale_code)
    fields = resolve_fields(compiled.tokens, groups, context)
    try:
        instant = assemble_instant(fields)
    except (ValueError, OverflowError) as e:
        diagnostic = ErrorTemplate.instant_out_of_range(value, template, str(e))
        return (None, (_error(diagnostic, value, template, locale_code),))

    return (instant, ())


def _error(
    diagnostic: Diagnostic, value: str, template: str, locale_code: str
) -> TemplateParseError:
    return TemplateParseError(
        diagnostic,
        input_value=value,
        template=template,
        locale_code=locale_code,
    )
