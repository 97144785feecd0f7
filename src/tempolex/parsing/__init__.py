"""Template parsing: recover instants from text laid out as a token template.

- parse_with_template() NEVER raises - errors are returned in tuple
- Inverse of tempolex.formatting.format_with_template()

Public API:
    Parsing Functions:
        parse_with_template - Returns tuple[datetime | None, tuple[TemplateParseError, ...]]

    Building Blocks:
        TOKEN_CATALOG, TokenDefinition, TokenField, Meridiem - Token vocabulary
        compile_template, locate_tokens, CompiledTemplate, LocatedToken - Compiler
        resolve_fields, CalendarFields - Captured text to calendar fields
        assemble_instant, merge_hour - Calendar fields to datetime

    Type Guards:
        is_valid_instant - TypeGuard guard for datetime (not None)

Example:
    >>> from tempolex.parsing import parse_with_template, is_valid_instant
    >>> result, errors = parse_with_template("15 janvier 2024", "D MMMM YYYY", "fr-FR")
    >>> if is_valid_instant(result):
    ...     print(result.date())
    2024-01-15

Python 3.11+. Uses Babel CLDR names + stdlib re.
"""

from .assembler import assemble_instant, merge_hour
from .compiler import (
    CompiledTemplate,
    LocatedToken,
    clear_template_caches,
    compile_template,
    locate_tokens,
)
from .fields import CalendarFields, resolve_fields
from .guards import is_valid_instant
from .templates import parse_with_template
from .tokens import TOKEN_CATALOG, Meridiem, TokenDefinition, TokenField

__all__ = [
    "TOKEN_CATALOG",
    "CalendarFields",
    "CompiledTemplate",
    "LocatedToken",
    "Meridiem",
    "TokenDefinition",
    "TokenField",
    "assemble_instant",
    "clear_template_caches",
    "compile_template",
    "is_valid_instant",
    "locate_tokens",
    "merge_hour",
    "parse_with_template",
    "resolve_fields",
]
