"""Template compiler: token template -> anchored, case-insensitive regex.

Compilation runs in four steps:

1. Discovery. Walk the catalog longest token first. Each occurrence found in
   a scratch copy of the template becomes a LocatedToken and its span is
   blanked with NUL filler of equal length, so "D" can never match inside an
   already claimed "DD" and every repeated occurrence is found exactly once.
2. Ordering. Sort located tokens by position. Discovery runs in length
   order, capture groups must run in template order.
3. Assembly. Rebuild the template from the original text: literal runs are
   escaped, each token span becomes one capture group holding the token's
   locale-specific fragment.
4. Compile with re.IGNORECASE; callers use fullmatch(), which anchors both
   ends.

A template without tokens compiles to an exact (case-insensitive) literal
match; an empty template only matches the empty string.

Compiled templates are cached per (template, locale).

Python 3.11+.
"""

import functools
import re
from dataclasses import dataclass

from tempolex.constants import MAX_TEMPLATE_CACHE_SIZE
from tempolex.locale_utils import normalize_locale
from tempolex.runtime.locale_context import LocaleContext

from .tokens import TOKENS_LONGEST_FIRST, TokenDefinition

__all__ = [
    "CompiledTemplate",
    "LocatedToken",
    "build_pattern_source",
    "clear_template_caches",
    "compile_template",
    "locate_tokens",
]

# Filler for claimed spans; never part of a token text
_BLANK = "\x00"


@dataclass(frozen=True, slots=True)
class LocatedToken:
    """A token occurrence inside a concrete template.

    Attributes:
        position: Offset of the token in the original template text
        token: The matched token definition
    """

    position: int
    token: TokenDefinition

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.position + len(self.token.token)


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A template compiled for one locale.

    Capture group i+1 of pattern holds the text for tokens[i].

    Attributes:
        template: Source template text
        locale_code: Normalized locale tag the template was compiled for
        pattern: Compiled regex, match with fullmatch()
        tokens: Located tokens in template order
    """

    template: str
    locale_code: str
    pattern: re.Pattern[str]
    tokens: tuple[LocatedToken, ...]

    def match(self, value: str) -> tuple[str, ...] | None:
        """Captured substrings in template order, or None when value does not match."""
        matched = self.pattern.fullmatch(value)
        if matched is None:
            return None
        return matched.groups()


def locate_tokens(template: str) -> tuple[LocatedToken, ...]:
    """Find every token occurrence, longest tokens claiming their spans first.

    Args:
        template: Template text

    Returns:
        Located tokens sorted by position

    Examples:
        >>> [(t.position, t.token.token) for t in locate_tokens("D/DD")]
        [(0, 'D'), (2, 'DD')]
    """
    scratch = template
    found: list[LocatedToken] = []

    for definition in TOKENS_LONGEST_FIRST:
        text = definition.token
        position = scratch.find(text)
        while position != -1:
            found.append(LocatedToken(position=position, token=definition))
            scratch = scratch[:position] + _BLANK * len(text) + scratch[position + len(text) :]
            position = scratch.find(text, position + len(text))

    found.sort(key=lambda located: located.position)
    return tuple(found)


def build_pattern_source(
    template: str,
    tokens: tuple[LocatedToken, ...],
    context: LocaleContext,
) -> str:
    """Regex source with one capture group per located token.

    Args:
        template: Original template text
        tokens: Located tokens in template order
        context: Locale providing month and weekday names

    Returns:
        Regex source (not anchored; use with fullmatch)
    """
    parts: list[str] = []
    cursor = 0
    for located in tokens:
        parts.append(re.escape(template[cursor : located.position]))
        parts.append(f"({located.token.match_fragment(context)})")
        cursor = located.end
    parts.append(re.escape(template[cursor:]))
    return "".join(parts)


@functools.lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def _compile(template: str, locale_code: str) -> CompiledTemplate:
    context = LocaleContext.create(locale_code)
    tokens = locate_tokens(template)
    source = build_pattern_source(template, tokens, context)
    return CompiledTemplate(
        template=template,
        locale_code=locale_code,
        pattern=re.compile(source, re.IGNORECASE),
        tokens=tokens,
    )


def compile_template(template: str, locale_code: str) -> CompiledTemplate:
    """Compile a template for a locale (cached per template and locale).

    Args:
        template: Template text mixing tokens and literals
        locale_code: BCP 47 or POSIX locale tag

    Returns:
        CompiledTemplate

    Examples:
        >>> compiled = compile_template("YYYY-MM-DD", "en-US")
        >>> compiled.pattern.pattern
        '([0-9]{4})\\\\-([0-9]{2})\\\\-([0-9]{2})'
        >>> compiled.match("2024-06-15")
        ('2024', '06', '15')
    """
    # The shared LocaleContext records the first spelling it is created with
    LocaleContext.create(locale_code)
    return _compile(template, normalize_locale(locale_code))


def clear_template_caches() -> None:
    """Clear compiled template cache (for tests)."""
    _compile.cache_clear()
