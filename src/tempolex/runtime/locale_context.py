"""Resolved locale shared by display formatting, name tables and templates.

A caller-supplied tag is resolved to a Babel Locale exactly once per process
and remembered together with whether a fallback was needed. Every formatter
and name table is built from a LocaleContext, so an unknown tag degrades the
same way everywhere:

    requested tag -> system locale -> en_US

Contexts are cached in a bounded LRU keyed by the normalized tag. Python's
locale module is only consulted to find the system locale; rendering never
touches process-global locale state.

Python 3.11+. Uses Babel for i18n.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError

from tempolex.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from tempolex.diagnostics import ErrorTemplate
from tempolex.locale_utils import get_system_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# Quoted literals in CLDR patterns ('h' in French "HH 'h'") are not fields.
_QUOTED_LITERAL = re.compile(r"'[^']*'")


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """A locale tag resolved against CLDR data.

    Construct through LocaleContext.create(), which applies the fallback
    chain and hands out shared instances.

    Attributes:
        locale_code: Tag as the caller wrote it
        is_fallback: True when the tag was unknown and a fallback is in use

    Examples:
        >>> LocaleContext.create("de-DE").identifier
        'de_DE'
        >>> ctx = LocaleContext.create("xx-invalid")
        >>> (ctx.locale_code, ctx.is_fallback)
        ('xx-invalid', True)
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Resolve a tag, reusing a cached context when one exists.

        Never raises: unknown or malformed tags, non-string values included,
        log a warning and resolve to the fallback locale.

        Args:
            locale_code: BCP 47 or POSIX locale tag
        """
        if isinstance(locale_code, str):
            key = normalize_locale(locale_code)
        else:
            key = repr(locale_code)  # type: ignore[unreachable]

        with cls._cache_lock:
            cached = cls._cache.get(key)
            if cached is not None:
                cls._cache.move_to_end(key)
                return cached

        babel_locale, is_fallback = _resolve(key, locale_code)
        context = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=is_fallback)

        with cls._cache_lock:
            # Another thread may have resolved the same key meanwhile
            existing = cls._cache.get(key)
            if existing is not None:
                return existing
            while len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[key] = context
            return context

    @classmethod
    def clear_cache(cls) -> None:
        """Forget every cached context (for tests)."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Number of cached contexts."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Cache statistics: size, max_size and cached keys, oldest first."""
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache),
            }

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale actually used for rendering."""
        return self._babel_locale

    @property
    def identifier(self) -> str:
        """Canonical identifier of the locale actually used (e.g. 'en_US').

        Unknown tags that fell back share the identifier of their fallback,
        which keeps locale-keyed caches bounded.
        """
        return str(self._babel_locale)

    def prefers_12_hour(self) -> bool:
        """Whether the locale's short time format uses a 12-hour clock."""
        try:
            pattern = self._babel_locale.time_formats["short"].pattern
        except (KeyError, AttributeError):
            return False
        fields = _QUOTED_LITERAL.sub("", pattern)
        return "h" in fields or "K" in fields


def _resolve(key: str, locale_code: str) -> tuple[Locale, bool]:
    """Babel locale for a normalized tag, and whether it is a fallback."""
    try:
        return Locale.parse(key), False
    except (UnknownLocaleError, ValueError, TypeError) as e:
        fallback = _fallback_locale()
        logger.warning("%s (%s)", ErrorTemplate.locale_unknown(locale_code, str(fallback)), e)
        return fallback, True


def _fallback_locale() -> Locale:
    """Resolve the system locale, or en_US when that is unusable too."""
    try:
        return Locale.parse(get_system_locale())
    except (UnknownLocaleError, ValueError):
        return Locale.parse(FALLBACK_LOCALE)
