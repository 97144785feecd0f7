"""Locale tag helpers.

Callers may pass BCP 47 tags ("en-US") or POSIX tags ("en_US"). Everything
inside Tempolex keys caches and Babel lookups on the POSIX form, so tags are
normalized once at the API boundary.

Python 3.11+.
"""

import locale as locale_module
import os

__all__ = [
    "get_system_locale",
    "normalize_locale",
]

# Pseudo-locales that carry no language information
_NEUTRAL_LOCALES = frozenset({"", "C", "POSIX"})

# Consulted after the OS-level LC_TIME setting, highest precedence first
_LOCALE_ENV_VARS = ("LC_ALL", "LC_TIME", "LANG")


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP 47 tag to the POSIX form Babel expects.

    Surrounding whitespace is dropped and hyphens become underscores. Tags
    already in POSIX form are returned unchanged.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" de_DE ")
        'de_DE'
    """
    return locale_code.strip().replace("-", "_")


def _strip_encoding(raw: str | None) -> str | None:
    """'de_DE.UTF-8' -> 'de_DE'; neutral or empty values -> None."""
    if raw is None:
        return None
    tag = raw.split(".", 1)[0].split("@", 1)[0]
    if tag in _NEUTRAL_LOCALES:
        return None
    return normalize_locale(tag)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale of the running process, used when a requested tag is unknown.

    Looks at the OS-level LC_TIME category first, then the LC_ALL, LC_TIME
    and LANG environment variables. "C" and "POSIX" are skipped.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning "en_US"
            when nothing usable is found

    Returns:
        POSIX locale tag (e.g. "de_DE")

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set
    """
    try:
        os_locale, _encoding = locale_module.getlocale(locale_module.LC_TIME)
    except ValueError:
        os_locale = None

    candidates = [os_locale, *(os.environ.get(name) for name in _LOCALE_ENV_VARS)]
    for candidate in candidates:
        tag = _strip_encoding(candidate)
        if tag is not None:
            return tag

    if raise_on_failure:
        msg = "Could not determine system locale. Set LC_ALL, LC_TIME, or LANG."
        raise RuntimeError(msg)
    return "en_US"
