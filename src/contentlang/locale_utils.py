"""Locale utilities for code normalization and Babel lookups.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling so that "ko", "KO", "pt-BR" and "pt_br"
compare consistently when matching record keys and supported locale sets.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to canonical lowercase POSIX form.

    BCP-47 uses hyphens (pt-BR), while Babel/POSIX and column suffixes use
    underscores (pt_BR). Locale codes are case-insensitive, so the canonical
    form is also lowercased for consistent lookups.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary using this function, then use the
    normalized form for comparisons and record keys.

    Args:
        locale_code: Locale code in BCP-47 or POSIX form (e.g., "en-US", "ko")

    Returns:
        Lowercase POSIX-formatted locale code (e.g., "en_us", "ko")

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("KO")
        'ko'
    """
    return locale_code.strip().replace("-", "_").lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("ko")
        >>> locale.language
        'ko'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache.

    Useful in tests and long-running processes that reload locale data.
    """
    get_babel_locale.cache_clear()


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel's CLDR data knows the locale code.

    Args:
        locale_code: Locale code to check

    Returns:
        True if the code is well-formed and recognized, False otherwise
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def locale_display_name(locale_code: str, in_locale: str | None = None) -> str:
    """Return the human-readable name of a locale.

    Args:
        locale_code: Locale to describe (e.g., "ko")
        in_locale: Locale of the returned name. Defaults to locale_code
            itself, so each language is named in its own script.

    Returns:
        Display name (e.g., "한국어" for "ko", "Korean" for "ko" in "en")

    Raises:
        babel.core.UnknownLocaleError: If either locale is not recognized
        ValueError: If either locale format is invalid
    """
    locale = get_babel_locale(locale_code)
    target = get_babel_locale(in_locale) if in_locale is not None else locale
    name = locale.get_display_name(target)
    return name if name is not None else locale_code
