"""contentlang exception hierarchy.

Resolution itself never raises; these errors cover configuration mistakes
detected at construction time and strict locale lookups.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "ContentLocaleError",
    "LocaleConfigError",
    "UnsupportedLocaleError",
]


class ContentLocaleError(Exception):
    """Base exception for all contentlang errors."""


class LocaleConfigError(ContentLocaleError, ValueError):
    """Invalid locale provider or resolver configuration.

    Examples:
    - Empty supported locale set
    - Default locale not in the supported set
    - Malformed or unknown locale code
    """


class UnsupportedLocaleError(ContentLocaleError, LookupError):
    """Locale candidate outside the supported set.

    Raised only by strict lookups (LocaleProvider.require). The lenient
    LocaleProvider.validate substitutes the default locale instead.

    Attributes:
        candidate: The rejected locale value
        supported: Supported locale codes, sorted
    """

    def __init__(self, candidate: object, supported: Iterable[str]) -> None:
        """Initialize UnsupportedLocaleError.

        Args:
            candidate: The rejected locale value
            supported: Supported locale codes
        """
        self.candidate = candidate
        self.supported: tuple[str, ...] = tuple(sorted(supported))
        msg = f"Unsupported locale {candidate!r}; expected one of: {', '.join(self.supported)}"
        super().__init__(msg)
