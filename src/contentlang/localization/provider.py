"""Locale provider: supported locales, default locale and the current locale.

The provider is the single place that turns untrusted locale input (URL
segments, cookies, headers) into a supported locale. Everything downstream,
including the content resolver, consumes only validated locales.

Key architectural decisions:
- Immutable: the current locale is fixed for a request or render context;
  with_locale() and for_path() return new providers
- Fail-fast configuration: unknown or malformed locale codes raise at
  construction rather than during a request
- Lenient lookups: validate() coerces unsupported input to the default,
  require() is the strict variant

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from contentlang.constants import DEFAULT_LOCALE, SUPPORTED_LOCALES
from contentlang.errors import LocaleConfigError, UnsupportedLocaleError
from contentlang.locale_utils import is_known_locale, locale_display_name, normalize_locale
from contentlang.localization.types import LocaleCode

__all__ = ["LocaleProvider"]

logger = logging.getLogger(__name__)


class LocaleProvider:
    """Closed set of supported locales with a default and a current locale.

    Supported codes keep the spelling they were configured with; matching
    is done on normalized codes, so "KO" and "ko" both validate to "ko".

    Example:
        >>> provider = LocaleProvider(["en", "ko"], "en")
        >>> provider.validate("ko")
        'ko'
        >>> provider.validate("fr")
        'en'
        >>> provider.for_path("/ko/post/42").current_locale()
        'ko'

    Attributes:
        current_locale: Active locale for this context
        supported_locales: Frozen set of supported locale codes
        default_locale: Designated default locale
    """

    __slots__ = ("_current", "_default", "_lookup", "_supported")

    def __init__(
        self,
        supported_locales: Iterable[LocaleCode],
        default_locale: LocaleCode,
        current_locale: object = None,
    ) -> None:
        """Initialize locale provider.

        Args:
            supported_locales: Locale codes served (e.g., ['en', 'ko'])
            default_locale: Locale used when a candidate is unsupported;
                must be one of supported_locales
            current_locale: Candidate for the active locale. Validated with
                validate(); ``None`` selects the default.

        Raises:
            LocaleConfigError: If supported_locales is empty, contains a
                malformed or unknown locale code, or does not contain
                default_locale
        """
        # dict.fromkeys() removes duplicates while maintaining insertion order
        supported = tuple(dict.fromkeys(supported_locales))
        if not supported:
            msg = "At least one supported locale is required"
            raise LocaleConfigError(msg)

        lookup: dict[str, LocaleCode] = {}
        for code in supported:
            self._check_locale_code(code)
            normalized = normalize_locale(code)
            if normalized in lookup:
                msg = f"Duplicate locale {code!r} (same as {lookup[normalized]!r})"
                raise LocaleConfigError(msg)
            lookup[normalized] = code

        if not isinstance(default_locale, str) or normalize_locale(default_locale) not in lookup:
            msg = (
                f"Default locale {default_locale!r} is not supported; "
                f"expected one of: {', '.join(supported)}"
            )
            raise LocaleConfigError(msg)

        self._lookup = lookup
        self._supported: frozenset[LocaleCode] = frozenset(supported)
        self._default: LocaleCode = lookup[normalize_locale(default_locale)]
        self._current: LocaleCode = self.validate(current_locale)

    @staticmethod
    def _check_locale_code(code: object) -> None:
        if not isinstance(code, str) or not code.strip():
            msg = f"Invalid locale code {code!r}: expected a non-empty string"
            raise LocaleConfigError(msg)
        if not is_known_locale(code):
            msg = f"Unknown locale identifier {code!r}: not a CLDR locale"
            raise LocaleConfigError(msg)

    @classmethod
    def default(cls, current_locale: object = None) -> LocaleProvider:
        """Create the platform provider: English and Korean, English default."""
        return cls(SUPPORTED_LOCALES, DEFAULT_LOCALE, current_locale)

    def __repr__(self) -> str:
        supported = sorted(self._supported)
        return (
            f"LocaleProvider(supported_locales={supported!r}, "
            f"default_locale={self._default!r}, current_locale={self._current!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleProvider):
            return NotImplemented
        return (
            self._supported == other._supported
            and self._default == other._default
            and self._current == other._current
        )

    def __hash__(self) -> int:
        return hash((self._supported, self._default, self._current))

    def current_locale(self) -> LocaleCode:
        """Get the active locale of this context."""
        return self._current

    def supported_locales(self) -> frozenset[LocaleCode]:
        """Get the supported locale codes."""
        return self._supported

    def default_locale(self) -> LocaleCode:
        """Get the designated default locale."""
        return self._default

    def is_supported(self, candidate: object) -> bool:
        """Check whether candidate names a supported locale."""
        return self._match(candidate) is not None

    def _match(self, candidate: object) -> LocaleCode | None:
        if not isinstance(candidate, str):
            return None
        return self._lookup.get(normalize_locale(candidate))

    def validate(self, candidate: object) -> LocaleCode:
        """Return the supported locale matching candidate, else the default.

        Args:
            candidate: Untrusted locale value (any type; None allowed)

        Returns:
            Supported locale code in its configured spelling
        """
        matched = self._match(candidate)
        if matched is None:
            if candidate is not None:
                logger.debug(
                    "Unsupported locale %r, using default %s", candidate, self._default
                )
            return self._default
        return matched

    def require(self, candidate: object) -> LocaleCode:
        """Return the supported locale matching candidate or raise.

        Args:
            candidate: Locale value to check

        Returns:
            Supported locale code in its configured spelling

        Raises:
            UnsupportedLocaleError: If candidate is not a supported locale
        """
        matched = self._match(candidate)
        if matched is None:
            raise UnsupportedLocaleError(candidate, self._supported)
        return matched

    def with_locale(self, candidate: object) -> LocaleProvider:
        """Return a provider whose current locale is validate(candidate)."""
        return LocaleProvider(self._lookup.values(), self._default, candidate)

    # ------------------------------------------------------------------
    # Locale-prefixed routing
    # ------------------------------------------------------------------

    def _split_path(self, pathname: str) -> tuple[LocaleCode | None, str]:
        """Split '/<locale>/rest' into (supported locale or None, '/rest')."""
        if not pathname.startswith("/"):
            return None, pathname
        segment, sep, rest = pathname[1:].partition("/")
        matched = self._lookup.get(normalize_locale(segment)) if segment else None
        if matched is None:
            return None, pathname
        return matched, f"/{rest}" if sep else "/"

    def locale_from_path(self, pathname: str) -> LocaleCode:
        """Return the locale named by the first path segment, else the default.

        Example:
            >>> LocaleProvider.default().locale_from_path("/ko/profile")
            'ko'
            >>> LocaleProvider.default().locale_from_path("/profile")
            'en'
        """
        locale, _ = self._split_path(pathname)
        return locale if locale is not None else self._default

    def strip_locale_prefix(self, pathname: str) -> str:
        """Remove a leading supported-locale segment from pathname.

        Example:
            >>> LocaleProvider.default().strip_locale_prefix("/ko/post/1")
            '/post/1'
            >>> LocaleProvider.default().strip_locale_prefix("/ko")
            '/'
        """
        _, rest = self._split_path(pathname)
        return rest

    def for_path(self, pathname: str) -> LocaleProvider:
        """Return a provider whose current locale comes from pathname."""
        return self.with_locale(self.locale_from_path(pathname))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display_name(self, locale: LocaleCode, in_locale: LocaleCode | None = None) -> str:
        """Return the human-readable name of a supported locale.

        Args:
            locale: Supported locale to describe
            in_locale: Language of the name; defaults to locale itself

        Raises:
            UnsupportedLocaleError: If locale is not supported
        """
        code = self.require(locale)
        return locale_display_name(code, in_locale)
