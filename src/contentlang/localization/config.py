"""Resolver configuration.

Provides a single frozen dataclass that encapsulates the parameters of the
content fallback chain: the default locale consulted as the last resort and
the policy deciding which stored values count as absent, and the locales
whose suffixed columns are parsed as variants.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from contentlang.constants import DEFAULT_LOCALE
from contentlang.enums import AbsentValuePolicy
from contentlang.errors import LocaleConfigError
from contentlang.locale_utils import normalize_locale

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for ContentResolver.

    All fields have sensible defaults; constructing ``ResolverConfig()`` with
    no arguments produces the platform configuration.

    Attributes:
        default_locale: Locale consulted after the requested locale and the
            base variant (default: "en"). Stored normalized.
        absent_policy: Which stored values the chain skips (default:
            AbsentValuePolicy.EMPTY, i.e. missing or "" is absent). Plain
            strings ("missing", "empty", "blank") are accepted.
        locales: Locales whose `<field>_<locale>` row columns are variants.
            None (default) accepts any suffix Babel knows as a locale. Stored
            as a normalized frozenset that always includes default_locale.

    Example:
        >>> config = ResolverConfig(default_locale="ko", absent_policy="blank")
        >>> config.absent_policy
        <AbsentValuePolicy.BLANK: 'blank'>
    """

    default_locale: str = DEFAULT_LOCALE
    absent_policy: AbsentValuePolicy = AbsentValuePolicy.EMPTY
    locales: frozenset[str] | None = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration values at construction time.

        Raises:
            LocaleConfigError: If default_locale is empty, absent_policy
                is not a known policy or locales is a bare string.
        """
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            msg = "default_locale must be a non-empty locale code"
            raise LocaleConfigError(msg)
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "default_locale", normalize_locale(self.default_locale))

        try:
            policy = AbsentValuePolicy(self.absent_policy)
        except ValueError:
            choices = ", ".join(p.value for p in AbsentValuePolicy)
            msg = f"Unknown absent_policy {self.absent_policy!r}; expected one of: {choices}"
            raise LocaleConfigError(msg) from None
        object.__setattr__(self, "absent_policy", policy)

        if self.locales is not None:
            locales: Iterable[str] = self.locales
            if isinstance(locales, str):
                msg = "locales must be a collection of locale codes, not a string"
                raise LocaleConfigError(msg)
            normalized = frozenset(normalize_locale(locale) for locale in locales)
            object.__setattr__(self, "locales", normalized | {self.default_locale})
