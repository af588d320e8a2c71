"""Locale-bound resolver accessors for presentation code.

Presentation code resolves many records against the one locale active for a
request or render. A BoundResolver closes over that locale so callers pass
only the record:

    get_content = use_content_language(provider)
    for post in posts:
        resolved = get_content(post)

Bindings are plain values derived from (resolver, locale). BindingMemo keeps
the most recent binding for one render context and rebuilds it only when the
locale changes; it is owned by the caller and never shared process-wide.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contentlang.localization.config import ResolverConfig
from contentlang.localization.record import ContentRecord
from contentlang.localization.resolver import ContentResolver, ResolvedContent
from contentlang.localization.types import LocaleCode, RowMapping

if TYPE_CHECKING:
    from contentlang.localization.provider import LocaleProvider

__all__ = [
    "BindingMemo",
    "BoundResolver",
    "use_content_language",
]


@dataclass(frozen=True, slots=True)
class BoundResolver:
    """Single-argument accessor resolving records against a fixed locale.

    Two bindings of the same resolver and locale compare equal, so a binding
    can be re-derived at any time without changing behavior.

    Attributes:
        resolver: Resolver performing the fallback chain
        locale: Locale closed over by this binding
    """

    resolver: ContentResolver
    locale: LocaleCode

    def __call__(self, record: ContentRecord | RowMapping) -> ResolvedContent:
        return self.resolver.resolve(record, self.locale)

    def resolve_many(
        self, records: Iterable[ContentRecord | RowMapping]
    ) -> list[ResolvedContent]:
        """Resolve records in order."""
        return [self.resolver.resolve(record, self.locale) for record in records]


class BindingMemo:
    """Per-context memo of the current locale binding.

    Returns the identical BoundResolver while the locale stays the same and
    a new one as soon as it changes. Keeps a single entry: only the latest
    locale is remembered.

    Example:
        >>> memo = BindingMemo()
        >>> first = memo.get("ko")
        >>> memo.get("ko") is first
        True
        >>> memo.get("en") is first
        False
    """

    __slots__ = ("_current", "_resolver")

    def __init__(self, resolver: ContentResolver | None = None) -> None:
        """Initialize memo.

        Args:
            resolver: Resolver to bind. ``None`` uses ``ContentResolver()``.
        """
        self._resolver = resolver if resolver is not None else ContentResolver()
        self._current: BoundResolver | None = None

    @property
    def resolver(self) -> ContentResolver:
        """Get the resolver this memo binds (read-only)."""
        return self._resolver

    def get(self, locale: LocaleCode) -> BoundResolver:
        """Return the binding for locale, rebuilding it if the locale changed."""
        current = self._current
        if current is None or current.locale != locale:
            current = self._resolver.bind(locale)
            self._current = current
        return current

    def clear(self) -> None:
        """Forget the current binding."""
        self._current = None


def use_content_language(
    provider: LocaleProvider,
    resolver: ContentResolver | None = None,
) -> BoundResolver:
    """Bind a resolver to the provider's current locale.

    Args:
        provider: Locale provider of the current request or render context
        resolver: Resolver to bind. ``None`` builds one whose default locale
            is the provider's default locale and which reads row columns
            only for the provider's supported locales.

    Returns:
        BoundResolver for provider.current_locale()

    Example:
        >>> provider = LocaleProvider.default().with_locale("ko")
        >>> get_content = use_content_language(provider)
        >>> get_content({"title": "Untitled", "title_ko": "제목"}).title
        '제목'
    """
    if resolver is None:
        config = ResolverConfig(
            default_locale=provider.default_locale(),
            locales=frozenset(provider.supported_locales()),
        )
        resolver = ContentResolver(config)
    return resolver.bind(provider.current_locale())
