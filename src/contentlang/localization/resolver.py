"""Per-field content resolution with a fixed fallback chain.

For each of title, body, location and country, independently:

1. The variant for the requested locale (title_ko for "ko")
2. The base variant without a language suffix (title)
3. The variant for the default locale (title_en)
4. The empty string

The first non-absent value wins and is returned unaltered. Which values
count as absent is set by ResolverConfig.absent_policy. Resolution is total
over sparse records: a missing field resolves to "" and never raises.

The requested locale is an explicit argument; it is expected to be already
validated by a LocaleProvider and is not checked here.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contentlang.constants import CONTENT_FIELDS, DEFAULT_LOCALE, EMPTY_TEXT
from contentlang.enums import AbsentValuePolicy, ContentField, ResolutionSource
from contentlang.locale_utils import normalize_locale
from contentlang.localization.config import ResolverConfig
from contentlang.localization.record import ContentRecord
from contentlang.localization.types import LocaleCode, RowMapping, Text

if TYPE_CHECKING:
    from contentlang.localization.binding import BoundResolver

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resolver
    "ContentResolver",
    "resolve_content",
    # Result types
    "ResolvedContent",
    "FieldResolution",
    # Fallback observability
    "FieldFallback",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedContent:
    """Locale-correct flat view of a content record.

    Every field is a string; a field with no usable variant is "".

    Attributes:
        title: Resolved title
        body: Resolved body text
        location: Resolved location
        country: Resolved country
    """

    title: Text = EMPTY_TEXT
    body: Text = EMPTY_TEXT
    location: Text = EMPTY_TEXT
    country: Text = EMPTY_TEXT

    def as_dict(self) -> dict[str, Text]:
        """Return the fields as a plain dict in display order."""
        return {name: getattr(self, name) for name in CONTENT_FIELDS}


@dataclass(frozen=True, slots=True)
class FieldResolution:
    """Outcome of resolving one field.

    Attributes:
        field: The resolved field
        value: Resolved text ("" when source is EMPTY)
        source: Fallback step that produced the value
        locale: Locale of the variant used; None for BASE and EMPTY
    """

    field: ContentField
    value: Text
    source: ResolutionSource
    locale: LocaleCode | None

    @property
    def is_fallback(self) -> bool:
        """True unless the requested locale's own variant was used."""
        return self.source is not ResolutionSource.EXACT


@dataclass(frozen=True, slots=True)
class FieldFallback:
    """Information about a field that missed its requested-locale variant.

    Provided to the on_fallback callback of ContentResolver.

    Attributes:
        field: The field that fell back
        requested_locale: Locale passed to resolve()
        source: Fallback step that produced the value (BASE, DEFAULT_LOCALE or EMPTY)
        resolved_locale: Locale of the variant used; None for BASE and EMPTY

    Example:
        >>> def log_fallback(info: FieldFallback) -> None:
        ...     print(f"{info.field} for {info.requested_locale} came from {info.source}")
        >>> resolver = ContentResolver(on_fallback=log_fallback)
    """

    field: ContentField
    requested_locale: LocaleCode
    source: ResolutionSource
    resolved_locale: LocaleCode | None


def _resolve_field(
    record: ContentRecord,
    content_field: ContentField,
    locale: LocaleCode,
    default_locale: LocaleCode,
    policy: AbsentValuePolicy,
) -> FieldResolution:
    chain: tuple[tuple[ResolutionSource, LocaleCode | None], ...] = (
        (ResolutionSource.EXACT, locale),
        (ResolutionSource.BASE, None),
        (ResolutionSource.DEFAULT_LOCALE, default_locale),
    )
    for source, variant_locale in chain:
        value = record.get(content_field, variant_locale)
        if not policy.is_absent(value):
            # is_absent(None) is True, so value is a str here
            return FieldResolution(content_field, value or EMPTY_TEXT, source, variant_locale)
    return FieldResolution(content_field, EMPTY_TEXT, ResolutionSource.EMPTY, None)


def _as_record(
    record: ContentRecord | RowMapping, locales: frozenset[LocaleCode] | None
) -> ContentRecord:
    if isinstance(record, ContentRecord):
        return record
    return ContentRecord.from_mapping(record, locales)


class ContentResolver:
    """Resolves content records against a requested locale.

    Holds only immutable configuration; every call computes a fresh result
    and the resolver can be shared freely.

    Example:
        >>> resolver = ContentResolver()
        >>> record = {"title_ko": "제목", "title": "Untitled"}
        >>> resolver.resolve(record, "ko").title
        '제목'
        >>> resolver.resolve(record, "en").title
        'Untitled'

    Attributes:
        config: Fallback chain configuration
    """

    __slots__ = ("_config", "_on_fallback")

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        on_fallback: Callable[[FieldFallback], None] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            config: Fallback configuration. ``None`` uses ``ResolverConfig()``
                (default locale "en", empty strings absent).
            on_fallback: Optional callback invoked for every field not resolved
                from the requested locale's own variant. Useful for tracking
                missing translations.
        """
        self._config = config if config is not None else ResolverConfig()
        self._on_fallback = on_fallback

    def __repr__(self) -> str:
        return f"ContentResolver(config={self._config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentResolver):
            return NotImplemented
        return self._config == other._config and self._on_fallback == other._on_fallback

    def __hash__(self) -> int:
        return hash((self._config, self._on_fallback))

    @property
    def config(self) -> ResolverConfig:
        """Get resolver configuration (read-only)."""
        return self._config

    @property
    def default_locale(self) -> LocaleCode:
        """Get the normalized default locale used by the third fallback step."""
        return self._config.default_locale

    def resolve_field(
        self,
        record: ContentRecord | RowMapping,
        field_name: str | ContentField,
        locale: LocaleCode,
    ) -> FieldResolution:
        """Resolve a single field and report which fallback step applied.

        Args:
            record: ContentRecord or flat row mapping
            field_name: Content field to resolve
            locale: Requested (already validated) locale

        Returns:
            FieldResolution with value, source and variant locale

        Raises:
            ValueError: If field_name is not a content field
        """
        content_field = ContentField(field_name)
        resolution = _resolve_field(
            _as_record(record, self._config.locales),
            content_field,
            normalize_locale(locale),
            self._config.default_locale,
            self._config.absent_policy,
        )
        self._notify(resolution, locale)
        return resolution

    def explain(
        self, record: ContentRecord | RowMapping, locale: LocaleCode
    ) -> Mapping[ContentField, FieldResolution]:
        """Resolve every field and report the fallback step of each.

        Args:
            record: ContentRecord or flat row mapping
            locale: Requested (already validated) locale

        Returns:
            Mapping of field to FieldResolution, in display order
        """
        content_record = _as_record(record, self._config.locales)
        return {
            content_field: self.resolve_field(content_record, content_field, locale)
            for content_field in ContentField
        }

    def resolve(self, record: ContentRecord | RowMapping, locale: LocaleCode) -> ResolvedContent:
        """Resolve all four fields for the requested locale.

        Args:
            record: ContentRecord or flat row mapping
            locale: Requested (already validated) locale

        Returns:
            ResolvedContent with every field a string, possibly empty
        """
        resolutions = self.explain(record, locale)
        return ResolvedContent(
            **{content_field.value: r.value for content_field, r in resolutions.items()}
        )

    def bind(self, locale: LocaleCode) -> BoundResolver:
        """Return a single-argument accessor closing over locale.

        Args:
            locale: Active (already validated) locale

        Returns:
            BoundResolver; call it with a record to resolve it
        """
        from contentlang.localization.binding import BoundResolver  # noqa: PLC0415

        return BoundResolver(self, locale)

    def _notify(self, resolution: FieldResolution, requested_locale: LocaleCode) -> None:
        if not resolution.is_fallback:
            return
        logger.debug(
            "Field %s for locale %s resolved via %s (%s)",
            resolution.field,
            requested_locale,
            resolution.source,
            resolution.locale,
        )
        if self._on_fallback is not None:
            self._on_fallback(
                FieldFallback(
                    field=resolution.field,
                    requested_locale=requested_locale,
                    source=resolution.source,
                    resolved_locale=resolution.locale,
                )
            )


def resolve_content(
    record: ContentRecord | RowMapping,
    locale: LocaleCode,
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
    absent_policy: AbsentValuePolicy | str = AbsentValuePolicy.EMPTY,
) -> ResolvedContent:
    """Resolve a content record for locale without building a resolver.

    Args:
        record: ContentRecord or flat row mapping
        locale: Requested (already validated) locale
        default_locale: Locale consulted by the third fallback step
        absent_policy: Which stored values count as missing

    Returns:
        ResolvedContent with every field a string, possibly empty

    Raises:
        LocaleConfigError: If default_locale or absent_policy is invalid

    Example:
        >>> resolve_content({"title": "Untitled", "title_ko": "제목"}, "ko").title
        '제목'
    """
    config = ResolverConfig(
        default_locale=default_locale,
        absent_policy=absent_policy,  # type: ignore[arg-type]
    )
    return ContentResolver(config).resolve(record, locale)
