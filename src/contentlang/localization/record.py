"""Multi-language content records.

A ContentRecord is an explicit mapping from (field, locale) to text. The
base variant of a field, stored without a language suffix, uses locale None.

Records are usually parsed from flat data-store rows where each language
lives in its own column:

    {"title": "Untitled", "title_ko": "제목", "content": "...", "location_ko": "서울"}

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from contentlang.constants import FIELD_ALIASES
from contentlang.enums import ContentField
from contentlang.locale_utils import is_known_locale, normalize_locale
from contentlang.localization.types import LocaleCode, RowMapping, Text, VariantKey

__all__ = ["ContentRecord"]

# Column suffix that can name a locale: 2-3 letter language plus optional
# script/region subtags ("ko", "pt_BR", "zh-Hans-CN").
_LOCALE_SUFFIX_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]{2,8})*$")


def _coerce_text(value: object) -> Text | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _variant_key(field_name: str | ContentField, locale: LocaleCode | None) -> VariantKey:
    try:
        content_field = ContentField(field_name)
    except ValueError:
        choices = ", ".join(f.value for f in ContentField)
        msg = f"Unknown content field {field_name!r}; expected one of: {choices}"
        raise ValueError(msg) from None
    return (content_field.value, normalize_locale(locale) if locale is not None else None)


def _parse_row_key(
    key: str, alias: str, locales: frozenset[LocaleCode] | None
) -> tuple[bool, LocaleCode | None]:
    """Match a row key against one field alias.

    A suffix names a locale only if it is in locales (normalized) or, when
    locales is None, if Babel knows it. Column suffixes such as _url or
    _lat are therefore not variants.

    Returns:
        (matched, locale) where locale is None for the base column
    """
    if key == alias:
        return True, None
    prefix = f"{alias}_"
    if key.startswith(prefix):
        suffix = key[len(prefix):]
        if _LOCALE_SUFFIX_PATTERN.match(suffix):
            locale = normalize_locale(suffix)
            if locales is None:
                known = is_known_locale(locale)
            else:
                known = locale in locales
            if known:
                return True, locale
    return False, None


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """Immutable multi-language content item.

    Sparse by design: any field may be missing in any locale, including the
    base variant. Lookups of missing variants return None rather than raise.

    Locale parts of keys are normalized, so variants for "pt-BR" and "pt_br"
    are the same variant.

    Example:
        >>> record = ContentRecord.from_mapping({"title": "Untitled", "title_ko": "제목"})
        >>> record.get("title", "ko")
        '제목'
        >>> record.get("title")
        'Untitled'
        >>> record.get("country", "ko") is None
        True

    Attributes:
        variants: Read-only mapping of (field, locale) to text
    """

    variants: Mapping[VariantKey, Text] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize keys, drop None values and freeze the mapping.

        Raises:
            ValueError: If a key names an unknown content field
        """
        normalized: dict[VariantKey, Text] = {}
        for (field_name, locale), value in self.variants.items():
            text = _coerce_text(value)
            if text is not None:
                normalized[_variant_key(field_name, locale)] = text
        object.__setattr__(self, "variants", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash(frozenset(self.variants.items()))

    def __len__(self) -> int:
        return len(self.variants)

    def __iter__(self) -> Iterator[VariantKey]:
        return iter(self.variants)

    @classmethod
    def from_mapping(
        cls, row: RowMapping, locales: Iterable[LocaleCode] | None = None
    ) -> ContentRecord:
        """Parse a flat data-store row.

        Recognized keys are ``<field>`` (base variant) and ``<field>_<locale>``
        for each content field. The body field also accepts the ``content``
        spelling used by post rows; ``body`` wins when both are present for
        the same locale. Unrelated keys are ignored, None values are absent
        and non-string scalars are converted with str().

        Args:
            row: Row mapping (e.g. a database record as a dict)
            locales: Locales whose suffixed columns are variants. None accepts
                any suffix Babel recognizes as a locale, so ``location_id``
                is read as Indonesian; pass the platform's locales to avoid that.

        Returns:
            ContentRecord holding every recognized variant
        """
        allowed = (
            frozenset(normalize_locale(locale) for locale in locales)
            if locales is not None
            else None
        )
        variants: dict[VariantKey, Text] = {}
        for content_field in ContentField:
            for alias in FIELD_ALIASES[content_field.value]:
                for key, value in row.items():
                    matched, locale = _parse_row_key(key, alias, allowed)
                    if not matched:
                        continue
                    text = _coerce_text(value)
                    if text is not None:
                        variants.setdefault((content_field.value, locale), text)
        return cls(variants)

    def get(self, field_name: str | ContentField, locale: LocaleCode | None = None) -> Text | None:
        """Return the stored variant, or None when it is missing.

        Args:
            field_name: Content field ("title", "body", "location", "country")
            locale: Locale code, or None for the base variant

        Raises:
            ValueError: If field_name is not a content field
        """
        return self.variants.get(_variant_key(field_name, locale))

    def locales(self) -> frozenset[LocaleCode]:
        """Return the normalized locales that have at least one variant."""
        return frozenset(locale for _, locale in self.variants if locale is not None)

    def with_variant(
        self,
        field_name: str | ContentField,
        locale: LocaleCode | None,
        value: Text | None,
    ) -> ContentRecord:
        """Return a copy with one variant replaced (or removed when value is None)."""
        key = _variant_key(field_name, locale)
        variants = {k: v for k, v in self.variants.items() if k != key}
        if value is not None:
            variants[key] = value
        return ContentRecord(variants)
