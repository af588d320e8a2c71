"""Content localization package.

Provides the full content localization stack: type aliases, configuration,
multi-language records, the per-field resolver, locale-bound accessors, the
locale provider and exhibition metadata parsing.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, Text, VariantKey, RowMapping)
    config     - ResolverConfig
    record     - ContentRecord
    resolver   - ContentResolver, resolve_content, ResolvedContent,
                 FieldResolution, FieldFallback
    binding    - BoundResolver, BindingMemo, use_content_language
    provider   - LocaleProvider
    exhibition - ExhibitionMeta, parse_exhibition_meta, exhibition_record

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from contentlang.enums import AbsentValuePolicy, ContentField, ResolutionSource
from contentlang.localization.binding import BindingMemo, BoundResolver, use_content_language
from contentlang.localization.config import ResolverConfig
from contentlang.localization.exhibition import (
    ExhibitionMeta,
    exhibition_record,
    parse_exhibition_meta,
)
from contentlang.localization.provider import LocaleProvider
from contentlang.localization.record import ContentRecord
from contentlang.localization.resolver import (
    ContentResolver,
    FieldFallback,
    FieldResolution,
    ResolvedContent,
    resolve_content,
)
from contentlang.localization.types import LocaleCode, RowMapping, Text, VariantKey

__all__ = [
    # Resolver
    "ContentResolver",
    "resolve_content",
    "ResolverConfig",
    "AbsentValuePolicy",
    # Records
    "ContentRecord",
    "ContentField",
    "ResolvedContent",
    # Binding
    "BoundResolver",
    "BindingMemo",
    "use_content_language",
    # Locale provider
    "LocaleProvider",
    # Fallback observability
    "FieldResolution",
    "FieldFallback",
    "ResolutionSource",
    # Exhibition metadata
    "ExhibitionMeta",
    "exhibition_record",
    "parse_exhibition_meta",
    # Type aliases for user code type annotations
    "LocaleCode",
    "RowMapping",
    "Text",
    "VariantKey",
]
