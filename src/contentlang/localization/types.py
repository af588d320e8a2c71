"""Type aliases for the content localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating resolver call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "RowMapping",
    "Text",
    "VariantKey",
]

LocaleCode: TypeAlias = str
"""Locale code (e.g., 'en', 'ko', 'pt-BR')."""

Text: TypeAlias = str
"""User-authored text stored in a content field."""

VariantKey: TypeAlias = tuple[str, LocaleCode | None]
"""(field, normalized locale) pair; locale None names the base variant."""

RowMapping: TypeAlias = Mapping[str, object]
"""Flat data-store row, e.g. {'title': ..., 'title_ko': ...}."""
