"""Shared constants for contentlang.

Centralized configuration values used across the localization package.
Placing constants here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Locales: Platform locale set and default
- Fields: Content fields and their row-key aliases
- Fallback strings: Value used when a field resolves to nothing

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Fields
    "CONTENT_FIELDS",
    "FIELD_ALIASES",
    # Fallback strings
    "EMPTY_TEXT",
]

# ============================================================================
# LOCALES
# ============================================================================

# Designated default locale. Ultimate per-locale fallback for every field.
DEFAULT_LOCALE: str = "en"

# Closed set of locales served by the platform, default first.
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ko")

# ============================================================================
# FIELDS
# ============================================================================

# Content fields exposed by ResolvedContent, in output order.
CONTENT_FIELDS: tuple[str, ...] = ("title", "body", "location", "country")

# Row-key spellings accepted for each field, in precedence order.
# Post rows store the body under "content".
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title",),
    "body": ("body", "content"),
    "location": ("location",),
    "country": ("country",),
}

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Resolved value for a field with no usable variant.
EMPTY_TEXT: str = ""
