"""contentlang - per-field content localization with deterministic fallback.

Resolves multi-language content records (title, body, location, country
stored as parallel per-language columns) into a flat, locale-correct view.
Each field falls back independently: requested locale, base variant,
default locale, empty string.

Public API:
    ContentResolver - Configured resolver (resolve, resolve_field, explain, bind)
    resolve_content - One-shot resolution with keyword configuration
    ContentRecord - Immutable (field, locale) -> text mapping
    ResolvedContent - Flat resolved view
    LocaleProvider - Supported/default/current locale with validation
    use_content_language - Bind a resolver to a provider's current locale

Exceptions:
    ContentLocaleError - Base exception class
    LocaleConfigError - Invalid locale or resolver configuration
    UnsupportedLocaleError - Strict lookup of an unsupported locale

Submodules:
    contentlang.localization - Records, resolver, binding, provider, exhibition metadata
    contentlang.locale_utils - Locale normalization and Babel lookups
"""

# Essential Public API - Minimal exports for clean namespace
from .errors import ContentLocaleError, LocaleConfigError, UnsupportedLocaleError
from .localization import (
    ContentRecord,
    ContentResolver,
    LocaleProvider,
    ResolvedContent,
    resolve_content,
    use_content_language,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("contentlang")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContentLocaleError",
    "ContentRecord",
    "ContentResolver",
    "LocaleConfigError",
    "LocaleProvider",
    "ResolvedContent",
    "UnsupportedLocaleError",
    "__version__",
    "resolve_content",
    "use_content_language",
]
