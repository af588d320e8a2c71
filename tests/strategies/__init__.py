"""Hypothesis strategies for contentlang property-based testing.

Usage:
    from tests.strategies import content_rows, platform_locales
"""

from .content import (
    PLATFORM_LOCALES,
    content_rows,
    field_values,
    platform_locales,
    pool_locales,
)

__all__ = [
    "PLATFORM_LOCALES",
    "content_rows",
    "field_values",
    "platform_locales",
    "pool_locales",
]
