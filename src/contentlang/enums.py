"""Enumerations for contentlang type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ContentField(StrEnum):
    """Localizable field of a content record.

    StrEnum provides automatic string conversion: str(ContentField.TITLE) == "title"
    """

    TITLE = "title"
    """Headline of a post or exhibition"""

    BODY = "body"
    """Main text (stored as "content" on post rows)"""

    LOCATION = "location"
    """Venue or city"""

    COUNTRY = "country"
    """Country name"""


class ResolutionSource(StrEnum):
    """Step of the fallback chain that produced a resolved value.

    Members are listed in chain order; exactly one applies per field.
    """

    EXACT = "exact"
    """Variant for the requested locale: title_ko for "ko" """

    BASE = "base"
    """Unsuffixed base variant: title"""

    DEFAULT_LOCALE = "default_locale"
    """Variant for the configured default locale: title_en"""

    EMPTY = "empty"
    """Nothing usable; resolved to the empty string"""


class AbsentValuePolicy(StrEnum):
    """Which stored values count as missing during fallback.

    StrEnum provides automatic string conversion: str(AbsentValuePolicy.EMPTY) == "empty"
    """

    MISSING = "missing"
    """Only a missing variant is absent; "" is a real value"""

    EMPTY = "empty"
    """Missing or empty string is absent"""

    BLANK = "blank"
    """Missing, empty or whitespace-only is absent"""

    def is_absent(self, value: str | None) -> bool:
        """Return True if value should be skipped by the fallback chain."""
        if value is None:
            return True
        match self:
            case AbsentValuePolicy.MISSING:
                return False
            case AbsentValuePolicy.EMPTY:
                return value == ""
            case _:  # BLANK
                return not value.strip()


__all__ = [
    "AbsentValuePolicy",
    "ContentField",
    "ResolutionSource",
]
