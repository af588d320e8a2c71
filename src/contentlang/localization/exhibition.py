"""Exhibition metadata stored as JSON in a post body.

Exhibition posts keep structured details in the ``content`` column as a JSON
object:

    {"description": "...", "location": "Seoul", "country": "Korea",
     "start_date": "2025-03-01", "end_date": "2025-03-30",
     "external_link": "https://...", "exhibition_status": "ongoing"}

parse_exhibition_meta() reads that object leniently; exhibition_record()
turns an exhibition row into a ContentRecord whose body is the description
and whose location/country come from the metadata when the row has no
usable value for them.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields

from contentlang.enums import AbsentValuePolicy, ContentField
from contentlang.localization.record import ContentRecord
from contentlang.localization.types import LocaleCode, RowMapping, Text

__all__ = [
    "ExhibitionMeta",
    "exhibition_record",
    "parse_exhibition_meta",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExhibitionMeta:
    """Exhibition details parsed from a post body.

    Every attribute is None when missing or not a string in the source.
    """

    description: Text | None = None
    location: Text | None = None
    country: Text | None = None
    start_date: Text | None = None
    end_date: Text | None = None
    external_link: Text | None = None
    exhibition_status: Text | None = None

    @property
    def is_empty(self) -> bool:
        """True if no attribute was found."""
        return all(getattr(self, f.name) is None for f in fields(self))


def _load_object(content: str | None) -> dict[str, object] | None:
    if content is None or not content.strip():
        return None
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug("Post body is not exhibition JSON: %s", e)
        return None
    if not isinstance(parsed, dict):
        logger.debug("Exhibition JSON is %s, expected object", type(parsed).__name__)
        return None
    return parsed


def parse_exhibition_meta(content: str | None) -> ExhibitionMeta:
    """Parse exhibition metadata from a post body.

    Blank input, invalid JSON and JSON that is not an object all yield an
    empty ExhibitionMeta. Non-string values are ignored.

    Args:
        content: Raw post body

    Returns:
        ExhibitionMeta (possibly empty)

    Example:
        >>> meta = parse_exhibition_meta('{"location": "Seoul", "country": 82}')
        >>> meta.location, meta.country
        ('Seoul', None)
    """
    parsed = _load_object(content)
    if parsed is None:
        return ExhibitionMeta()
    return _meta_from_object(parsed)


def _meta_from_object(parsed: dict[str, object]) -> ExhibitionMeta:
    values = {
        f.name: value
        for f in fields(ExhibitionMeta)
        if isinstance(value := parsed.get(f.name), str)
    }
    return ExhibitionMeta(**values)


def exhibition_record(
    row: RowMapping,
    *,
    absent_policy: AbsentValuePolicy | str = AbsentValuePolicy.EMPTY,
    locales: Iterable[LocaleCode] | None = None,
) -> ContentRecord:
    """Build a ContentRecord from an exhibition post row.

    The row is parsed like ContentRecord.from_mapping(). Then, for every body
    variant holding an exhibition JSON object (base or per locale):

    - the body variant becomes the object's description (or is dropped when
      the object has none)
    - its location and country fill the variants of the same locale that
      are absent under absent_policy, so an empty location column does not
      hide the metadata

    Body variants that are not exhibition JSON are kept unchanged.

    Args:
        row: Exhibition post row
        absent_policy: Which existing location/country values the metadata
            may replace; use the resolver's policy (default: EMPTY)
        locales: Passed to ContentRecord.from_mapping()

    Returns:
        ContentRecord with structured fields lifted out of the body

    Raises:
        ValueError: If absent_policy is not a known policy
    """
    policy = AbsentValuePolicy(absent_policy)
    record = ContentRecord.from_mapping(row, locales)
    body_variants = [
        (locale, value)
        for (field_name, locale), value in record.variants.items()
        if field_name == ContentField.BODY
    ]
    for locale, body in body_variants:
        parsed = _load_object(body)
        if parsed is None:
            continue
        meta = _meta_from_object(parsed)
        record = record.with_variant(ContentField.BODY, locale, meta.description)
        for content_field, value in (
            (ContentField.LOCATION, meta.location),
            (ContentField.COUNTRY, meta.country),
        ):
            if value is not None and policy.is_absent(record.get(content_field, locale)):
                record = record.with_variant(content_field, locale, value)
    return record
