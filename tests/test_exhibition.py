"""Tests for exhibition metadata parsing and exhibition records."""

from __future__ import annotations

import json

import pytest

from contentlang.localization import (
    ContentResolver,
    ExhibitionMeta,
    exhibition_record,
    parse_exhibition_meta,
)

_META = {
    "description": "Ceramics from the studio",
    "location": "Seongsu-dong",
    "country": "Korea",
    "start_date": "2025-03-01",
    "end_date": "2025-03-30",
    "external_link": "https://example.com/show",
    "exhibition_status": "ongoing",
}


class TestParseExhibitionMeta:
    """Lenient JSON parsing of post bodies."""

    def test_all_fields(self) -> None:
        """Every known string attribute is read."""
        meta = parse_exhibition_meta(json.dumps(_META))

        assert meta == ExhibitionMeta(**_META)
        assert not meta.is_empty

    @pytest.mark.parametrize("content", [None, "", "   ", "not json", "[1, 2]", '"text"', "{"])
    def test_unusable_content_gives_empty_meta(self, content: str | None) -> None:
        """Blank, invalid or non-object content yields an empty meta."""
        meta = parse_exhibition_meta(content)

        assert meta == ExhibitionMeta()
        assert meta.is_empty

    def test_non_string_values_ignored(self) -> None:
        """Only string values are kept."""
        meta = parse_exhibition_meta(
            json.dumps({"location": "Seoul", "country": 82, "description": None})
        )

        assert meta.location == "Seoul"
        assert meta.country is None
        assert meta.description is None

    def test_unknown_keys_ignored(self) -> None:
        """Keys outside the metadata schema are dropped."""
        meta = parse_exhibition_meta(json.dumps({"curator": "Kim", "location": "Busan"}))

        assert meta == ExhibitionMeta(location="Busan")


class TestExhibitionRecord:
    """Lifting metadata out of exhibition rows."""

    def test_body_becomes_description(self) -> None:
        """JSON body is replaced by its description."""
        record = exhibition_record({"title": "Spring Show", "content": json.dumps(_META)})

        assert record.get("body") == "Ceramics from the studio"
        assert record.get("location") == "Seongsu-dong"
        assert record.get("country") == "Korea"

    def test_row_columns_take_precedence(self) -> None:
        """Explicit location/country columns are not overwritten."""
        record = exhibition_record(
            {"content": json.dumps(_META), "location": "Hannam-dong", "country_ko": "한국"}
        )

        assert record.get("location") == "Hannam-dong"
        assert record.get("country") == "Korea"
        assert record.get("country", "ko") == "한국"

    def test_localized_body_feeds_same_locale(self) -> None:
        """A per-locale JSON body fills that locale's variants."""
        korean = {"description": "스튜디오 도자기", "location": "성수동", "country": "대한민국"}
        record = exhibition_record(
            {"content": json.dumps(_META), "content_ko": json.dumps(korean)}
        )

        resolved = ContentResolver().resolve(record, "ko")

        assert resolved.body == "스튜디오 도자기"
        assert resolved.location == "성수동"
        assert resolved.country == "대한민국"

    def test_missing_description_drops_body(self) -> None:
        """A JSON body without description leaves no body variant."""
        record = exhibition_record({"content": json.dumps({"location": "Seoul"})})

        assert record.get("body") is None
        assert record.get("location") == "Seoul"

    def test_plain_text_body_kept(self) -> None:
        """Non-JSON bodies pass through unchanged."""
        record = exhibition_record({"content": "Opening night!", "location": "Seoul"})

        assert record.get("body") == "Opening night!"
        assert record.get("location") == "Seoul"

    def test_empty_location_column_filled_from_meta(self) -> None:
        """An empty-string column does not hide the metadata."""
        record = exhibition_record(
            {"content": json.dumps({"location": "Seoul"}), "location": "", "country": ""}
        )

        assert record.get("location") == "Seoul"
        assert ContentResolver().resolve(record, "en").location == "Seoul"

    def test_missing_policy_keeps_empty_location_column(self) -> None:
        """Under the missing policy "" is a real value and is kept."""
        record = exhibition_record(
            {"content": json.dumps({"location": "Seoul"}), "location": ""},
            absent_policy="missing",
        )

        assert record.get("location") == ""

    def test_blank_policy_fills_whitespace_column(self) -> None:
        """Under the blank policy whitespace-only columns are replaced."""
        record = exhibition_record(
            {"content": json.dumps({"country": "Korea"}), "country": "  "},
            absent_policy="blank",
        )

        assert record.get("country") == "Korea"
