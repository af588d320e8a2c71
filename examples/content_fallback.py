"""contentlang Example - Per-Field Content Fallback.

Demonstrates resolving bilingual post rows for English and Korean readers.

Scenarios covered:
1. Partially translated posts (en -> ko)
2. Request locale from a URL path
3. Tracking missing translations with on_fallback
4. Exhibition posts with JSON metadata

Python 3.13+.
"""

from __future__ import annotations

import json

from contentlang import ContentResolver, LocaleProvider, use_content_language
from contentlang.localization import BindingMemo, FieldFallback, exhibition_record

POSTS = [
    {"id": 1, "title": "Studio day", "title_ko": "작업실의 하루", "content": "Glazing all day."},
    {"id": 2, "title": "New series", "content": "Three new vases.", "content_ko": "새 화병 세 점."},
    {"id": 3, "title_en": "Only English", "location_en": "Seoul"},
]


def example_1_partial_translations() -> None:
    """Example 1: Fields fall back independently."""
    print("=" * 60)
    print("Example 1: Partial translations (ko -> base -> en)")
    print("=" * 60)

    memo = BindingMemo()
    for locale in ("en", "ko"):
        get_content = memo.get(locale)
        for post in POSTS:
            resolved = get_content(post)
            print(f"[{locale}] #{post['id']}: {resolved.title!r} / {resolved.body!r}")
    print()


def example_2_locale_from_path() -> None:
    """Example 2: Validate the request locale from the URL."""
    print("=" * 60)
    print("Example 2: Locale from URL path")
    print("=" * 60)

    provider = LocaleProvider.default()
    for path in ("/ko/post/1", "/en/post/1", "/fr/post/1", "/post/1"):
        request_provider = provider.for_path(path)
        get_content = use_content_language(request_provider)
        page = provider.strip_locale_prefix(path)
        print(f"{path:<12} -> {request_provider.current_locale()} {page}: "
              f"{get_content(POSTS[0]).title}")
    print()


def example_3_missing_translations() -> None:
    """Example 3: Collect fields missing a Korean translation."""
    print("=" * 60)
    print("Example 3: Tracking missing translations")
    print("=" * 60)

    missing: list[FieldFallback] = []
    resolver = ContentResolver(on_fallback=missing.append)
    resolver.bind("ko").resolve_many(POSTS)

    for info in missing:
        print(f"{info.field:<9} ko -> {info.source} ({info.resolved_locale})")
    print()


def example_4_exhibition() -> None:
    """Example 4: Exhibition rows store details as JSON."""
    print("=" * 60)
    print("Example 4: Exhibition metadata")
    print("=" * 60)

    row = {
        "title": "Spring Ceramics",
        "title_ko": "봄 도자기전",
        "content": json.dumps(
            {"description": "Group show", "location": "Seongsu-dong", "country": "Korea"}
        ),
        "location_ko": "성수동",
    }
    record = exhibition_record(row)
    for locale in ("en", "ko"):
        print(f"[{locale}] {ContentResolver().resolve(record, locale).as_dict()}")
    print()


if __name__ == "__main__":
    example_1_partial_translations()
    example_2_locale_from_path()
    example_3_missing_translations()
    example_4_exhibition()
