"""Tests for locale-bound resolver accessors."""

from __future__ import annotations

import pytest

from contentlang.localization import (
    BindingMemo,
    BoundResolver,
    ContentResolver,
    LocaleProvider,
    ResolverConfig,
    use_content_language,
)


class TestBoundResolver:
    """Single-argument accessors closing over a locale."""

    def test_call_resolves_with_bound_locale(self, resolver: ContentResolver) -> None:
        """Calling the binding resolves against its locale."""
        get_content = resolver.bind("ko")
        record = {"title": "Untitled", "title_ko": "제목"}

        assert get_content(record) == resolver.resolve(record, "ko")
        assert get_content.locale == "ko"

    def test_rebinding_is_equal(self, resolver: ContentResolver) -> None:
        """Re-deriving a binding gives an equal value."""
        assert resolver.bind("ko") == resolver.bind("ko")
        assert resolver.bind("ko") != resolver.bind("en")

    def test_resolve_many_preserves_order(self, resolver: ContentResolver) -> None:
        """resolve_many returns one result per record, in order."""
        records = [{"title_ko": "하나"}, {"title": "two"}, {}]

        titles = [r.title for r in resolver.bind("ko").resolve_many(records)]

        assert titles == ["하나", "two", ""]

    def test_binding_is_frozen(self, resolver: ContentResolver) -> None:
        """The bound locale cannot be reassigned."""
        binding = resolver.bind("ko")

        with pytest.raises(AttributeError):
            binding.locale = "en"  # type: ignore[misc]
        assert binding.locale == "ko"


class TestBindingMemo:
    """Per-context memo of the current binding."""

    def test_same_locale_same_object(self) -> None:
        """Unchanged locale returns the identical binding."""
        memo = BindingMemo()

        assert memo.get("ko") is memo.get("ko")

    def test_locale_change_rebuilds(self) -> None:
        """Changing locale yields a new binding for the new locale."""
        memo = BindingMemo()
        korean = memo.get("ko")

        english = memo.get("en")

        assert english is not korean
        assert english.locale == "en"
        assert memo.get("ko") is not korean
        assert memo.get("ko") == korean

    def test_clear_forgets_binding(self) -> None:
        """clear() drops the memoized binding."""
        memo = BindingMemo()
        first = memo.get("ko")

        memo.clear()

        assert memo.get("ko") is not first

    def test_uses_given_resolver(self) -> None:
        """Bindings use the memo's resolver."""
        resolver = ContentResolver(ResolverConfig(default_locale="ko"))
        memo = BindingMemo(resolver)

        assert memo.resolver is resolver
        assert memo.get("ja").resolver is resolver

    def test_memos_are_independent(self) -> None:
        """Each memo keeps its own state."""
        first, second = BindingMemo(), BindingMemo()

        assert first.get("ko") is not second.get("ko")


class TestUseContentLanguage:
    """Binding a resolver to a provider's current locale."""

    def test_binds_current_locale(self, provider: LocaleProvider) -> None:
        """Accessor resolves against the provider's current locale."""
        get_content = use_content_language(provider.with_locale("ko"))

        assert isinstance(get_content, BoundResolver)
        assert get_content({"title": "Untitled", "title_ko": "제목"}).title == "제목"

    def test_invalid_request_locale_uses_default(self, provider: LocaleProvider) -> None:
        """Unsupported request locale resolves as the default locale."""
        get_content = use_content_language(provider.for_path("/fr/post/1"))

        assert get_content.locale == "en"
        assert get_content({"title": "Untitled", "title_ko": "제목"}).title == "Untitled"

    def test_resolver_default_follows_provider(self) -> None:
        """Built resolver falls back to the provider's default locale."""
        provider = LocaleProvider(["en", "ko"], "ko", current_locale="en")

        get_content = use_content_language(provider)

        assert get_content.resolver.default_locale == "ko"
        assert get_content({"title_ko": "제목"}).title == "제목"

    def test_built_resolver_reads_supported_locale_columns(self) -> None:
        """Built resolver parses row columns for the provider's locales."""
        provider = LocaleProvider(["en", "ko", "id"], "en", current_locale="id")
        row = {"location": "Seoul", "location_id": "Jakarta"}

        assert use_content_language(provider)(row).location == "Jakarta"
        assert use_content_language(provider).resolver.config.locales == frozenset(
            {"en", "ko", "id"}
        )

    def test_explicit_resolver_used(self, provider: LocaleProvider) -> None:
        """A supplied resolver is bound as-is."""
        resolver = ContentResolver(ResolverConfig(absent_policy="blank"))

        get_content = use_content_language(provider, resolver)

        assert get_content.resolver is resolver
