"""Tests for LocaleContext resolution, fallback and caching."""

import logging
import threading

import pytest

from tempolex.constants import MAX_LOCALE_CACHE_SIZE
from tempolex.runtime import LocaleContext
from tempolex.runtime import locale_context as locale_context_module


class TestCreate:
    """Resolving known tags."""

    @pytest.mark.parametrize(
        ("locale_code", "identifier"),
        [
            ("en-US", "en_US"),
            ("en_US", "en_US"),
            ("de-DE", "de_DE"),
            ("fr", "fr"),
            (" pt-BR ", "pt_BR"),
        ],
    )
    def test_known_tags(self, locale_code: str, identifier: str) -> None:
        """BCP 47 and POSIX tags resolve to the same Babel locale."""
        context = LocaleContext.create(locale_code)
        assert context.identifier == identifier
        assert context.locale_code == locale_code
        assert not context.is_fallback

    def test_babel_locale_exposed(self) -> None:
        """The resolved Babel Locale is available."""
        assert LocaleContext.create("de-DE").babel_locale.language == "de"

    def test_contexts_are_immutable(self) -> None:
        """Frozen dataclass."""
        context = LocaleContext.create("en-US")
        with pytest.raises(AttributeError):
            context.is_fallback = True  # type: ignore[misc]


class TestFallback:
    """Unknown tags."""

    @pytest.mark.parametrize("locale_code", ["xx-invalid", "", "123", "en-US-!!"])
    def test_unknown_tag_uses_system_locale(
        self,
        locale_code: str,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """The system locale replaces an unknown tag, with a warning."""
        monkeypatch.setattr(locale_context_module, "get_system_locale", lambda: "de_DE")
        with caplog.at_level(logging.WARNING, logger="tempolex.runtime.locale_context"):
            context = LocaleContext.create(locale_code)
        assert context.is_fallback
        assert context.locale_code == locale_code
        assert context.identifier == "de_DE"
        assert any("Unknown locale" in record.getMessage() for record in caplog.records)

    def test_unusable_system_locale_uses_english(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """When the system locale is unknown too, en_US is used."""
        monkeypatch.setattr(locale_context_module, "get_system_locale", lambda: "zz_ZZ")
        context = LocaleContext.create("xx-invalid")
        assert context.is_fallback
        assert context.identifier == "en_US"

    def test_fallback_warns_once(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Cached fallbacks do not warn again."""
        monkeypatch.setattr(locale_context_module, "get_system_locale", lambda: "en_US")
        with caplog.at_level(logging.WARNING, logger="tempolex.runtime.locale_context"):
            LocaleContext.create("xx-invalid")
            LocaleContext.create("xx-invalid")
        assert len(caplog.records) == 1


class TestCache:
    """Bounded LRU cache of contexts."""

    def test_same_instance_for_equivalent_tags(self) -> None:
        """en-US and en_US share one cached context."""
        assert LocaleContext.create("en-US") is LocaleContext.create("en_US")
        assert LocaleContext.cache_size() == 1

    def test_clear_cache(self) -> None:
        """clear_cache() empties the cache."""
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_cache_info(self) -> None:
        """Keys are listed oldest first."""
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        info = LocaleContext.cache_info()
        assert info == {
            "size": 2,
            "max_size": MAX_LOCALE_CACHE_SIZE,
            "locales": ("en_US", "de_DE"),
        }

    def test_lru_eviction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The least recently used context is evicted at capacity."""
        monkeypatch.setattr(locale_context_module, "MAX_LOCALE_CACHE_SIZE", 2)
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        LocaleContext.create("en-US")  # refresh
        LocaleContext.create("fr-FR")
        assert LocaleContext.cache_info()["locales"] == ("en_US", "fr_FR")

    def test_concurrent_create(self) -> None:
        """Threads racing on one tag receive one instance."""
        results: list[LocaleContext] = []

        def worker() -> None:
            results.append(LocaleContext.create("sv-SE"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(context) for context in results}) == 1


class TestClockPreference:
    """prefers_12_hour()."""

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [("en-US", True), ("de-DE", False), ("fr-FR", False), ("ja-JP", False)],
    )
    def test_prefers_12_hour(self, locale_code: str, expected: bool) -> None:
        """Derived from the short time format."""
        assert LocaleContext.create(locale_code).prefers_12_hour() is expected
