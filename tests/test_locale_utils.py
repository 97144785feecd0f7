"""Tests for locale tag helpers."""

import pytest

from tempolex import locale_utils
from tempolex.locale_utils import get_system_locale, normalize_locale

_ENV_VARS = ("LC_ALL", "LC_TIME", "LANG")


@pytest.fixture
def no_os_locale(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """OS reports no LC_TIME locale and no locale variables are set."""
    monkeypatch.setattr(locale_utils.locale_module, "getlocale", lambda *_: (None, None))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestNormalizeLocale:
    """BCP 47 to POSIX."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en-US", "en_US"),
            ("en_US", "en_US"),
            ("en", "en"),
            ("zh-Hant-TW", "zh_Hant_TW"),
            ("  de-DE\n", "de_DE"),
        ],
    )
    def test_normalize(self, tag: str, expected: str) -> None:
        """Hyphens become underscores, whitespace is dropped."""
        assert normalize_locale(tag) == expected


class TestGetSystemLocale:
    """System locale detection."""

    def test_os_locale_first(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """The OS LC_TIME locale wins over environment variables."""
        no_os_locale.setattr(
            locale_utils.locale_module, "getlocale", lambda *_: ("fr_FR", "UTF-8")
        )
        no_os_locale.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "fr_FR"

    def test_environment_precedence(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """LC_ALL, then LC_TIME, then LANG."""
        no_os_locale.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "de_DE"
        no_os_locale.setenv("LC_TIME", "sv_SE.UTF-8")
        assert get_system_locale() == "sv_SE"
        no_os_locale.setenv("LC_ALL", "ja_JP")
        assert get_system_locale() == "ja_JP"

    @pytest.mark.parametrize("value", ["de_DE.UTF-8", "de_DE@euro", "de-DE"])
    def test_encoding_and_modifier_stripped(
        self, no_os_locale: pytest.MonkeyPatch, value: str
    ) -> None:
        """Encodings and modifiers are not part of the tag."""
        no_os_locale.setenv("LANG", value)
        assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("value", ["C", "POSIX", "C.UTF-8", ""])
    def test_neutral_locales_skipped(self, no_os_locale: pytest.MonkeyPatch, value: str) -> None:
        """C and POSIX carry no language."""
        no_os_locale.setenv("LC_ALL", value)
        no_os_locale.setenv("LANG", "es_ES.UTF-8")
        assert get_system_locale() == "es_ES"

    def test_default(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """Nothing usable means en_US."""
        assert get_system_locale() == "en_US"

    def test_raise_on_failure(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """Opt-in error when nothing usable is found."""
        with pytest.raises(RuntimeError, match="Could not determine system locale"):
            get_system_locale(raise_on_failure=True)

    def test_getlocale_error_is_ignored(self, no_os_locale: pytest.MonkeyPatch) -> None:
        """An unparsable OS locale falls through to the environment."""

        def broken(*_: object) -> tuple[str, str]:
            raise ValueError("unknown locale: xx")

        no_os_locale.setattr(locale_utils.locale_module, "getlocale", broken)
        no_os_locale.setenv("LANG", "it_IT.UTF-8")
        assert get_system_locale() == "it_IT"
