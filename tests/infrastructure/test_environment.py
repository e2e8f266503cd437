"""Tests for the discovery of language preferences."""

import pytest

from ui_localization.infrastructure.environment import (
    normalize_locale,
    preferred_languages,
)


class TestNormalizeLocale:
    """Tests for normalize_locale."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("pt_BR.UTF-8", "pt-BR"),
            ("de_DE@euro", "de-DE"),
            ("zh_TW.Big5@stroke", "zh-TW"),
            ("fr", "fr"),
            ("zh-Hant", "zh-Hant"),
            (" en_US ", "en-US"),
        ],
    )
    def test_normalize(self, value: str, expected: str) -> None:
        """Encoding and modifier are dropped and _ becomes -."""
        assert normalize_locale(value) == expected

    @pytest.mark.parametrize("value", ["", "C", "POSIX", "C.UTF-8", ".UTF-8"])
    def test_neutral_locale(self, value: str) -> None:
        """Language neutral locales give no tag."""
        assert normalize_locale(value) is None


class TestPreferredLanguages:
    """Tests for preferred_languages."""

    def test_empty_environment(self) -> None:
        """No locale variable gives no preference."""
        assert not preferred_languages({})

    def test_lang_only(self) -> None:
        """LANG alone gives one preference."""
        assert preferred_languages({"LANG": "ja_JP.UTF-8"}) == ["ja-JP"]

    def test_locale_priority(self) -> None:
        """LC_ALL takes precedence over LC_MESSAGES and LANG."""
        environ = {
            "LC_ALL": "it_IT.UTF-8",
            "LC_MESSAGES": "ko_KR.UTF-8",
            "LANG": "es_ES.UTF-8",
        }
        assert preferred_languages(environ) == ["it-IT"]

    def test_empty_variable_skipped(self) -> None:
        """Empty locale variables are skipped."""
        environ = {"LC_ALL": "", "LC_MESSAGES": "ko_KR.UTF-8"}
        assert preferred_languages(environ) == ["ko-KR"]

    def test_language_list(self) -> None:
        """LANGUAGE entries come first, followed by the locale."""
        environ = {"LANGUAGE": "zh_TW:fr", "LANG": "de_DE.UTF-8"}
        assert preferred_languages(environ) == ["zh-TW", "fr", "de-DE"]

    def test_duplicates_removed(self) -> None:
        """A language listed twice is kept at its first position."""
        environ = {"LANGUAGE": "vi:en_US", "LANG": "vi.UTF-8"}
        assert preferred_languages(environ) == ["vi", "en-US"]

    def test_language_ignored_without_locale(self) -> None:
        """LANGUAGE is ignored when no locale is set."""
        assert not preferred_languages({"LANGUAGE": "fr:de"})

    def test_language_ignored_with_c_locale(self) -> None:
        """LANGUAGE is ignored for the C locale."""
        assert not preferred_languages({"LANGUAGE": "fr:de", "LC_ALL": "C"})

    def test_empty_language_entries_skipped(self) -> None:
        """Empty entries of the LANGUAGE list are skipped."""
        environ = {"LANGUAGE": "ru::", "LANG": "en_GB.UTF-8"}
        assert preferred_languages(environ) == ["ru", "en-GB"]

    def test_reads_os_environ_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The process environment is read when none is given."""
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "pt_BR.UTF-8")
        monkeypatch.setenv("LANGUAGE", "pt_BR")
        assert preferred_languages() == ["pt-BR"]
