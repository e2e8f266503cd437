"""Tests for the command line interface."""

# pylint: disable=redefined-outer-name

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from ui_localization import localizer
from ui_localization.core.types import LanguageId, MessageId
from ui_localization.exceptions import UnknownMessageError
from ui_localization.main import create_parser, main, parse_message_id


@pytest.fixture(autouse=True)
def isolate_cli(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run the CLI without touching logging or the real environment."""
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    saved = localizer.get_localizer()
    with patch("ui_localization.main.Config.setup_logging"):
        yield
    localizer._localizer = saved  # pylint: disable=protected-access


class TestParseMessageId:
    """Tests for parse_message_id."""

    @pytest.mark.parametrize("name", ["file_save", "FILE_SAVE", "file-save"])
    def test_known_name(self, name: str) -> None:
        """Names are matched ignoring case and separator."""
        assert parse_message_id(name) is MessageId.FILE_SAVE

    def test_unknown_name(self) -> None:
        """An unknown name raises UnknownMessageError."""
        with pytest.raises(UnknownMessageError):
            parse_message_id("file_print")


class TestCreateParser:
    """Tests for the argument parser."""

    def test_repeated_languages(self) -> None:
        """--lang can be given several times."""
        args = create_parser().parse_args(["-l", "fr", "-l", "ja", "selected"])
        assert args.languages == ["fr", "ja"]

    def test_table_language(self) -> None:
        """The table language is converted to a LanguageId."""
        args = create_parser().parse_args(["table", "--language", "ZH-HANT"])
        assert args.language is LanguageId.ZH_HANT

    def test_table_unknown_language(self) -> None:
        """An unknown table language is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["table", "--language", "xx"])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for main."""

    def test_selected_from_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The last matching --lang is selected."""
        main(["-l", "fr", "-l", "ja", "selected"])
        assert capsys.readouterr().out.strip() == "ja"

    def test_selected_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without any preference the base language is selected."""
        main(["selected"])
        assert capsys.readouterr().out.strip() == "en"

    def test_selected_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Environment locales are used when nothing else is given."""
        monkeypatch.setenv("LANG", "ko_KR.UTF-8")
        main(["selected"])
        assert capsys.readouterr().out.strip() == "ko"

    def test_selected_from_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Configured languages replace the environment."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("languages: [zh-TW]\n", encoding="utf-8")
        main(["-c", str(config_path), "selected"])
        assert capsys.readouterr().out.strip() == "zh-hant"

    def test_arguments_override_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--lang takes precedence over the configuration."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("languages: [zh-TW]\n", encoding="utf-8")
        main(["-c", str(config_path), "-l", "it", "selected"])
        assert capsys.readouterr().out.strip() == "it"

    def test_show(self, capsys: pytest.CaptureFixture[str]) -> None:
        """show prints the message in the selected language."""
        main(["-l", "pt-BR", "-l", "en", "show", "file_save"])
        assert capsys.readouterr().out.strip() == "Salvar"

    def test_show_keeps_placeholder(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Placeholders are printed verbatim."""
        main(["show", "large_clipboard_warning_line2"])
        assert "{size}" in capsys.readouterr().out

    def test_show_unknown_message(self) -> None:
        """An unknown message exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["show", "file_print"])
        assert exc_info.value.code == 1

    def test_table_single_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        """table --language prints one column."""
        main(["table", "--language", "de"])
        out = capsys.readouterr().out
        assert "Strg" in out
        assert "Umschalt" in out

    def test_table_all_languages(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """table prints a column per language."""
        monkeypatch.setenv("COLUMNS", "400")
        main(["table"])
        out = capsys.readouterr().out
        assert "pt-br" in out
        assert "file_save" in out

    def test_no_command(self) -> None:
        """Without a command, help is printed and the exit status is 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
