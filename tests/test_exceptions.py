"""Tests for the custom exception hierarchy."""

import pytest

from ui_localization.exceptions import (
    CatalogShapeError,
    LocalizationError,
    UnknownLanguageError,
    UnknownMessageError,
)


@pytest.mark.parametrize(
    "exception",
    [
        CatalogShapeError("row missing"),
        UnknownLanguageError("xx"),
        UnknownMessageError("file_print"),
    ],
    ids=[
        "CatalogShapeError",
        "UnknownLanguageError",
        "UnknownMessageError",
    ],
)
def test_all_inherit_from_base(exception: LocalizationError) -> None:
    """Every custom exception is a LocalizationError."""
    assert isinstance(exception, LocalizationError)


class TestUnknownLanguageError:
    """Tests for UnknownLanguageError."""

    def test_message_includes_tag(self) -> None:
        """Error message contains the tag."""
        assert "pt-pt" in str(UnknownLanguageError("pt-pt"))

    def test_tag_attribute(self) -> None:
        """The tag attribute stores the original tag."""
        assert UnknownLanguageError("pt-pt").tag == "pt-pt"


class TestUnknownMessageError:
    """Tests for UnknownMessageError."""

    def test_message_includes_name(self) -> None:
        """Error message contains the message name."""
        error = UnknownMessageError("file_print")
        assert "file_print" in str(error)
        assert error.name == "file_print"
