"""Custom exception hierarchy for ui_localization."""


class LocalizationError(Exception):
    """Base exception for all ui_localization errors."""


class CatalogShapeError(LocalizationError):
    """The message catalog does not match the message and language enumerations."""


class UnknownLanguageError(LocalizationError):
    """No supported language has the given canonical tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unsupported language: {tag!r}")
        self.tag = tag


class UnknownMessageError(LocalizationError):
    """No message identifier has the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown message: {name!r}")
        self.name = name
