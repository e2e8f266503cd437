"""Access to the user interface strings in the selected language.

A :class:`Localizer` is created once at startup from the user's language
preferences and then shared with every component that renders text. For
code that cannot be handed a localizer, :func:`init` captures one for the
whole process and :func:`loc` reads from it. Call :func:`init` on the main
thread before any other thread starts rendering text.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ui_localization.catalog import translate
from ui_localization.core.types import (
    BASE_LANGUAGE,
    LanguageId,
    MessageId,
    PreferenceTag,
)
from ui_localization.infrastructure.environment import preferred_languages
from ui_localization.language_selector import select_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Localizer:
    """Looks up messages in one committed language."""

    language: LanguageId = BASE_LANGUAGE

    @classmethod
    def from_preferences(cls, preferences: Iterable[PreferenceTag]) -> "Localizer":
        """Create a localizer for the language selected from *preferences*."""
        preferences = list(preferences)
        language = select_language(preferences)
        logger.info(
            "Selected language %s from preferences %s", language.tag, preferences
        )
        return cls(language)

    def loc(self, message_id: MessageId) -> str:
        """Return the text of *message_id* in the committed language."""
        return translate(message_id, self.language)

    def __call__(self, message_id: MessageId) -> str:
        return self.loc(message_id)


# Base language until init is called
_localizer = Localizer()


def init(preferences: Iterable[PreferenceTag] | None = None) -> Localizer:
    """Select the process language and return its localizer.

    Args:
        preferences: Preference tags, most preferred first. When omitted, they
            are read from the environment.
    """
    global _localizer  # noqa: PLW0603  # pylint: disable=global-statement
    if preferences is None:
        preferences = preferred_languages()
    _localizer = Localizer.from_preferences(preferences)
    return _localizer


def get_localizer() -> Localizer:
    """Return the localizer captured by :func:`init`."""
    return _localizer


def current_language() -> LanguageId:
    """Return the language captured by :func:`init`."""
    return _localizer.language


def loc(message_id: MessageId) -> str:
    """Return the text of *message_id* in the process language."""
    return _localizer.loc(message_id)
