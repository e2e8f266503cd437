"""Selection of the user interface language from preference tags."""
import logging
from collections.abc import Iterable

from ui_localization.core.types import BASE_LANGUAGE, LanguageId, PreferenceTag

logger = logging.getLogger(__name__)

# Checked in order: a region or script specific prefix must come before the
# prefix of its broader language.
LANGUAGE_PREFIXES: tuple[tuple[str, LanguageId], ...] = (
    ("en", LanguageId.EN),
    ("de", LanguageId.DE),
    ("es", LanguageId.ES),
    ("fr", LanguageId.FR),
    ("it", LanguageId.IT),
    ("ja", LanguageId.JA),
    ("ko", LanguageId.KO),
    ("pt-br", LanguageId.PT_BR),
    ("ru", LanguageId.RU),
    ("zh-hant", LanguageId.ZH_HANT),
    ("zh-tw", LanguageId.ZH_HANT),
    ("zh", LanguageId.ZH_HANS),
    ("vi", LanguageId.VI),
)


def _starts_with_ignore_ascii_case(tag: str, prefix: str) -> bool:
    """Return True if *tag* starts with *prefix*, folding ASCII letters only."""
    head = tag[: len(prefix)]
    return len(head) == len(prefix) and all(
        a == b or (a.isascii() and a.lower() == b.lower())
        for a, b in zip(head, prefix)
    )


def match_language(tag: PreferenceTag) -> LanguageId | None:
    """Return the language of the first prefix that *tag* starts with.

    Args:
        tag: A preference tag such as ``"de-AT"``.

    Returns:
        The matching language, or None when the tag matches no prefix.
    """
    for prefix, language in LANGUAGE_PREFIXES:
        if _starts_with_ignore_ascii_case(tag, prefix):
            return language
    return None


def select_language(tags: Iterable[PreferenceTag]) -> LanguageId:
    """Choose the user interface language for the given preferences.

    The tags are read most preferred first. Every matching tag replaces the
    previous selection, so the last matching tag decides. A tag resolving to
    the base language does not replace another language, since the base
    language is the default anyway. Unknown tags are ignored.

    Args:
        tags: Preference tags, most preferred first.

    Returns:
        The selected language, or the base language when nothing matches.
    """
    selected = BASE_LANGUAGE
    for tag in tags:
        language = match_language(tag)
        if language is None:
            logger.debug("Ignoring unsupported language preference %r", tag)
            continue
        if language == BASE_LANGUAGE and selected != BASE_LANGUAGE:
            logger.debug(
                "Keeping %s over base language preference %r", selected.tag, tag
            )
            continue
        selected = language
    return selected
