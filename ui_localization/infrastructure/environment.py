"""Discovery of the user's language preferences from the environment.

Follows the POSIX conventions also used by gettext: ``LANGUAGE`` holds a
colon separated list of languages and is only honoured when a language
specific locale (not ``C`` or ``POSIX``) is set through ``LC_ALL``,
``LC_MESSAGES`` or ``LANG``.
"""
import logging
import os
from collections.abc import Mapping

from ui_localization.core.types import PreferenceTag

logger = logging.getLogger(__name__)

LOCALE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
"""Locale variables, by decreasing priority."""

_NEUTRAL_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale(value: str) -> PreferenceTag | None:
    """Turn a POSIX locale name into a preference tag.

    ``"pt_BR.UTF-8"`` becomes ``"pt-BR"`` and ``"de_DE@euro"`` becomes
    ``"de-DE"``.

    Returns:
        The tag, or None for an empty or language neutral locale.
    """
    tag = value.strip().split(".", 1)[0].split("@", 1)[0]
    if not tag or tag in _NEUTRAL_LOCALES:
        return None
    return tag.replace("_", "-")


def preferred_languages(
    environ: Mapping[str, str] | None = None,
) -> list[PreferenceTag]:
    """Return the user's preference tags, most preferred first.

    Args:
        environ: Environment to read from (default: ``os.environ``).
    """
    if environ is None:
        environ = os.environ

    locale = next(
        (environ[name] for name in LOCALE_VARIABLES if environ.get(name)), None
    )
    if locale is None or normalize_locale(locale) is None:
        logger.debug("No language specific locale set in the environment")
        return []

    candidates: list[str] = []
    language_list = environ.get("LANGUAGE", "")
    if language_list:
        candidates.extend(language_list.split(":"))
    candidates.append(locale)

    tags: list[PreferenceTag] = []
    for candidate in candidates:
        tag = normalize_locale(candidate)
        if tag is not None and tag not in tags:
            tags.append(tag)
    logger.debug("Language preferences from the environment: %s", tags)
    return tags
