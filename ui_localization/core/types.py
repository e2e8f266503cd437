"""Module containing custom types for the ui_localization package."""
import enum

from ui_localization.exceptions import UnknownLanguageError

PreferenceTag = str
"""A loosely formatted language preference such as ``"en-US"`` or ``"zh-Hant"``."""


class MessageId(enum.IntEnum):
    """Identifier of a localizable user interface string.

    The value is the row index of the message in the catalog.
    """

    # Keyboard keys
    CTRL = 0
    ALT = enum.auto()
    SHIFT = enum.auto()

    # Common dialog buttons
    OK = enum.auto()
    YES = enum.auto()
    NO = enum.auto()
    CANCEL = enum.auto()
    ALWAYS = enum.auto()

    # File menu
    FILE = enum.auto()
    FILE_NEW = enum.auto()
    FILE_OPEN = enum.auto()
    FILE_SAVE = enum.auto()
    FILE_SAVE_AS = enum.auto()
    FILE_CLOSE = enum.auto()
    FILE_EXIT = enum.auto()

    # Edit menu
    EDIT = enum.auto()
    EDIT_UNDO = enum.auto()
    EDIT_REDO = enum.auto()
    EDIT_CUT = enum.auto()
    EDIT_COPY = enum.auto()
    EDIT_PASTE = enum.auto()
    EDIT_FIND = enum.auto()
    EDIT_REPLACE = enum.auto()

    # View menu
    VIEW = enum.auto()
    VIEW_FOCUS_STATUSBAR = enum.auto()
    VIEW_WORD_WRAP = enum.auto()

    # Help menu
    HELP = enum.auto()
    HELP_ABOUT = enum.auto()

    # Exit dialog
    UNSAVED_CHANGES_DIALOG_TITLE = enum.auto()
    UNSAVED_CHANGES_DIALOG_DESCRIPTION = enum.auto()
    UNSAVED_CHANGES_DIALOG_YES = enum.auto()
    UNSAVED_CHANGES_DIALOG_NO = enum.auto()

    # About dialog
    ABOUT_DIALOG_TITLE = enum.auto()
    ABOUT_DIALOG_VERSION = enum.auto()

    # Clipboard too large to be forwarded to the terminal
    LARGE_CLIPBOARD_WARNING_LINE1 = enum.auto()
    LARGE_CLIPBOARD_WARNING_LINE2 = enum.auto()
    LARGE_CLIPBOARD_WARNING_LINE3 = enum.auto()
    SUPER_LARGE_CLIPBOARD_WARNING = enum.auto()

    # Warning dialog
    WARNING_DIALOG_TITLE = enum.auto()

    # Error dialog
    ERROR_DIALOG_TITLE = enum.auto()
    ERROR_ICU_MISSING = enum.auto()

    # Search bar
    SEARCH_NEEDLE_LABEL = enum.auto()
    SEARCH_REPLACEMENT_LABEL = enum.auto()
    SEARCH_MATCH_CASE = enum.auto()
    SEARCH_WHOLE_WORD = enum.auto()
    SEARCH_USE_REGEX = enum.auto()
    SEARCH_REPLACE_ALL = enum.auto()
    SEARCH_CLOSE = enum.auto()

    # Status bar
    ENCODING_REOPEN = enum.auto()
    ENCODING_CONVERT = enum.auto()
    INDENTATION_TABS = enum.auto()
    INDENTATION_SPACES = enum.auto()

    # Save as dialog
    SAVE_AS_DIALOG_PATH_LABEL = enum.auto()
    SAVE_AS_DIALOG_NAME_LABEL = enum.auto()
    FILE_OVERWRITE_WARNING = enum.auto()
    FILE_OVERWRITE_WARNING_DESCRIPTION = enum.auto()


class LanguageId(enum.IntEnum):
    """A supported translation variant.

    The value is the column index of the language in the catalog.
    The first member is the base language: its translations are complete and
    it is selected when no preference matches.
    """

    EN = 0
    DE = enum.auto()
    ES = enum.auto()
    FR = enum.auto()
    IT = enum.auto()
    JA = enum.auto()
    KO = enum.auto()
    PT_BR = enum.auto()
    RU = enum.auto()
    ZH_HANS = enum.auto()
    ZH_HANT = enum.auto()
    VI = enum.auto()

    @property
    def tag(self) -> str:
        """Return the canonical lowercase tag of the language (e.g. ``pt-br``)."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_tag(cls, tag: str) -> "LanguageId":
        """Return the language whose canonical tag is *tag*.

        The comparison ignores case and accepts ``_`` in place of ``-``.
        Unlike preference matching, no prefix matching takes place.

        Raises:
            UnknownLanguageError: If no supported language has this tag.
        """
        wanted = tag.strip().lower().replace("_", "-")
        for language in cls:
            if language.tag == wanted:
                return language
        raise UnknownLanguageError(tag)


BASE_LANGUAGE = LanguageId.EN
"""Language used when no preference matches."""

MESSAGE_COUNT = len(MessageId)
"""Number of rows in the catalog."""

LANGUAGE_COUNT = len(LanguageId)
"""Number of columns in the catalog."""
