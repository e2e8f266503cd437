"""Main module for the ui-localization command line tool."""
import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ui_localization.catalog import CATALOG, language_column
from ui_localization.core.types import LanguageId, MessageId
from ui_localization.exceptions import (
    LocalizationError,
    UnknownLanguageError,
    UnknownMessageError,
)
from ui_localization.infrastructure.config import Config
from ui_localization.localizer import Localizer, init


def parse_message_id(name: str) -> MessageId:
    """Return the message identifier named *name*, ignoring case.

    Raises:
        UnknownMessageError: If no message has this name.
    """
    try:
        return MessageId[name.strip().upper().replace("-", "_")]
    except KeyError as e:
        raise UnknownMessageError(name) from e


def language_argument(tag: str) -> LanguageId:
    """Convert a canonical language tag given on the command line."""
    try:
        return LanguageId.from_tag(tag)
    except UnknownLanguageError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    """
    parser = argparse.ArgumentParser(description="User interface localization")
    parser.add_argument(
        "-c",
        "--config",
        help="YAML configuration file",
        type=Path,
    )
    parser.add_argument(
        "-l",
        "--lang",
        help="Language preference, most preferred first (repeatable)",
        action="append",
        dest="languages",
    )
    sub_parser = parser.add_subparsers(dest="command")

    sub_parser.add_parser("selected", help="Print the selected language")

    show_parser = sub_parser.add_parser("show", help="Print one message")
    show_parser.add_argument("message", help="Message name, e.g. file_save")

    table_parser = sub_parser.add_parser("table", help="Print the catalog")
    table_parser.add_argument(
        "--language",
        help="Only print this language (canonical tag, e.g. pt-br)",
        type=language_argument,
    )
    return parser


def render_table(console: Console, language: LanguageId | None = None) -> None:
    """Print the catalog, or the column of a single language."""
    languages = list(LanguageId) if language is None else [language]
    table = Table(title="Catalog")
    table.add_column("Message")
    for lang in languages:
        table.add_column(lang.tag)

    if language is None:
        for message, row in CATALOG.items():
            table.add_row(message.name.lower(), *row)
    else:
        for message, text in language_column(language).items():
            table.add_row(message.name.lower(), text)
    console.print(table)


def create_localizer(config: Config, languages: list[str] | None) -> Localizer:
    """Select the language from the command line, the config or the environment."""
    if languages is not None:
        return init(languages)
    return init(config.preferences())


def main(argv: list[str] | None = None) -> None:
    """
    Command Line Interface for the ui-localization package.
    Several commands are available:
    - selected: Print the language selected from the preferences
    - show: Print one message in the selected language
    - table: Print the catalog
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    config = Config()
    if args.config is not None:
        config.parse(args.config)
    config.setup_logging()

    localizer = create_localizer(config, args.languages)
    console = Console()

    match args.command:
        case "selected":
            console.print(localizer.language.tag)

        case "show":
            try:
                message = parse_message_id(args.message)
            except LocalizationError as e:
                console.print(f"[red]{e}[/red]")
                sys.exit(1)
            console.print(localizer.loc(message), markup=False)

        case "table":
            render_table(console, args.language)

        case _:
            parser.print_help()
            sys.exit(1)


if __name__ == "__main__":
    main()
