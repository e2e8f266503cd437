"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from ui_localization.core.types import PreferenceTag

LOG_DIRECTORY = Path(".local") / "share" / "ui-localization"
"""Log directory, relative to the home directory."""

LOG_FILENAME = "ui-localization.log"


class Config:  # pylint: disable=too-few-public-methods
    """A class to store the configuration."""

    def __init__(self) -> None:
        # Language preferences replacing the ones found in the environment
        self.languages: list[PreferenceTag] | None = None
        # logging.config.dictConfig schema
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}

        languages = config.get("languages")
        if isinstance(languages, str):
            languages = [languages]
        if languages is not None:
            self.languages = [str(tag) for tag in languages]

        if "logging" in config:
            self.logging_config = config["logging"]

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in (".yaml", ".yml"):
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def preferences(self) -> list[PreferenceTag] | None:
        """Return the configured language preferences, if any."""
        return None if self.languages is None else list(self.languages)

    def setup_logging(self) -> None:
        """Configure logging.

        Uses the ``logging`` section of the configuration when present,
        otherwise writes to a log file in the user's data directory.
        """
        if self.logging_config is not None:
            try:
                logging.config.dictConfig(self.logging_config)
                return
            except (ValueError, TypeError, AttributeError, ImportError) as e:
                logging.basicConfig(level=logging.INFO)
                logging.getLogger(__name__).warning(
                    "Invalid logging configuration, using defaults: %s", e
                )
                return

        log_dir = Path.home() / LOG_DIRECTORY
        log_dir.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_dir / LOG_FILENAME,
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
