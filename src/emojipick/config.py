# -*- coding: utf-8 -*-
"""
src/emojipick/config.py

Module for handling application configuration.

This module defines default settings for EmojiPick, such as the global
hotkey, the platform version used to pick the emoji dataset and the picker
display options. User settings are read from config.ini in the application
data directory, which is created with default values on the first run.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "EmojiPick"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_TONE_STORE_FILENAME = "skin_tones.ini"
DEFAULT_USAGE_STORE_FILENAME = "usage_counts.ini"
DEFAULT_HOTKEY = "<ctrl>+<alt>+e"
DEFAULT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PLATFORM_VERSION = 15.4
DEFAULT_COLUMNS = 8


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - Windows: %APPDATA%/EmojiPick
    - macOS: ~/Library/Application Support/EmojiPick
    - Linux: ~/.config/EmojiPick

    Returns:
        Path: The directory, created if it did not exist and the location
        is writable.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        app_dir = Path.home() / ".config" / APP_NAME

    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create application directory '{app_dir}': {e}")
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """
        Args:
            app_dir (Optional[Path]): Directory holding config.ini and the
                skin tone preferences. Defaults to `get_app_dir()`.
        """
        self.parser = configparser.ConfigParser()
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        self.parser["General"] = {
            "hotkey": DEFAULT_HOTKEY,
            "language": DEFAULT_LANGUAGE,
            "log_level": DEFAULT_LOG_LEVEL,
        }
        self.parser["Picker"] = {
            "platform_version": str(DEFAULT_PLATFORM_VERSION),
            "max_platform_version": "",
            "show_empty_categories": "False",
            "only_show_new_emojis": "False",
            "display_count_in_header": "False",
            "dismiss_after_choosing": "True",
            "columns": str(DEFAULT_COLUMNS),
        }
        self.parser["Preferences"] = {
            "tone_store_filename": DEFAULT_TONE_STORE_FILENAME,
            "usage_store_filename": DEFAULT_USAGE_STORE_FILENAME,
        }

    def _load_from_file(self):
        """
        Loads settings from config.ini, overriding defaults.
        If the file doesn't exist, it is created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
            return
        try:
            self.parser.read(self.config_file_path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            # Keep whatever was parsed before the error, defaults for the rest.
            logger.error(f"Could not parse config file '{self.config_file_path}': {e}")

    def _save_defaults(self):
        try:
            self.app_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    def _get_float(self, section: str, option: str, fallback):
        try:
            return self.parser.getfloat(section, option, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid number for [{section}] {option}, using {fallback}.")
            return fallback

    def _get_bool(self, section: str, option: str, fallback: bool) -> bool:
        try:
            return self.parser.getboolean(section, option, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid boolean for [{section}] {option}, using {fallback}.")
            return fallback

    # --- Properties to access settings easily and with correct types ---

    @property
    def hotkey(self) -> str:
        """The global hotkey combination that opens the picker."""
        return self.parser.get("General", "hotkey", fallback=DEFAULT_HOTKEY)

    @property
    def language(self) -> str:
        return self.parser.get("General", "language", fallback=DEFAULT_LANGUAGE)

    @property
    def log_level(self) -> int:
        """The root logger level, as a logging module constant."""
        name = self.parser.get("General", "log_level", fallback=DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def platform_version(self) -> float:
        """The platform version the emoji dataset is resolved for."""
        return self._get_float("Picker", "platform_version", DEFAULT_PLATFORM_VERSION)

    @property
    def max_platform_version(self) -> Optional[float]:
        """Upper cap for the dataset version, or None when not set."""
        raw = self.parser.get("Picker", "max_platform_version", fallback="").strip()
        if not raw:
            return None
        return self._get_float("Picker", "max_platform_version", None)

    @property
    def show_empty_categories(self) -> bool:
        return self._get_bool("Picker", "show_empty_categories", False)

    @property
    def only_show_new_emojis(self) -> bool:
        return self._get_bool("Picker", "only_show_new_emojis", False)

    @property
    def display_count_in_header(self) -> bool:
        return self._get_bool("Picker", "display_count_in_header", False)

    @property
    def dismiss_after_choosing(self) -> bool:
        """Whether the picker hides once an emoji was chosen."""
        return self._get_bool("Picker", "dismiss_after_choosing", True)

    @property
    def columns(self) -> int:
        """Number of emoji per row in the picker grid."""
        try:
            columns = self.parser.getint("Picker", "columns", fallback=DEFAULT_COLUMNS)
        except ValueError:
            return DEFAULT_COLUMNS
        return columns if columns > 0 else DEFAULT_COLUMNS

    @property
    def tone_store_path(self) -> Path:
        """The full path to the persisted skin tone preferences."""
        filename = self.parser.get("Preferences", "tone_store_filename", fallback=DEFAULT_TONE_STORE_FILENAME)
        return self.app_dir / filename

    @property
    def usage_store_path(self) -> Path:
        """The full path to the persisted pick counts."""
        filename = self.parser.get("Preferences", "usage_store_filename", fallback=DEFAULT_USAGE_STORE_FILENAME)
        return self.app_dir / filename


# --- Singleton Instance ---
# Other modules can import this instance directly, e.g.
# from src.emojipick.config import config
config = Config()
