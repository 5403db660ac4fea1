# -*- coding: utf-8 -*-
"""
src/emojipick/utils/preference_store.py

Persists the per-glyph skin tone choices and pick counts between sessions.

The tones are written to a small INI file next to config.ini, in a
[SkinTones] section where each option is a glyph key and each value the raw
SkinTone number, e.g.:

    [SkinTones]
    1f44d = 4

Pick counts use the same layout in a [UsageCounts] section of their own file.
"""

import configparser
import logging
from pathlib import Path
from typing import Optional

from ..core.tone_store import ToneStore

logger = logging.getLogger(__name__)

SECTION = "SkinTones"
USAGE_SECTION = "UsageCounts"


class IniToneStore(ToneStore):
    """
    A ToneStore backed by an INI file.

    Values are kept in memory and the file is rewritten on every `set`. A
    missing or unreadable file starts the store empty; a failed write is
    logged and the value stays available for the rest of the session.
    """
    section = SECTION

    def __init__(self, file_path: Path):
        super().__init__()
        self.file_path = Path(file_path)
        self.parser = configparser.ConfigParser(interpolation=None)
        self._load()

    def _load(self):
        if self.file_path.exists():
            try:
                self.parser.read(self.file_path, encoding="utf-8")
                logger.info(f"Loaded preferences from '{self.file_path}'.")
            except (configparser.Error, OSError, UnicodeDecodeError) as e:
                logger.error(f"Could not read preferences '{self.file_path}': {e}")
                self.parser = configparser.ConfigParser(interpolation=None)
        if not self.parser.has_section(self.section):
            self.parser.add_section(self.section)

    def _save(self):
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                self.parser.write(f)
        except OSError as e:
            logger.error(f"Could not write preferences to '{self.file_path}': {e}")

    def get(self, key: str) -> Optional[int]:
        with self.lock:
            try:
                return self.parser.getint(self.section, key, fallback=None)
            except (ValueError, configparser.Error):
                logger.warning(f"Ignoring malformed value for '{key}'.")
                return None

    def set(self, key: str, value: int) -> None:
        with self.lock:
            self.parser.set(self.section, key, str(int(value)))
            self._save()


class IniUsageStore(IniToneStore):
    """Pick counts per glyph key, in a [UsageCounts] section."""
    section = USAGE_SECTION
