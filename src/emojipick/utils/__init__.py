# -*- coding: utf-8 -*-
"""
The Utilities Package for EmojiPick.

Helpers that touch the outside world on behalf of the picker:

- preference_store: IniToneStore and IniUsageStore, skin tone choices and
  pick counts persisted to disk.
- localization: Translator for category labels and UI strings.
- clipboard_manager: copy_to_clipboard, backed by pyperclip.
- hotkey_manager: HotkeyManager, the global hotkey listener (pynput).
- json_export: export_dataset, one JSON file per category.

The clipboard and hotkey modules import their libraries at import time, so
they are not re-exported here; import them from their modules.
"""

from .localization import Translator
from .preference_store import IniToneStore, IniUsageStore

__all__ = [
    "IniToneStore",
    "IniUsageStore",
    "Translator",
]
