# -*- coding: utf-8 -*-
"""
src/emojipick/core/tone_store.py

The key-value collaborator that remembers a skin tone per glyph.

Entries never hold their own tone. Instead the tone is looked up here by
the glyph key of the entry's code points, so every on-screen instance of the
same emoji shares one preference. Persistent implementations live in
`emojipick.utils.preference_store`.
"""

import threading
from typing import Dict, Optional


class ToneStore:
    """
    Base class for tone stores.

    Subclasses implement `get` and `set`. The re-entrant `lock` is held by
    the entry operations around each read-modify-write, so a store can be
    shared between the GUI thread and the hotkey listener thread.
    """

    def __init__(self):
        self.lock = threading.RLock()

    def get(self, key: str) -> Optional[int]:
        raise NotImplementedError

    def set(self, key: str, value: int) -> None:
        raise NotImplementedError


class InMemoryToneStore(ToneStore):
    """A dict-backed store, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        super().__init__()
        self._values: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        with self.lock:
            return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        with self.lock:
            self._values[key] = int(value)

    def __len__(self) -> int:
        return len(self._values)
