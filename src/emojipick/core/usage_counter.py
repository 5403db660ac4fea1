# -*- coding: utf-8 -*-
"""
src/emojipick/core/usage_counter.py

Counts how often each emoji was picked.

Counts are kept per glyph key in any key-to-integer store with a `lock`
(the same contract as `ToneStore`), so the in-memory store serves tests and
`IniUsageStore` persists the counts between sessions.
"""

import logging
from typing import Iterable, List

from .emoji_entry import EmojiEntry
from .tone_store import ToneStore

logger = logging.getLogger(__name__)


class UsageCounter:
    def __init__(self, store: ToneStore):
        self.store = store

    def count(self, entry: EmojiEntry) -> int:
        value = self.store.get(entry.key)
        return value if value is not None and value > 0 else 0

    def record(self, entry: EmojiEntry) -> int:
        """Adds one use of `entry` and returns the new count."""
        with self.store.lock:
            new_count = self.count(entry) + 1
            self.store.set(entry.key, new_count)
        logger.debug(f"'{entry.search_key}' picked {new_count} time(s).")
        return new_count

    def most_used(self, entries: Iterable[EmojiEntry], limit: int = 16) -> List[EmojiEntry]:
        """
        The used entries among `entries`, most used first.

        Ties keep the order of `entries`; entries never picked are left out,
        as are repeated glyph keys.
        """
        seen = set()
        used = []
        for entry in entries:
            if entry.key in seen:
                continue
            seen.add(entry.key)
            if self.count(entry) > 0:
                used.append(entry)
        used.sort(key=self.count, reverse=True)
        return used[:limit]
