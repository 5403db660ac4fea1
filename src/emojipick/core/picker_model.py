# -*- coding: utf-8 -*-
"""
src/emojipick/core/picker_model.py

The presentation-independent state of one picker session.

`PickerViewModel` sits between a resolved catalog and whatever draws the
picker. It decides which categories are visible, answers section and row
queries, runs searches over the machine search keys, records tone choices
and reports the final selection to subscribers. The PyQt6 window in
`emojipick.gui` is a thin shell around it.
"""

import logging
from typing import Callable, List, Optional, Sequence

from .categories import EmojiCategory
from .emoji_entry import EmojiEntry
from .skin_tone import SkinTone
from .tone_store import ToneStore
from .usage_counter import UsageCounter

logger = logging.getLogger(__name__)


class PickerViewModel:
    """
    Holds the categories, search results and selection of a picker session.
    """

    def __init__(
        self,
        catalog: Sequence[EmojiCategory],
        tone_store: ToneStore,
        translator=None,
        *,
        show_empty_categories: bool = False,
        only_show_new_emojis: bool = False,
        display_count_in_header: bool = False,
        usage_counter: Optional[UsageCounter] = None,
    ):
        """
        Args:
            catalog (Sequence[EmojiCategory]): Output of `resolve_catalog`.
            tone_store (ToneStore): Where tone choices are read and written.
            translator: Object with a `get(key)` method used for category
                labels. Without one the raw localize keys are shown.
            show_empty_categories (bool): Keep categories with no emoji.
            only_show_new_emojis (bool): Only keep the emoji introduced in
                the newest emoji version of the catalog. Empty categories
                are always dropped in this mode.
            display_count_in_header (bool): Append the emoji count to labels.
            usage_counter (UsageCounter): Counts every confirmed pick, if given.
        """
        self.tone_store = tone_store
        self.translator = translator
        self.show_empty_categories = show_empty_categories
        self.only_show_new_emojis = only_show_new_emojis
        self.display_count_in_header = display_count_in_header
        self.usage_counter = usage_counter

        self._all_categories: List[EmojiCategory] = list(catalog)
        self._subscribers: List[Callable[[str], None]] = []
        self._selected_category_index = 0

        self._searching = False
        self._search_term = ""
        self._search_results: List[EmojiEntry] = []

    @property
    def categories(self) -> List[EmojiCategory]:
        """The visible categories, filtered with the current flags on every access."""
        categories = self._all_categories
        if self.only_show_new_emojis:
            versions = [e.unicode_version for c in categories for e in c.entries]
            newest = max(versions) if versions else None
            categories = [
                EmojiCategory(c.type, tuple(e for e in c.entries if e.unicode_version == newest))
                for c in categories
            ]
            return [c for c in categories if c.entries]
        if self.show_empty_categories:
            return list(categories)
        return [c for c in categories if c.entries]

    # --- Section queries ---

    def number_of_sections(self) -> int:
        if self._searching:
            return 1
        return len(self.categories)

    def number_of_items(self, section: int) -> int:
        if self._searching:
            return len(self._search_results)
        return len(self.categories[section].entries)

    def emoji_at(self, section: int, row: int) -> EmojiEntry:
        if self._searching:
            return self._search_results[row]
        return self.categories[section].entries[row]

    def category_label(self, category: EmojiCategory) -> str:
        """The localized label of a category, with the count if enabled."""
        key = category.localize_key
        label = self.translator.get(key) if self.translator is not None else key
        if self.display_count_in_header:
            label = f"{label} ({len(category.entries)})"
        return label

    def section_header_name(self, section: int) -> str:
        if self._searching:
            return f"Results for: {self._search_term}".upper()
        return self.category_label(self.categories[section])

    @property
    def selected_category_index(self) -> int:
        return self._selected_category_index

    @selected_category_index.setter
    def selected_category_index(self, index: int):
        last = max(len(self.categories) - 1, 0)
        self._selected_category_index = min(max(index, 0), last)

    # --- Search ---

    def search(self, term: str) -> None:
        """Case-insensitive substring search over the search keys."""
        if not term:
            return
        self._search_term = term
        self._searching = True
        needle = term.lower()
        self._search_results = [
            entry
            for category in self.categories
            for entry in category.entries
            if needle in entry.search_key.lower()
        ]
        logger.debug(f"Search '{term}' matched {len(self._search_results)} emojis.")

    def clear_search(self) -> None:
        self._searching = False
        self._search_term = ""
        self._search_results = []

    def is_searching(self) -> bool:
        return self._searching

    @property
    def search_results(self) -> List[EmojiEntry]:
        return list(self._search_results)

    # --- Tones and selection ---

    def update_skin_tone(self, section: int, row: int, tone: SkinTone) -> EmojiEntry:
        """Records `tone` for the emoji at (section, row) and returns it."""
        entry = self.emoji_at(section, row)
        entry.set_tone(tone, self.tone_store)
        return entry

    def render(self, entry: EmojiEntry) -> str:
        return entry.render(self.tone_store)

    def needs_tone_choice(self, entry: EmojiEntry) -> bool:
        """True if `entry` has tone variants and the user never picked one."""
        return entry.supports_skin_tone and not entry.has_chosen_tone_before(self.tone_store)

    def on_selected(self, callback: Callable[[str], None]) -> None:
        """Registers `callback` to receive every confirmed selection."""
        self._subscribers.append(callback)

    def select(self, entry: EmojiEntry) -> Optional[str]:
        """
        Confirms `entry` as the picked emoji.

        Returns the rendered string, or None when the user still has to pick
        a tone for it. Subscribers are only notified on confirmed picks.
        """
        if self.needs_tone_choice(entry):
            logger.debug(f"'{entry.search_key}' needs a tone choice before it can be selected.")
            return None
        emoji = self.render(entry)
        if self.usage_counter is not None:
            self.usage_counter.record(entry)
        for callback in self._subscribers:
            callback(emoji)
        return emoji

    def most_used(self, limit: int = 16) -> List[EmojiEntry]:
        """The most picked visible emoji, or an empty list without a counter."""
        if self.usage_counter is None:
            return []
        return self.usage_counter.most_used(
            (entry for category in self.categories for entry in category.entries), limit
        )
