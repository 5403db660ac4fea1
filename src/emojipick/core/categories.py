# -*- coding: utf-8 -*-
"""
src/emojipick/core/categories.py

Emoji category tags and the category container used by the picker tabs.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .emoji_entry import EmojiEntry


class EmojiCategoryType(IntEnum):
    """The eight picker tabs. The ordinal is the display order."""
    PEOPLE = 0
    NATURE = 1
    FOOD_AND_DRINK = 2
    ACTIVITY = 3
    TRAVEL_AND_PLACES = 4
    OBJECTS = 5
    SYMBOLS = 6
    FLAGS = 7

    @property
    def localize_key(self) -> str:
        """Non-localized key handed to the translator for the tab label."""
        return _LOCALIZE_KEYS[self]


_LOCALIZE_KEYS = {
    EmojiCategoryType.PEOPLE: "emotionsAndPeople",
    EmojiCategoryType.NATURE: "animalsAndNature",
    EmojiCategoryType.FOOD_AND_DRINK: "foodAndDrinks",
    EmojiCategoryType.ACTIVITY: "activities",
    EmojiCategoryType.TRAVEL_AND_PLACES: "travellingAndPlaces",
    EmojiCategoryType.OBJECTS: "items",
    EmojiCategoryType.SYMBOLS: "symbols",
    EmojiCategoryType.FLAGS: "flags",
}


@dataclass(frozen=True)
class EmojiCategory:
    """One tab's worth of emoji, in display order."""
    type: EmojiCategoryType
    entries: Tuple[EmojiEntry, ...]

    @property
    def localize_key(self) -> str:
        return self.type.localize_key

    def __len__(self) -> int:
        return len(self.entries)
