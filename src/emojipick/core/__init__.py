# -*- coding: utf-8 -*-
"""
The Core Package for EmojiPick.

This package holds everything the picker needs that is independent of the
GUI toolkit and of the file system: the category and skin tone tags, the
emoji entry value with its tone substitution, the master emoji table, the
platform-version dataset resolver and the picker view model.

Modules within this package:
- `categories`: EmojiCategoryType and EmojiCategory.
- `skin_tone`: SkinTone and its modifier code points.
- `emoji_entry`: EmojiEntry, glyph keys and code point decoding.
- `tone_store`: The ToneStore collaborator and an in-memory implementation.
- `emoji_definitions`: The master emoji table.
- `dataset_resolver`: Maps a platform version to an emoji dataset.
- `picker_model`: PickerViewModel, the state of one picker session.
- `usage_counter`: UsageCounter, pick counts per glyph.
"""

from .categories import EmojiCategory, EmojiCategoryType
from .dataset_resolver import dataset_version_for, resolve_catalog
from .emoji_entry import (
    EmojiEntry,
    decode_code_points,
    glyph_key,
    has_chosen_tone_before,
    render,
    set_tone,
    tone_preview,
)
from .picker_model import PickerViewModel
from .skin_tone import SkinTone
from .tone_store import InMemoryToneStore, ToneStore
from .usage_counter import UsageCounter

__all__ = [
    "EmojiCategory",
    "EmojiCategoryType",
    "EmojiEntry",
    "InMemoryToneStore",
    "PickerViewModel",
    "SkinTone",
    "ToneStore",
    "UsageCounter",
    "dataset_version_for",
    "decode_code_points",
    "glyph_key",
    "has_chosen_tone_before",
    "render",
    "resolve_catalog",
    "set_tone",
    "tone_preview",
]
