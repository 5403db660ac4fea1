# -*- coding: utf-8 -*-
"""
src/emojipick/core/emoji_entry.py

This module defines the EmojiEntry value and the operations that turn it
into a display string, optionally with a skin tone modifier.

An entry is immutable. The tone the user picked for it is kept in a
`ToneStore` under the entry's glyph key, which makes the choice shared by
every entry with the same code points, across picker sessions when the store
is persistent.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .skin_tone import SkinTone
from .tone_store import InMemoryToneStore, ToneStore

logger = logging.getLogger(__name__)

MAX_SCALAR_VALUE = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def is_scalar_value(code_point: int) -> bool:
    """True if `code_point` can be encoded as a single Unicode character."""
    return 0 <= code_point <= MAX_SCALAR_VALUE and code_point not in SURROGATE_RANGE


def decode_code_points(code_points: Iterable[int]) -> str:
    """
    Decodes a sequence of Unicode scalar values into a string.

    Decoding stops at the first value that is not a scalar value and the
    characters decoded so far are returned, so a bad table entry shows up as
    a shortened glyph instead of an exception.
    """
    chars = []
    for cp in code_points:
        if not is_scalar_value(cp):
            logger.debug(f"Stopped decoding at invalid code point {cp!r}.")
            break
        chars.append(chr(cp))
    return "".join(chars)


def glyph_key(code_points: Iterable[int]) -> str:
    """
    Builds the canonical identity of a code point sequence.

    Each code point is written as lowercase hex, zero-padded to four digits,
    and joined with '-' in sequence order, e.g. [0x1F3F3, 0xFE0F] gives
    '1f3f3-fe0f'.
    """
    return "-".join(format(cp, "04x") for cp in code_points)


@dataclass(frozen=True)
class EmojiEntry:
    """
    One selectable emoji.

    Attributes:
        code_points (Tuple[int, ...]): Scalar values rendering the base glyph.
        supports_skin_tone (bool): Whether tone modifier variants exist.
        search_key (str): Machine key used for search, never localized.
        unicode_version (float): Emoji version the glyph first appeared in.
    """
    code_points: Tuple[int, ...]
    supports_skin_tone: bool
    search_key: str
    unicode_version: float

    @property
    def key(self) -> str:
        return glyph_key(self.code_points)

    @property
    def base_string(self) -> str:
        return decode_code_points(self.code_points)

    def selected_tone(self, tone_store: Optional[ToneStore]) -> Optional[SkinTone]:
        """The remembered tone, or None when unset or unsupported."""
        if not self.supports_skin_tone or tone_store is None:
            return None
        return SkinTone.from_raw(tone_store.get(self.key))

    def has_chosen_tone_before(self, tone_store: Optional[ToneStore]) -> bool:
        """
        True once a valid tone (including SkinTone.NONE) was recorded for this
        glyph. A stored 0 or any other unknown raw value reads as never chosen.

        The picker uses this flag, not the tone itself, to decide whether it
        must ask for a tone before a tone-capable emoji can be chosen.
        """
        if not self.supports_skin_tone or tone_store is None:
            return False
        return SkinTone.from_raw(tone_store.get(self.key)) is not None

    def set_tone(self, tone: SkinTone, tone_store: ToneStore) -> None:
        """Records `tone` for this glyph. Ignored for entries without tones."""
        if not self.supports_skin_tone:
            logger.debug(f"Ignoring tone {tone!r} for '{self.search_key}': no skin tone support.")
            return
        skin_tone = SkinTone.from_raw(tone)
        if skin_tone is None:
            logger.warning(f"Ignoring unknown tone value {tone!r} for '{self.search_key}'.")
            return
        with tone_store.lock:
            tone_store.set(self.key, int(skin_tone))
        logger.debug(f"Recorded tone {skin_tone.name} for '{self.search_key}'.")

    def render(self, tone_store: Optional[ToneStore] = None) -> str:
        """
        Returns the display string, with the remembered tone applied.

        The tone modifier goes right after the first code point. That keeps
        ZWJ sequences intact, e.g. police officer + ZWJ + female sign becomes
        police officer + modifier + ZWJ + female sign.
        """
        if not self.supports_skin_tone or tone_store is None:
            return decode_code_points(self.code_points)

        with tone_store.lock:
            tone = self.selected_tone(tone_store)
            modifier = tone.modifier if tone is not None else None
            if modifier is None:
                return decode_code_points(self.code_points)
            code_points = list(self.code_points)
            code_points.insert(1, modifier)
        return decode_code_points(code_points)

    def __str__(self) -> str:
        return self.base_string


def render(entry: EmojiEntry, tone_store: Optional[ToneStore] = None) -> str:
    return entry.render(tone_store)


def set_tone(entry: EmojiEntry, tone: SkinTone, tone_store: ToneStore) -> None:
    entry.set_tone(tone, tone_store)


def has_chosen_tone_before(entry: EmojiEntry, tone_store: Optional[ToneStore]) -> bool:
    return entry.has_chosen_tone_before(tone_store)


def tone_preview(entry: EmojiEntry, tone: SkinTone) -> str:
    """Renders `entry` as it would look with `tone`, without touching any user store."""
    return entry.render(InMemoryToneStore({entry.key: int(tone)}))
