# -*- coding: utf-8 -*-
"""
src/emojipick/core/skin_tone.py

Skin tone selectors for emoji that support Fitzpatrick modifiers.

The integer values are what gets persisted in the tone store. They start
at 1 so that an explicit "none" choice can be told apart from a glyph whose
tone was never chosen.
"""

from enum import IntEnum
from typing import Optional


class SkinTone(IntEnum):
    NONE = 1
    LIGHT = 2
    MEDIUM_LIGHT = 3
    MEDIUM = 4
    MEDIUM_DARK = 5
    DARK = 6

    @property
    def modifier(self) -> Optional[int]:
        """The modifier scalar inserted after the base code point, or None."""
        return _MODIFIERS.get(self)

    @classmethod
    def from_raw(cls, value) -> Optional["SkinTone"]:
        """
        Converts a persisted raw value back into a SkinTone.

        Returns None for anything that is not a known tone value, so stale or
        hand-edited preferences read as "no tone" instead of failing.
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return None


_MODIFIERS = {
    SkinTone.LIGHT: 0x1F3FB,
    SkinTone.MEDIUM_LIGHT: 0x1F3FC,
    SkinTone.MEDIUM: 0x1F3FD,
    SkinTone.MEDIUM_DARK: 0x1F3FE,
    SkinTone.DARK: 0x1F3FF,
}
