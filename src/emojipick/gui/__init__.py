# -*- coding: utf-8 -*-
"""
The GUI Package for EmojiPick.

PyQt6 widgets for the desktop picker: the PickerWindow popup and the
SkinToneMenu it opens for emoji with tone variants.
"""

from .picker_window import PickerWindow, SkinToneMenu

__all__ = [
    "PickerWindow",
    "SkinToneMenu",
]
