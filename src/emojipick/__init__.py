"""
EmojiPick Application Package.

This package contains the emoji picker: the toolkit-independent core
(emoji dataset resolution, skin tone handling, picker state), the PyQt6
picker window and the tray application that ties them together.

The main application class lives in `app.py`; it is not imported here so
that the core can be used without a GUI stack or a display.
"""

__version__ = "0.1.0"
