# -*- coding: utf-8 -*-
"""
src/emojipick/utils/clipboard_manager.py

Hands the picked emoji over to other applications through the clipboard.

Clipboard access goes through 'pyperclip'. On Linux it needs xclip, xsel or
wl-clipboard, which are not always present, so failures are logged and
reported to the caller instead of raised.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies `text` (normally a rendered emoji) to the system clipboard.

    Args:
        text (str): The string to copy.

    Returns:
        bool: True if the text was copied, False if no clipboard was usable.
    """
    if not text:
        logger.debug("Nothing to copy, skipping clipboard.")
        return False
    try:
        pyperclip.copy(text)
        logger.info(f"Copied to clipboard: '{text}'")
        return True
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip', 'xsel' or 'wl-clipboard' is installed."
        )
        return False
