# -*- coding: utf-8 -*-
"""
src/emojipick/utils/hotkey_manager.py

Global hotkey that summons the picker, built on 'pynput'.

pynput runs its listener in a daemon thread. The callback is invoked on that
thread, so GUI callers must only emit a Qt signal from it and do the real
work on the GUI thread.
"""

import logging
from typing import Callable, Optional

from pynput import keyboard

logger = logging.getLogger(__name__)


class HotkeyManager:
    """
    Owns one pynput GlobalHotKeys listener.

    Attributes:
        hotkey_str (str): pynput hotkey syntax, e.g. '<ctrl>+<alt>+e'.
        callback (Callable[[], None]): Called on every activation.
        listener (Optional[keyboard.GlobalHotKeys]): The running listener.
    """

    def __init__(self, hotkey_str: str, callback: Callable[[], None]):
        self.hotkey_str = hotkey_str
        self.callback = callback
        self.listener: Optional[keyboard.GlobalHotKeys] = None

    @property
    def is_running(self) -> bool:
        return self.listener is not None and self.listener.is_alive()

    def _on_activate(self):
        logger.debug(f"Hotkey '{self.hotkey_str}' activated.")
        try:
            self.callback()
        except Exception as e:
            # An exception here would kill the listener thread.
            logger.error(f"Error executing hotkey callback: {e}", exc_info=True)

    def start(self) -> bool:
        """
        Starts listening, replacing a listener that is already running.

        Returns:
            bool: False if pynput rejected the hotkey or could not start.
        """
        if self.is_running:
            logger.warning("Hotkey listener is already running. Restarting it.")
            self.stop()

        try:
            self.listener = keyboard.GlobalHotKeys({self.hotkey_str: self._on_activate})
            self.listener.start()
        except Exception as e:
            # pynput raises ValueError for bad hotkey strings and backend errors otherwise.
            logger.error(f"Failed to start hotkey listener for '{self.hotkey_str}': {e}", exc_info=True)
            self.listener = None
            return False
        logger.info(f"Global hotkey listener started for '{self.hotkey_str}'.")
        return True

    def stop(self):
        if self.is_running:
            logger.info("Stopping global hotkey listener.")
            self.listener.stop()
        else:
            logger.debug("Attempted to stop listener, but it was not running.")
        self.listener = None
