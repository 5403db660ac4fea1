# -*- coding: utf-8 -*-
"""
src/emojipick/app.py

Core application controller for EmojiPick.

This module contains the main application class, `EmojiPickApp`, which
owns the system tray icon and the global hotkey listener, builds a picker
session from the configured platform version and copies the chosen emoji to
the clipboard.
"""

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from .config import APP_NAME, Config
from .core.dataset_resolver import dataset_version_for, effective_platform_version, resolve_catalog
from .core.picker_model import PickerViewModel
from .core.usage_counter import UsageCounter
from .gui.picker_window import PickerWindow
from .utils.clipboard_manager import copy_to_clipboard
from .utils.hotkey_manager import HotkeyManager
from .utils.localization import Translator
from .utils.preference_store import IniToneStore, IniUsageStore

logger = logging.getLogger(__name__)

# --- Constants ---
CURRENT_PATH = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_PATH.parent.parent
ICON_FILE = PROJECT_ROOT / "assets" / "icon.png"
TRAY_MESSAGE_MS = 2000


class EmojiPickApp(QObject):
    """
    The main application controller. Manages the tray icon, hotkey and picker.
    """
    # Signal to open the picker from the hotkey thread
    trigger_picker = pyqtSignal()

    def __init__(self, app: QApplication, config: Config):
        super().__init__()
        self.app = app
        self.config = config
        self.translator = Translator(config.language)
        self.tone_store = IniToneStore(config.tone_store_path)
        self.usage_counter = UsageCounter(IniUsageStore(config.usage_store_path))

        version = effective_platform_version(config.platform_version, config.max_platform_version)
        logger.info(
            f"Platform version {version} uses emoji dataset {dataset_version_for(version)}."
        )
        catalog = resolve_catalog(config.platform_version, config.max_platform_version)
        self.view_model = PickerViewModel(
            catalog,
            self.tone_store,
            self.translator,
            show_empty_categories=config.show_empty_categories,
            only_show_new_emojis=config.only_show_new_emojis,
            display_count_in_header=config.display_count_in_header,
            usage_counter=self.usage_counter,
        )
        self.picker_window = PickerWindow(
            self.view_model,
            translator=self.translator,
            columns=config.columns,
            dismiss_after_choosing=config.dismiss_after_choosing,
        )
        self.picker_window.emoji_selected.connect(self.on_emoji_selected)

        self.setup_tray_icon()

        # Queued across threads, so the picker is always opened on the GUI thread.
        self.trigger_picker.connect(self.show_picker)
        self.hotkey_manager = HotkeyManager(config.hotkey, self.trigger_picker.emit)
        self.hotkey_manager.start()

    def setup_tray_icon(self):
        """Creates and configures the system tray icon and its menu."""
        self.tray_icon = QSystemTrayIcon()

        if ICON_FILE.exists():
            self.tray_icon.setIcon(QIcon(str(ICON_FILE)))
        else:
            logger.warning(f"Icon file not found at {ICON_FILE}")
            self.tray_icon.setIcon(QIcon.fromTheme("face-smile"))

        self.tray_icon.setToolTip(self.translator.get("tray_tooltip", hotkey=self.config.hotkey))

        menu = QMenu()

        pick_action = QAction(self.translator.get("tray_pick"), self.app)
        pick_action.triggered.connect(self.show_picker)
        menu.addAction(pick_action)

        menu.addSeparator()

        quit_action = QAction(self.translator.get("tray_quit"), self.app)
        quit_action.triggered.connect(self.quit_app)
        menu.addAction(quit_action)

        self.tray_icon.setContextMenu(menu)
        self.tray_icon.activated.connect(self._on_tray_activated)
        self.tray_icon.show()
        self._tray_menu = menu

    def _on_tray_activated(self, reason):
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.show_picker()

    def show_picker(self):
        if self.picker_window.isVisible():
            self.picker_window.raise_()
            self.picker_window.activateWindow()
            return
        self.picker_window.show_at_cursor()

    def on_emoji_selected(self, emoji: str):
        """Copies the picked emoji to the clipboard and reports the result."""
        if copy_to_clipboard(emoji):
            self.tray_icon.showMessage(
                self.translator.get("copied_title"),
                self.translator.get("copied_message", emoji=emoji),
                QSystemTrayIcon.MessageIcon.Information,
                TRAY_MESSAGE_MS,
            )
        else:
            self.tray_icon.showMessage(
                APP_NAME,
                self.translator.get("copy_failed_message", emoji=emoji),
                QSystemTrayIcon.MessageIcon.Warning,
                TRAY_MESSAGE_MS,
            )

    def quit_app(self):
        """Stops the hotkey listener and quits the application."""
        logger.info(f"Quitting {APP_NAME}...")
        self.hotkey_manager.stop()
        self.picker_window.close()
        self.tray_icon.hide()
        self.app.quit()
