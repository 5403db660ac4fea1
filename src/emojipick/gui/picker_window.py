# -*- coding: utf-8 -*-
"""
src/emojipick/gui/picker_window.py

Defines the PickerWindow widget, the PyQt6 front end of a picker session.

The window is a frameless popup with a search field on top and one tab per
emoji category. Each tab is a scrollable grid of flat buttons. All state
lives in the PickerViewModel; the window only draws it and forwards clicks.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QAction, QCursor, QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QLineEdit,
    QMenu,
    QScrollArea,
    QTabWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ..core.emoji_entry import EmojiEntry, tone_preview
from ..core.picker_model import PickerViewModel
from ..core.skin_tone import SkinTone

logger = logging.getLogger(__name__)

EMOJI_POINT_SIZE = 20
BUTTON_SIZE = 40
WINDOW_WIDTH_MARGIN = 48
WINDOW_HEIGHT = 420

_TONE_LABEL_KEYS = {
    SkinTone.NONE: "tone_none",
    SkinTone.LIGHT: "tone_light",
    SkinTone.MEDIUM_LIGHT: "tone_mediumLight",
    SkinTone.MEDIUM: "tone_medium",
    SkinTone.MEDIUM_DARK: "tone_mediumDark",
    SkinTone.DARK: "tone_dark",
}


class SkinToneMenu(QMenu):
    """
    Popup listing the six tone variants of one emoji.

    `exec_for` blocks until the user picks a tone or dismisses the menu and
    returns the chosen SkinTone, or None when dismissed.
    """

    def __init__(self, entry: EmojiEntry, translator=None, parent: QWidget = None):
        super().__init__(parent)
        self.entry = entry
        title = translator.get("skin_tone_menu_title") if translator is not None else "Skin tone"
        self.setTitle(title)

        for tone in SkinTone:
            preview = tone_preview(entry, tone)
            label = translator.get(_TONE_LABEL_KEYS[tone]) if translator is not None else tone.name.title()
            action = QAction(f"{preview}  {label}", self)
            action.setData(int(tone))
            self.addAction(action)

    def exec_for(self, pos: QPoint) -> Optional[SkinTone]:
        action = self.exec(pos)
        if action is None:
            return None
        return SkinTone.from_raw(action.data())


class PickerWindow(QWidget):
    """
    A popup window showing the emoji catalog of one picker session.
    """
    # Emitted with the rendered emoji once a selection is confirmed
    emoji_selected = pyqtSignal(str)

    def __init__(
        self,
        view_model: PickerViewModel,
        translator=None,
        columns: int = 8,
        dismiss_after_choosing: bool = True,
        parent: QWidget = None,
    ):
        """
        Args:
            view_model (PickerViewModel): State of the session to display.
            translator: Translator for window strings, or None for English keys.
            columns (int): Emoji per grid row.
            dismiss_after_choosing (bool): Hide the window after a selection.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.view_model = view_model
        self.translator = translator
        self.columns = columns
        self.dismiss_after_choosing = dismiss_after_choosing

        self.view_model.on_selected(self.emoji_selected.emit)

        self._setup_window_properties()
        self._setup_ui()
        self._populate_tabs()

    def _tr(self, key: str, default: str) -> str:
        if self.translator is None:
            return default
        return self.translator.get(key, default=default)

    def _setup_window_properties(self):
        self.setWindowTitle(self._tr("window_title", "EmojiPick"))
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.WindowStaysOnTopHint |
            Qt.WindowType.Tool
        )
        self.setFixedSize(self.columns * BUTTON_SIZE + WINDOW_WIDTH_MARGIN, WINDOW_HEIGHT)
        self.setStyleSheet("""
            QToolButton {
                border: none;
                border-radius: 5px;
            }
            QToolButton:hover {
                background-color: rgba(128, 128, 128, 60);
            }
        """)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.search_field = QLineEdit()
        self.search_field.setPlaceholderText(self._tr("search_placeholder", "Search emoji"))
        self.search_field.setClearButtonEnabled(True)
        self.search_field.textChanged.connect(self._on_search_changed)
        layout.addWidget(self.search_field)

        self.tabs = QTabWidget()
        self.tabs.currentChanged.connect(self._on_tab_changed)
        layout.addWidget(self.tabs)

        self.setLayout(layout)

    def _make_grid(self, section: int) -> QWidget:
        """Builds the scrollable button grid for one section."""
        container = QWidget()
        grid = QGridLayout(container)
        grid.setSpacing(0)
        grid.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        font = QFont()
        font.setPointSize(EMOJI_POINT_SIZE)

        count = self.view_model.number_of_items(section)
        if count == 0:
            grid.addWidget(QLabel(self._tr("no_results", "No emoji found")), 0, 0)
        for row in range(count):
            entry = self.view_model.emoji_at(section, row)
            button = QToolButton()
            button.setText(self.view_model.render(entry))
            button.setToolTip(entry.search_key)
            button.setFont(font)
            button.setFixedSize(BUTTON_SIZE, BUTTON_SIZE)
            button.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
            button.clicked.connect(
                lambda _checked=False, s=section, r=row, b=button: self._on_emoji_clicked(s, r, b)
            )
            button.customContextMenuRequested.connect(
                lambda _pos, s=section, r=row, b=button: self._choose_tone(s, r, b)
            )
            grid.addWidget(button, row // self.columns, row % self.columns)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(container)
        return scroll

    def _populate_tabs(self):
        self.tabs.blockSignals(True)
        self.tabs.clear()
        for section in range(self.view_model.number_of_sections()):
            self.tabs.addTab(self._make_grid(section), self.view_model.section_header_name(section))
        if not self.view_model.is_searching():
            self.tabs.setCurrentIndex(self.view_model.selected_category_index)
        self.tabs.blockSignals(False)

    def _on_tab_changed(self, index: int):
        if not self.view_model.is_searching():
            self.view_model.selected_category_index = index

    def _on_search_changed(self, text: str):
        if text.strip():
            self.view_model.search(text.strip())
        else:
            self.view_model.clear_search()
        self._populate_tabs()

    def _choose_tone(self, section: int, row: int, button: QToolButton) -> bool:
        """Asks for a tone for the emoji behind `button`. False if dismissed."""
        entry = self.view_model.emoji_at(section, row)
        if not entry.supports_skin_tone:
            return False
        menu = SkinToneMenu(entry, self.translator, self)
        tone = menu.exec_for(QCursor.pos())
        if tone is None:
            return False
        self.view_model.update_skin_tone(section, row, tone)
        button.setText(self.view_model.render(entry))
        return True

    def _on_emoji_clicked(self, section: int, row: int, button: QToolButton):
        entry = self.view_model.emoji_at(section, row)
        if self.view_model.needs_tone_choice(entry) and not self._choose_tone(section, row, button):
            return
        if self.view_model.select(entry) is not None and self.dismiss_after_choosing:
            self.hide()

    def show_at_cursor(self):
        """Shows the window next to the mouse cursor, kept on screen."""
        self.search_field.clear()
        pos = QCursor.pos()
        screen = QApplication.screenAt(pos) or QApplication.primaryScreen()
        if screen is not None:
            geometry = screen.availableGeometry()
            x = min(max(pos.x(), geometry.left()), geometry.right() - self.width())
            y = min(max(pos.y(), geometry.top()), geometry.bottom() - self.height())
            self.move(x, y)
        self.show()
        self.raise_()
        self.activateWindow()
        self.search_field.setFocus()

    def keyPressEvent(self, event: QKeyEvent):
        """Escape hides the picker."""
        if event.key() == Qt.Key.Key_Escape:
            logger.debug("Picker dismissed with Escape.")
            self.hide()
            event.accept()
            return
        super().keyPressEvent(event)
