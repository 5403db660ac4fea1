import logging
import sys

from PyQt6.QtWidgets import QApplication

from src.emojipick.config import config


def main():
    """
    The main entry point for the EmojiPick application.

    Configures logging, creates the QApplication and the EmojiPickApp
    controller, then runs the Qt event loop until the user quits from the
    tray menu.
    """
    logging.basicConfig(level=config.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    # Imported after logging is configured so import-time messages are kept.
    from src.emojipick.app import EmojiPickApp

    app = QApplication(sys.argv)

    # The picker is hidden, not closed, after a choice; the app lives in the tray.
    app.setQuitOnLastWindowClosed(False)

    emoji_pick_app = EmojiPickApp(app, config)

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
