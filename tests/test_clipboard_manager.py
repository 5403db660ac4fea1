import pyperclip

from src.emojipick.utils import clipboard_manager
from src.emojipick.utils.clipboard_manager import copy_to_clipboard


class TestCopyToClipboard:
    def test_copy_success(self, monkeypatch):
        copied = []
        monkeypatch.setattr(clipboard_manager.pyperclip, "copy", copied.append)

        assert copy_to_clipboard("👍🏽") is True
        assert copied == ["👍🏽"]

    def test_copy_failure_is_reported(self, monkeypatch):
        def fail(text):
            raise pyperclip.PyperclipException("no clipboard")

        monkeypatch.setattr(clipboard_manager.pyperclip, "copy", fail)

        assert copy_to_clipboard("😀") is False

    def test_empty_text_is_not_copied(self, monkeypatch):
        copied = []
        monkeypatch.setattr(clipboard_manager.pyperclip, "copy", copied.append)

        assert copy_to_clipboard("") is False
        assert copied == []
