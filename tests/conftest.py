import os
import sys

import pytest

# pynput cannot reach an X server on headless Linux; use its bundled dummy
# backend so the hotkey tests can import it.
if sys.platform.startswith("linux") and not os.environ.get("DISPLAY"):
    os.environ.setdefault("PYNPUT_BACKEND", "dummy")

from src.emojipick.core.dataset_resolver import resolve_catalog
from src.emojipick.core.emoji_entry import EmojiEntry
from src.emojipick.core.tone_store import InMemoryToneStore


@pytest.fixture
def tone_store():
    return InMemoryToneStore()


@pytest.fixture
def newest_catalog():
    return resolve_catalog(15.4)


@pytest.fixture
def thumbs_up():
    return EmojiEntry((0x1F44D,), True, "thumbs up", 1.0)


@pytest.fixture
def grinning_face():
    return EmojiEntry((0x1F600,), False, "grinning face", 1.0)
