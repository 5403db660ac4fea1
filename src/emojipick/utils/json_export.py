# -*- coding: utf-8 -*-
"""
src/emojipick/utils/json_export.py

Writes an emoji dataset as JSON, one file per category, so the same tables
can be shipped to pickers written for other toolkits.

File layout (`<localizeKey>.json`):

    {
      "type": 0,
      "localizeKey": "emotionsAndPeople",
      "emojis": [
        {"emojiKeys": [128077], "isSkinToneSupported": true,
         "searchKey": "thumbs up", "unicodeVersion": 1.0}
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.categories import EmojiCategory
from ..core.emoji_entry import EmojiEntry

logger = logging.getLogger(__name__)


def entry_to_dict(entry: EmojiEntry) -> Dict[str, Any]:
    return {
        "emojiKeys": list(entry.code_points),
        "isSkinToneSupported": entry.supports_skin_tone,
        "searchKey": entry.search_key,
        "unicodeVersion": entry.unicode_version,
    }


def category_to_dict(category: EmojiCategory) -> Dict[str, Any]:
    return {
        "type": int(category.type),
        "localizeKey": category.localize_key,
        "emojis": [entry_to_dict(entry) for entry in category.entries],
    }


def export_dataset(catalog: Sequence[EmojiCategory], output_dir: Path) -> List[Path]:
    """
    Writes every category of `catalog` into `output_dir`.

    Returns:
        The paths of the written files, in category order.

    Raises:
        OSError: If the directory cannot be created or a file not written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for category in catalog:
        path = output_dir / f"{category.localize_key}.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(category_to_dict(category), f, ensure_ascii=False, indent=2)
        logger.debug(f"Wrote {len(category.entries)} emojis to '{path}'.")
        written.append(path)
    return written
