import json

from src.emojipick.core.categories import EmojiCategoryType
from src.emojipick.utils.json_export import category_to_dict, export_dataset


class TestJsonExport:
    def test_one_file_per_category(self, newest_catalog, tmp_path):
        paths = export_dataset(newest_catalog, tmp_path / "out")

        assert [p.name for p in paths] == [f"{t.localize_key}.json" for t in EmojiCategoryType]
        assert all(p.exists() for p in paths)

    def test_people_file_content(self, newest_catalog, tmp_path):
        export_dataset(newest_catalog, tmp_path)
        data = json.loads((tmp_path / "emotionsAndPeople.json").read_text(encoding="utf-8"))

        assert data["type"] == 0
        assert data["localizeKey"] == "emotionsAndPeople"
        assert len(data["emojis"]) == len(newest_catalog[0].entries)
        thumbs_up = next(e for e in data["emojis"] if e["searchKey"] == "thumbs up")
        assert thumbs_up == {
            "emojiKeys": [0x1F44D],
            "isSkinToneSupported": True,
            "searchKey": "thumbs up",
            "unicodeVersion": 1.0,
        }

    def test_category_to_dict_keeps_order(self, newest_catalog):
        flags = category_to_dict(newest_catalog[EmojiCategoryType.FLAGS])

        assert [e["searchKey"] for e in flags["emojis"]] == [
            e.search_key for e in newest_catalog[EmojiCategoryType.FLAGS].entries
        ]
