from src.emojipick.core.categories import EmojiCategoryType
from src.emojipick.utils.localization import Translator, translations


class TestTranslator:
    def test_english_category_label(self):
        assert Translator("en").get("emotionsAndPeople") == "Smileys & People"

    def test_russian_category_label(self):
        assert Translator("ru").get("flags") == "Флаги"

    def test_every_category_key_is_translated(self):
        for language in translations:
            for category_type in EmojiCategoryType:
                assert category_type.localize_key in translations[language]

    def test_unknown_language_uses_english(self):
        translator = Translator("xx")

        assert translator.language == "en"
        assert translator.get("items") == "Objects"

    def test_missing_key_falls_back_to_english(self):
        assert Translator("de").get("window_title") == "EmojiPick"

    def test_unknown_key(self):
        assert Translator().get("nope") == "[nope]"
        assert Translator().get("nope", default="fallback") == "fallback"

    def test_format_arguments(self):
        assert Translator().get("copied_message", emoji="👍") == "👍 copied to clipboard."

    def test_missing_format_argument_returns_template(self):
        assert Translator().get("copied_message") == "{emoji} copied to clipboard."
