# -*- coding: utf-8 -*-
"""
src/emojipick/utils/localization.py

Translated UI strings, looked up by the non-localized keys the core exposes
(category keys such as 'emotionsAndPeople') and a few keys of the desktop
host itself.
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

translations = {
    'en': {
        # Category tabs
        'emotionsAndPeople': "Smileys & People",
        'animalsAndNature': "Animals & Nature",
        'foodAndDrinks': "Food & Drink",
        'activities': "Activity",
        'travellingAndPlaces': "Travel & Places",
        'items': "Objects",
        'symbols': "Symbols",
        'flags': "Flags",

        # Picker window
        'window_title': "EmojiPick",
        'search_placeholder': "Search emoji",
        'no_results': "No emoji found",
        'skin_tone_menu_title': "Skin tone",

        # Skin tones
        'tone_none': "Default",
        'tone_light': "Light",
        'tone_mediumLight': "Medium-Light",
        'tone_medium': "Medium",
        'tone_mediumDark': "Medium-Dark",
        'tone_dark': "Dark",

        # Tray
        'tray_tooltip': "EmojiPick - press {hotkey} to pick an emoji",
        'tray_pick': "Pick Emoji",
        'tray_quit': "Quit",
        'copied_title': "Emoji copied",
        'copied_message': "{emoji} copied to clipboard.",
        'copy_failed_message': "Could not copy {emoji} to the clipboard.",
    },
    'ru': {
        'emotionsAndPeople': "Эмоции и люди",
        'animalsAndNature': "Животные и природа",
        'foodAndDrinks': "Еда и напитки",
        'activities': "Активность",
        'travellingAndPlaces': "Путешествия и места",
        'items': "Предметы",
        'symbols': "Символы",
        'flags': "Флаги",

        'window_title': "EmojiPick",
        'search_placeholder': "Поиск эмодзи",
        'no_results': "Ничего не найдено",
        'skin_tone_menu_title': "Оттенок кожи",

        'tone_none': "По умолчанию",
        'tone_light': "Светлый",
        'tone_mediumLight': "Умеренно светлый",
        'tone_medium': "Средний",
        'tone_mediumDark': "Умеренно тёмный",
        'tone_dark': "Тёмный",

        'tray_tooltip': "EmojiPick - нажмите {hotkey}, чтобы выбрать эмодзи",
        'tray_pick': "Выбрать эмодзи",
        'tray_quit': "Выход",
        'copied_title': "Эмодзи скопирован",
        'copied_message': "{emoji} скопирован в буфер обмена.",
        'copy_failed_message': "Не удалось скопировать {emoji} в буфер обмена.",
    },
    'de': {
        'emotionsAndPeople': "Smileys & Personen",
        'animalsAndNature': "Tiere & Natur",
        'foodAndDrinks': "Essen & Trinken",
        'activities': "Aktivitäten",
        'travellingAndPlaces': "Reisen & Orte",
        'items': "Objekte",
        'symbols': "Symbole",
        'flags': "Flaggen",

        'search_placeholder': "Emoji suchen",
        'no_results': "Keine Emojis gefunden",
        'skin_tone_menu_title': "Hautfarbe",

        'tone_none': "Standard",
        'tone_light': "Hell",
        'tone_mediumLight': "Mittelhell",
        'tone_medium': "Mittel",
        'tone_mediumDark': "Mitteldunkel",
        'tone_dark': "Dunkel",

        'tray_pick': "Emoji auswählen",
        'tray_quit': "Beenden",
        'copied_title': "Emoji kopiert",
        'copied_message': "{emoji} in die Zwischenablage kopiert.",
        'copy_failed_message': "{emoji} konnte nicht kopiert werden.",
    },
}


class Translator:
    """Looks up translated strings for one language with English fallback."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in translations:
            logger.warning(f"No translations for language '{language}', using '{DEFAULT_LANGUAGE}'.")
            language = DEFAULT_LANGUAGE
        self.language = language

    def get(self, key, default=None, **kwargs):
        """
        Returns the translated string for `key`.

        Falls back to English, then to `default`, then to '[key]'. Keyword
        arguments are substituted with str.format, e.g.
        tr.get('copied_message', emoji='👍').
        """
        template = translations.get(self.language, {}).get(key)
        if template is None:
            template = translations[DEFAULT_LANGUAGE].get(key)
        if template is None:
            template = default if default is not None else f"[{key}]"

        try:
            return template.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Localization key error for '{key}': missing format key {e}")
            return template
