import pytest

from src.emojipick.core.categories import EmojiCategory, EmojiCategoryType
from src.emojipick.core.emoji_entry import EmojiEntry
from src.emojipick.core.picker_model import PickerViewModel
from src.emojipick.core.skin_tone import SkinTone
from src.emojipick.core.tone_store import InMemoryToneStore
from src.emojipick.core.usage_counter import UsageCounter
from src.emojipick.utils.localization import Translator


def _find(view_model, search_key):
    for section in range(view_model.number_of_sections()):
        for row in range(view_model.number_of_items(section)):
            if view_model.emoji_at(section, row).search_key == search_key:
                return section, row
    raise LookupError(search_key)


@pytest.fixture
def view_model(newest_catalog, tone_store):
    return PickerViewModel(newest_catalog, tone_store)


class TestSections:
    def test_sections_follow_catalog(self, view_model, newest_catalog):
        assert view_model.number_of_sections() == 8
        for section, category in enumerate(newest_catalog):
            assert view_model.number_of_items(section) == len(category.entries)
            assert view_model.emoji_at(section, 0) == category.entries[0]

    def test_header_without_translator_is_localize_key(self, view_model):
        assert view_model.section_header_name(0) == "emotionsAndPeople"
        assert view_model.section_header_name(7) == "flags"

    def test_header_with_translator_and_count(self, newest_catalog, tone_store):
        vm = PickerViewModel(newest_catalog, tone_store, Translator("en"), display_count_in_header=True)

        assert vm.section_header_name(1) == f"Animals & Nature ({len(newest_catalog[1].entries)})"

    def test_out_of_range_row_raises(self, view_model):
        with pytest.raises(IndexError):
            view_model.emoji_at(0, 10_000)

    def test_selected_category_index_is_clamped(self, view_model):
        view_model.selected_category_index = 3
        assert view_model.selected_category_index == 3
        view_model.selected_category_index = 99
        assert view_model.selected_category_index == 7
        view_model.selected_category_index = -2
        assert view_model.selected_category_index == 0


class TestCategoryFilters:
    def _catalog_with_empty_category(self):
        grinning = EmojiEntry((0x1F600,), False, "grinning face", 1.0)
        return (
            EmojiCategory(EmojiCategoryType.PEOPLE, (grinning,)),
            EmojiCategory(EmojiCategoryType.NATURE, ()),
        )

    def test_empty_categories_hidden_by_default(self, tone_store):
        vm = PickerViewModel(self._catalog_with_empty_category(), tone_store)

        assert [c.type for c in vm.categories] == [EmojiCategoryType.PEOPLE]

    def test_empty_categories_shown_on_request(self, tone_store):
        vm = PickerViewModel(self._catalog_with_empty_category(), tone_store, show_empty_categories=True)

        assert vm.number_of_sections() == 2
        assert vm.number_of_items(1) == 0

    def test_only_new_emojis_keeps_newest_version(self, newest_catalog, tone_store):
        vm = PickerViewModel(newest_catalog, tone_store, only_show_new_emojis=True, show_empty_categories=True)

        versions = {e.unicode_version for c in vm.categories for e in c.entries}
        assert versions == {14.0}
        assert all(c.entries for c in vm.categories)
        assert EmojiCategoryType.FLAGS not in [c.type for c in vm.categories]

    def test_flags_changed_after_construction_apply(self, newest_catalog, tone_store):
        vm = PickerViewModel(self._catalog_with_empty_category(), tone_store)
        assert vm.number_of_sections() == 1

        vm.show_empty_categories = True
        assert vm.number_of_sections() == 2

        vm = PickerViewModel(newest_catalog, tone_store)
        vm.only_show_new_emojis = True
        assert {e.unicode_version for c in vm.categories for e in c.entries} == {14.0}

        vm.only_show_new_emojis = False
        assert vm.number_of_sections() == 8


class TestSearch:
    def test_search_is_case_insensitive_substring(self, view_model):
        view_model.search("THUMBS")

        assert view_model.is_searching()
        assert view_model.number_of_sections() == 1
        assert [e.search_key for e in view_model.search_results] == ["thumbs up"]

    def test_search_spans_categories_in_display_order(self, view_model):
        view_model.search("heart")
        results = view_model.search_results

        assert len(results) > 2
        assert all("heart" in e.search_key for e in results)
        assert results[0].search_key == "smiling face with heart-eyes"
        assert view_model.section_header_name(0) == "RESULTS FOR: HEART"
        assert view_model.number_of_items(0) == len(results)
        assert view_model.emoji_at(0, 0) == results[0]

    def test_empty_term_is_ignored(self, view_model):
        view_model.search("")

        assert not view_model.is_searching()

    def test_clear_search_restores_sections(self, view_model):
        view_model.search("zzz-no-match")
        assert view_model.number_of_items(0) == 0

        view_model.clear_search()
        assert not view_model.is_searching()
        assert view_model.number_of_sections() == 8


class TestSelection:
    def test_select_plain_emoji_notifies_subscribers(self, view_model):
        picked = []
        view_model.on_selected(picked.append)
        entry = view_model.emoji_at(*_find(view_model, "grinning face"))

        assert view_model.select(entry) == "😀"
        assert picked == ["😀"]

    def test_tone_capable_emoji_needs_a_choice_first(self, view_model):
        picked = []
        view_model.on_selected(picked.append)
        section, row = _find(view_model, "thumbs up")
        entry = view_model.emoji_at(section, row)

        assert view_model.needs_tone_choice(entry)
        assert view_model.select(entry) is None
        assert picked == []

        updated = view_model.update_skin_tone(section, row, SkinTone.MEDIUM)

        assert updated == entry
        assert not view_model.needs_tone_choice(entry)
        assert view_model.select(entry) == "👍🏽"
        assert picked == ["👍🏽"]

    def test_none_is_a_valid_final_choice(self, view_model):
        section, row = _find(view_model, "waving hand")
        entry = view_model.update_skin_tone(section, row, SkinTone.NONE)

        assert view_model.select(entry) == "👋"

    def test_tone_update_from_search_results(self, view_model):
        view_model.search("thumbs")
        entry = view_model.update_skin_tone(0, 0, SkinTone.DARK)
        view_model.clear_search()

        section, row = _find(view_model, "thumbs up")
        assert view_model.render(view_model.emoji_at(section, row)) == "👍🏿"
        assert view_model.render(entry) == "👍🏿"

    def test_stored_zero_still_asks_for_a_tone(self, newest_catalog):
        picked = []
        vm = PickerViewModel(newest_catalog, InMemoryToneStore({"1f44d": 0}))
        vm.on_selected(picked.append)
        entry = vm.emoji_at(*_find(vm, "thumbs up"))

        assert vm.needs_tone_choice(entry)
        assert vm.select(entry) is None
        assert picked == []


class TestUsageCounting:
    def test_confirmed_picks_are_counted(self, newest_catalog, tone_store):
        counter = UsageCounter(InMemoryToneStore())
        vm = PickerViewModel(newest_catalog, tone_store, usage_counter=counter)
        grinning = vm.emoji_at(*_find(vm, "grinning face"))
        thumbs = vm.emoji_at(*_find(vm, "thumbs up"))

        vm.select(grinning)
        vm.select(grinning)
        vm.select(thumbs)

        assert counter.count(grinning) == 2
        assert counter.count(thumbs) == 0

    def test_most_used_orders_by_count(self, newest_catalog, tone_store):
        vm = PickerViewModel(newest_catalog, tone_store, usage_counter=UsageCounter(InMemoryToneStore()))
        grinning = vm.emoji_at(*_find(vm, "grinning face"))
        waving = vm.emoji_at(*_find(vm, "waving hand"))
        vm.update_skin_tone(*_find(vm, "waving hand"), SkinTone.NONE)

        vm.select(grinning)
        vm.select(waving)
        vm.select(waving)

        assert vm.most_used() == [waving, grinning]
        assert vm.most_used(limit=1) == [waving]

    def test_most_used_without_counter_is_empty(self, view_model):
        view_model.select(view_model.emoji_at(*_find(view_model, "grinning face")))

        assert view_model.most_used() == []
