import pytest

from src.emojipick.core.categories import EmojiCategoryType
from src.emojipick.core.dataset_resolver import (
    DATASET_BRACKETS,
    FLOOR_EMOJI_VERSION,
    dataset_version_for,
    effective_platform_version,
    resolve_catalog,
)
from src.emojipick.core.emoji_definitions import EMOJI_DEFINITIONS

# One version from every bracket, floor first.
SAMPLE_VERSIONS = [11.0, 12.1, 13.2, 14.2, 14.5, 15.4]


def _search_keys(catalog):
    return {entry.search_key for category in catalog for entry in category.entries}


class TestDatasetVersionFor:
    @pytest.mark.parametrize("platform_version, emoji_version", [
        (-5.0, FLOOR_EMOJI_VERSION),
        (0.0, FLOOR_EMOJI_VERSION),
        (12.0, FLOOR_EMOJI_VERSION),
        (12.1, 11.0),
        (13.1, 11.0),
        (13.15, 11.0),
        (13.2, 12.0),
        (14.1, 12.0),
        (14.2, 13.0),
        (14.4, 13.0),
        (14.5, 13.1),
        (15.3, 13.1),
        (15.4, 14.0),
        (99.0, 14.0),
    ])
    def test_bracket_boundaries(self, platform_version, emoji_version):
        assert dataset_version_for(platform_version) == emoji_version

    def test_nan_falls_to_floor(self):
        assert dataset_version_for(float("nan")) == FLOOR_EMOJI_VERSION

    def test_infinity_gets_newest(self):
        assert dataset_version_for(float("inf")) == DATASET_BRACKETS[-1][1]

    def test_brackets_are_sorted(self):
        bounds = [lower for lower, _ in DATASET_BRACKETS]
        assert bounds == sorted(bounds)


class TestResolveCatalog:
    @pytest.mark.parametrize("platform_version", SAMPLE_VERSIONS + [0.0, 99.0])
    def test_always_eight_ordered_non_empty_categories(self, platform_version):
        catalog = resolve_catalog(platform_version)

        assert [c.type for c in catalog] == list(EmojiCategoryType)
        assert [int(c.type) for c in catalog] == list(range(8))
        assert all(len(c.entries) > 0 for c in catalog)

    def test_same_bracket_gives_equal_catalog(self):
        assert resolve_catalog(14.3) == resolve_catalog(14.2)
        assert resolve_catalog(14.3) == resolve_catalog(14.4)

    def test_open_ended_top_bracket(self):
        assert resolve_catalog(99.0) == resolve_catalog(15.4)

    def test_repeated_calls_return_identical_structure(self):
        assert resolve_catalog(15.0) is resolve_catalog(15.0)

    def test_floor_dataset_excludes_newer_emoji(self):
        keys = _search_keys(resolve_catalog(10.0))

        assert "thumbs up" in keys
        assert "smiling face with hearts" not in keys
        assert "melting face" not in keys

    def test_bracket_adds_its_emoji_version(self):
        assert "smiling face with hearts" in _search_keys(resolve_catalog(12.1))
        assert "yawning face" not in _search_keys(resolve_catalog(12.1))
        assert "yawning face" in _search_keys(resolve_catalog(13.2))
        assert "face in clouds" not in _search_keys(resolve_catalog(14.4))
        assert "face in clouds" in _search_keys(resolve_catalog(14.5))
        assert "melting face" in _search_keys(resolve_catalog(15.4))

    def test_newer_datasets_are_ordered_supersets(self):
        catalogs = [resolve_catalog(v) for v in SAMPLE_VERSIONS]
        for older, newer in zip(catalogs, catalogs[1:]):
            for old_category, new_category in zip(older, newer):
                kept = [e for e in new_category.entries if e in old_category.entries]
                assert kept == list(old_category.entries)
                assert len(new_category.entries) >= len(old_category.entries)

    def test_newest_dataset_holds_the_whole_table(self, newest_catalog):
        for category in newest_catalog:
            assert category.entries == EMOJI_DEFINITIONS[category.type]

    def test_max_platform_version_caps_the_dataset(self):
        assert resolve_catalog(16.0, max_platform_version=14.3) == resolve_catalog(14.3)
        assert resolve_catalog(13.0, max_platform_version=15.4) == resolve_catalog(13.0)

    def test_effective_platform_version(self):
        assert effective_platform_version(15.0) == 15.0
        assert effective_platform_version(15.0, 14.0) == 14.0
        assert effective_platform_version(15.0, float("nan")) == 15.0


class TestEmojiDefinitions:
    def test_code_points_are_scalar_values(self):
        for entries in EMOJI_DEFINITIONS.values():
            for entry in entries:
                assert entry.code_points
                assert all(0 <= cp <= 0x10FFFF for cp in entry.code_points)

    def test_glyphs_are_unique(self):
        keys = [entry.key for entries in EMOJI_DEFINITIONS.values() for entry in entries]
        assert len(keys) == len(set(keys))

    def test_localize_keys(self):
        assert EmojiCategoryType.PEOPLE.localize_key == "emotionsAndPeople"
        assert EmojiCategoryType.OBJECTS.localize_key == "items"
        assert EmojiCategoryType.TRAVEL_AND_PLACES.localize_key == "travellingAndPlaces"
