import logging

from src.emojipick.config import (
    DEFAULT_COLUMNS,
    DEFAULT_HOTKEY,
    DEFAULT_PLATFORM_VERSION,
    DEFAULT_TONE_STORE_FILENAME,
    DEFAULT_USAGE_STORE_FILENAME,
    Config,
)


def _write_config(tmp_path, text):
    (tmp_path / "config.ini").write_text(text, encoding="utf-8")


class TestDefaults:
    def test_first_run_writes_default_file(self, tmp_path):
        Config(app_dir=tmp_path)

        content = (tmp_path / "config.ini").read_text(encoding="utf-8")
        assert content.startswith("# EmojiPick Configuration File")
        assert "[Picker]" in content

    def test_default_values(self, tmp_path):
        config = Config(app_dir=tmp_path)

        assert config.hotkey == DEFAULT_HOTKEY
        assert config.language == "en"
        assert config.log_level == logging.INFO
        assert config.platform_version == DEFAULT_PLATFORM_VERSION
        assert config.max_platform_version is None
        assert config.show_empty_categories is False
        assert config.only_show_new_emojis is False
        assert config.display_count_in_header is False
        assert config.dismiss_after_choosing is True
        assert config.columns == DEFAULT_COLUMNS
        assert config.tone_store_path == tmp_path / DEFAULT_TONE_STORE_FILENAME
        assert config.usage_store_path == tmp_path / DEFAULT_USAGE_STORE_FILENAME

    def test_defaults_survive_a_reload(self, tmp_path):
        Config(app_dir=tmp_path)
        config = Config(app_dir=tmp_path)

        assert config.max_platform_version is None
        assert config.platform_version == DEFAULT_PLATFORM_VERSION


class TestOverrides:
    def test_file_values_override_defaults(self, tmp_path):
        _write_config(tmp_path, (
            "[General]\nlanguage = ru\nlog_level = debug\n"
            "[Picker]\nplatform_version = 14.3\nmax_platform_version = 14.0\n"
            "only_show_new_emojis = yes\ncolumns = 10\n"
        ))
        config = Config(app_dir=tmp_path)

        assert config.language == "ru"
        assert config.log_level == logging.DEBUG
        assert config.platform_version == 14.3
        assert config.max_platform_version == 14.0
        assert config.only_show_new_emojis is True
        assert config.columns == 10
        assert config.hotkey == DEFAULT_HOTKEY

    def test_invalid_values_fall_back(self, tmp_path):
        _write_config(tmp_path, (
            "[General]\nlog_level = LOUD\n"
            "[Picker]\nplatform_version = latest\nmax_platform_version = soon\n"
            "show_empty_categories = maybe\ncolumns = 0\n"
        ))
        config = Config(app_dir=tmp_path)

        assert config.log_level == logging.INFO
        assert config.platform_version == DEFAULT_PLATFORM_VERSION
        assert config.max_platform_version is None
        assert config.show_empty_categories is False
        assert config.columns == DEFAULT_COLUMNS

    def test_unparsable_file_keeps_defaults(self, tmp_path):
        _write_config(tmp_path, "no section header here\n")
        config = Config(app_dir=tmp_path)

        assert config.platform_version == DEFAULT_PLATFORM_VERSION
