"""Tests for settings, process-wide defaults and the YAML loader."""

import pytest

from stringtools import (
    Settings,
    SettingsValidationError,
    configure,
    get_settings,
    is_blank,
    load_settings,
    reset_settings,
    stitch,
)


class TestSettings:

    def test_defaults_are_valid(self):
        assert Settings().validate() == []

    def test_invalid_pattern_reported(self):
        errors = Settings(blank='[').validate()
        assert len(errors) == 1
        assert errors[0].path == 'blank'
        assert errors[0].exit_code == 2

    def test_non_string_reported(self):
        errors = Settings(thread=5).validate()
        assert [e.path for e in errors] == ['thread']

    def test_empty_pattern_reported(self):
        errors = Settings(name_pattern='').validate()
        assert [e.path for e in errors] == ['name_pattern']

    def test_equality_ignores_compiled_cache(self):
        settings = Settings()
        settings.compiled()
        assert settings == Settings()

    def test_replace(self):
        assert Settings().replace(thread='-').thread == '-'


class TestConfigure:

    def test_configure_changes_defaults(self):
        configure(thread='-')
        assert get_settings().thread == '-'
        assert stitch('a', 'b') == 'a-b'

    def test_per_call_override_wins(self):
        configure(thread='-')
        assert stitch('a', 'b', settings=Settings()) == 'a b'

    def test_unknown_setting_rejected(self):
        with pytest.raises(SettingsValidationError, match="Unknown setting 'bogus'"):
            configure(bogus=1)

    def test_invalid_setting_leaves_defaults(self):
        with pytest.raises(SettingsValidationError):
            configure(blank='(')
        assert get_settings() == Settings()

    def test_reset(self):
        configure(blank='[x]')
        assert is_blank('xx')
        reset_settings()
        assert not is_blank('xx')


class TestLoadSettings:

    def test_load_values(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("thread: ' | '\nblank: '[\\t ]'\n")
        settings = load_settings(path)
        assert settings.thread == ' | '
        assert settings.blank == '[\\t ]'
        assert settings.list_separator == ' '

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('')
        assert load_settings(path) == Settings()

    def test_unknown_keys_collected(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("colour: red\nsize: 3\n")
        with pytest.raises(SettingsValidationError) as exc_info:
            load_settings(path)
        assert len(exc_info.value.errors) == 2
        assert exc_info.value.exit_code == 2

    def test_invalid_values_collected(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("blank: '['\nthread: 3\n")
        with pytest.raises(SettingsValidationError) as exc_info:
            load_settings(path)
        assert sorted(e.path for e in exc_info.value.errors) == ['blank', 'thread']

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("- a\n- b\n")
        with pytest.raises(SettingsValidationError, match='YAML object'):
            load_settings(path)

    def test_malformed_yaml_rejected(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("thread: [unclosed\n")
        with pytest.raises(SettingsValidationError, match='Failed to load settings'):
            load_settings(path)

    def test_missing_file_rejected(self, tmp_path):
        with pytest.raises(SettingsValidationError, match='Failed to load settings'):
            load_settings(tmp_path / 'missing.yaml')
