"""
Tests for settings loading, deep merge logic and stylesheet loading.

Uses real TOML and CSS files on disk (no mocking of the filesystem).
"""

from unittest.mock import MagicMock

import toml

from gerard.utils.helpers import (
    DEFAULT_SETTINGS,
    _deep_merge,
    config_dir,
    load_settings,
    load_stylesheet,
)


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        result = _deep_merge({"a": 1, "b": 2}, {"b": 99})
        assert result == {"a": 1, "b": 99}

    def test_override_adds_new_key(self):
        result = _deep_merge({"a": 1}, {"b": 2})
        assert result == {"a": 1, "b": 2}

    def test_nested_dicts_are_merged(self):
        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        result = _deep_merge(base, override)
        assert result == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"x": 2}})
        assert base["a"]["x"] == 1

    def test_result_does_not_share_nested_dicts(self):
        base = {"a": {"x": 1}}
        result = _deep_merge(base, {})
        result["a"]["x"] = 5
        assert base["a"]["x"] == 1


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_returns_defaults_when_file_missing(self, tmp_path):
        settings = load_settings(tmp_path / "nonexistent.toml")
        assert settings == DEFAULT_SETTINGS
        assert settings["search"]["matcher"] == "subsequence"

    def test_defaults_are_a_copy(self, tmp_path):
        settings = load_settings(tmp_path / "nonexistent.toml")
        settings["launcher"]["close_delay_ms"] = 999
        assert DEFAULT_SETTINGS["launcher"]["close_delay_ms"] == 0

    def test_loaded_values_override_defaults(self, tmp_settings):
        settings = load_settings(tmp_settings)
        assert settings["launcher"]["close_delay_ms"] == 300
        assert settings["search"]["matcher"] == "weighted"
        assert settings["search"]["fuzzy_threshold"] == 70
        assert settings["applications"]["include_hidden"] is True

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        settings_path = tmp_path / "settings.toml"
        settings_path.write_text(toml.dumps({"search": {"fuzzy_threshold": 80}}))

        settings = load_settings(settings_path)
        assert settings["search"]["fuzzy_threshold"] == 80
        assert settings["search"]["matcher"] == "subsequence"
        assert settings["launcher"]["width"] == 600

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path):
        settings_path = tmp_path / "settings.toml"
        settings_path.write_text("[search\nmatcher = ")
        assert load_settings(settings_path) == DEFAULT_SETTINGS

    def test_non_utf8_file_falls_back_to_defaults(self, tmp_path):
        settings_path = tmp_path / "settings.toml"
        settings_path.write_bytes(b"[launcher]\nwidth = 800 # \xff\xfe\n")
        assert load_settings(settings_path) == DEFAULT_SETTINGS

    def test_scalar_section_is_ignored(self, tmp_path):
        settings_path = tmp_path / "settings.toml"
        settings_path.write_text("launcher = 1\n\n[search]\nfuzzy_threshold = 65\n")

        settings = load_settings(settings_path)
        assert settings["launcher"] == DEFAULT_SETTINGS["launcher"]
        assert settings["search"]["fuzzy_threshold"] == 65

    def test_default_location_follows_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        (tmp_path / "gerard").mkdir()
        (tmp_path / "gerard" / "settings.toml").write_text(
            toml.dumps({"launcher": {"width": 1024}})
        )

        assert config_dir() == tmp_path / "gerard"
        assert load_settings()["launcher"]["width"] == 1024


class TestLoadStylesheet:
    """Test the optional user stylesheet."""

    def test_missing_stylesheet_is_skipped(self, tmp_path):
        app = MagicMock()
        assert load_stylesheet(app, tmp_path / "style.css") is False
        app.apply_css.assert_not_called()

    def test_existing_stylesheet_is_applied(self, tmp_path):
        stylesheet = tmp_path / "style.css"
        stylesheet.write_text(".search-entry { font-size: 18px; }")
        app = MagicMock()

        assert load_stylesheet(app, stylesheet) is True
        app.apply_css.assert_called_once_with(str(stylesheet))

    def test_broken_stylesheet_is_reported_not_raised(self, tmp_path):
        stylesheet = tmp_path / "style.css"
        stylesheet.write_text("{{{")
        app = MagicMock()
        app.apply_css.side_effect = RuntimeError("parse error")

        assert load_stylesheet(app, stylesheet) is False
