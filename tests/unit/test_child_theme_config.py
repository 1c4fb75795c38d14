"""Tests for ChildThemeConfig and the theme queries built on it."""

import pytest
from django.test import override_settings

from genesis_child.config import ChildThemeConfig
from genesis_child.exceptions import ThemeConfigError
from genesis_child.theme import ChildTheme


class TestChildThemeConfig:
    def test_reads_django_settings(self):
        config = ChildThemeConfig()
        assert config.get("child_theme_name") == "Test Child Theme"

    def test_nested_settings_are_merged(self):
        with override_settings(
            GENESIS_CHILD_CONFIG={"theme_support": {"custom-header": {"header-selector": ".x"}}}
        ):
            config = ChildThemeConfig()

        assert config.get("theme_support.custom-header.header-selector") == ".x"
        assert config.get("theme_support.custom-header.default-text-color") == "333333"
        assert config.get("theme_support.html5") is True

    def test_overrides_win_over_settings(self):
        config = ChildThemeConfig({"child_theme_name": "Override"})
        assert config.get("child_theme_name") == "Override"

    def test_get_default(self):
        config = ChildThemeConfig()
        assert config.get("header.image", "none") == "none"
        assert config.get("missing.key", 5) == 5

    def test_set_and_reset(self):
        config = ChildThemeConfig()
        config.set("header.text_color", "222222")
        assert config.get("header.text_color") == "222222"

        config.reset()
        assert config.get("header.text_color") is None

    def test_set_does_not_leak_into_defaults(self):
        ChildThemeConfig().set("theme_support.custom-header.default-text-color", "ffffff")
        assert ChildThemeConfig().get("theme_support.custom-header.default-text-color") == "333333"

    def test_update_merges(self):
        config = ChildThemeConfig()
        config.update({"header": {"image": "/h.png"}})

        assert config.as_dict()["header"] == {"image": "/h.png", "text_color": None}

    def test_rejects_non_mapping_theme_support(self):
        with pytest.raises(ThemeConfigError) as exc_info:
            ChildThemeConfig({"theme_support": ["custom-header"]})
        assert "theme_support" in exc_info.value.message

    @pytest.mark.parametrize("value, expected", [(None, False), (True, True), (0, False)])
    def test_debug_flag(self, settings, value, expected):
        settings.DEBUG = False
        assert ChildThemeConfig({"script_debug": value}).debug_flag("script_debug") is expected


class TestChildTheme:
    def test_feature_support(self):
        theme = ChildTheme(ChildThemeConfig({"theme_support": {"html5": False}}))

        assert theme.supports("custom-header") is True
        assert theme.supports("html5") is False
        assert theme.uses_html5_markup() is False
        assert theme.supports("post-thumbnails") is False

    def test_get_option(self):
        theme = ChildTheme(ChildThemeConfig())

        assert theme.get_option("custom-header", "default-text-color") == "333333"
        assert theme.get_option("custom-header", "header-selector", ".fallback") == ".fallback"
        assert theme.get_option("html5", "anything", "x") == "x"

    @pytest.mark.parametrize("image", [None, "", "remove-header"])
    def test_no_header_image(self, image):
        theme = ChildTheme(ChildThemeConfig({"header": {"image": image}}))
        assert theme.header.get_header_image_url() is None

    def test_header_image(self):
        theme = ChildTheme(ChildThemeConfig({"header": {"image": "/static/h.png"}}))
        assert theme.header.get_header_image_url() == "/static/h.png"

    def test_text_color_falls_back_to_default(self):
        theme = ChildTheme(ChildThemeConfig())
        assert theme.header.get_header_text_color() == "333333"

    def test_blank_text_color_hides_header_text(self):
        theme = ChildTheme(ChildThemeConfig({"header": {"text_color": "blank"}}))
        assert theme.header.should_display_header_text() is False

    def test_header_text_unsupported(self):
        theme = ChildTheme(
            ChildThemeConfig({"theme_support": {"custom-header": {"header-text": False}}})
        )
        assert theme.header.should_display_header_text() is False
