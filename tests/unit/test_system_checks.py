"""Tests for genesis_child system checks (genesis_child/checks.py)."""

from genesis_child.checks import (
    check_header_colors,
    check_header_selector,
    check_main_stylesheet,
    is_hex_color,
)


def _ids(errors):
    return [e.id for e in errors]


class TestIsHexColor:
    def test_valid(self):
        assert is_hex_color("333333")
        assert is_hex_color("#fff")
        assert is_hex_color("A1b2C3")

    def test_invalid(self):
        assert not is_hex_color("blank")
        assert not is_hex_color("12345")
        assert not is_hex_color(333333)
        assert not is_hex_color("")


class TestHeaderColorChecks:
    def test_defaults_pass(self):
        assert check_header_colors(None) == []

    def test_invalid_default_color(self, settings):
        settings.GENESIS_CHILD_CONFIG = {
            "theme_support": {"custom-header": {"default-text-color": "red"}}
        }
        errors = check_header_colors(None)

        assert _ids(errors) == ["genesis_child.C001"]
        assert errors[0].fix_hint

    def test_invalid_current_color(self, settings):
        settings.GENESIS_CHILD_CONFIG = {"header": {"text_color": "not-a-color"}}

        assert _ids(check_header_colors(None)) == ["genesis_child.C002"]

    def test_blank_color_is_allowed(self, settings):
        settings.GENESIS_CHILD_CONFIG = {"header": {"text_color": "blank"}}

        assert check_header_colors(None) == []

    def test_skipped_without_custom_header(self, settings):
        settings.GENESIS_CHILD_CONFIG = {
            "theme_support": {"custom-header": False},
            "header": {"text_color": "bad"},
        }

        assert check_header_colors(None) == []


class TestMainStylesheetCheck:
    def test_missing_stylesheet_warns(self, settings, tmp_path):
        settings.GENESIS_CHILD_CONFIG = {"stylesheet_dir": str(tmp_path)}

        errors = check_main_stylesheet(None)

        assert _ids(errors) == ["genesis_child.C003"]
        assert "style" in errors[0].msg

    def test_existing_stylesheet_passes(self, settings, stylesheet_dir):
        settings.GENESIS_CHILD_CONFIG = {"stylesheet_dir": str(stylesheet_dir)}

        assert check_main_stylesheet(None) == []


class TestHeaderSelectorCheck:
    def test_empty_selector_warns(self, settings):
        settings.GENESIS_CHILD_CONFIG = {
            "theme_support": {"custom-header": {"header-selector": "  "}}
        }

        assert _ids(check_header_selector(None)) == ["genesis_child.C004"]

    def test_unset_selector_passes(self):
        assert check_header_selector(None) == []
