"""
Pytest configuration and fixtures for genesis-child tests.
"""

import pytest

from genesis_child.config import ChildThemeConfig
from genesis_child.header import HeaderSettings


@pytest.fixture
def header_settings():
    """Build HeaderSettings that pass every guard unless overridden."""

    def build(**overrides):
        values = dict(
            custom_header_supported=True,
            has_custom_callback=False,
            header_image_url=None,
            show_header_text=True,
            text_color="000000",
            default_text_color="000000",
            header_selector_override=None,
            use_html5_markup=True,
        )
        values.update(overrides)
        return HeaderSettings(**values)

    return build


@pytest.fixture
def child_config(settings):
    """Build a ChildThemeConfig on top of the test settings."""

    def build(**overrides):
        return ChildThemeConfig(overrides)

    return build


@pytest.fixture
def stylesheet_dir(tmp_path):
    """A directory holding style.css and style.min.css."""
    (tmp_path / "style.css").write_text("body { color: #333; }")
    (tmp_path / "style.min.css").write_text("body{color:#333}")
    return tmp_path
