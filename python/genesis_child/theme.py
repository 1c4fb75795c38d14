"""
Read-only queries over the active theme's declared features and header state.

These are thin views over a ``ChildThemeConfig``; nothing here is cached, so
every query reflects the configuration at call time.
"""

import logging
from typing import Any, Optional

from .config import ChildThemeConfig

logger = logging.getLogger(__name__)

CUSTOM_HEADER = "custom-header"
HTML5 = "html5"

# Header image value meaning "the user removed the header image".
REMOVE_HEADER = "remove-header"
# Header text color value meaning "hide the header text".
BLANK_TEXT_COLOR = "blank"


class ThemeSupport:
    """Features the theme declares, e.g. ``custom-header`` and its options."""

    def __init__(self, config: ChildThemeConfig):
        self.config = config

    def _feature(self, name: str) -> Any:
        return self.config.get("theme_support", {}).get(name)

    def supports(self, name: str) -> bool:
        """A feature configured as ``False``/``None`` (or not at all) is unsupported."""
        value = self._feature(name)
        return value is not None and value is not False

    def get_option(self, name: str, key: str, default: Any = None) -> Any:
        value = self._feature(name)
        if not isinstance(value, dict):
            return default
        option = value.get(key)
        return default if option is None else option


class HeaderState:
    """Current header image and text settings chosen for the site."""

    def __init__(self, config: ChildThemeConfig, support: ThemeSupport):
        self.config = config
        self.support = support

    def get_header_image_url(self) -> Optional[str]:
        image = self.config.get("header.image")
        if not image or image == REMOVE_HEADER:
            return None
        return str(image)

    def get_header_text_color(self) -> str:
        default = self.support.get_option(CUSTOM_HEADER, "default-text-color", "")
        color = self.config.get("header.text_color", default)
        return str(color).lstrip("#")

    def should_display_header_text(self) -> bool:
        if not self.support.get_option(CUSTOM_HEADER, "header-text", False):
            return False
        return self.get_header_text_color() != BLANK_TEXT_COLOR


class ChildTheme:
    """
    Facade over the theme queries the header style assembler needs.

    Example:
        theme = ChildTheme(ChildThemeConfig())
        theme.supports("custom-header")  # True
        theme.header.get_header_image_url()  # None
    """

    def __init__(self, config: ChildThemeConfig):
        self.config = config
        self.support = ThemeSupport(config)
        self.header = HeaderState(config, self.support)

    def supports(self, name: str) -> bool:
        return self.support.supports(name)

    def get_option(self, name: str, key: str, default: Any = None) -> Any:
        return self.support.get_option(name, key, default)

    def uses_html5_markup(self) -> bool:
        return self.support.supports(HTML5)
