"""
Django system checks for genesis-child.

Registers checks with Django's check framework that also run via
``python manage.py check``:

- C001 -- default header text color is not a hex color
- C002 -- current header text color is not a hex color (or "blank")
- C003 -- main stylesheet file is missing (enqueued unversioned)
- C004 -- header selector override is set but empty
"""

import logging
import os
import re

from django.core.checks import Error, Warning, register

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


# ---------------------------------------------------------------------------
# Check result classes with fix_hint support
# ---------------------------------------------------------------------------


class _ChildThemeCheckMixin:
    """Mixin that adds fix_hint to check results."""

    def __init__(self, *args, fix_hint="", **kwargs):
        super().__init__(*args, **kwargs)
        self.fix_hint = fix_hint


class ChildThemeCheckError(_ChildThemeCheckMixin, Error):
    pass


class ChildThemeCheckWarning(_ChildThemeCheckMixin, Warning):
    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_hex_color(value) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value.lstrip("#")))


def _get_config():
    from genesis_child.config import ChildThemeConfig

    return ChildThemeConfig()


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


@register("genesis_child")
def check_header_colors(app_configs, **kwargs):
    """C001/C002 -- header text colors must be hex colors without the '#'."""
    from genesis_child.theme import BLANK_TEXT_COLOR, CUSTOM_HEADER, ChildTheme

    errors = []
    theme = ChildTheme(_get_config())
    if not theme.supports(CUSTOM_HEADER):
        return errors

    default = theme.get_option(CUSTOM_HEADER, "default-text-color", "")
    if not is_hex_color(default):
        errors.append(
            ChildThemeCheckError(
                "custom-header 'default-text-color' %r is not a hex color." % (default,),
                hint="Use a 3 or 6 digit hex color such as '333333'.",
                fix_hint="Set GENESIS_CHILD_CONFIG['theme_support']['custom-header']"
                "['default-text-color'] = '333333'",
                id="genesis_child.C001",
            )
        )

    current = theme.config.get("header.text_color")
    if current is not None and current != BLANK_TEXT_COLOR and not is_hex_color(current):
        errors.append(
            ChildThemeCheckError(
                "Header text color %r is not a hex color." % (current,),
                hint="Use a hex color, or 'blank' to hide the header text.",
                fix_hint="Set GENESIS_CHILD_CONFIG['header']['text_color'] = '222222'",
                id="genesis_child.C002",
            )
        )

    return errors


@register("genesis_child")
def check_main_stylesheet(app_configs, **kwargs):
    """C003 -- the main stylesheet should exist so it can be versioned."""
    from genesis_child.stylesheet import main_stylesheet_path

    errors = []
    path = main_stylesheet_path(_get_config())
    if path is None or not os.path.exists(path):
        errors.append(
            ChildThemeCheckWarning(
                "Main stylesheet %s not found." % (path or "style.css",),
                hint="The stylesheet will be enqueued without a version token, "
                "so browsers may keep serving a stale copy.",
                fix_hint="Set GENESIS_CHILD_CONFIG['stylesheet_dir'] to the directory "
                "holding style.css",
                id="genesis_child.C003",
            )
        )
    return errors


@register("genesis_child")
def check_header_selector(app_configs, **kwargs):
    """C004 -- an empty header selector override silently falls back."""
    from genesis_child.theme import CUSTOM_HEADER, ChildTheme

    errors = []
    selector = ChildTheme(_get_config()).get_option(CUSTOM_HEADER, "header-selector")
    if isinstance(selector, str) and not selector.strip():
        errors.append(
            ChildThemeCheckWarning(
                "custom-header 'header-selector' is empty.",
                hint="The default header selector is used instead.",
                fix_hint="Remove 'header-selector' or set it to a CSS selector",
                id="genesis_child.C004",
            )
        )
    return errors
