"""
Configuration for genesis-child

Provides centralized configuration for:
- Child theme identity (name, stylesheet location)
- Theme support flags (custom header, HTML5 markup)
- Current header state (image, text color)
- Debug switches (script suffix, deprecated parent-theme code)
"""

import copy
from typing import Dict, Any

from .exceptions import ThemeConfigError

SETTINGS_NAME = "GENESIS_CHILD_CONFIG"


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into ``base`` (in place)."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ChildThemeConfig:
    """
    Central configuration for the child theme extension.

    Usage:
        # In settings.py
        GENESIS_CHILD_CONFIG = {
            'child_theme_name': 'My Child Theme',
            'theme_support': {
                'custom-header': {'default-text-color': '333333'},
            },
            'header': {'image': '/static/img/header.png'},
        }

        # Or programmatically
        config = ChildThemeConfig()
        config.set('header.text_color', '222222')
    """

    # Default configuration
    _defaults = {
        # Child theme identity
        "child_theme_name": None,  # Used for the stylesheet handle (slugified)
        "stylesheet_dir": None,  # Directory holding style.css (None = first STATICFILES_DIRS entry)
        "stylesheet_url": None,  # URL prefix for style.css (None = STATIC_URL)
        # Debug switches
        "script_debug": None,  # Serve unminified style.css (None = follow DEBUG)
        "load_deprecated": None,  # Keep deprecated parent-theme code (None = follow DEBUG)
        # Features declared by the active theme
        "theme_support": {
            "html5": True,
            "custom-header": {
                "wp-head-callback": None,  # Theme renders its own header style
                "header-selector": None,  # Overrides the header container selector
                "default-text-color": "333333",
                "header-text": True,  # Theme allows header title/description text
            },
        },
        # Current header state
        "header": {
            "image": None,  # Header image URL ("remove-header" = none)
            "text_color": None,  # Hex color without '#', or "blank" (None = theme default)
        },
    }

    def __init__(self, overrides: Dict[str, Any] = None):
        self._overrides = overrides or {}
        self._config = copy.deepcopy(self._defaults)
        self._load_from_settings()

    def _load_from_settings(self):
        """Load configuration from Django settings if available"""
        try:
            from django.conf import settings

            if hasattr(settings, SETTINGS_NAME):
                _merge(self._config, copy.deepcopy(getattr(settings, SETTINGS_NAME)))
        except ImportError:
            pass

        _merge(self._config, copy.deepcopy(self._overrides))

        for key in ("theme_support", "header"):
            if not isinstance(self._config.get(key), dict):
                raise ThemeConfigError(key, self._config.get(key))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports dot notation for nested values)
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            config.get('child_theme_name')  # 'My Child Theme'
            config.get('header.image')  # '/static/img/header.png'
        """
        # Dot notation only descends into dicts; keys such as "custom-header"
        # contain no dots, so they are safe path components.
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default

    def set(self, key: str, value: Any):
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports dot notation for nested values)
            value: Value to set

        Example:
            config.set('header.text_color', '222222')
        """
        keys = key.split(".")

        # Navigate to the nested dict
        target = self._config
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]

        # Set the value
        target[keys[-1]] = value

    def debug_flag(self, key: str) -> bool:
        """
        Resolve a debug switch, falling back to ``settings.DEBUG`` when unset.

        Example:
            config.debug_flag('script_debug')  # True in development
        """
        value = self.get(key)
        if value is None:
            from django.conf import settings

            return bool(getattr(settings, "DEBUG", False))
        return bool(value)

    def reset(self):
        """Reset configuration to defaults (re-reading Django settings)"""
        self._config = copy.deepcopy(self._defaults)
        self._load_from_settings()

    def update(self, config_dict: Dict[str, Any]):
        """
        Update multiple configuration values at once.

        Args:
            config_dict: Dictionary of configuration values, merged recursively
        """
        _merge(self._config, copy.deepcopy(config_dict))

    def as_dict(self) -> Dict[str, Any]:
        """Get the entire configuration as a dictionary"""
        return copy.deepcopy(self._config)
