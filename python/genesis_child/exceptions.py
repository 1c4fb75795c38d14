"""
Exceptions raised by genesis-child.

The header style assembler never raises; these cover misconfiguration of the
app and misuse of the hook table.
"""

from typing import Optional


class ChildThemeError(Exception):
    """Base exception for genesis-child errors."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class InvalidHookError(ChildThemeError):
    """Raised when something that is not callable is added to a hook."""

    def __init__(self, hook: str, callback):
        message = f"Cannot add {callback!r} to hook '{hook}': callback is not callable."
        hint = (
            f"\n    Pass a function or bound method:\n"
            f"        hooks.add('{hook}', my_callback, priority=10)"
        )
        super().__init__(message, hint)


class ThemeConfigError(ChildThemeError):
    """Raised when GENESIS_CHILD_CONFIG has the wrong shape."""

    def __init__(self, key: str, value):
        message = (
            f"GENESIS_CHILD_CONFIG['{key}'] must be a dict, got {type(value).__name__}."
        )
        hint = (
            "\n    Example:\n"
            "        GENESIS_CHILD_CONFIG = {\n"
            "            'theme_support': {\n"
            "                'html5': True,\n"
            "                'custom-header': {'default-text-color': '333333'},\n"
            "            },\n"
            "        }"
        )
        super().__init__(message, hint)


__all__ = [
    "ChildThemeError",
    "InvalidHookError",
    "ThemeConfigError",
]
