"""
Hook table for page-render events.

Actions and filters are registered under a hook name and run in
``(priority, registration order)`` order. Extensions describe what they add
and what they replace as an explicit override table, which the registry
applies in one step:

    hooks = HookRegistry()
    hooks.install([
        HookOverride(RENDER_HEAD, ext.custom_header_style,
                     replaces="genesis_custom_header_style"),
    ])
    hooks.do_action(RENDER_HEAD, head)
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .exceptions import InvalidHookError

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

# Hook names
AUTO_UPDATE_THEME = "auto_update_theme"
THEME_META = "theme_meta"
ENQUEUE_SCRIPTS = "enqueue_scripts"
RENDER_HEAD = "render_head"
LOAD_DEPRECATED = "load_deprecated"

CallbackRef = Union[Callable, str]


@dataclass(frozen=True)
class HookOverride:
    """
    One entry of an override table.

    ``replaces`` is removed from ``hook`` (at every priority) before
    ``callback`` is added. A ``None`` callback only removes.
    """

    hook: str
    callback: Optional[Callable]
    priority: int = DEFAULT_PRIORITY
    replaces: Optional[CallbackRef] = None


@dataclass
class _Registration:
    callback: Callable
    priority: int
    order: int


def callback_names(callback: Callable) -> set:
    """Names a registered callback can be referred to by."""
    func = getattr(callback, "__func__", callback)
    names = set()
    name = getattr(func, "__name__", None)
    qualname = getattr(func, "__qualname__", None)
    module = getattr(func, "__module__", None)
    if name:
        names.add(name)
    if qualname:
        names.add(qualname)
        if module:
            names.add(f"{module}.{qualname}")
    return names


def _matches(registered: Callable, ref: CallbackRef) -> bool:
    if isinstance(ref, str):
        return ref in callback_names(registered)
    return registered == ref


class HookRegistry:
    """Registry of action and filter callbacks keyed by hook name."""

    def __init__(self):
        self._hooks: Dict[str, List[_Registration]] = {}
        self._counter = itertools.count()

    def add(self, hook: str, callback: Callable, priority: int = DEFAULT_PRIORITY):
        """Register ``callback`` on ``hook``; lower priorities run first."""
        if not callable(callback):
            raise InvalidHookError(hook, callback)
        self._hooks.setdefault(hook, []).append(
            _Registration(callback, priority, next(self._counter))
        )
        logger.debug("Added %s to hook %s (priority %s)", callback_names(callback), hook, priority)

    def remove(self, hook: str, callback: CallbackRef, priority: Optional[int] = None) -> bool:
        """
        Unregister ``callback`` from ``hook``.

        ``callback`` may be the callable itself or one of its names. With
        ``priority=None`` registrations at every priority are removed.

        Returns:
            True if anything was removed.
        """
        registrations = self._hooks.get(hook, [])
        kept = [
            reg
            for reg in registrations
            if not (_matches(reg.callback, callback) and priority in (None, reg.priority))
        ]
        removed = len(kept) != len(registrations)
        if removed:
            self._hooks[hook] = kept
            logger.debug("Removed %r from hook %s", callback, hook)
        return removed

    def has(self, hook: str, callback: Optional[CallbackRef] = None) -> bool:
        registrations = self._hooks.get(hook, [])
        if callback is None:
            return bool(registrations)
        return any(_matches(reg.callback, callback) for reg in registrations)

    def callbacks(self, hook: str) -> List[Callable]:
        """Callbacks for ``hook`` in the order they run."""
        ordered = sorted(self._hooks.get(hook, []), key=lambda reg: (reg.priority, reg.order))
        return [reg.callback for reg in ordered]

    def do_action(self, hook: str, *args: Any) -> None:
        """Run every callback on ``hook``; return values are ignored."""
        for callback in self.callbacks(hook):
            callback(*args)

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback on ``hook`` and return the result."""
        for callback in self.callbacks(hook):
            value = callback(value, *args)
        return value

    def install(self, overrides: Iterable[HookOverride]) -> None:
        """Apply an override table in order."""
        for override in overrides:
            if override.replaces is not None:
                self.remove(override.hook, override.replaces)
            if override.callback is not None:
                self.add(override.hook, override.callback, override.priority)


def return_false(*args: Any) -> bool:
    """Filter callback that always answers False."""
    return False
