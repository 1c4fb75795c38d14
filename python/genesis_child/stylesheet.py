"""
Enqueueing of the child theme's main stylesheet.

The stylesheet is versioned by its modification time so browsers refetch it
whenever the file changes:

    <link rel="stylesheet" id="my-child-theme-css"
          href="/static/style.min.css?ver=1700000000" type="text/css" media="all">
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from django.conf import settings
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString
from django.utils.text import slugify

from .config import ChildThemeConfig

logger = logging.getLogger(__name__)

DEFAULT_HANDLE = "child-theme"


@dataclass(frozen=True)
class Stylesheet:
    handle: str
    src: str
    deps: Sequence[str] = field(default_factory=tuple)
    version: Optional[str] = None

    @property
    def href(self) -> str:
        if self.version is None:
            return self.src
        separator = "&" if "?" in self.src else "?"
        return f"{self.src}{separator}ver={self.version}"


class StyleQueue:
    """Stylesheets enqueued for one page render, in enqueue order."""

    def __init__(self):
        self._styles: List[Stylesheet] = []

    def enqueue(self, handle: str, src: str, deps: Sequence[str] = (), version=None):
        """Add a stylesheet; re-enqueueing an existing handle does nothing."""
        if self.is_enqueued(handle):
            return
        version = None if version is None else str(version)
        self._styles.append(Stylesheet(handle, src, tuple(deps), version))

    def is_enqueued(self, handle: str) -> bool:
        return any(style.handle == handle for style in self._styles)

    def __iter__(self) -> Iterator[Stylesheet]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def render(self) -> SafeString:
        return format_html_join(
            "\n",
            '<link rel="stylesheet" id="{}-css" href="{}" type="text/css" media="all">',
            ((style.handle, style.href) for style in self._styles),
        )


def script_suffix(config: ChildThemeConfig) -> str:
    """'' when debugging scripts, otherwise '.min'."""
    return "" if config.debug_flag("script_debug") else ".min"


def stylesheet_handle(config: ChildThemeConfig) -> str:
    name = config.get("child_theme_name")
    if name:
        handle = slugify(name)
        if handle:
            return handle
    return DEFAULT_HANDLE


def stylesheet_dir(config: ChildThemeConfig) -> Optional[str]:
    directory = config.get("stylesheet_dir")
    if directory:
        return str(directory)
    static_dirs = getattr(settings, "STATICFILES_DIRS", [])
    if static_dirs:
        first = static_dirs[0]
        # STATICFILES_DIRS entries may be (prefix, path) tuples
        return str(first[1] if isinstance(first, (list, tuple)) else first)
    return None


def stylesheet_url(config: ChildThemeConfig) -> str:
    url = config.get("stylesheet_url") or getattr(settings, "STATIC_URL", None) or "/static/"
    url = str(url)
    return url if url.endswith("/") else url + "/"


def main_stylesheet_path(config: ChildThemeConfig) -> Optional[str]:
    directory = stylesheet_dir(config)
    if directory is None:
        return None
    return os.path.join(directory, f"style{script_suffix(config)}.css")


def enqueue_main_stylesheet(styles: StyleQueue, config: ChildThemeConfig) -> None:
    """
    Enqueue ``style.css`` (or ``style.min.css``) versioned by its mtime.

    A missing file is logged and enqueued without a version token.
    """
    filename = f"style{script_suffix(config)}.css"
    path = main_stylesheet_path(config)

    version = None
    if path is None:
        logger.warning("No stylesheet directory configured; %s enqueued unversioned", filename)
    else:
        try:
            version = int(os.path.getmtime(path))
        except OSError:
            logger.warning("Main stylesheet %s not found; enqueued unversioned", path)

    handle = stylesheet_handle(config)
    styles.enqueue(handle, stylesheet_url(config) + filename, version=version)
    logger.debug("Enqueued main stylesheet %s (version %s)", handle, version)
