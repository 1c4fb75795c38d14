"""
Custom header style generation.

When the theme supports a custom header but does not render its own header
style, this module produces the inline CSS that applies the configured header
image and text color:

    settings = HeaderSettings.from_theme(theme)
    css = assemble(settings)
    html = render_header_style(css)  # '<style type="text/css">...</style>\\n'
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .escaping import sanitize_url
from .theme import CUSTOM_HEADER

logger = logging.getLogger(__name__)

HTML5_TITLE_SELECTOR = ".custom-header .site-title"
HTML5_DESCRIPTION_SELECTOR = ".custom-header .site-description"
HTML5_HEADER_SELECTOR = ".custom-header .site-header"

LEGACY_TITLE_SELECTOR = ".custom-header #title"
LEGACY_DESCRIPTION_SELECTOR = ".custom-header #description"
LEGACY_HEADER_SELECTOR = ".custom-header #header"

IMAGE_RULE = (
    "{selector}{{background-image:url({url}) !important; "
    "background-repeat:no-repeat !important;}}"
)
TEXT_COLOR_RULE = "{title} a, {title} a:hover, {desc} {{ color: #{color} !important; }}"


@dataclass(frozen=True)
class HeaderSettings:
    """Everything the header style depends on, captured for a single render."""

    custom_header_supported: bool
    has_custom_callback: bool
    header_image_url: Optional[str]
    show_header_text: bool
    text_color: str
    default_text_color: str
    header_selector_override: Optional[str] = None
    use_html5_markup: bool = True

    @classmethod
    def from_theme(cls, theme) -> "HeaderSettings":
        """Capture the current state of a ``ChildTheme``."""
        return cls(
            custom_header_supported=theme.supports(CUSTOM_HEADER),
            has_custom_callback=bool(theme.get_option(CUSTOM_HEADER, "wp-head-callback")),
            header_image_url=theme.header.get_header_image_url(),
            show_header_text=theme.header.should_display_header_text(),
            text_color=theme.header.get_header_text_color(),
            default_text_color=str(
                theme.get_option(CUSTOM_HEADER, "default-text-color", "")
            ).lstrip("#"),
            header_selector_override=theme.get_option(CUSTOM_HEADER, "header-selector"),
            use_html5_markup=theme.uses_html5_markup(),
        )

    @property
    def title_selector(self) -> str:
        return HTML5_TITLE_SELECTOR if self.use_html5_markup else LEGACY_TITLE_SELECTOR

    @property
    def description_selector(self) -> str:
        return HTML5_DESCRIPTION_SELECTOR if self.use_html5_markup else LEGACY_DESCRIPTION_SELECTOR

    @property
    def header_selector(self) -> str:
        if self.header_selector_override and self.header_selector_override.strip():
            return self.header_selector_override
        return HTML5_HEADER_SELECTOR if self.use_html5_markup else LEGACY_HEADER_SELECTOR


def assemble(settings: HeaderSettings) -> Optional[str]:
    """
    Build the custom header CSS for ``settings``.

    Returns None when the theme does not support a custom header, renders its
    own header style, or nothing differs from the theme defaults.

    Example:
        assemble(HeaderSettings(
            custom_header_supported=True,
            has_custom_callback=False,
            header_image_url="http://example.com/h.png",
            show_header_text=False,
            text_color="000000",
            default_text_color="000000",
        ))
        # '.custom-header .site-header{background-image:url(http://example.com/h.png) ...}'
    """
    if not settings.custom_header_supported or settings.has_custom_callback:
        return None

    text_color_changed = settings.text_color != settings.default_text_color

    # Nothing configured: don't emit an empty <style> block.
    if not settings.header_image_url and not settings.show_header_text and not text_color_changed:
        return None

    output = ""

    if settings.header_image_url:
        url = sanitize_url(settings.header_image_url)
        if url:
            output += IMAGE_RULE.format(selector=settings.header_selector, url=url)
        else:
            logger.debug("Header image URL %r rejected by sanitizer", settings.header_image_url)

    if settings.show_header_text and text_color_changed:
        output += TEXT_COLOR_RULE.format(
            title=settings.title_selector,
            desc=settings.description_selector,
            color=settings.text_color,
        )

    return output or None


class HeaderStyleAssembler:
    """Object form of :func:`assemble`, for callers that inject collaborators."""

    def assemble(self, settings: HeaderSettings) -> Optional[str]:
        return assemble(settings)


def render_header_style(css: Optional[str]) -> SafeString:
    """Wrap header CSS in a style element, escaping it for inline HTML."""
    if not css:
        return mark_safe("")
    return format_html('<style type="text/css">{}</style>\n', css)
