"""
The child theme extension: which parent-theme behaviors it overrides and the
callbacks that replace them.

The extension holds no global state. The app config builds one instance,
asks it for its override table and installs that table into its own
``HookRegistry``; tests do the same with their own registry.
"""

import logging
from typing import List, Optional

from django.utils.safestring import SafeString, mark_safe

from . import hooks as hook_names
from .config import ChildThemeConfig
from .header import HeaderSettings, assemble, render_header_style
from .hooks import HookOverride, HookRegistry, return_false
from .signals import header_style_rendered
from .stylesheet import StyleQueue, enqueue_main_stylesheet
from .theme import ChildTheme
from .updates import auto_update_genesis

logger = logging.getLogger(__name__)

# Parent-theme callbacks replaced by this extension
PARENT_LOAD_STYLESHEET = "genesis_load_stylesheet"
PARENT_HEADER_STYLE = "genesis_custom_header_style"


class GenesisChild:
    """
    Overrides the parent theme's stylesheet loading and custom header style.

    Usage:
        extension = GenesisChild(ChildThemeConfig())
        hooks = HookRegistry()
        hooks.install(extension.hook_table())

        head_html = extension.render_head(hooks)
    """

    def __init__(self, config: Optional[ChildThemeConfig] = None):
        self.config = config if config is not None else ChildThemeConfig()

    def hook_table(self) -> List[HookOverride]:
        """Overrides to install, in precedence order."""
        table = [
            HookOverride(hook_names.AUTO_UPDATE_THEME, self.auto_update_genesis),
            # The parent theme prints its stylesheet link directly; ours is enqueued.
            HookOverride(hook_names.THEME_META, None, replaces=PARENT_LOAD_STYLESHEET),
            HookOverride(hook_names.ENQUEUE_SCRIPTS, self.enqueue_main_stylesheet, priority=5),
            HookOverride(
                hook_names.RENDER_HEAD,
                self.custom_header_style,
                replaces=PARENT_HEADER_STYLE,
            ),
        ]
        if not self.config.debug_flag("load_deprecated"):
            table.append(HookOverride(hook_names.LOAD_DEPRECATED, return_false))
        return table

    @property
    def theme(self) -> ChildTheme:
        return ChildTheme(self.config)

    def header_settings(self) -> HeaderSettings:
        return HeaderSettings.from_theme(self.theme)

    def auto_update_genesis(self, update, item):
        return auto_update_genesis(update, item)

    def enqueue_main_stylesheet(self, styles: StyleQueue) -> None:
        enqueue_main_stylesheet(styles, self.config)

    def custom_header_style(self, head: List[str]) -> None:
        """Append the custom header style block to ``head``, if there is one."""
        css = assemble(self.header_settings())
        if css is None:
            logger.debug("No custom header style to output")
            return

        html = render_header_style(css)
        head.append(html)
        header_style_rendered.send(sender=self.__class__, css=css, html=str(html))

    def render_head(self, hooks: HookRegistry) -> SafeString:
        """Run the head hook for one page render and return its markup."""
        head: List[str] = []
        hooks.do_action(hook_names.RENDER_HEAD, head)
        # Callbacks write already-escaped markup.
        return mark_safe("".join(str(part) for part in head))

    def render_styles(self, hooks: HookRegistry) -> SafeString:
        """Run the enqueue hook for one page render and return the link tags."""
        styles = StyleQueue()
        hooks.do_action(hook_names.ENQUEUE_SCRIPTS, styles)
        return styles.render()
