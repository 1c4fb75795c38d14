import logging

from django.apps import AppConfig
from django.core.signals import setting_changed

logger = logging.getLogger(__name__)

_WATCHED_SETTINGS = {"GENESIS_CHILD_CONFIG", "DEBUG", "STATIC_URL", "STATICFILES_DIRS"}


class GenesisChildConfig(AppConfig):
    name = "genesis_child"
    verbose_name = "Genesis child theme"

    hooks = None
    extension = None
    _installed = ()

    def ready(self):
        # Import checks module so @register() decorators are executed
        import genesis_child.checks  # noqa: F401

        from genesis_child.config import ChildThemeConfig
        from genesis_child.extension import GenesisChild
        from genesis_child.hooks import HookRegistry

        self.hooks = HookRegistry()
        self.extension = GenesisChild(ChildThemeConfig())
        self._installed = self.extension.hook_table()
        self.hooks.install(self._installed)

        setting_changed.connect(self._reload, dispatch_uid="genesis_child.reload")

    def _reload(self, setting, **kwargs):
        """Reinstall this app's overrides when a setting they depend on changes."""
        if setting not in _WATCHED_SETTINGS:
            return

        # Only our own registrations are swapped; other apps' callbacks stay.
        for override in self._installed:
            if override.callback is not None:
                self.hooks.remove(override.hook, override.callback, override.priority)

        self.extension.config.reset()
        self._installed = self.extension.hook_table()
        self.hooks.install(self._installed)
        logger.debug("Reloaded genesis_child configuration after %s changed", setting)
