"""
Automatic update policy for the parent theme.
"""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PARENT_THEME_SLUG = "genesis"


def _item_slug(item):
    if isinstance(item, Mapping):
        return item.get("slug", item.get("theme"))
    return getattr(item, "slug", getattr(item, "theme", None))


def auto_update_genesis(update, item):
    """
    Always allow automatic updates of the parent theme.

    Args:
        update: Whether the auto-update is currently allowed.
        item: The theme being checked, with a ``slug``.

    Returns:
        True for the parent theme, otherwise ``update`` unchanged.
    """
    slug = _item_slug(item)
    logger.debug("Auto-update check: update=%r slug=%r", update, slug)
    if slug == PARENT_THEME_SLUG:
        return True
    return update
