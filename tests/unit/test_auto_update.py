"""Tests for the parent theme auto-update policy (genesis_child/updates.py)."""

import logging
from types import SimpleNamespace

import pytest

from genesis_child.updates import auto_update_genesis


class TestAutoUpdateGenesis:
    @pytest.mark.parametrize("update", [True, False, None])
    def test_parent_theme_always_updates(self, update):
        assert auto_update_genesis(update, {"slug": "genesis"}) is True

    @pytest.mark.parametrize("update", [True, False, None])
    def test_other_themes_pass_through(self, update):
        assert auto_update_genesis(update, {"slug": "twentytwenty"}) is update

    def test_item_object_with_slug(self):
        assert auto_update_genesis(False, SimpleNamespace(slug="genesis")) is True

    def test_item_object_with_theme_attribute(self):
        assert auto_update_genesis(False, SimpleNamespace(theme="genesis")) is True

    def test_item_without_slug_passes_through(self):
        assert auto_update_genesis(False, {}) is False
        assert auto_update_genesis(True, object()) is True

    def test_slug_match_is_exact(self):
        assert auto_update_genesis(False, {"slug": "Genesis"}) is False
        assert auto_update_genesis(False, {"slug": "genesis-child"}) is False

    def test_decision_inputs_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="genesis_child.updates"):
            auto_update_genesis(False, {"slug": "genesis"})

        assert "slug='genesis'" in caplog.text
