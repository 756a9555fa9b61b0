"""Tests for context-menu anchoring and item construction."""

from __future__ import annotations

import unittest
from pathlib import Path

from defira.explorer import DeleteItem, EditItem, ExplorerState, Point, menu_items
from defira.explorer.context_menu import close_context_menu, open_context_menu, record_cursor


class ContextMenuTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = ExplorerState(root=Path("/vault"))

    def test_menu_anchors_at_last_recorded_cursor(self) -> None:
        record_cursor(self.state, Point(10, 20))
        record_cursor(self.state, Point(50, 80))

        menu = open_context_menu(self.state, Path("/vault/a.gpg"))

        self.assertEqual(menu.anchor, Point(50, 80))
        self.assertIs(self.state.context_menu, menu)

    def test_open_replaces_existing_menu(self) -> None:
        open_context_menu(self.state, Path("/vault/a.gpg"))
        record_cursor(self.state, Point(3, 4))

        open_context_menu(self.state, Path("/vault/b.gpg"))

        assert self.state.context_menu is not None
        self.assertEqual(self.state.context_menu.target, Path("/vault/b.gpg"))
        self.assertEqual(self.state.context_menu.anchor, Point(3, 4))

    def test_close_clears_menu(self) -> None:
        open_context_menu(self.state, Path("/vault/a.gpg"))

        close_context_menu(self.state)
        close_context_menu(self.state)

        self.assertIsNone(self.state.context_menu)

    def test_menu_items_bind_edit_and_delete_to_target(self) -> None:
        menu = open_context_menu(self.state, Path("/vault/a.gpg"))

        items = menu_items(menu)

        self.assertEqual([item.label for item in items], ["Edit", "Delete"])
        self.assertEqual(items[0].action, EditItem(Path("/vault/a.gpg")))
        self.assertEqual(items[1].action, DeleteItem(Path("/vault/a.gpg")))


if __name__ == "__main__":
    unittest.main()
