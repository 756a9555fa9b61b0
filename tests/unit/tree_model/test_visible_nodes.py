"""Tests for lazy visible-node listing and kind classification."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from defira.tree_model import (
    KIND_DIRECTORY,
    KIND_PLAINTEXT,
    KIND_SECRET,
    classify_path,
    list_directory_children,
    list_visible_nodes,
)
import defira.tree_model.build as build


class VisibleNodesTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        (root / "secrets").mkdir()
        (root / "secrets" / "a.gpg").write_bytes(b"cipher")
        (root / "secrets" / "deep").mkdir()
        (root / "secrets" / "deep" / "b.txt").write_text("b\n", encoding="utf-8")
        (root / "notes.txt").write_text("hello\n", encoding="utf-8")

    def test_collapsed_root_lists_only_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)

            nodes = list_visible_nodes(root, expanded=set())

            self.assertEqual([(node.path, node.depth) for node in nodes], [(root, 0)])
            self.assertEqual(nodes[0].kind, KIND_DIRECTORY)

    def test_children_follow_directory_only_when_expanded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            secrets = root / "secrets"

            collapsed = list_visible_nodes(root, expanded={root})
            self.assertIn(secrets, [node.path for node in collapsed])
            self.assertNotIn(secrets / "a.gpg", [node.path for node in collapsed])

            expanded = list_visible_nodes(root, expanded={root, secrets})
            paths = [node.path for node in expanded]
            secrets_idx = paths.index(secrets)
            child_paths = {secrets / "a.gpg", secrets / "deep"}
            self.assertEqual(set(paths[secrets_idx + 1 : secrets_idx + 3]), child_paths)
            self.assertNotIn(secrets / "deep" / "b.txt", paths)

    def test_collapsed_ancestor_hides_expanded_descendants(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            deep = root / "secrets" / "deep"

            nodes = list_visible_nodes(root, expanded={root, deep})

            self.assertNotIn(deep, [node.path for node in nodes])
            self.assertNotIn(deep / "b.txt", [node.path for node in nodes])

    def test_pre_order_depths_and_kinds(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            secrets = root / "secrets"
            deep = secrets / "deep"

            nodes = list_visible_nodes(root, expanded={root, secrets, deep})
            by_path = {node.path: node for node in nodes}

            self.assertEqual(by_path[secrets].depth, 1)
            self.assertEqual(by_path[secrets / "a.gpg"].depth, 2)
            self.assertEqual(by_path[deep / "b.txt"].depth, 3)
            self.assertEqual(by_path[secrets / "a.gpg"].kind, KIND_SECRET)
            self.assertEqual(by_path[root / "notes.txt"].kind, KIND_PLAINTEXT)

            paths = [node.path for node in nodes]
            self.assertEqual(paths.index(deep / "b.txt"), paths.index(deep) + 1)

    def test_order_follows_filesystem_enumeration(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            expected = [entry.name for entry in os.scandir(root) if not entry.name.startswith(".")]

            nodes = list_visible_nodes(root, expanded={root})

            self.assertEqual([node.path.name for node in nodes[1:]], expected)

    def test_hidden_entries_are_always_excluded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            hidden_dir = root / ".git"
            hidden_dir.mkdir()
            (root / ".hidden.gpg").write_bytes(b"x")
            (root / "shown.txt").write_text("x", encoding="utf-8")

            nodes = list_visible_nodes(root, expanded={root, hidden_dir})

            self.assertEqual([node.path.name for node in nodes[1:]], ["shown.txt"])

    def test_hidden_root_is_still_listed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = (Path(tmp) / ".password-store").resolve()
            root.mkdir()
            (root / "mail.gpg").write_bytes(b"x")

            nodes = list_visible_nodes(root, expanded={root})

            self.assertEqual([node.path for node in nodes], [root, root / "mail.gpg"])

    def test_unreadable_directory_is_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            secrets = root / "secrets"
            real_list = build.list_directory_children

            def flaky_list(directory: Path):
                if directory == secrets:
                    return [], PermissionError("denied")
                return real_list(directory)

            with (
                mock.patch.object(build, "list_directory_children", side_effect=flaky_list),
                self.assertLogs("defira.tree_model.build", level="ERROR") as captured,
            ):
                nodes = list_visible_nodes(root, expanded={root, secrets})

            paths = [node.path for node in nodes]
            self.assertIn(secrets, paths)
            self.assertIn(root / "notes.txt", paths)
            self.assertNotIn(secrets / "a.gpg", paths)
            self.assertIn("Failed to read directory", captured.output[0])

    def test_list_directory_children_reports_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"

            children, scan_error = list_directory_children(missing)

            self.assertEqual(children, [])
            self.assertIsInstance(scan_error, FileNotFoundError)

    def test_custom_secret_extension(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "key.age").write_bytes(b"x")
            (root / "key.gpg").write_bytes(b"x")

            nodes = list_visible_nodes(root, expanded={root}, secret_extension=".age")
            kinds = {node.path.name: node.kind for node in nodes[1:]}

            self.assertEqual(kinds, {"key.age": KIND_SECRET, "key.gpg": KIND_PLAINTEXT})

    def test_classify_path_uses_filesystem_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            folder = root / "vault.gpg"
            folder.mkdir()

            self.assertEqual(classify_path(folder), KIND_DIRECTORY)
            self.assertEqual(classify_path(root / "missing.gpg"), KIND_SECRET)
            self.assertEqual(classify_path(root / "missing.txt"), KIND_PLAINTEXT)


if __name__ == "__main__":
    unittest.main()
