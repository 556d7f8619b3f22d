"""Tree-row formatting tests for expansion markers and placeholders."""

from __future__ import annotations

import unittest

from versiontree.expansion import ExpandedPathSet
from versiontree.tree_model import DIRECTORY, FILE, Entry, build_file_tree, format_tree_rows
from versiontree.tree_model.rendering import EMPTY_DIRECTORY_TEXT
from versiontree.ui_theme import DEFAULT_THEME


def _tree():
    return build_file_tree(
        "root-addon",
        "addon",
        [
            Entry("lib", 0, "lib", DIRECTORY),
            Entry("empty", 0, "empty", DIRECTORY),
            Entry("README.md", 0, "README.md", FILE),
            Entry("lib/a.js", 1, "a.js", FILE),
        ],
    )


class FormatTreeRowsTests(unittest.TestCase):
    def test_collapsed_directories_hide_children(self) -> None:
        rows = format_tree_rows(_tree(), ExpandedPathSet(), no_color=True)

        self.assertEqual(rows, ["addon/", "▸ empty/", "▸ lib/", "  README.md"])

    def test_expanded_directory_shows_indented_children(self) -> None:
        rows = format_tree_rows(_tree(), ExpandedPathSet(frozenset({"lib"})), no_color=True)

        self.assertEqual(rows, ["addon/", "▸ empty/", "▾ lib/", "    a.js", "  README.md"])

    def test_expanded_empty_directory_shows_placeholder(self) -> None:
        rows = format_tree_rows(_tree(), ExpandedPathSet(frozenset({"empty"})), no_color=True)

        self.assertEqual(rows[1], "▾ empty/")
        self.assertEqual(rows[2], f"    {EMPTY_DIRECTORY_TEXT}")

    def test_current_file_is_highlighted(self) -> None:
        rows = format_tree_rows(_tree(), ExpandedPathSet(), current_path="README.md", theme=DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.reverse}README.md{DEFAULT_THEME.reset}", rows[-1])

    def test_current_file_is_marked_without_color(self) -> None:
        rows = format_tree_rows(_tree(), ExpandedPathSet(), current_path="README.md", no_color=True)

        self.assertEqual(rows[-1], "  README.md <")


if __name__ == "__main__":
    unittest.main()
