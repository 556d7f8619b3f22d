"""Tests for relative navigation over ordered sequences.

Confirms first/last selection with no current element, adjacency, and
that sequence ends are reported as ``None`` rather than wrapping.
"""

from __future__ import annotations

import unittest

from versiontree.navigation import (
    RelativePathPosition,
    go_to_relative_file,
    relative_item,
    relative_item_from_path,
)

NEXT = RelativePathPosition.NEXT
PREVIOUS = RelativePathPosition.PREVIOUS


class RelativeItemTests(unittest.TestCase):
    def test_no_current_selects_first_or_last(self) -> None:
        sequence = ["a", "b", "c"]

        self.assertEqual(relative_item(sequence, None, NEXT), "a")
        self.assertEqual(relative_item(sequence, None, PREVIOUS), "c")

    def test_empty_sequence_yields_none(self) -> None:
        self.assertIsNone(relative_item([], None, NEXT))
        self.assertIsNone(relative_item([], None, PREVIOUS))
        self.assertIsNone(relative_item([], "a", NEXT))

    def test_adjacent_elements(self) -> None:
        sequence = ["a", "b", "c"]

        self.assertEqual(go_to_relative_file(sequence, "b", NEXT), "c")
        self.assertEqual(go_to_relative_file(sequence, "b", PREVIOUS), "a")

    def test_ends_do_not_wrap(self) -> None:
        sequence = ["a", "b", "c"]

        self.assertIsNone(relative_item(sequence, "c", NEXT))
        self.assertIsNone(relative_item(sequence, "a", PREVIOUS))

    def test_every_index_steps_by_one(self) -> None:
        sequence = ["lib/a.js", "lib/b.js", "manifest.json", "README.md"]
        for index, item in enumerate(sequence):
            with self.subTest(item=item):
                expected_next = sequence[index + 1] if index + 1 < len(sequence) else None
                expected_previous = sequence[index - 1] if index > 0 else None
                self.assertEqual(relative_item(sequence, item, NEXT), expected_next)
                self.assertEqual(relative_item(sequence, item, PREVIOUS), expected_previous)

    def test_unknown_current_behaves_like_no_selection(self) -> None:
        sequence = ["a", "b"]

        self.assertEqual(relative_item(sequence, "gone", NEXT), "a")
        self.assertEqual(relative_item(sequence, "gone", PREVIOUS), "b")

    def test_works_with_any_equality_comparable_element(self) -> None:
        sequence = [("x", 1), ("x", 2), ("y", 1)]

        self.assertEqual(relative_item(sequence, ("x", 2), NEXT), ("y", 1))
        self.assertEqual(relative_item(tuple(sequence), ("x", 2), PREVIOUS), ("x", 1))



class RelativeItemFromPathTests(unittest.TestCase):
    path_list = ["a.js", "b.js", "c.js", "d.js"]
    sequence = [("a.js", 1), ("a.js", 2), ("c.js", 1)]

    def _from(self, current, current_path, position):
        return relative_item_from_path(
            self.sequence, lambda item: item[0], self.path_list, current, current_path, position
        )

    def test_enters_at_or_after_current_file(self) -> None:
        self.assertEqual(self._from(None, "b.js", NEXT), ("c.js", 1))
        self.assertEqual(self._from(None, "a.js", NEXT), ("a.js", 1))
        self.assertIsNone(self._from(None, "d.js", NEXT))

    def test_enters_at_or_before_current_file(self) -> None:
        self.assertEqual(self._from(None, "b.js", PREVIOUS), ("a.js", 2))
        self.assertEqual(self._from(None, "c.js", PREVIOUS), ("c.js", 1))
        self.assertEqual(self._from(None, "d.js", PREVIOUS), ("c.js", 1))

    def test_current_item_takes_precedence_over_path(self) -> None:
        self.assertEqual(self._from(("a.js", 1), "c.js", NEXT), ("a.js", 2))

    def test_unknown_path_falls_back_to_ends(self) -> None:
        self.assertEqual(self._from(None, None, NEXT), ("a.js", 1))
        self.assertEqual(self._from(None, "gone.js", PREVIOUS), ("c.js", 1))


if __name__ == "__main__":
    unittest.main()
