"""Linter message parsing and ordering tests."""

from __future__ import annotations

import unittest

from versiontree.messages import (
    build_message_map,
    go_to_relative_message,
    message_from_record,
    message_paths,
    message_sequence,
)
from versiontree.navigation import RelativePathPosition

RECORDS = [
    {"uid": "m3", "path": "lib/a.js", "line": 20, "column": 1, "type": "error", "message": "late"},
    {"uid": "m1", "path": "lib/a.js", "line": 2, "column": 5, "type": "warning", "message": "early"},
    {"uid": "m2", "path": "lib/a.js", "line": 2, "column": 9, "type": "notice", "message": "same line"},
    {"uid": "m0", "path": "lib/a.js", "line": None, "type": "warning", "message": "file level"},
    {"uid": "g1", "path": None, "type": "error", "message": "general"},
    {"uid": "b1", "path": "b.js", "line": 1, "type": "error", "message": "other file"},
]


class MessageRecordTests(unittest.TestCase):
    def test_record_fields_are_normalized(self) -> None:
        message = message_from_record({"uid": "x", "path": "", "line": True, "type": "fatal"})

        self.assertIsNone(message.path)
        self.assertIsNone(message.line)
        self.assertEqual(message.type, "notice")
        self.assertEqual(message.message, "")

    def test_uid_is_required(self) -> None:
        with self.assertRaises(ValueError):
            message_from_record({"path": "a.js"})


class MessageOrderingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.message_map = build_message_map(message_from_record(record) for record in RECORDS)

    def test_messages_sorted_by_line_then_column(self) -> None:
        self.assertEqual([m.uid for m in self.message_map["lib/a.js"]], ["m0", "m1", "m2", "m3"])

    def test_general_messages_are_not_navigable(self) -> None:
        self.assertNotIn(None, self.message_map)
        self.assertNotIn("g1", message_sequence(["lib/a.js", "b.js"], self.message_map))

    def test_sequence_follows_path_list(self) -> None:
        self.assertEqual(
            message_sequence(["lib/a.js", "b.js"], self.message_map),
            ["m0", "m1", "m2", "m3", "b1"],
        )

    def test_relative_message(self) -> None:
        uids = message_sequence(["b.js", "lib/a.js"], self.message_map)

        self.assertEqual(go_to_relative_message(uids, "", RelativePathPosition.NEXT), "b1")
        self.assertEqual(go_to_relative_message(uids, "b1", RelativePathPosition.NEXT), "m0")
        self.assertEqual(go_to_relative_message(uids, "m0", RelativePathPosition.PREVIOUS), "b1")
        self.assertIsNone(go_to_relative_message(uids, "m3", RelativePathPosition.NEXT))

    def test_relative_message_starts_from_current_file(self) -> None:
        path_list = ["b.js", "c.js", "lib/a.js"]
        uids = message_sequence(path_list, self.message_map)
        paths = message_paths(self.message_map)

        self.assertEqual(paths["m2"], "lib/a.js")
        self.assertEqual(
            go_to_relative_message(uids, "", RelativePathPosition.NEXT, "c.js", path_list, paths),
            "m0",
        )
        self.assertEqual(
            go_to_relative_message(uids, "", RelativePathPosition.PREVIOUS, "c.js", path_list, paths),
            "b1",
        )


if __name__ == "__main__":
    unittest.main()
