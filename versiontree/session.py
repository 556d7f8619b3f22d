"""Review session: one loaded version plus its navigation state.

The session owns the built tree, the derived path list, expansion state, and
the current file/anchor/message selection. Every navigation entry point
returns the new position or ``None`` when nothing moved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .changes import DiffPosition, diff_positions, go_to_relative_diff, parse_unified_diff
from .errors import TreeNotLoadedError
from .expansion import ExpandedPathSet
from .messages import (
    build_message_map,
    go_to_relative_message,
    message_from_record,
    message_paths,
    message_sequence,
)
from .navigation import RelativePathPosition, go_to_relative_file
from .state import ViewerState
from .tree_model import DirectoryNode, Version, build_path_list, build_version_tree, directory_ids

logger = logging.getLogger(__name__)

_DIRECTION_WORDS = {
    RelativePathPosition.NEXT: "next",
    RelativePathPosition.PREVIOUS: "previous",
}


class ReviewSession:
    """Single-user session over one package version at a time."""

    def __init__(self, state: ViewerState | None = None) -> None:
        self.state = state if state is not None else ViewerState()

    def _require_tree(self) -> DirectoryNode:
        if self.state.tree is None:
            raise TreeNotLoadedError("no version tree has been loaded")
        return self.state.tree

    @property
    def tree(self) -> DirectoryNode:
        return self._require_tree()

    @property
    def path_list(self) -> list[str]:
        self._require_tree()
        return self.state.path_list

    @property
    def diff_loaded(self) -> bool:
        return self.state.diff_hunks is not None

    @property
    def messages_loaded(self) -> bool:
        return self.state.message_map is not None

    def load_version(self, version: Version) -> DirectoryNode:
        """Build and install the tree for ``version``.

        Expansion survives a rebuild of the same version and is reset when a
        different version arrives. The tree and path list are swapped in
        together only after both are fully computed.
        """
        state = self.state
        tree = build_version_tree(version)
        path_list = build_path_list(tree)

        same_version = state.version is not None and state.version.id == version.id
        if not same_version:
            state.expanded = ExpandedPathSet()
            state.current_anchor = ""
            state.message_uid = ""
            state.diff_hunks = None
            state.message_map = None
        if state.current_path not in path_list:
            state.current_path = None
            state.current_anchor = ""

        state.version = version
        state.tree = tree
        state.path_list = path_list
        state.status_message = ""
        state.dirty = True
        logger.debug("loaded version %s with %d files", version.id, len(path_list))
        return tree

    def select_file(self, path: str) -> None:
        """Make ``path`` the current file; clears the hunk and message selection."""
        if path not in self.path_list:
            raise KeyError(path)
        self.state.current_path = path
        self.state.current_anchor = ""
        self.state.message_uid = ""
        self.state.dirty = True

    def toggle_directory(self, directory_id: str) -> ExpandedPathSet:
        self._require_tree()
        self.state.expanded = self.state.expanded.toggle(directory_id)
        self.state.dirty = True
        return self.state.expanded

    def expand_all(self) -> ExpandedPathSet:
        self.state.expanded = self.state.expanded.expand_all(directory_ids(self.tree))
        self.state.dirty = True
        return self.state.expanded

    def collapse_all(self) -> ExpandedPathSet:
        self._require_tree()
        self.state.expanded = self.state.expanded.collapse_all()
        self.state.dirty = True
        return self.state.expanded

    def is_expanded(self, directory_id: str) -> bool:
        self._require_tree()
        return self.state.expanded.is_expanded(directory_id)

    def load_diff(self, diff_text: str) -> None:
        self.state.diff_hunks = parse_unified_diff(diff_text)
        self.state.dirty = True

    def clear_diff(self) -> None:
        self.state.diff_hunks = None
        self.state.current_anchor = ""
        self.state.dirty = True

    def load_messages(self, records: Iterable[Mapping[str, object]]) -> None:
        self.state.message_map = build_message_map(message_from_record(record) for record in records)
        self.state.dirty = True

    def clear_messages(self) -> None:
        self.state.message_map = None
        self.state.message_uid = ""
        self.state.dirty = True

    def _report_boundary(self, noun: str, position: RelativePathPosition) -> None:
        message = f"No {_DIRECTION_WORDS[position]} {noun}"
        logger.debug(message)
        self.state.status_message = message
        self.state.dirty = True

    def go_to_relative_file(self, position: RelativePathPosition) -> str | None:
        """Move to the adjacent file in display order."""
        target = go_to_relative_file(self.path_list, self.state.current_path, position)
        if target is None:
            self._report_boundary("file", position)
            return None
        self.select_file(target)
        self.state.status_message = ""
        return target

    def go_to_relative_diff(self, position: RelativePathPosition) -> DiffPosition | None:
        """Move to the adjacent diff hunk, crossing file boundaries as needed.

        With no hunk selected, the search starts at the current file.
        """
        path_list = self.path_list
        if self.state.diff_hunks is None:
            logger.warning("Cannot navigate to %s change without diff loaded", _DIRECTION_WORDS[position])
            return None
        positions = diff_positions(path_list, self.state.diff_hunks)
        target = go_to_relative_diff(
            positions, self.state.current_path, self.state.current_anchor, position, path_list=path_list
        )
        if target is None:
            self._report_boundary("change", position)
            return None
        self.state.current_path = target.path
        self.state.current_anchor = target.anchor
        self.state.status_message = ""
        self.state.dirty = True
        return target

    def go_to_relative_message(self, position: RelativePathPosition) -> str | None:
        """Move to the adjacent linter message and its file."""
        path_list = self.path_list
        message_map = self.state.message_map
        if message_map is None:
            logger.warning("Cannot navigate to %s message without linter messages loaded", _DIRECTION_WORDS[position])
            return None
        uids = message_sequence(path_list, message_map)
        paths_by_uid = message_paths(message_map)
        target = go_to_relative_message(
            uids,
            self.state.message_uid,
            position,
            current_path=self.state.current_path,
            path_list=path_list,
            paths_by_uid=paths_by_uid,
        )
        if target is None:
            self._report_boundary("message", position)
            return None
        self.state.current_path = paths_by_uid[target]
        self.state.message_uid = target
        self.state.current_anchor = ""
        self.state.status_message = ""
        self.state.dirty = True
        return target
