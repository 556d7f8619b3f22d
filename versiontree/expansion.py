"""Immutable expand/collapse state for tree directories."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExpandedPathSet:
    """Set of expanded directory ids; every operation returns a new value.

    Directories absent from the set are collapsed.
    """

    paths: frozenset[str] = field(default_factory=frozenset)

    def toggle(self, directory_id: str) -> ExpandedPathSet:
        if directory_id in self.paths:
            return ExpandedPathSet(self.paths - {directory_id})
        return ExpandedPathSet(self.paths | {directory_id})

    def expand_all(self, directory_ids: Iterable[str]) -> ExpandedPathSet:
        """Return a set containing exactly ``directory_ids``."""
        return ExpandedPathSet(frozenset(directory_ids))

    def collapse_all(self) -> ExpandedPathSet:
        return ExpandedPathSet()

    def is_expanded(self, directory_id: str) -> bool:
        return directory_id in self.paths

    def __contains__(self, directory_id: object) -> bool:
        return directory_id in self.paths

    def __len__(self) -> int:
        return len(self.paths)
