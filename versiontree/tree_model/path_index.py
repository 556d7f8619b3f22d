"""Flattened orderings derived from a built tree."""

from __future__ import annotations

from .types import DirectoryNode


def build_path_list(tree: DirectoryNode) -> list[str]:
    """Return file ids in depth-first display order; directories are skipped."""
    paths: list[str] = []

    def walk(directory: DirectoryNode) -> None:
        for child in directory.children:
            if isinstance(child, DirectoryNode):
                walk(child)
            else:
                paths.append(child.id)

    walk(tree)
    return paths


def directory_ids(tree: DirectoryNode) -> list[str]:
    """Return every non-root directory id in depth-first display order."""
    ids: list[str] = []

    def walk(directory: DirectoryNode) -> None:
        for child in directory.children:
            if isinstance(child, DirectoryNode):
                ids.append(child.id)
                walk(child)

    walk(tree)
    return ids
