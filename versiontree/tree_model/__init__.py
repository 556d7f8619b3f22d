"""Tree-model creation, flattening, and row formatting.

Defines ``Entry`` and the immutable ``FileNode``/``DirectoryNode`` tree.
Also derives the file path list used for sequential navigation.
"""

from __future__ import annotations

from .build import (
    build_file_tree,
    build_version_tree,
    entries_from_records,
    entry_from_record,
    get_root_path,
    version_from_record,
)
from .path_index import build_path_list, directory_ids
from .rendering import format_tree_rows
from .types import DIRECTORY, FILE, DirectoryNode, Entry, FileNode, TreeNode, Version

__all__ = [
    "DIRECTORY",
    "FILE",
    "Entry",
    "FileNode",
    "DirectoryNode",
    "TreeNode",
    "Version",
    "build_file_tree",
    "build_version_tree",
    "entries_from_records",
    "entry_from_record",
    "get_root_path",
    "version_from_record",
    "build_path_list",
    "directory_ids",
    "format_tree_rows",
]
