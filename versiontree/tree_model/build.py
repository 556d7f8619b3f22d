"""Tree construction from flat, depth-annotated version entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from ..errors import MissingParentError
from .types import DIRECTORY, ENTRY_KINDS, FILE, DirectoryNode, Entry, FileNode, TreeNode, Version


def get_root_path(name: str) -> str:
    """Return the synthetic root id used for a version named ``name``."""
    return f"root-{name}"


def entry_from_record(record: Mapping[str, object]) -> Entry:
    """Parse one API/manifest record into an ``Entry``.

    ``kind`` wins over ``mime_category``; a ``mime_category`` of
    ``"directory"`` marks a directory and every other category a file.
    ``filename`` defaults to the last path segment.
    """
    path = record.get("path")
    if not isinstance(path, str) or not path or path.startswith("/") or path.endswith("/"):
        raise ValueError(f"invalid entry path: {path!r}")

    depth = record.get("depth", path.count("/"))
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise ValueError(f"invalid depth for {path!r}: {depth!r}")
    if depth != path.count("/"):
        raise ValueError(f"depth {depth} does not match path {path!r}")

    kind = record.get("kind")
    if kind is None:
        kind = DIRECTORY if record.get("mime_category") == DIRECTORY else FILE
    if kind not in ENTRY_KINDS:
        raise ValueError(f"invalid kind for {path!r}: {kind!r}")

    filename = record.get("filename")
    if not isinstance(filename, str) or not filename:
        filename = path.rsplit("/", 1)[-1]

    return Entry(path=path, depth=depth, filename=filename, kind=str(kind))


def entries_from_records(records: Iterable[Mapping[str, object]]) -> list[Entry]:
    """Parse records and order them by ascending depth (stable within a depth)."""
    entries = [entry_from_record(record) for record in records]
    entries.sort(key=lambda entry: entry.depth)
    return entries


def version_from_record(record: Mapping[str, object]) -> Version:
    """Parse a version manifest object (``id``, ``name``, ``entries``)."""
    raw_id = record.get("id")
    if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)):
        raise ValueError(f"invalid version id: {raw_id!r}")
    name = record.get("name")
    if not isinstance(name, str) or not name:
        name = str(raw_id)
    raw_entries = record.get("entries", [])
    if not isinstance(raw_entries, list) or not all(isinstance(item, dict) for item in raw_entries):
        raise ValueError("version entries must be a list of objects")
    return Version(id=str(raw_id), name=name, entries=tuple(entries_from_records(raw_entries)))


@dataclass
class _PendingDirectory:
    id: str
    name: str
    children: list[_PendingDirectory | FileNode] = field(default_factory=list)


def _sibling_sort_key(node: _PendingDirectory | FileNode) -> tuple[bool, str]:
    return (isinstance(node, FileNode), node.name)


def _freeze(directory: _PendingDirectory) -> DirectoryNode:
    """Sort children recursively and convert to immutable nodes."""
    children: list[TreeNode] = []
    for child in sorted(directory.children, key=_sibling_sort_key):
        children.append(_freeze(child) if isinstance(child, _PendingDirectory) else child)
    return DirectoryNode(id=directory.id, name=directory.name, children=tuple(children))


def _find_parent(root: _PendingDirectory, entry: Entry) -> _PendingDirectory:
    """Walk from ``root`` along the entry's parent segments."""
    current = root
    for segment in entry.path.split("/")[:-1]:
        found = None
        for child in current.children:
            if isinstance(child, _PendingDirectory) and child.name == segment:
                found = child
                break
        if found is None:
            raise MissingParentError(entry.path, segment)
        current = found
    return current


def build_file_tree(root_id: str, root_name: str, entries: Sequence[Entry]) -> DirectoryNode:
    """Build a sorted directory tree from depth-ordered ``entries``.

    Entries are placed depth by depth so every directory exists before its
    children attach to it. Raises ``MissingParentError`` when an entry's
    parent directory was never supplied.
    """
    root = _PendingDirectory(id=root_id, name=root_name)
    max_depth = max((entry.depth for entry in entries), default=0)

    for depth in range(max_depth + 1):
        for entry in entries:
            if entry.depth != depth:
                continue
            parent = _find_parent(root, entry)
            if entry.is_dir:
                parent.children.append(_PendingDirectory(id=entry.path, name=entry.filename))
            else:
                parent.children.append(FileNode(id=entry.path, name=entry.filename))

    return _freeze(root)


def build_version_tree(version: Version) -> DirectoryNode:
    """Build the tree for ``version`` rooted at ``get_root_path(version.name)``."""
    return build_file_tree(get_root_path(version.name), version.name, version.entries)
