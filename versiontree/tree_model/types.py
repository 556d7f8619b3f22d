"""Entry and tree-node datatypes used across tree-model modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

FILE = "file"
DIRECTORY = "directory"
ENTRY_KINDS = (FILE, DIRECTORY)


@dataclass(frozen=True)
class Entry:
    """One file-system object of a package version."""

    path: str
    depth: int
    filename: str
    kind: str = FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY


@dataclass(frozen=True)
class FileNode:
    id: str
    name: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class DirectoryNode:
    """Directory node; ``children`` are sorted directories-first, then by name."""

    id: str
    name: str
    children: tuple[TreeNode, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
        }


TreeNode = Union[FileNode, DirectoryNode]


@dataclass(frozen=True)
class Version:
    """A loaded package version: identity plus its flat entry list."""

    id: str
    name: str
    entries: tuple[Entry, ...] = ()
