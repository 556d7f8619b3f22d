from __future__ import annotations

from dataclasses import dataclass, field

from .changes import DiffHunk
from .expansion import ExpandedPathSet
from .messages import LinterMessage
from .tree_model import DirectoryNode, Version


@dataclass
class ViewerState:
    version: Version | None = None
    tree: DirectoryNode | None = None
    path_list: list[str] = field(default_factory=list)
    expanded: ExpandedPathSet = field(default_factory=ExpandedPathSet)
    current_path: str | None = None
    current_anchor: str = ""
    message_uid: str = ""
    diff_hunks: dict[str, list[DiffHunk]] | None = None
    message_map: dict[str, list[LinterMessage]] | None = None
    status_message: str = ""
    dirty: bool = True
