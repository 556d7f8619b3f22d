"""Diff-hunk extraction and hunk-position ordering.

Unified diff text is classified line by line with pygments' ``DiffLexer``.
Hunks are then laid out in tree display order so ``n``/``p`` can step
through them with the shared relative navigator.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from pygments.lexers import DiffLexer
from pygments.token import Generic, Token

from .navigation import RelativePathPosition, relative_item_from_path

HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
DEV_NULL = "/dev/null"
TokenType = type(Token)


@dataclass(frozen=True)
class DiffHunk:
    """One ``@@`` section of a file diff."""

    path: str
    anchor: str
    header: str
    old_start: int
    old_count: int
    new_start: int
    new_count: int


@dataclass(frozen=True)
class DiffPosition:
    path: str
    anchor: str


def hunk_anchor(index: int) -> str:
    """Return the anchor for the ``index``-th (1-based) hunk of a file."""
    return f"hunk-{index}"


def _classified_lines(diff_text: str) -> Iterator[tuple[TokenType, str]]:
    """Yield ``(token_type, line)`` pairs using the first token of each line."""
    line_type: TokenType | None = None
    parts: list[str] = []
    for token_type, value in DiffLexer(stripnl=False).get_tokens(diff_text):
        if line_type is None and value:
            line_type = token_type
        parts.append(value)
        if value.endswith("\n"):
            yield line_type or Token.Text, "".join(parts)[:-1]
            line_type = None
            parts = []
    if parts and "".join(parts):
        yield line_type or Token.Text, "".join(parts)


def _strip_diff_prefix(raw: str) -> str:
    path = raw.split("\t", 1)[0].strip()
    if path.startswith(("a/", "b/")):
        return path[2:]
    return path


def parse_unified_diff(diff_text: str) -> dict[str, list[DiffHunk]]:
    """Parse a (possibly multi-file) unified diff into hunks keyed by path.

    The ``+++`` side names the file; deleted files fall back to the ``---``
    side. Lines inside a hunk body are never mistaken for file headers.
    """
    hunks: dict[str, list[DiffHunk]] = {}
    old_path: str | None = None
    current_path: str | None = None
    old_remaining = 0
    new_remaining = 0

    for token_type, line in _classified_lines(diff_text):
        if old_remaining > 0 or new_remaining > 0:
            if line.startswith("-"):
                old_remaining -= 1
            elif line.startswith("+"):
                new_remaining -= 1
            elif line.startswith("\\"):
                continue
            else:
                old_remaining -= 1
                new_remaining -= 1
            continue

        if token_type in Generic.Heading:
            old_path = None
            current_path = None
        elif token_type in Generic.Deleted and line.startswith("--- "):
            old_path = _strip_diff_prefix(line[4:])
        elif token_type in Generic.Inserted and line.startswith("+++ "):
            new_path = _strip_diff_prefix(line[4:])
            current_path = old_path if new_path == DEV_NULL and old_path else new_path
        elif token_type in Generic.Subheading and current_path is not None:
            match = HUNK_HEADER_RE.match(line)
            if match is None:
                continue
            old_count = int(match.group(2)) if match.group(2) is not None else 1
            new_count = int(match.group(4)) if match.group(4) is not None else 1
            file_hunks = hunks.setdefault(current_path, [])
            file_hunks.append(
                DiffHunk(
                    path=current_path,
                    anchor=hunk_anchor(len(file_hunks) + 1),
                    header=line,
                    old_start=int(match.group(1)),
                    old_count=old_count,
                    new_start=int(match.group(3)),
                    new_count=new_count,
                )
            )
            old_remaining = old_count
            new_remaining = new_count

    return hunks


def diff_positions(
    path_list: Sequence[str],
    hunks_by_path: Mapping[str, Sequence[DiffHunk]],
) -> list[DiffPosition]:
    """Return hunk positions in tree display order, then hunk order per file.

    Files absent from ``path_list`` are not reachable and are left out.
    """
    positions: list[DiffPosition] = []
    for path in path_list:
        for hunk in hunks_by_path.get(path, ()):
            positions.append(DiffPosition(path=path, anchor=hunk.anchor))
    return positions


def go_to_relative_diff(
    positions: Sequence[DiffPosition],
    current_path: str | None,
    current_anchor: str | None,
    position: RelativePathPosition,
    path_list: Sequence[str] = (),
) -> DiffPosition | None:
    """Return the hunk position adjacent to the current file/anchor pair.

    Without a current hunk, navigation starts from ``current_path`` when it
    is in ``path_list``.
    """
    current = None
    if current_path is not None and current_anchor:
        current = DiffPosition(path=current_path, anchor=current_anchor)
    return relative_item_from_path(
        positions, lambda item: item.path, path_list, current, current_path, position
    )
