"""Formatting helpers for visible tree rows."""

from __future__ import annotations

from ..expansion import ExpandedPathSet
from ..ui_theme import DEFAULT_THEME, PLAIN_THEME, UITheme
from .types import DirectoryNode

EMPTY_DIRECTORY_TEXT = "This folder is empty"


def format_tree_rows(
    tree: DirectoryNode,
    expanded: ExpandedPathSet,
    current_path: str | None = None,
    theme: UITheme | None = None,
    no_color: bool = False,
) -> list[str]:
    """Render the root row plus every visible descendant as display text.

    The root is always open. Collapsed directories hide their subtree and
    expanded empty directories get a placeholder row.
    """
    active_theme = PLAIN_THEME if no_color else (theme or DEFAULT_THEME)
    reset = active_theme.reset
    rows = [f"{active_theme.tree_root}{tree.name}/{reset}"]

    def walk(directory: DirectoryNode, level: int) -> None:
        indent = "  " * level
        for child in directory.children:
            if isinstance(child, DirectoryNode):
                is_open = expanded.is_expanded(child.id)
                marker = "▾ " if is_open else "▸ "
                rows.append(
                    f"{indent}{active_theme.tree_marker}{marker}{reset}"
                    f"{active_theme.tree_dir}{child.name}/{reset}"
                )
                if not is_open:
                    continue
                if child.children:
                    walk(child, level + 1)
                else:
                    rows.append(
                        f"{indent}    {active_theme.tree_empty_hint}{EMPTY_DIRECTORY_TEXT}{reset}"
                    )
                continue

            # Align file names under the parent directory arrow column.
            name = child.name
            if child.id == current_path:
                name = f"{active_theme.reverse}{name}{reset}" if active_theme.reverse else f"{name} <"
                rows.append(f"{indent}  {name}")
            else:
                rows.append(f"{indent}  {active_theme.tree_file_default}{name}{reset}")

    walk(tree, 0)
    return rows
