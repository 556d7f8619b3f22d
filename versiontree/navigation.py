"""Relative navigation over ordered sequences.

This module intentionally has no UI concerns.
The same adjacency rule drives file, diff-hunk, and linter-message jumps.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class RelativePathPosition(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


def relative_item(
    sequence: Sequence[T],
    current: T | None,
    position: RelativePathPosition,
) -> T | None:
    """Return the element adjacent to ``current`` in ``position`` direction.

    With no current element (or one no longer in ``sequence``) ``NEXT``
    yields the first element and ``PREVIOUS`` the last. Returns ``None``
    past either end; there is no wraparound.
    """
    if not sequence:
        return None

    index: int | None = None
    if current is not None:
        try:
            index = sequence.index(current)
        except ValueError:
            index = None

    if index is None:
        return sequence[0] if position is RelativePathPosition.NEXT else sequence[-1]

    target = index + 1 if position is RelativePathPosition.NEXT else index - 1
    if 0 <= target < len(sequence):
        return sequence[target]
    return None


def go_to_relative_file(
    path_list: Sequence[str],
    current_path: str | None,
    position: RelativePathPosition,
) -> str | None:
    """Return the file path adjacent to ``current_path`` in ``path_list``."""
    return relative_item(path_list, current_path, position)


def relative_item_from_path(
    sequence: Sequence[T],
    path_of: Callable[[T], str],
    path_list: Sequence[str],
    current: T | None,
    current_path: str | None,
    position: RelativePathPosition,
) -> T | None:
    """Like ``relative_item``, but enter ``sequence`` at the current file.

    When ``current`` is not in ``sequence`` and ``current_path`` is in
    ``path_list``, ``NEXT`` yields the first element whose file is at or
    after ``current_path`` in ``path_list`` order and ``PREVIOUS`` the last
    element at or before it.
    """
    if current is not None and current in sequence:
        return relative_item(sequence, current, position)
    if current_path is None or current_path not in path_list:
        return relative_item(sequence, None, position)

    order = {path: index for index, path in enumerate(path_list)}
    current_index = order[current_path]
    if position is RelativePathPosition.NEXT:
        for item in sequence:
            if order.get(path_of(item), -1) >= current_index:
                return item
        return None
    for item in reversed(sequence):
        if order.get(path_of(item), len(path_list)) <= current_index:
            return item
    return None
