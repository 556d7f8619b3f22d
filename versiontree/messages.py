"""Linter message records and their navigation ordering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .navigation import RelativePathPosition, relative_item_from_path

MESSAGE_TYPES = ("error", "warning", "notice")


@dataclass(frozen=True)
class LinterMessage:
    uid: str
    path: str | None
    line: int | None
    column: int | None
    type: str
    message: str


def _optional_int(record: Mapping[str, object], key: str) -> int | None:
    value = record.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def message_from_record(record: Mapping[str, object]) -> LinterMessage:
    """Parse one linter record; ``uid`` is required, the rest is lenient."""
    uid = record.get("uid")
    if not isinstance(uid, str) or not uid:
        raise ValueError(f"invalid linter message uid: {uid!r}")
    path = record.get("path")
    message_type = record.get("type")
    text = record.get("message")
    return LinterMessage(
        uid=uid,
        path=path if isinstance(path, str) and path else None,
        line=_optional_int(record, "line"),
        column=_optional_int(record, "column"),
        type=message_type if message_type in MESSAGE_TYPES else "notice",
        message=text if isinstance(text, str) else "",
    )


def _message_sort_key(message: LinterMessage) -> tuple[int, int, int, int]:
    # Messages without a line (file-level) come before line-level ones.
    return (
        0 if message.line is None else 1,
        message.line or 0,
        0 if message.column is None else 1,
        message.column or 0,
    )


def build_message_map(messages: Iterable[LinterMessage]) -> dict[str, list[LinterMessage]]:
    """Group path-bound messages by path, each group in line/column order.

    General messages (no path) cannot be navigated to and are dropped here.
    """
    message_map: dict[str, list[LinterMessage]] = {}
    for message in messages:
        if message.path is None:
            continue
        message_map.setdefault(message.path, []).append(message)
    for path_messages in message_map.values():
        path_messages.sort(key=_message_sort_key)
    return message_map


def message_sequence(
    path_list: Sequence[str],
    message_map: Mapping[str, Sequence[LinterMessage]],
) -> list[str]:
    """Return message uids in tree display order, then line order per file."""
    uids: list[str] = []
    for path in path_list:
        uids.extend(message.uid for message in message_map.get(path, ()))
    return uids


def message_paths(message_map: Mapping[str, Sequence[LinterMessage]]) -> dict[str, str]:
    """Return ``{uid: path}`` for every message in ``message_map``."""
    return {message.uid: path for path, path_messages in message_map.items() for message in path_messages}


def go_to_relative_message(
    uids: Sequence[str],
    current_uid: str | None,
    position: RelativePathPosition,
    current_path: str | None = None,
    path_list: Sequence[str] = (),
    paths_by_uid: Mapping[str, str] | None = None,
) -> str | None:
    """Return the message uid adjacent to ``current_uid``.

    Without a current message, navigation starts from ``current_path``.
    """
    paths = paths_by_uid or {}
    return relative_item_from_path(
        uids, lambda uid: paths.get(uid, ""), path_list, current_uid or None, current_path, position
    )
