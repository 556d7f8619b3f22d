"""Exception types raised by tree building and session queries."""

from __future__ import annotations


class VersionTreeError(Exception):
    """Base class for versiontree failures."""


class TreeNotLoadedError(VersionTreeError, RuntimeError):
    """Raised when a session is queried before any version has been loaded."""


class MissingParentError(VersionTreeError, LookupError):
    """Raised when an entry's parent directory cannot be located in the tree."""

    def __init__(self, path: str, missing_segment: str) -> None:
        super().__init__(f"cannot place {path!r}: parent segment {missing_segment!r} not found")
        self.path = path
        self.missing_segment = missing_segment
