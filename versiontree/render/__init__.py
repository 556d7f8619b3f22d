"""Presentation helpers that sit outside the tree model."""

from .help import SHORTCUT_ROWS, help_panel_lines

__all__ = ["SHORTCUT_ROWS", "help_panel_lines"]
