"""Keyboard shortcut help panel content.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, PLAIN_THEME, UITheme

NEEDS_DIFF = "diff"
NEEDS_MESSAGES = "messages"

# (key, label, required data) in display order.
SHORTCUT_ROWS: tuple[tuple[str, str, str | None], ...] = (
    ("k", "Up file", None),
    ("j", "Down file", None),
    ("p", "Previous change", NEEDS_DIFF),
    ("n", "Next change", NEEDS_DIFF),
    ("a", "Previous message", NEEDS_MESSAGES),
    ("z", "Next message", NEEDS_MESSAGES),
    ("o", "Open all folders", None),
    ("c", "Close all folders", None),
)


def help_panel_lines(
    diff_loaded: bool,
    theme: UITheme | None = None,
    no_color: bool = False,
    messages_loaded: bool = True,
) -> list[str]:
    """Return the shortcut panel.

    Diff keys are dimmed while no diff is loaded and message keys while no
    linter messages are loaded. The plain theme has no dim style, so those
    rows get a ``(no diff)`` or ``(no messages)`` suffix instead.
    """
    active_theme = PLAIN_THEME if no_color else (theme or DEFAULT_THEME)
    reset = active_theme.reset
    available = {NEEDS_DIFF: diff_loaded, NEEDS_MESSAGES: messages_loaded}
    lines = [f"{active_theme.help_heading}KEYS{reset}"]
    for key, label, requires in SHORTCUT_ROWS:
        if requires is not None and not available[requires]:
            suffix = "" if active_theme.help_dim else f" (no {requires})"
            lines.append(f"{active_theme.help_dim}{key}  {label}{suffix}{reset}")
        else:
            lines.append(f"{active_theme.help_key}{key}{reset}  {label}")
    return lines
