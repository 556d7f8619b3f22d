"""Command-line front door for versiontree.

Loads a version manifest, builds its tree, and replays key presses.
Then prints the visible tree, the file path list, or the tree JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import config
from .errors import VersionTreeError
from .input import DEFAULT_KEY_BINDINGS, KeyboardRouter
from .render import help_panel_lines
from .session import ReviewSession
from .tree_model import format_tree_rows, version_from_record
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> dict[str, object]:
    """Read a manifest file; raises ``SystemExit`` on missing or invalid JSON."""
    if not path.is_file():
        raise SystemExit(f"Manifest not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise SystemExit(f"Invalid manifest JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"Manifest must be a JSON object: {path}")
    return data


def build_session(manifest: dict[str, object]) -> ReviewSession:
    """Create a session with the manifest's version, diff, and messages loaded."""
    session = ReviewSession()
    session.load_version(version_from_record(manifest))

    diff_text = manifest.get("diff")
    if isinstance(diff_text, str):
        session.load_diff(diff_text)

    messages = manifest.get("messages")
    if isinstance(messages, list):
        session.load_messages(record for record in messages if isinstance(record, dict))
    return session


def parse_bind_options(
    options: list[str],
    parser: argparse.ArgumentParser,
) -> dict[str, tuple[str, ...]]:
    """Merge ``ACTION=KEYS`` options into the persisted key-binding overrides."""
    bindings = config.load_key_bindings()
    for option in options:
        action, sep, keys = option.partition("=")
        action = action.strip()
        if not sep or not keys:
            parser.error(f"--bind expects ACTION=KEYS, got {option!r}")
        if action not in DEFAULT_KEY_BINDINGS:
            parser.error(f"--bind: unknown action {action!r}")
        bindings[action] = tuple(keys)
    return bindings


def render_session(
    session: ReviewSession,
    theme_name: str | None,
    no_color: bool,
    show_help: bool,
) -> str:
    theme = resolve_theme(theme_name, no_color=no_color)
    state = session.state
    lines = format_tree_rows(session.tree, state.expanded, current_path=state.current_path, theme=theme)

    position = [state.current_path or "-"]
    if state.current_anchor:
        position.append(f"#{state.current_anchor}")
    if state.message_uid:
        position.append(f" [{state.message_uid}]")
    lines.append("")
    lines.append("".join(position))
    if state.status_message:
        lines.append(f"{theme.status}{state.status_message}{theme.reset}")
    if show_help:
        lines.append("")
        lines.extend(
            help_panel_lines(session.diff_loaded, theme=theme, messages_loaded=session.messages_loaded)
        )
    return "\n".join(lines) + "\n"


def main() -> None:
    """Parse CLI arguments, load the manifest, and print the result."""
    parser = argparse.ArgumentParser(
        description="Render a package version's files as a tree and replay navigation keys."
    )
    parser.add_argument("manifest", help="Path to a version manifest JSON file.")
    parser.add_argument("--keys", default="", help="Key presses to replay in order, e.g. 'ojjn'.")
    parser.add_argument("--expand-all", action="store_true", help="Expand every directory before replaying keys.")
    parser.add_argument("--paths", action="store_true", help="Print the ordered file path list instead of the tree.")
    parser.add_argument("--json", action="store_true", help="Print the tree as JSON instead of rendered rows.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--help-panel", action="store_true", help="Append the keyboard shortcut panel.")
    parser.add_argument(
        "--save-theme",
        action="store_true",
        help="Persist the --theme value as the default theme.",
    )
    parser.add_argument(
        "--bind",
        action="append",
        default=[],
        metavar="ACTION=KEYS",
        help="Persist a key-binding override, e.g. next_file=jl (repeatable).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LOG_LEVELS,
        default=None,
        help="Logging level (default from config, else WARNING).",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=(args.log_level or config.load_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.save_theme:
        if args.theme is None:
            parser.error("--save-theme requires --theme")
        theme_name = normalize_theme_name(args.theme)
        if theme_name != args.theme.strip().lower():
            parser.error(f"--save-theme: unknown theme {args.theme!r}")
        config.save_theme_name(theme_name)
    if args.bind:
        config.save_key_bindings(parse_bind_options(args.bind, parser))

    manifest = load_manifest(Path(args.manifest))
    try:
        session = build_session(manifest)
    except (ValueError, VersionTreeError) as exc:
        raise SystemExit(f"Cannot load manifest {args.manifest}: {exc}") from exc

    if args.expand_all:
        session.expand_all()
    router = KeyboardRouter(session, key_bindings=config.load_key_bindings())
    for key in args.keys:
        if not router.handle_token(key):
            logger.info("ignoring unbound key %r", key)

    if args.paths:
        sys.stdout.write("".join(f"{path}\n" for path in session.path_list))
        return
    if args.json:
        sys.stdout.write(json.dumps(session.tree.to_dict(), indent=2) + "\n")
        return

    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    sys.stdout.write(render_session(session, theme_name, args.no_color, args.help_panel))


if __name__ == "__main__":
    main()
