"""Command-line front door for geeto.

Parses CLI options, builds menu options or editor text, and dispatches into
the interactive calls. This is the only place a ``Quit`` outcome turns into
a process exit.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import load_engine_config, with_theme
from .external_editor import edit_in_editor
from .highlight import highlight_diff, highlight_line, syntax_category
from .logs import configure_logging
from .menu import Option, Quit, coerce_options
from .prompts import ask_question, confirm, present_inline_editor, present_multi_select, present_single_select
from .terminal import GeetoError
from .ui_theme import available_theme_names, resolve_theme

QUIT_EXIT_STATUS = 130


def _parse_option_arg(raw: str) -> Option:
    """``label=value`` or bare ``label`` (value equals label)."""
    label, sep, value = raw.partition("=")
    if not sep:
        return Option(label=raw, value=raw)
    return Option(label=label, value=value)


def _load_json_options(path: Path) -> list[Option]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Cannot read options from {path}: {exc}") from exc
    if not isinstance(data, list):
        raise SystemExit(f"Options file must hold a JSON list: {path}")
    return coerce_options(data)


def _menu_options(args: argparse.Namespace) -> list[Option]:
    options = [_parse_option_arg(raw) for raw in args.options]
    if args.json is not None:
        options.extend(_load_json_options(Path(args.json)))
    if not options:
        raise SystemExit("No options given.")
    return options


def _exit_if_quit(outcome: object) -> None:
    if isinstance(outcome, Quit):
        sys.stdout.write("\n\nCancelled by user\n")
        raise SystemExit(QUIT_EXIT_STATUS)


def _cmd_select(args: argparse.Namespace, config, theme) -> None:
    outcome = present_single_select(args.prompt, _menu_options(args), config=config, theme=theme)
    _exit_if_quit(outcome)
    sys.stdout.write(f"{outcome.value}\n")


def _cmd_multiselect(args: argparse.Namespace, config, theme) -> None:
    outcome = present_multi_select(args.prompt, _menu_options(args), config=config, theme=theme)
    _exit_if_quit(outcome)
    for value in outcome.value:
        sys.stdout.write(f"{value}\n")


def _cmd_edit(args: argparse.Namespace, config, theme) -> None:
    path = Path(args.file) if args.file else None
    if path is not None and path.exists():
        initial = path.read_text(encoding="utf-8")
    else:
        initial = args.text or ""
    syntax = args.syntax if args.syntax is not None else (path.name if path is not None else "")

    if args.external:
        edited: str | None = edit_in_editor(initial, path.name if path is not None else "geeto-edit.txt")
    else:
        edited = present_inline_editor(initial, args.label, syntax, config=config, theme=theme)
    if edited is None:
        raise SystemExit("Edit cancelled.")
    if args.write and path is not None:
        path.write_text(edited + "\n", encoding="utf-8")
        return
    sys.stdout.write(f"{edited}\n")


def _cmd_ask(args: argparse.Namespace, config, theme) -> None:
    answer = ask_question(args.question, args.default, config=config, theme=theme)
    _exit_if_quit(answer)
    sys.stdout.write(f"{answer}\n")


def _cmd_confirm(args: argparse.Namespace, config, theme) -> None:
    answer = confirm(args.question, default_yes=not args.default_no, config=config, theme=theme)
    _exit_if_quit(answer)
    if not answer:
        raise SystemExit(1)


def _cmd_highlight(args: argparse.Namespace, config, theme) -> None:
    path = Path(args.file)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    category = syntax_category(args.syntax if args.syntax is not None else path.name)
    text = path.read_text(encoding="utf-8", errors="replace")
    for line in text.splitlines():
        sys.stdout.write(highlight_line(line, category, theme) + "\n")


def _cmd_diff(args: argparse.Namespace, config, theme) -> None:
    sys.stdout.write(highlight_diff(sys.stdin.read(), theme))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geeto",
        description="Interactive terminal menus, inline editing, and prompts.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}, or plain).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-level", default=None, help="Write logs at this level (DEBUG, INFO, ...).")
    parser.add_argument("--log-file", default=None, help="Log file path (default: per-user log directory).")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("select", _cmd_select, "Pick one option."),
        ("multiselect", _cmd_multiselect, "Check any number of options."),
    ):
        menu = sub.add_parser(name, help=help_text)
        menu.add_argument("prompt", help="Question shown above the menu.")
        menu.add_argument("options", nargs="*", help="Options as LABEL or LABEL=VALUE.")
        menu.add_argument("--json", metavar="FILE", help="JSON list of {label, value, disabled, children} objects.")
        menu.set_defaults(handler=handler)

    edit = sub.add_parser("edit", help="Edit text inline.")
    edit.add_argument("file", nargs="?", default=None, help="File whose content to edit.")
    edit.add_argument("--text", default=None, help="Initial text when no file is given.")
    edit.add_argument("--label", default="Edit Message", help="Footer label.")
    edit.add_argument("--syntax", default=None, help="Highlight as this extension (py, md, json, ...).")
    edit.add_argument("--write", action="store_true", help="Write the result back to FILE.")
    edit.add_argument("--external", action="store_true", help="Use $EDITOR instead of the inline editor.")
    edit.set_defaults(handler=_cmd_edit)

    ask = sub.add_parser("ask", help="Ask a one-line question.")
    ask.add_argument("question")
    ask.add_argument("--default", default=None)
    ask.set_defaults(handler=_cmd_ask)

    yes_no = sub.add_parser("confirm", help="Ask a yes/no question; exit status 1 means no.")
    yes_no.add_argument("question")
    yes_no.add_argument("--default-no", action="store_true")
    yes_no.set_defaults(handler=_cmd_confirm)

    highlight = sub.add_parser("highlight", help="Print a file with syntax highlighting and exit.")
    highlight.add_argument("file")
    highlight.add_argument("--syntax", default=None)
    highlight.set_defaults(handler=_cmd_highlight)

    diff = sub.add_parser("diff", help="Color a unified diff read from stdin.")
    diff.set_defaults(handler=_cmd_diff)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the requested interactive call."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level is not None or args.log_file is not None:
        configure_logging(args.log_level or "DEBUG", Path(args.log_file) if args.log_file else None)

    config = with_theme(load_engine_config(), args.theme)
    theme = resolve_theme(config.theme, no_color=args.no_color)
    try:
        args.handler(args, config, theme)
    except GeetoError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
