"""Interactive calls: menus, the inline editor, and simple prompts.

Each call takes exclusive ownership of the terminal for its duration, runs
the shared session loop, and releases the terminal on every exit path. Menus
report a quit request as a ``Quit`` value instead of ending the process; the
top-level program decides what quitting means.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable, Iterable
from typing import Any

from .config import EngineConfig, load_engine_config
from .editor import EditBuffer, EditorController, EditorDone
from .highlight import syntax_category
from .input import InputReader, KeyDecoder
from .line_input import LineDone, LineInputController, render_line_prompt
from .menu import Option, Quit, Selected, SelectionState, coerce_options
from .render import FrameWriter, render_editor_frame, render_menu_frame
from .runtime import END_OF_INPUT, KeyController, run_session
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_SIZE = (80, 24)

# One controller per descriptor pair, so nested calls share its busy guard.
_DEFAULT_TERMINALS: dict[tuple[int, int], TerminalController] = {}


def default_terminal() -> TerminalController:
    """Controller bound to the process's stdin/stdout, shared by every call."""
    fds = (sys.stdin.fileno(), sys.stdout.fileno())
    terminal = _DEFAULT_TERMINALS.get(fds)
    if terminal is None:
        terminal = TerminalController(*fds)
        _DEFAULT_TERMINALS[fds] = terminal
    return terminal


def _resolve_settings(config: EngineConfig | None, theme: UITheme | None) -> tuple[EngineConfig, UITheme]:
    config = config if config is not None else load_engine_config()
    return config, theme if theme is not None else resolve_theme(config.theme)


def _run_interactive(
    terminal: TerminalController | None,
    config: EngineConfig,
    controller: KeyController,
    build_frame: Callable[[int, int], list[str]],
    before_paint: Callable[[FrameWriter], None] | None = None,
) -> Any:
    terminal = terminal if terminal is not None else default_terminal()
    with terminal.acquire() as session:
        writer = FrameWriter(session.stdout_fd)
        reader = InputReader(session.stdin_fd, KeyDecoder(config.escape_timeout_ms))

        def repaint() -> None:
            if before_paint is not None:
                before_paint(writer)
            size = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
            writer.paint(build_frame(size.columns, size.lines))

        return run_session(reader, controller, repaint)


def _present_menu(
    prompt: str,
    options: Iterable[Option | dict | tuple | str],
    *,
    multi: bool,
    terminal: TerminalController | None,
    config: EngineConfig | None,
    theme: UITheme | None,
) -> Selected | Quit:
    items = coerce_options(options)
    if not items:
        raise ValueError("a menu needs at least one option")
    config, theme = _resolve_settings(config, theme)
    state = SelectionState(items, multi=multi, viewport_height=config.max_visible_items)

    def honor_clear(writer: FrameWriter) -> None:
        if state.clear_requested:
            state.clear_requested = False
            writer.clear_screen()

    outcome = _run_interactive(
        terminal,
        config,
        state,
        lambda columns, _rows: render_menu_frame(state, prompt, theme, columns),
        honor_clear,
    )
    if outcome is END_OF_INPUT:
        return Quit()
    return outcome


def present_single_select(
    prompt: str,
    options: Iterable[Option | dict | tuple | str],
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> Selected | Quit:
    """Let the user pick one option; ``Selected.value`` is its value."""
    return _present_menu(prompt, options, multi=False, terminal=terminal, config=config, theme=theme)


def present_multi_select(
    prompt: str,
    options: Iterable[Option | dict | tuple | str],
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> Selected | Quit:
    """Let the user check options; ``Selected.value`` lists checked leaf values.

    Group-header values never appear in the list.
    """
    return _present_menu(prompt, options, multi=True, terminal=terminal, config=config, theme=theme)


def present_inline_editor(
    initial_text: str,
    label: str = "Edit Message",
    syntax_hint: str = "",
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> str | None:
    """Edit ``initial_text`` in place; returns the trimmed text, or ``None`` on cancel."""
    config, theme = _resolve_settings(config, theme)
    buffer = EditBuffer(initial_text, tab_text=config.tab_text)
    controller = EditorController(buffer)
    category = syntax_category(syntax_hint)

    outcome = _run_interactive(
        terminal,
        config,
        controller,
        lambda columns, rows: render_editor_frame(buffer, label, category, theme, columns, rows),
    )
    if isinstance(outcome, EditorDone):
        return outcome.text
    return None


def _read_line(
    question: str,
    *,
    multiline: bool,
    terminal: TerminalController | None,
    config: EngineConfig | None,
    theme: UITheme | None,
) -> str | Quit:
    config, theme = _resolve_settings(config, theme)
    controller = LineInputController(multiline=multiline)
    outcome = _run_interactive(
        terminal,
        config,
        controller,
        lambda columns, _rows: render_line_prompt(question, controller, theme, columns),
    )
    if isinstance(outcome, Quit):
        return outcome
    if isinstance(outcome, LineDone):
        return outcome.text
    # End-of-input: keep what was typed so far.
    return controller.text


def ask_question(
    question: str,
    default: str | None = None,
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> str | Quit:
    """Read one line; an empty answer yields ``default`` when given."""
    full_question = f"{question} ({default}) " if default else question
    answer = _read_line(full_question, multiline=False, terminal=terminal, config=config, theme=theme)
    if isinstance(answer, Quit):
        return answer
    answer = answer.strip()
    if not answer and default is not None:
        return default
    return answer


def ask_multiline(
    question: str,
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> str | Quit:
    """Read free text until Ctrl-D; returns it trimmed."""
    answer = _read_line(question, multiline=True, terminal=terminal, config=config, theme=theme)
    if isinstance(answer, Quit):
        return answer
    return answer.strip()


def confirm(
    question: str,
    default_yes: bool = True,
    *,
    terminal: TerminalController | None = None,
    config: EngineConfig | None = None,
    theme: UITheme | None = None,
) -> bool | Quit:
    """Ask a yes/no question; an empty answer picks the default."""
    suffix = " (Y/n): " if default_yes else " (y/N): "
    answer = ask_question(f"{question}{suffix}", terminal=terminal, config=config, theme=theme)
    if isinstance(answer, Quit):
        return answer
    if answer == "":
        return default_yes
    return answer.lower() in {"y", "yes"}
