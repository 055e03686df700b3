"""Public package surface for geeto.

Exports ``main`` for programmatic CLI invocation plus the interactive prompt
calls. Most implementation lives in submodules under ``geeto``.
"""

from __future__ import annotations

import logging

from .menu import Option, Quit, Selected
from .prompts import (
    ask_multiline,
    ask_question,
    confirm,
    present_inline_editor,
    present_multi_select,
    present_single_select,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "Option",
    "Selected",
    "Quit",
    "present_single_select",
    "present_multi_select",
    "present_inline_editor",
    "ask_question",
    "ask_multiline",
    "confirm",
]
