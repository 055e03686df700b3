"""Rendering: the incremental frame writer and per-view frame builders."""

from .editor import editor_scroll_top, editor_viewport_rows, render_editor_frame
from .frame import FrameWriter
from .menu import render_menu_frame

__all__ = [
    "FrameWriter",
    "editor_scroll_top",
    "editor_viewport_rows",
    "render_editor_frame",
    "render_menu_frame",
]
