"""Inline multi-line editor: text buffer plus key bindings."""

from .buffer import EditBuffer
from .controller import EditorController, EditorDone

__all__ = ["EditBuffer", "EditorController", "EditorDone"]
