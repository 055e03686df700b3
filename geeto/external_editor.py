"""Editor launch helper for editing text in ``$EDITOR``.

Used when a caller prefers the user's own editor over the inline one. Never
raises for editor failures: the initial text is returned instead.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
import time
from pathlib import Path

logger = logging.getLogger(__name__)

FALLBACK_EDITOR = "vi"


def editor_command() -> list[str]:
    editor_env = os.environ.get("EDITOR", "").strip()
    cmd = shlex.split(editor_env) if editor_env else []
    return cmd or [FALLBACK_EDITOR]


def edit_in_editor(initial_text: str = "", filename_hint: str = "geeto-commit.txt") -> str:
    """Round-trip ``initial_text`` through a temp file opened in ``$EDITOR``.

    Returns the trimmed file content after the editor exits.
    """
    tmp_path = Path(tempfile.gettempdir()) / f"{int(time.time() * 1000)}-{filename_hint}"
    try:
        tmp_path.write_text(initial_text, encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot write temp file %s: %s", tmp_path, exc)
        return initial_text

    try:
        subprocess.run([*editor_command(), str(tmp_path)], check=False)
        return tmp_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("editor round-trip failed: %s", exc)
        return initial_text
    finally:
        try:
            tmp_path.unlink()
        except OSError:
            pass
