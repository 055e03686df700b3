"""Input-layer public API for key decoding.

Exports are split between the pure byte decoder (``KeyDecoder``) and the
descriptor-bound reader used by the session loop.
"""

from .decoder import DEFAULT_ESCAPE_TIMEOUT_MS, ESCAPE_SEQUENCES, KeyDecoder
from .keys import CTRL_C, CTRL_D, CTRL_K, CTRL_S, Key, KeyEvent
from .reader import InputReader

__all__ = [
    "DEFAULT_ESCAPE_TIMEOUT_MS",
    "ESCAPE_SEQUENCES",
    "KeyDecoder",
    "InputReader",
    "Key",
    "KeyEvent",
    "CTRL_C",
    "CTRL_D",
    "CTRL_K",
    "CTRL_S",
]
