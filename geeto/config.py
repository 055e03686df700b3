"""Persistent JSON config helpers.

Stores engine tunables: Escape debounce window, menu viewport height, UI
theme, and indent text. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "geeto"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_ESCAPE_TIMEOUT_MS = 50
DEFAULT_MAX_VISIBLE_ITEMS = 15
DEFAULT_TAB_TEXT = "  "


@dataclass(frozen=True)
class EngineConfig:
    """Tunables consumed by the interactive sessions."""

    escape_timeout_ms: int = DEFAULT_ESCAPE_TIMEOUT_MS
    max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEMS
    theme: str = "default"
    tab_text: str = DEFAULT_TAB_TEXT


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep interactive
    behavior non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_bounded_int(value: object, default: int, low: int, high: int) -> int:
    """Normalize a JSON/env scalar into ``[low, high]``.

    Booleans and non-integers (other than integral strings) fall back to
    ``default``.
    """
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(low, min(high, value))


def _coerce_tab_text(value: object) -> str:
    """Accept only short runs of spaces as indent text."""
    if isinstance(value, str) and value and len(value) <= 8 and not value.strip(" "):
        return value
    return DEFAULT_TAB_TEXT


def load_engine_config() -> EngineConfig:
    """Build ``EngineConfig`` from the config file plus environment overrides.

    ``GEETO_THEME`` and ``GEETO_ESCAPE_TIMEOUT_MS`` win over persisted values.
    """
    data = load_config()
    escape_raw = os.environ.get("GEETO_ESCAPE_TIMEOUT_MS", data.get("escape_timeout_ms"))
    theme_raw = os.environ.get("GEETO_THEME") or data.get("theme")
    return EngineConfig(
        escape_timeout_ms=_coerce_bounded_int(escape_raw, DEFAULT_ESCAPE_TIMEOUT_MS, 5, 1000),
        max_visible_items=_coerce_bounded_int(data.get("max_visible_items"), DEFAULT_MAX_VISIBLE_ITEMS, 3, 100),
        theme=theme_raw.strip() if isinstance(theme_raw, str) and theme_raw.strip() else "default",
        tab_text=_coerce_tab_text(data.get("tab_text")),
    )


def save_engine_config(config: EngineConfig) -> None:
    """Merge ``config`` into the persisted JSON object."""
    data = load_config()
    data.update(asdict(config))
    save_config(data)


def with_theme(config: EngineConfig, theme: str | None) -> EngineConfig:
    """Return ``config`` with ``theme`` applied when one is given."""
    if not theme:
        return config
    return replace(config, theme=theme)
