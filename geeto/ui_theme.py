"""UI theme definitions and selection helpers.

Themes are ANSI palettes for menu rows, editor chrome, syntax tokens, and
diff coloring. Renderers only ever read semantic fields from ``UITheme``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    bright: str
    reverse: str
    reverse_off: str
    prompt_marker: str
    pointer: str
    row_active: str
    row_muted: str
    row_heading: str
    hint: str
    query_prompt: str
    box_checked: str
    box_partial: str
    box_unchecked: str
    counter: str
    gutter_number: str
    gutter_bar: str
    gutter_bar_active: str
    footer_title: str
    footer_hint: str
    syntax_comment: str
    syntax_string: str
    syntax_keyword: str
    syntax_number: str
    syntax_variable: str
    syntax_heading: str
    syntax_emphasis: str
    syntax_code: str
    syntax_key: str
    syntax_constant: str
    syntax_selector: str
    diff_header: str
    diff_hunk: str
    diff_added: str
    diff_removed: str
    diff_context: str

    def syntax_style(self, style_name: str) -> str:
        """Return the escape prefix for a highlight style name, or ``""``."""
        return getattr(self, f"syntax_{style_name}", "")


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    bright="\033[1m",
    reverse="\033[7m",
    reverse_off="\033[27m",
    prompt_marker="\033[36m",
    pointer="\033[36m",
    row_active="\033[36m\033[1m",
    row_muted="\033[90m",
    row_heading="\033[1m",
    hint="\033[90m",
    query_prompt="\033[36m",
    box_checked="\033[32m",
    box_partial="\033[33m",
    box_unchecked="\033[90m",
    counter="\033[36m",
    gutter_number="\033[90m",
    gutter_bar="\033[90m",
    gutter_bar_active="\033[36m",
    footer_title="\033[36m",
    footer_hint="\033[90m",
    syntax_comment="\033[90m",
    syntax_string="\033[32m",
    syntax_keyword="\033[36m",
    syntax_number="\033[35m",
    syntax_variable="\033[33m",
    syntax_heading="\033[36m",
    syntax_emphasis="\033[33m",
    syntax_code="\033[32m",
    syntax_key="\033[36m",
    syntax_constant="\033[35m",
    syntax_selector="\033[33m",
    diff_header="\033[36m",
    diff_hunk="\033[33m",
    diff_added="\033[32m",
    diff_removed="\033[31m",
    diff_context="\033[37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    bright="\033[1m",
    reverse="\033[7m",
    reverse_off="\033[27m",
    prompt_marker="\033[38;5;39m",
    pointer="\033[38;5;45m",
    row_active="\033[1;38;5;45m",
    row_muted="\033[38;5;110m",
    row_heading="\033[1;38;5;153m",
    hint="\033[2;38;5;110m",
    query_prompt="\033[1;38;5;45m",
    box_checked="\033[38;5;84m",
    box_partial="\033[38;5;215m",
    box_unchecked="\033[38;5;73m",
    counter="\033[38;5;45m",
    gutter_number="\033[38;5;73m",
    gutter_bar="\033[2;38;5;31m",
    gutter_bar_active="\033[38;5;39m",
    footer_title="\033[1;38;5;39m",
    footer_hint="\033[2;38;5;110m",
    syntax_comment="\033[38;5;66m",
    syntax_string="\033[38;5;114m",
    syntax_keyword="\033[38;5;81m",
    syntax_number="\033[38;5;183m",
    syntax_variable="\033[38;5;222m",
    syntax_heading="\033[1;38;5;81m",
    syntax_emphasis="\033[38;5;222m",
    syntax_code="\033[38;5;114m",
    syntax_key="\033[38;5;117m",
    syntax_constant="\033[38;5;183m",
    syntax_selector="\033[38;5;222m",
    diff_header="\033[38;5;45m",
    diff_hunk="\033[38;5;215m",
    diff_added="\033[38;5;84m",
    diff_removed="\033[38;5;203m",
    diff_context="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    bright="",
    reverse="\033[7m",
    reverse_off="\033[27m",
    prompt_marker="",
    pointer="",
    row_active="",
    row_muted="",
    row_heading="",
    hint="",
    query_prompt="",
    box_checked="",
    box_partial="",
    box_unchecked="",
    counter="",
    gutter_number="",
    gutter_bar="",
    gutter_bar_active="",
    footer_title="",
    footer_hint="",
    syntax_comment="",
    syntax_string="",
    syntax_keyword="",
    syntax_number="",
    syntax_variable="",
    syntax_heading="",
    syntax_emphasis="",
    syntax_code="",
    syntax_key="",
    syntax_constant="",
    syntax_selector="",
    diff_header="",
    diff_hunk="",
    diff_added="",
    diff_removed="",
    diff_context="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode.

    The plain theme keeps reverse video so the editor cursor stays visible.
    """
    if no_color or (name or "").strip().lower() == PLAIN_THEME.name:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
