"""Syntax highlighting for the inline editor and diff output.

Each file category has an ordered rule table (comments, strings, keyword
sets, numbers). The tables are Pygments ``RegexLexer`` states, so a line is
tokenized in one left-to-right pass: at every position the first rule that
matches wins and its span is never re-scanned. A keyword inside a string is
therefore part of the string token.
"""

from __future__ import annotations

from pathlib import PurePath

from pygments.lexer import RegexLexer
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Number,
    String,
    Text,
    _TokenType,
)

from .ui_theme import UITheme

Span = tuple[int, int, str]

SH_KEYWORDS = (
    "if|then|else|elif|fi|for|do|done|while|case|"
    "esac|in|function|return|export|source|alias|local|readonly"
)
JS_KEYWORDS = (
    "const|let|var|function|return|if|else|for|while|"
    "do|switch|case|break|continue|import|export|from|"
    "default|class|extends|new|this|async|await|try|"
    "catch|throw|typeof|instanceof|of|in|true|false|null|undefined"
)
PY_KEYWORDS = (
    "def|class|if|elif|else|for|while|return|import|"
    "from|as|try|except|finally|with|yield|lambda|"
    "pass|break|continue|and|or|not|in|is|True|False|"
    "None|self|async|await"
)


def _keywords(vocabulary: str) -> str:
    return rf"\b({vocabulary})\b"


HASH_COMMENT = (r"#.*", Comment)
STRING = (r"(['\"`])(?:(?!\1).)*\1", String)
NUMBER = (r"\b\d+\.?\d*\b", Number)

# Every character must land in some token; these trail each rule table.
FALLTHROUGH = [
    (r"\w+", Text),
    (r"\s+", Text),
    (r".", Text),
]


class ShellRulesLexer(RegexLexer):
    name = "geeto-shell"
    tokens = {
        "root": [
            HASH_COMMENT,
            STRING,
            (r"\$\{?\w+\}?", Name.Variable),
            (_keywords(SH_KEYWORDS), Keyword),
            *FALLTHROUGH,
        ]
    }


class ScriptRulesLexer(RegexLexer):
    name = "geeto-script"
    tokens = {
        "root": [
            (r"//.*", Comment),
            STRING,
            (_keywords(JS_KEYWORDS), Keyword),
            NUMBER,
            *FALLTHROUGH,
        ]
    }


class PythonRulesLexer(RegexLexer):
    name = "geeto-python"
    tokens = {
        "root": [
            HASH_COMMENT,
            STRING,
            (_keywords(PY_KEYWORDS), Keyword),
            NUMBER,
            *FALLTHROUGH,
        ]
    }


class JsonRulesLexer(RegexLexer):
    name = "geeto-json"
    tokens = {
        "root": [
            STRING,
            NUMBER,
            (r"\b(true|false|null)\b", Keyword),
            *FALLTHROUGH,
        ]
    }


class MarkdownRulesLexer(RegexLexer):
    name = "geeto-markdown"
    tokens = {
        "root": [
            (r"^#{1,6}\s.*", Generic.Heading),
            (r"\*\*[^*]+\*\*", Generic.Strong),
            (r"`[^`]+`", String.Backtick),
            *FALLTHROUGH,
        ]
    }


class ConfigRulesLexer(RegexLexer):
    name = "geeto-config"
    tokens = {
        "root": [
            HASH_COMMENT,
            STRING,
            (r"^[\w.-]+(?=\s*[=:])", Name.Attribute),
            (r"\b(true|false)\b", Keyword.Constant),
            NUMBER,
            *FALLTHROUGH,
        ]
    }


class CssRulesLexer(RegexLexer):
    name = "geeto-css"
    tokens = {
        "root": [
            (r"/\*.+?\*/", Comment),
            STRING,
            (r"[.#][\w-]+", Name.Class),
            NUMBER,
            *FALLTHROUGH,
        ]
    }


class PlainRulesLexer(RegexLexer):
    name = "geeto-plain"
    tokens = {
        "root": [
            HASH_COMMENT,
            STRING,
            NUMBER,
            *FALLTHROUGH,
        ]
    }


_LEXER_CLASSES: dict[str, type[RegexLexer]] = {
    "shell": ShellRulesLexer,
    "script": ScriptRulesLexer,
    "python": PythonRulesLexer,
    "json": JsonRulesLexer,
    "markdown": MarkdownRulesLexer,
    "config": ConfigRulesLexer,
    "css": CssRulesLexer,
    "plain": PlainRulesLexer,
}
_LEXERS: dict[str, RegexLexer] = {}

_EXTENSION_CATEGORIES: dict[str, str] = {
    **dict.fromkeys(("sh", "bash", "bashrc", "zshrc", "zsh", "profile", "bash_profile"), "shell"),
    **dict.fromkeys(
        ("js", "ts", "jsx", "tsx", "mjs", "cjs", "c", "h", "cc", "cpp", "hpp", "java", "go", "rs", "cs", "kt", "swift"),
        "script",
    ),
    **dict.fromkeys(("py", "pyi"), "python"),
    "json": "json",
    **dict.fromkeys(("md", "markdown"), "markdown"),
    **dict.fromkeys(("yml", "yaml", "toml"), "config"),
    **dict.fromkeys(("css", "scss"), "css"),
}

_STYLE_BY_TOKEN: dict[_TokenType, str] = {
    Comment: "comment",
    String: "string",
    String.Backtick: "code",
    Keyword: "keyword",
    Keyword.Constant: "constant",
    Number: "number",
    Name.Variable: "variable",
    Name.Attribute: "key",
    Name.Class: "selector",
    Generic.Heading: "heading",
    Generic.Strong: "emphasis",
}


def syntax_category(hint: str | None) -> str | None:
    """Map a syntax hint to a rule-table category.

    Accepts ``"py"``, ``".py"``, or a file name such as ``"notes.md"`` or
    ``".bashrc"``. An empty hint disables highlighting (``None``); an
    unrecognized one uses the plain table.
    """
    if not hint:
        return None
    candidate = hint.strip().lower()
    if not candidate:
        return None
    if candidate in _LEXER_CLASSES:
        return candidate
    bare = candidate.lstrip(".")
    if bare in _EXTENSION_CATEGORIES:
        return _EXTENSION_CATEGORIES[bare]
    suffix = PurePath(candidate).suffix.lstrip(".")
    return _EXTENSION_CATEGORIES.get(suffix, "plain")


def _lexer_for(category: str) -> RegexLexer:
    lexer = _LEXERS.get(category)
    if lexer is None:
        lexer = _LEXER_CLASSES[category]()
        _LEXERS[category] = lexer
    return lexer


def _style_for_token(ttype: _TokenType) -> str | None:
    while ttype is not None:
        style = _STYLE_BY_TOKEN.get(ttype)
        if style is not None:
            return style
        ttype = ttype.parent
    return None


def highlight_spans(text: str, category: str | None) -> list[Span]:
    """Tokenize one line into non-overlapping ``(start, end, style)`` spans.

    Only styled spans are returned, in ascending order.
    """
    if category is None or not text:
        return []
    spans: list[Span] = []
    for pos, ttype, value in _lexer_for(category).get_tokens_unprocessed(text):
        style = _style_for_token(ttype)
        if style is None or not value:
            continue
        end = pos + len(value)
        if spans and spans[-1][2] == style and spans[-1][1] == pos:
            spans[-1] = (spans[-1][0], end, style)
        else:
            spans.append((pos, end, style))
    return spans


def paint_spans(text: str, spans: list[Span], theme: UITheme, cursor_col: int | None = None) -> str:
    """Render ``text`` with ``spans`` styled and an optional reverse-video cursor.

    A cursor at ``len(text)`` is drawn as a reversed blank cell.
    """
    out: list[str] = []

    def emit(start: int, end: int, style: str) -> None:
        if start >= end:
            return
        prefix = theme.syntax_style(style) if style else ""
        out.append(prefix)
        if cursor_col is not None and start <= cursor_col < end:
            out.append(text[start:cursor_col])
            out.append(f"{theme.reverse}{text[cursor_col]}{theme.reverse_off}")
            out.append(text[cursor_col + 1 : end])
        else:
            out.append(text[start:end])
        if prefix:
            out.append(theme.reset)

    pos = 0
    for start, end, style in spans:
        emit(pos, start, "")
        emit(start, end, style)
        pos = end
    emit(pos, len(text), "")
    if cursor_col is not None and cursor_col >= len(text):
        out.append(f"{theme.reverse} {theme.reverse_off}")
    return "".join(out)


def highlight_line(text: str, category: str | None, theme: UITheme) -> str:
    return paint_spans(text, highlight_spans(text, category), theme)


def highlight_diff(diff: str, theme: UITheme) -> str:
    """Color a unified diff line by line."""
    out: list[str] = []
    for line in diff.split("\n"):
        if line.startswith("+++") or line.startswith("---"):
            style = theme.diff_header
        elif line.startswith("@@"):
            style = theme.diff_hunk
        elif line.startswith("+"):
            style = theme.diff_added
        elif line.startswith("-"):
            style = theme.diff_removed
        elif line.startswith(" "):
            style = theme.diff_context
        else:
            style = ""
        out.append(f"{style}{line}{theme.reset}" if style and line else line)
    return "\n".join(out)
