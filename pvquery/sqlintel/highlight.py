"""Regex-driven syntax highlighting for the SQL editor and the JSON detail view.

This pass does not use the lexer. It has to cope with whatever the user has
typed so far, so it only ever looks for runs it can recognise and leaves the
rest unstyled.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Pattern

from rich.text import Text

from .catalog import EDITOR_KEYWORDS
from .functions import FUNCTIONS
from .models import HighlightSpan, HighlightStyle, TextRange

_PROTECTED_PATTERN = re.compile(
    r"""
    (?P<comment>--[^\n]*|/\*.*?(?:\*/|\Z))
    |(?P<string>'[^']*(?:''[^']*)*')
    |(?P<quoted_identifier>"[^"]*(?:""[^"]*)*")
    """,
    re.VERBOSE | re.DOTALL,
)
_PROTECTED_STYLES = {
    "comment": HighlightStyle.COMMENT,
    "string": HighlightStyle.STRING,
    "quoted_identifier": HighlightStyle.QUOTED_IDENTIFIER,
}
_NUMBER_PATTERN = re.compile(r"\b\d+(?:\.\d+)?\b")


def _word_pattern(words: Iterable[str]) -> Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


_KEYWORD_PATTERN = _word_pattern(EDITOR_KEYWORDS.words)
_FUNCTION_PATTERN = _word_pattern(FUNCTIONS.words)

_JSON_STRING_PATTERN = re.compile(r'"(?:[^"\\]|\\.)*"')
_JSON_BOOLEAN_PATTERN = re.compile(r"\b(?:true|false)\b")
_JSON_NULL_PATTERN = re.compile(r"\bnull\b")
_JSON_NUMBER_PATTERN = re.compile(r"-?\b\d+(?:\.\d+)?(?:[eE][+-]?\d+)?\b")
_JSON_KEY_LOOKAHEAD = re.compile(r"[ \t\r\n]*:")


def classify(text: str) -> list[HighlightSpan]:
    """Assign display styles to comments, quoted runs, numbers, keywords and functions.

    Comments and quoted runs are found first and protect their contents:
    a number, keyword or function match fully inside one of them is skipped.
    """

    spans: list[HighlightSpan] = []
    protected: list[TextRange] = []
    for match in _PROTECTED_PATTERN.finditer(text):
        span = TextRange(match.start(), match.end())
        protected.append(span)
        spans.append(HighlightSpan(span, _PROTECTED_STYLES[match.lastgroup or "comment"]))

    for pattern, style in (
        (_NUMBER_PATTERN, HighlightStyle.NUMBER),
        (_KEYWORD_PATTERN, HighlightStyle.KEYWORD),
        (_FUNCTION_PATTERN, HighlightStyle.FUNCTION),
    ):
        spans.extend(_unprotected(pattern, text, style, protected))

    spans.sort(key=lambda entry: (entry.range.start, entry.range.end))
    return spans


def classify_json(text: str) -> list[HighlightSpan]:
    """Highlight a JSON document; keys and string values get distinct styles."""

    spans: list[HighlightSpan] = []
    strings: list[TextRange] = []
    for match in _JSON_STRING_PATTERN.finditer(text):
        span = TextRange(match.start(), match.end())
        strings.append(span)
        is_key = _JSON_KEY_LOOKAHEAD.match(text, match.end()) is not None
        style = HighlightStyle.JSON_KEY if is_key else HighlightStyle.JSON_STRING
        spans.append(HighlightSpan(span, style))

    for pattern, style in (
        (_JSON_BOOLEAN_PATTERN, HighlightStyle.JSON_BOOLEAN),
        (_JSON_NULL_PATTERN, HighlightStyle.JSON_NULL),
        (_JSON_NUMBER_PATTERN, HighlightStyle.JSON_NUMBER),
    ):
        spans.extend(_unprotected(pattern, text, style, strings))

    spans.sort(key=lambda entry: (entry.range.start, entry.range.end))
    return spans


def render(text: str, spans: Iterable[HighlightSpan], theme: Mapping[str, str]) -> Text:
    """Build a rich ``Text`` with each span styled from ``theme``.

    ``theme`` maps style names (``"keyword"``, ``"comment"``, ...) to rich
    style strings; styles missing from the theme are left plain.
    """

    rendered = Text(text)
    for span in spans:
        style = theme.get(span.style.value)
        if style:
            rendered.stylize(style, span.range.start, span.range.end)
    return rendered


def _unprotected(
    pattern: Pattern[str],
    text: str,
    style: HighlightStyle,
    protected: list[TextRange],
) -> Iterable[HighlightSpan]:
    for match in pattern.finditer(text):
        span = TextRange(match.start(), match.end())
        if not any(region.contains(span) for region in protected):
            yield HighlightSpan(span, style)


__all__ = ["classify", "classify_json", "render"]
