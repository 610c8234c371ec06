"""Locate and rewrite the projection list of a SELECT statement."""

from __future__ import annotations

from typing import Sequence

from .models import TextRange, TokenKind
from .tokenizer import tokenize

DEFAULT_ROW_LIMIT = 1000


def select_column_list_range(text: str) -> TextRange | None:
    """Return the span between ``SELECT [DISTINCT]`` and the top-level ``FROM``.

    Boundaries come from token kinds, so a ``FROM`` inside a string, quoted
    identifier, comment or parenthesised subquery is never mistaken for the
    end of the list. Trivia right before ``FROM`` is excluded from the span.
    Returns ``None`` when the text does not look like ``SELECT ... FROM``.
    """

    tokens = tokenize(text)
    count = len(tokens)
    idx = 0

    def skip_trivia(position: int) -> int:
        while position < count and tokens[position].is_trivia:
            position += 1
        return position

    idx = skip_trivia(idx)
    if idx >= count or not tokens[idx].is_keyword("SELECT"):
        return None
    idx = skip_trivia(idx + 1)
    if idx < count and tokens[idx].is_keyword("DISTINCT"):
        idx += 1
    start = skip_trivia(idx)
    if start >= count:
        return None

    depth = 0
    from_idx: int | None = None
    for position in range(start, count):
        token = tokens[position]
        if token.kind is TokenKind.LEFT_PAREN:
            depth += 1
        elif token.kind is TokenKind.RIGHT_PAREN:
            depth = max(0, depth - 1)
        elif depth == 0 and token.is_keyword("FROM"):
            from_idx = position
            break

    if from_idx is None or from_idx <= start:
        return None

    last = from_idx - 1
    while last >= start and tokens[last].is_trivia:
        last -= 1
    if last < start:
        return None
    return TextRange(tokens[start].range.start, tokens[last].range.end)


def quote_identifier(name: str) -> str:
    """Wrap ``name`` in double quotes, doubling any embedded quote."""

    return '"' + name.replace('"', '""') + '"'


def replace_column_list(text: str, columns: Sequence[str]) -> str | None:
    """Swap the projection list for ``columns`` (or ``*`` when empty).

    Everything outside the column list is kept verbatim.
    """

    span = select_column_list_range(text)
    if span is None:
        return None
    projection = ", ".join(quote_identifier(column) for column in columns) or "*"
    return text[: span.start] + projection + text[span.end :]


def default_stream_query(stream: str, *, limit: int = DEFAULT_ROW_LIMIT) -> str:
    """Query the editor starts with when a stream is picked."""

    return f"SELECT * FROM {quote_identifier(stream)} ORDER BY p_timestamp DESC LIMIT {limit}"


__all__ = [
    "DEFAULT_ROW_LIMIT",
    "default_stream_query",
    "quote_identifier",
    "replace_column_list",
    "select_column_list_range",
]
