"""Classify what the editor should offer at the cursor."""

from __future__ import annotations

from .models import CompletionContext, TokenKind
from .tokenizer import significant, token_text, tokenize

_TABLE_TRIGGERS = frozenset(
    {"FROM", "JOIN", "INNER", "LEFT", "RIGHT", "FULL", "CROSS", "NATURAL", "INTO"}
)
_COLUMN_TRIGGERS = frozenset(
    {
        "SELECT", "WHERE", "AND", "OR", "ON", "HAVING", "SET", "BY", "WHEN",
        "THEN", "ELSE", "CASE", "DISTINCT", "NOT", "BETWEEN", "LIKE", "IN", "IS",
    }
)
# Clauses a comma-separated list can belong to.
_COLUMN_LIST_OWNERS = frozenset({"SELECT", "BY", "WHERE", "HAVING", "ON"})
_TABLE_LIST_OWNERS = frozenset({"FROM", "JOIN"})

# Tokens that close a word rather than being part of one.
_DELIMITERS = frozenset({TokenKind.COMMA, TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN})


def determine_context(text_before_cursor: str) -> CompletionContext:
    """Decide what kind of identifier is expected after ``text_before_cursor``.

    A word still being typed at the very end of the text is ignored, so both
    ``"SELECT * FROM "`` and ``"SELECT * FROM ac"`` classify as a table
    reference. The word is everything after the last whitespace, comment,
    comma or parenthesis, which makes ``"SELECT t."`` a column reference too.
    """

    tokens = tokenize(text_before_cursor)
    while tokens and not tokens[-1].is_trivia and tokens[-1].kind not in _DELIMITERS:
        tokens.pop()

    words = [token_text(token, text_before_cursor).upper() for token in significant(tokens)]
    if not words:
        return CompletionContext.GENERAL

    last_word = words[-1]
    if last_word in _TABLE_TRIGGERS:
        return CompletionContext.TABLE_REF
    if last_word in _COLUMN_TRIGGERS:
        return CompletionContext.COLUMN_REF
    if last_word == "ORDER":
        return CompletionContext.AFTER_ORDER
    if last_word == "GROUP":
        return CompletionContext.AFTER_GROUP
    if last_word == ",":
        for word in reversed(words):
            if word in _COLUMN_LIST_OWNERS:
                return CompletionContext.COLUMN_REF
            if word in _TABLE_LIST_OWNERS:
                return CompletionContext.TABLE_REF
        return CompletionContext.COLUMN_REF
    return CompletionContext.GENERAL


__all__ = ["determine_context"]
