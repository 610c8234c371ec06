"""Map line/column positions from remote engine errors onto editor text."""

from __future__ import annotations

import re

from .models import SQLErrorPosition, TextRange
from .tokenizer import significant, tokenize

# The engine sometimes writes "Column: 15" and sometimes "Column 15".
_POSITION_PATTERN = re.compile(r"Line:\s*(\d+),\s*Column:?\s*(\d+)")


def parse_position(message: str) -> SQLErrorPosition | None:
    """Extract the first ``Line: <n>, Column <n>`` pair from an error message."""

    match = _POSITION_PATTERN.search(message)
    if match is None:
        return None
    return SQLErrorPosition(line=int(match.group(1)), column=int(match.group(2)))


def character_offset(line: int, column: int, text: str) -> int | None:
    """Convert a 1-based line/column into a string index, or ``None`` if out of bounds."""

    if line < 1 or column < 1:
        return None
    length = len(text)
    current = 1
    i = 0
    while current < line:
        if i >= length:
            return None
        if text[i] == "\n":
            current += 1
        i += 1
    offset = i + column - 1
    if offset > length:
        return None
    return offset


def token_range_at(offset: int, text: str) -> TextRange | None:
    """Range of the token under ``offset``.

    Offsets on whitespace or comments snap forward to the next real token;
    offsets at or past the end resolve to the last real token.
    """

    tokens = tokenize(text)
    for idx, token in enumerate(tokens):
        if token.range.start <= offset < token.range.end:
            if not token.is_trivia:
                return token.range
            following = significant(tokens[idx + 1 :])
            return following[0].range if following else None

    if offset >= len(text):
        remaining = significant(tokens)
        if remaining:
            return remaining[-1].range
    return None


def error_highlight_range(line: int, column: int, text: str) -> TextRange | None:
    offset = character_offset(line, column, text)
    if offset is None:
        return None
    return token_range_at(offset, text)


def error_range_for_message(message: str, text: str) -> TextRange | None:
    """Parse an engine error message and resolve it against ``text`` in one go."""

    position = parse_position(message)
    if position is None:
        return None
    return error_highlight_range(position.line, position.column, text)


__all__ = [
    "character_offset",
    "error_highlight_range",
    "error_range_for_message",
    "parse_position",
    "token_range_at",
]
