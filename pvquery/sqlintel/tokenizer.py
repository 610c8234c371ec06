"""Lossless SQL lexer used by the structural helpers.

Every character of the input ends up in exactly one token, so concatenating
the token slices in order reproduces the buffer. The lexer never raises:
unterminated comments and quoted runs simply extend to the end of the input,
which keeps it usable on half-typed SQL.
"""

from __future__ import annotations

from typing import Callable, Iterable

from .catalog import TOKENIZER_KEYWORDS
from .models import TextRange, Token, TokenKind

_WHITESPACE = frozenset(" \t\r\n")
_PUNCTUATION = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    ",": TokenKind.COMMA,
    "*": TokenKind.STAR,
}


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into an ordered, gapless list of tokens."""

    tokens: list[Token] = []
    length = len(text)
    i = 0
    while i < length:
        start = i
        char = text[i]
        nxt = text[i + 1] if i + 1 < length else ""
        value: str | None = None

        if char in _WHITESPACE:
            i = _skip_while(text, i, lambda c: c in _WHITESPACE)
            kind = TokenKind.WHITESPACE
        elif char == "-" and nxt == "-":
            end = text.find("\n", i)
            i = length if end < 0 else end
            kind = TokenKind.LINE_COMMENT
        elif char == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            i = length if end < 0 else end + 2
            kind = TokenKind.BLOCK_COMMENT
        elif char == "'":
            value, i = _consume_quoted(text, i, "'")
            kind = TokenKind.STRING_LITERAL
        elif char == '"':
            value, i = _consume_quoted(text, i, '"')
            kind = TokenKind.QUOTED_IDENTIFIER
        elif char in _PUNCTUATION:
            i += 1
            kind = _PUNCTUATION[char]
        elif char.isdecimal() or (char == "." and nxt.isdecimal()):
            i = _consume_number(text, i)
            value = text[start:i]
            kind = TokenKind.NUMBER
        elif char.isalpha() or char == "_":
            i = _skip_while(text, i, _is_identifier_char)
            word = text[start:i]
            upper = word.upper()
            if upper in TOKENIZER_KEYWORDS:
                kind, value = TokenKind.KEYWORD, upper
            else:
                kind, value = TokenKind.IDENTIFIER, word
        else:
            i += 1
            kind, value = TokenKind.OTHER, char

        tokens.append(Token(kind=kind, range=TextRange(start, i), value=value))
    return tokens


def token_text(token: Token, text: str) -> str:
    """Return the exact source text a token was lexed from."""

    return token.range.slice(text)


def significant(tokens: Iterable[Token]) -> list[Token]:
    """Drop whitespace and comments."""

    return [token for token in tokens if not token.is_trivia]


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _skip_while(text: str, i: int, predicate: Callable[[str], bool]) -> int:
    length = len(text)
    while i < length and predicate(text[i]):
        i += 1
    return i


def _consume_quoted(text: str, i: int, quote: str) -> tuple[str, int]:
    """Read a quoted run starting at its opening quote.

    Doubled quotes are an escaped literal quote. Returns the unescaped content
    and the index just past the closing quote, or the end of the text when the
    run is unterminated.
    """

    length = len(text)
    i += 1
    parts: list[str] = []
    while i < length:
        end = text.find(quote, i)
        if end < 0:
            parts.append(text[i:])
            return "".join(parts), length
        parts.append(text[i:end])
        if end + 1 < length and text[end + 1] == quote:
            parts.append(quote)
            i = end + 2
        else:
            return "".join(parts), end + 1
    return "".join(parts), length


def _consume_number(text: str, i: int) -> int:
    length = len(text)
    i = _skip_while(text, i, lambda c: c.isdecimal() or c == ".")
    if i < length and text[i] in "eE":
        i += 1
        if i < length and text[i] in "+-":
            i += 1
        i = _skip_while(text, i, str.isdecimal)
    return i


__all__ = ["significant", "token_text", "tokenize"]
