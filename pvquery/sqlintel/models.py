"""Core value types shared by the SQL intelligence helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Tuple


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open span of string indices within a source buffer."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the substring of ``text`` covered by this range."""

        return text[self.start : self.end]

    def contains(self, other: TextRange) -> bool:
        return self.start <= other.start and other.end <= self.end


class TokenKind(str, Enum):
    """Classification assigned to every lexed token."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    QUOTED_IDENTIFIER = "quoted_identifier"
    STRING_LITERAL = "string_literal"
    NUMBER = "number"
    COMMA = "comma"
    STAR = "star"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    WHITESPACE = "whitespace"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    OTHER = "other"

    @property
    def is_trivia(self) -> bool:
        return self in _TRIVIA


_TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexed token.

    ``value`` carries the payload of the tagged kinds: the uppercase keyword,
    the identifier as written, the unescaped content of quoted runs, the raw
    number text, or the character of an ``OTHER`` token. Punctuation and
    trivia have no payload.
    """

    kind: TokenKind
    range: TextRange
    value: str | None = None

    @property
    def is_trivia(self) -> bool:
        return self.kind.is_trivia

    def is_keyword(self, keyword: str) -> bool:
        return self.kind is TokenKind.KEYWORD and self.value == keyword


@dataclass(frozen=True, slots=True)
class SQLErrorPosition:
    """Line/column reported by the remote query engine (both 1-based)."""

    line: int
    column: int


class CompletionKind(str, Enum):
    """Source vocabulary of a completion item."""

    KEYWORD = "keyword"
    FUNCTION = "function"
    TABLE = "table"
    COLUMN = "column"


_KIND_LABELS = {
    CompletionKind.KEYWORD: "K",
    CompletionKind.FUNCTION: "F",
    CompletionKind.TABLE: "T",
    CompletionKind.COLUMN: "C",
}


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """Single autocomplete entry.

    Tables are displayed quoted but inserted bare so the inserted text keeps
    matching the prefix the user typed.
    """

    display_text: str
    kind: CompletionKind
    detail: str | None = None
    insert_text: str = field(default="")

    def __post_init__(self) -> None:
        if not self.insert_text:
            object.__setattr__(self, "insert_text", self.display_text)

    @property
    def kind_label(self) -> str:
        return _KIND_LABELS[self.kind]


class CompletionContext(str, Enum):
    """What kind of identifier the cursor position expects."""

    GENERAL = "general"
    TABLE_REF = "table_ref"
    COLUMN_REF = "column_ref"
    AFTER_ORDER = "after_order"
    AFTER_GROUP = "after_group"


class CompletionResult(NamedTuple):
    """Matching items, the typed prefix and where that prefix sits."""

    items: Tuple[CompletionItem, ...]
    prefix: str
    range: TextRange


class HighlightStyle(str, Enum):
    """Display styles assigned by the highlighters."""

    COMMENT = "comment"
    STRING = "string"
    QUOTED_IDENTIFIER = "quoted_identifier"
    NUMBER = "number"
    KEYWORD = "keyword"
    FUNCTION = "function"
    JSON_KEY = "json_key"
    JSON_STRING = "json_string"
    JSON_BOOLEAN = "json_boolean"
    JSON_NULL = "json_null"
    JSON_NUMBER = "json_number"


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    range: TextRange
    style: HighlightStyle


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Details derived for the buffer under the cursor."""

    buffer: str
    cursor: int
    context: CompletionContext
    prefix: str
    tables: Tuple[str, ...]
    column_list: TextRange | None
    errors: Tuple[str, ...]


__all__ = [
    "AnalysisResult",
    "CompletionContext",
    "CompletionItem",
    "CompletionKind",
    "CompletionResult",
    "HighlightSpan",
    "HighlightStyle",
    "SQLErrorPosition",
    "TextRange",
    "Token",
    "TokenKind",
]
