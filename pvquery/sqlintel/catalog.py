"""Keyword vocabularies shared by the lexer, completion and highlighting."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

# Words the lexer classifies as keywords. Smaller than the editor vocabulary on
# purpose: it only needs the words structural helpers look for.
TOKENIZER_KEYWORDS: frozenset[str] = frozenset(
    {
        "SELECT", "DISTINCT", "FROM", "WHERE", "GROUP", "BY", "HAVING",
        "ORDER", "LIMIT", "OFFSET", "AS", "AND", "OR", "NOT", "IN", "IS",
        "NULL", "LIKE", "BETWEEN", "CASE", "WHEN", "THEN", "ELSE", "END",
        "JOIN", "ON", "LEFT", "RIGHT", "INNER", "OUTER", "CROSS", "FULL",
        "UNION", "ALL", "INTERSECT", "EXCEPT", "INSERT", "UPDATE", "DELETE",
        "CREATE", "DROP", "ALTER", "SET", "INTO", "VALUES", "ASC", "DESC",
        "EXISTS", "TRUE", "FALSE", "WITH", "RECURSIVE", "OVER", "PARTITION",
        "WINDOW", "ROWS", "RANGE", "UNBOUNDED", "PRECEDING", "FOLLOWING",
        "CURRENT", "ROW", "FILTER", "LATERAL", "NATURAL", "USING", "FETCH",
        "FIRST", "LAST", "NEXT", "ONLY", "TIES", "TOP",
    }
)


class KeywordCatalog:
    """Alphabetically ordered vocabulary with case-insensitive prefix lookup."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: Tuple[str, ...] = tuple(sorted({word.upper() for word in words}))

    @classmethod
    def default(cls) -> "KeywordCatalog":
        return cls(_EDITOR_KEYWORDS)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def matching(self, prefix: str) -> list[str]:
        """Return entries starting with ``prefix``, ignoring case."""

        needle = prefix.upper()
        return [word for word in self._words if word.startswith(needle)]


_EDITOR_KEYWORDS: Sequence[str] = (
    "ADD", "ALL", "ALTER", "AND", "AS", "ASC",
    "BETWEEN", "BY",
    "CASE", "CAST", "CREATE", "CROSS", "CUBE", "CURRENT",
    "DELETE", "DESC", "DISTINCT", "DROP",
    "ELSE", "END", "EXCEPT", "EXISTS", "EXTRACT",
    "FALSE", "FETCH", "FILTER", "FIRST", "FOLLOWING", "FOR", "FROM", "FULL",
    "GROUP", "GROUPING",
    "HAVING",
    "IF", "IN", "INNER", "INSERT", "INTERSECT", "INTERVAL", "INTO", "IS",
    "JOIN",
    "LATERAL", "LEFT", "LIKE", "LIMIT",
    "NATURAL", "NEXT", "NOT", "NULL",
    "OFFSET", "ON", "ONLY", "OR", "ORDER", "OUTER", "OVER",
    "PARTITION", "PERCENT", "PRECEDING",
    "RANGE", "RECURSIVE", "RIGHT", "ROLLUP", "ROW", "ROWS",
    "SELECT", "SET", "SETS",
    "TABLE", "THEN", "TOP", "TRUE",
    "UNBOUNDED", "UNION", "UPDATE", "USING",
    "VALUES",
    "WHEN", "WHERE", "WINDOW", "WITH",
)

EDITOR_KEYWORDS = KeywordCatalog.default()


__all__ = ["EDITOR_KEYWORDS", "KeywordCatalog", "TOKENIZER_KEYWORDS"]
