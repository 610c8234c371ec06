"""Tests for the lossless SQL lexer."""

from __future__ import annotations

import pytest

from pvquery.sqlintel import TextRange, TokenKind, significant, token_text, tokenize


def _kinds(sql: str) -> list[tuple[TokenKind, str | None]]:
    return [(token.kind, token.value) for token in tokenize(sql)]


def _values(sql: str, kind: TokenKind) -> list[str | None]:
    return [token.value for token in tokenize(sql) if token.kind is kind]


def test_tokenizes_simple_select() -> None:
    assert _kinds("SELECT * FROM t") == [
        (TokenKind.KEYWORD, "SELECT"),
        (TokenKind.WHITESPACE, None),
        (TokenKind.STAR, None),
        (TokenKind.WHITESPACE, None),
        (TokenKind.KEYWORD, "FROM"),
        (TokenKind.WHITESPACE, None),
        (TokenKind.IDENTIFIER, "t"),
    ]


@pytest.mark.parametrize("word", ["select", "Select", "SELECT", "sElEcT"])
def test_keywords_are_canonicalized_to_uppercase(word: str) -> None:
    assert _kinds(word) == [(TokenKind.KEYWORD, "SELECT")]


def test_identifiers_keep_original_case() -> None:
    assert _values("SELECT myCol FROM Logs", TokenKind.IDENTIFIER) == ["myCol", "Logs"]


def test_string_literal_unescapes_doubled_quotes() -> None:
    assert _values("SELECT 'it''s' FROM t", TokenKind.STRING_LITERAL) == ["it's"]


def test_quoted_identifier_unescapes_doubled_quotes() -> None:
    assert _values('SELECT "a""b" FROM t', TokenKind.QUOTED_IDENTIFIER) == ['a"b']


def test_quoted_identifier_keeps_spaces() -> None:
    assert _kinds('SELECT "my col" FROM t')[2] == (TokenKind.QUOTED_IDENTIFIER, "my col")


def test_unterminated_string_consumes_rest_of_input() -> None:
    sql = "SELECT 'oops FROM t"
    tokens = tokenize(sql)

    assert tokens[-1].kind is TokenKind.STRING_LITERAL
    assert tokens[-1].value == "oops FROM t"
    assert tokens[-1].range == TextRange(7, len(sql))


def test_line_comment_stops_at_newline() -> None:
    sql = "SELECT * -- get all\nFROM t"
    tokens = tokenize(sql)
    comment = next(token for token in tokens if token.kind is TokenKind.LINE_COMMENT)

    assert token_text(comment, sql) == "-- get all"
    assert any(token.is_keyword("FROM") for token in tokens)


def test_block_comment_and_unterminated_block_comment() -> None:
    assert TokenKind.BLOCK_COMMENT in [kind for kind, _ in _kinds("SELECT /* cols */ * FROM t")]

    sql = "SELECT /* never closed FROM t"
    assert tokenize(sql)[-1].kind is TokenKind.BLOCK_COMMENT
    assert tokenize(sql)[-1].range.end == len(sql)


def test_block_comments_do_not_nest() -> None:
    sql = "/* a /* b */ c */"
    tokens = tokenize(sql)

    assert token_text(tokens[0], sql) == "/* a /* b */"
    assert tokens[0].kind is TokenKind.BLOCK_COMMENT


@pytest.mark.parametrize(
    ("sql", "expected"),
    [
        ("LIMIT 100", ["100"]),
        ("SELECT 1.5e-3", ["1.5e-3"]),
        ("SELECT .5", [".5"]),
        ("SELECT 2E+10", ["2E+10"]),
        ("SELECT 3.14", ["3.14"]),
    ],
)
def test_numbers(sql: str, expected: list[str]) -> None:
    assert _values(sql, TokenKind.NUMBER) == expected


def test_lone_dot_is_other() -> None:
    assert _kinds("t.col") == [
        (TokenKind.IDENTIFIER, "t"),
        (TokenKind.OTHER, "."),
        (TokenKind.IDENTIFIER, "col"),
    ]


def test_operators_are_single_character_tokens() -> None:
    assert _values("a <> b;", TokenKind.OTHER) == ["<", ">", ";"]


def test_punctuation_kinds() -> None:
    kinds = [kind for kind, _ in _kinds("(*,)")]

    assert kinds == [TokenKind.LEFT_PAREN, TokenKind.STAR, TokenKind.COMMA, TokenKind.RIGHT_PAREN]


def test_unicode_identifiers_are_not_split() -> None:
    assert _kinds("SELECT café, 名前 FROM t")[2] == (TokenKind.IDENTIFIER, "café")
    assert _values("SELECT café, 名前 FROM t", TokenKind.IDENTIFIER) == ["café", "名前", "t"]


def test_significant_drops_trivia() -> None:
    tokens = significant(tokenize("SELECT /* x */ a -- y\n FROM t"))

    assert [token.value for token in tokens] == ["SELECT", "a", "FROM", "t"]


@pytest.mark.parametrize(
    "sql",
    [
        "",
        "SELECT * FROM t",
        "select a, b -- trailing\nfrom \"x\"\"y\" where s = 'it''s' /* c */",
        "SELECT 'unterminated",
        '"also unterminated',
        "/* open",
        "1.2.3e+ 4e ..5 ;;; <>= \t\r\n",
        "SELECT (SELECT count(*) FROM x), col FROM main",
        "ünïcødé — ½ ∑ 名前",
    ],
)
def test_tokenization_is_lossless(sql: str) -> None:
    tokens = tokenize(sql)

    assert "".join(token_text(token, sql) for token in tokens) == sql
    position = 0
    for token in tokens:
        assert token.range.start == position
        assert token.range.end > token.range.start
        position = token.range.end
    assert position == len(sql)
