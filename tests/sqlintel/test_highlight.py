"""Tests for the regex syntax highlighters."""

from __future__ import annotations

from rich.text import Span

from pvquery.sqlintel import HighlightStyle, classify, classify_json, render


def _styled(text: str, spans) -> list[tuple[str, HighlightStyle]]:
    return [(span.range.slice(text), span.style) for span in spans]


def test_keywords_strings_comments_and_numbers() -> None:
    sql = "SELECT 'from' FROM t -- where 1\nWHERE x = 42"

    assert _styled(sql, classify(sql)) == [
        ("SELECT", HighlightStyle.KEYWORD),
        ("'from'", HighlightStyle.STRING),
        ("FROM", HighlightStyle.KEYWORD),
        ("-- where 1", HighlightStyle.COMMENT),
        ("WHERE", HighlightStyle.KEYWORD),
        ("42", HighlightStyle.NUMBER),
    ]


def test_keywords_match_any_case() -> None:
    assert _styled("select", classify("select")) == [("select", HighlightStyle.KEYWORD)]


def test_functions_are_highlighted() -> None:
    sql = "SELECT count(*) FROM t"

    assert ("count", HighlightStyle.FUNCTION) in _styled(sql, classify(sql))


def test_quoted_identifiers_protect_keywords() -> None:
    sql = 'SELECT "select" FROM t'

    assert _styled(sql, classify(sql)) == [
        ("SELECT", HighlightStyle.KEYWORD),
        ('"select"', HighlightStyle.QUOTED_IDENTIFIER),
        ("FROM", HighlightStyle.KEYWORD),
    ]


def test_escaped_quotes_stay_in_one_string() -> None:
    sql = "SELECT 'it''s from here'"

    assert _styled(sql, classify(sql))[1] == ("'it''s from here'", HighlightStyle.STRING)


def test_comment_marker_inside_string_is_not_a_comment() -> None:
    sql = "SELECT 'a -- b' FROM t"

    styles = _styled(sql, classify(sql))

    assert ("'a -- b'", HighlightStyle.STRING) in styles
    assert ("FROM", HighlightStyle.KEYWORD) in styles
    assert all(style is not HighlightStyle.COMMENT for _, style in styles)


def test_block_comments_including_unterminated() -> None:
    sql = "/* SELECT */ SELECT /* open WHERE"

    assert _styled(sql, classify(sql)) == [
        ("/* SELECT */", HighlightStyle.COMMENT),
        ("SELECT", HighlightStyle.KEYWORD),
        ("/* open WHERE", HighlightStyle.COMMENT),
    ]


def test_numbers_inside_identifiers_are_ignored() -> None:
    sql = "SELECT col1, 3.14 FROM t"

    numbers = [text for text, style in _styled(sql, classify(sql)) if style is HighlightStyle.NUMBER]

    assert numbers == ["3.14"]


def test_empty_input() -> None:
    assert classify("") == []
    assert classify_json("") == []


def test_spans_are_sorted_by_start() -> None:
    sql = "SELECT 1, 'x', max(y) -- done"
    starts = [span.range.start for span in classify(sql)]

    assert starts == sorted(starts)


def test_json_keys_and_values() -> None:
    doc = '{"level": "error", "count": 3, "ok": true, "x": null, "n": "42", "y" : -1.5e3}'

    assert _styled(doc, classify_json(doc)) == [
        ('"level"', HighlightStyle.JSON_KEY),
        ('"error"', HighlightStyle.JSON_STRING),
        ('"count"', HighlightStyle.JSON_KEY),
        ("3", HighlightStyle.JSON_NUMBER),
        ('"ok"', HighlightStyle.JSON_KEY),
        ("true", HighlightStyle.JSON_BOOLEAN),
        ('"x"', HighlightStyle.JSON_KEY),
        ("null", HighlightStyle.JSON_NULL),
        ('"n"', HighlightStyle.JSON_KEY),
        ('"42"', HighlightStyle.JSON_STRING),
        ('"y"', HighlightStyle.JSON_KEY),
        ("-1.5e3", HighlightStyle.JSON_NUMBER),
    ]


def test_json_literals_inside_strings_are_ignored() -> None:
    doc = '["is true", "null", "\\"quoted\\" 7"]'

    styles = {style for _, style in _styled(doc, classify_json(doc))}

    assert styles == {HighlightStyle.JSON_STRING}


def test_render_applies_theme_styles() -> None:
    sql = "SELECT 1"

    rendered = render(sql, classify(sql), {"keyword": "bold blue"})

    assert rendered.plain == sql
    assert rendered.spans == [Span(0, 6, "bold blue")]
