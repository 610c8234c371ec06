"""Prefix-based autocomplete over keywords, functions, streams and fields."""

from __future__ import annotations

from typing import Iterable, Sequence

from pvquery.models import SchemaField

from .catalog import EDITOR_KEYWORDS, KeywordCatalog
from .columns import quote_identifier
from .context import determine_context
from .functions import FUNCTIONS, FunctionCatalog
from .models import CompletionContext, CompletionItem, CompletionKind, CompletionResult, TextRange


def is_word_character(char: str) -> bool:
    """ASCII letters, digits and underscore; the characters a prefix is made of."""

    return ("A" <= char <= "Z") or ("a" <= char <= "z") or ("0" <= char <= "9") or char == "_"


def completions(
    text: str,
    cursor_position: int,
    table_names: Iterable[str],
    schema_fields: Iterable[SchemaField],
    *,
    keywords: KeywordCatalog = EDITOR_KEYWORDS,
    functions: FunctionCatalog = FUNCTIONS,
) -> CompletionResult:
    """Return matching items, the prefix before the cursor and its range."""

    if cursor_position <= 0 or cursor_position > len(text):
        return CompletionResult((), "", TextRange(0, 0))

    word_start = cursor_position
    while word_start > 0 and is_word_character(text[word_start - 1]):
        word_start -= 1
    prefix = text[word_start:cursor_position]
    span = TextRange(word_start, cursor_position)
    if not prefix:
        return CompletionResult((), "", span)

    context = determine_context(text[:word_start])
    tables = sorted(table_names)
    fields = sorted(schema_fields, key=lambda entry: entry.name)

    items: list[CompletionItem] = []
    if context is CompletionContext.TABLE_REF:
        items.extend(_table_items(tables, prefix))
    elif context is CompletionContext.COLUMN_REF:
        items.extend(_column_items(fields, prefix))
        items.extend(_vocabulary_items(functions, prefix, CompletionKind.FUNCTION))
    elif context in (CompletionContext.AFTER_ORDER, CompletionContext.AFTER_GROUP):
        if "BY".startswith(prefix.upper()):
            items.append(CompletionItem("BY", CompletionKind.KEYWORD))
    else:
        items.extend(_vocabulary_items(keywords, prefix, CompletionKind.KEYWORD))
        items.extend(_vocabulary_items(functions, prefix, CompletionKind.FUNCTION))
        items.extend(_table_items(tables, prefix))
        items.extend(_column_items(fields, prefix))

    # A lone exact hit would only repeat what is already typed.
    if len(items) == 1 and items[0].display_text.upper() == prefix.upper():
        return CompletionResult((), prefix, span)
    return CompletionResult(tuple(items), prefix, span)


def _starts_with(candidate: str, prefix: str) -> bool:
    return candidate.upper().startswith(prefix.upper())


def _table_items(tables: Sequence[str], prefix: str) -> Iterable[CompletionItem]:
    for name in tables:
        if _starts_with(name, prefix):
            yield CompletionItem(quote_identifier(name), CompletionKind.TABLE, insert_text=name)


def _column_items(fields: Sequence[SchemaField], prefix: str) -> Iterable[CompletionItem]:
    for entry in fields:
        if _starts_with(entry.name, prefix):
            yield CompletionItem(entry.name, CompletionKind.COLUMN, detail=entry.data_type)


def _vocabulary_items(
    catalog: KeywordCatalog, prefix: str, kind: CompletionKind
) -> Iterable[CompletionItem]:
    for word in catalog.matching(prefix):
        yield CompletionItem(word, kind)


__all__ = ["completions", "is_word_character"]
