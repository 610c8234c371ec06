"""SQL intelligence helpers behind the query editor."""

from __future__ import annotations

from .catalog import EDITOR_KEYWORDS, TOKENIZER_KEYWORDS, KeywordCatalog
from .columns import default_stream_query, quote_identifier, replace_column_list, select_column_list_range
from .completion import completions, is_word_character
from .context import determine_context
from .debounce import Debouncer
from .errors import (
    character_offset,
    error_highlight_range,
    error_range_for_message,
    parse_position,
    token_range_at,
)
from .functions import FUNCTIONS, FunctionCatalog
from .highlight import classify, classify_json, render
from .metadata import MetadataProvider, StaticMetadataProvider
from .models import (
    AnalysisResult,
    CompletionContext,
    CompletionItem,
    CompletionKind,
    CompletionResult,
    HighlightSpan,
    HighlightStyle,
    SQLErrorPosition,
    TextRange,
    Token,
    TokenKind,
)
from .service import SqlIntelService
from .tokenizer import significant, token_text, tokenize

__all__ = [
    "AnalysisResult",
    "CompletionContext",
    "CompletionItem",
    "CompletionKind",
    "CompletionResult",
    "Debouncer",
    "EDITOR_KEYWORDS",
    "FUNCTIONS",
    "FunctionCatalog",
    "HighlightSpan",
    "HighlightStyle",
    "KeywordCatalog",
    "MetadataProvider",
    "SQLErrorPosition",
    "SqlIntelService",
    "StaticMetadataProvider",
    "TOKENIZER_KEYWORDS",
    "TextRange",
    "Token",
    "TokenKind",
    "character_offset",
    "classify",
    "classify_json",
    "completions",
    "default_stream_query",
    "determine_context",
    "error_highlight_range",
    "error_range_for_message",
    "is_word_character",
    "parse_position",
    "quote_identifier",
    "render",
    "replace_column_list",
    "select_column_list_range",
    "significant",
    "token_range_at",
    "token_text",
    "tokenize",
]
