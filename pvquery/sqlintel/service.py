"""Editor-facing facade coordinating completion, highlighting and error mapping."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, TypeVar

from rich.text import Text
from sqlglot import exp, parse_one
from sqlglot.errors import ParseError, TokenError

from pvquery.config import EditorSettings, HighlightTheme

from .columns import select_column_list_range
from .completion import completions, is_word_character
from .context import determine_context
from .debounce import Debouncer, ResultCallback
from .errors import error_range_for_message
from .highlight import classify, render
from .metadata import MetadataProvider, StaticMetadataProvider
from .models import AnalysisResult, CompletionResult, HighlightSpan, TextRange

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class SqlIntelService:
    """Async wrapper the editor calls on every keystroke.

    The helpers underneath are pure functions; this class adds metadata
    lookups and moves work on very large buffers off the event loop.
    """

    def __init__(
        self,
        metadata_provider: MetadataProvider | None = None,
        *,
        settings: EditorSettings | None = None,
        theme: HighlightTheme | None = None,
    ) -> None:
        self._metadata = metadata_provider or StaticMetadataProvider()
        self._settings = settings or EditorSettings()
        self._theme = theme or HighlightTheme()
        self._debouncer = Debouncer(self._settings.debounce_delay)

    @property
    def settings(self) -> EditorSettings:
        return self._settings

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def schedule_suggest(self, buffer: str, cursor: int, on_result: ResultCallback) -> None:
        """Queue a ``suggest`` call behind the configured debounce delay.

        Only the latest call in a burst of keystrokes reaches ``on_result``.
        """

        self._debouncer.submit(lambda: self.suggest(buffer, cursor), on_result)

    async def analyze(self, buffer: str, cursor: int) -> AnalysisResult:
        """Derive cursor context and structural details for ``buffer``."""

        cursor = max(0, min(cursor, len(buffer)))
        word_start = cursor
        while word_start > 0 and is_word_character(buffer[word_start - 1]):
            word_start -= 1

        context = await self._run(buffer, determine_context, buffer[:word_start])
        column_list = await self._run(buffer, select_column_list_range, buffer)
        tables, errors = await self._run(buffer, self._referenced_tables, buffer)
        return AnalysisResult(
            buffer=buffer,
            cursor=cursor,
            context=context,
            prefix=buffer[word_start:cursor],
            tables=tables,
            column_list=column_list,
            errors=errors,
        )

    async def suggest(self, buffer: str, cursor: int) -> CompletionResult:
        """Return completion items for the cursor position, capped by settings."""

        tables, _ = await self._run(buffer, self._referenced_tables, buffer)
        stream_names = await self._metadata.stream_names()
        fields = await self._metadata.fields_for(tables)
        result = await self._run(buffer, completions, buffer, cursor, stream_names, fields)
        limit = self._settings.max_suggestions
        if len(result.items) <= limit:
            return result
        return result._replace(items=result.items[:limit])

    async def highlight(self, buffer: str) -> list[HighlightSpan]:
        return await self._run(buffer, classify, buffer)

    async def highlighted_text(self, buffer: str) -> Text:
        """Highlight ``buffer`` and render it with the configured theme."""

        spans = await self.highlight(buffer)
        return render(buffer, spans, self._theme.styles)

    async def column_list(self, buffer: str) -> TextRange | None:
        return await self._run(buffer, select_column_list_range, buffer)

    async def error_range(self, message: str, buffer: str) -> TextRange | None:
        """Map a remote error message onto the token it points at."""

        span = await self._run(buffer, error_range_for_message, message, buffer)
        if span is None:
            LOG.debug("Error message has no usable position", extra={"error_message": message})
        return span

    async def _run(self, buffer: str, func: Callable[..., T], *args: object) -> T:
        if len(buffer) > self._settings.offload_threshold:
            return await asyncio.to_thread(func, *args)
        return func(*args)

    def _referenced_tables(self, buffer: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
        stripped = buffer.strip()
        if not stripped:
            return (), ()
        try:
            ast = parse_one(stripped, read=self._settings.dialect)
        except (ParseError, TokenError, ValueError) as exc:
            # ValueError covers a dialect name sqlglot does not know.
            LOG.debug("Skipping table analysis for unparsable buffer", extra={"error": str(exc)})
            return (), (str(exc).strip(),)
        return _stream_names(ast), ()


def _stream_names(expression: exp.Expression) -> tuple[str, ...]:
    # Streams live in a single namespace, so catalog and schema qualifiers are dropped.
    names: dict[str, str] = {}
    for table in expression.find_all(exp.Table):
        if table.name:
            names.setdefault(table.name.lower(), table.name)
    return tuple(names.values())


__all__ = ["SqlIntelService"]
