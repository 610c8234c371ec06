"""Command line helpers for poking at the SQL intelligence engine."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import AppConfig, load_config
from .models import SchemaField
from .sqlintel import (
    SqlIntelService,
    StaticMetadataProvider,
    error_range_for_message,
    select_column_list_range,
    tokenize,
)

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pvquery", description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="Path to config.toml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    tokens = commands.add_parser("tokens", help="List the tokens of a SQL file")
    tokens.add_argument("file", help="SQL file, or - for stdin")

    columns = commands.add_parser("columns", help="Show the SELECT column list")
    columns.add_argument("file", help="SQL file, or - for stdin")

    highlight = commands.add_parser("highlight", help="Print SQL with syntax highlighting")
    highlight.add_argument("file", help="SQL file, or - for stdin")

    complete = commands.add_parser("complete", help="List completions at a cursor offset")
    complete.add_argument("file", help="SQL file, or - for stdin")
    complete.add_argument("--cursor", type=int, default=None, help="Cursor offset (default: end)")
    complete.add_argument(
        "--table", action="append", default=[], help="Extra stream name to offer (repeatable)"
    )

    error = commands.add_parser("error", help="Map a server error message onto the SQL")
    error.add_argument("file", help="SQL file, or - for stdin")
    error.add_argument("message", help="Error message returned by the server")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``python -m pvquery``."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config(args.config)
    console = Console(highlight=False, soft_wrap=True)

    try:
        sql = _read_source(args.file)
    except OSError as exc:
        console.print(f"Could not read {args.file}: {exc.strerror or exc}", markup=False)
        return 1

    if args.command == "tokens":
        _print_tokens(console, sql)
    elif args.command == "columns":
        span = select_column_list_range(sql)
        if span is None:
            console.print("No column list found.")
            return 1
        console.print(f"{span.start}-{span.end}: {span.slice(sql)}", markup=False)
    elif args.command == "highlight":
        service = _service(config, ())
        console.print(asyncio.run(service.highlighted_text(sql)))
    elif args.command == "complete":
        cursor = len(sql) if args.cursor is None else args.cursor
        service = _service(config, args.table)
        result = asyncio.run(service.suggest(sql, cursor))
        for item in result.items:
            detail = f"  {item.detail}" if item.detail else ""
            console.print(f"{item.kind_label} {item.display_text}{detail}", markup=False)
    elif args.command == "error":
        span = error_range_for_message(args.message, sql)
        if span is None:
            console.print("No position found in error message.")
            return 1
        console.print(f"{span.start}-{span.end}: {span.slice(sql)}", markup=False)
    return 0


def _read_source(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _service(config: AppConfig, extra_tables: Sequence[str]) -> SqlIntelService:
    streams: dict[str, tuple[SchemaField, ...]] = dict(config.streams)
    for name in extra_tables:
        streams.setdefault(name, ())
    LOG.debug("Building service", extra={"streams": sorted(streams)})
    return SqlIntelService(
        StaticMetadataProvider(streams),
        settings=config.editor,
        theme=config.theme,
    )


def _print_tokens(console: Console, sql: str) -> None:
    table = Table("Kind", "Range", "Value", "Text")
    for token in tokenize(sql):
        table.add_row(
            token.kind.value,
            f"{token.range.start}-{token.range.end}",
            Text(token.value or ""),
            Text(repr(token.range.slice(sql))),
        )
    console.print(table)


__all__ = ["build_parser", "main"]
