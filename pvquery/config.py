"""App configuration loading helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import tomllib

from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlglot.dialects.dialect import Dialect

from .models import SchemaField

CONFIG_FILE = Path.home() / ".config" / "pvquery" / "config.toml"

LOG = logging.getLogger(__name__)


class EditorSettings(BaseModel):
    """Tuning knobs for the query editor integration."""

    max_suggestions: int = Field(default=50, ge=1)
    debounce_delay: float = Field(default=0.15, ge=0)
    offload_threshold: int = Field(default=20_000, ge=0)
    dialect: str = "postgres"

    @field_validator("dialect")
    @classmethod
    def _known_dialect(cls, value: str) -> str:
        # sqlglot raises ValueError for names it has no dialect for.
        Dialect.get_or_raise(value)
        return value


def _default_styles() -> dict[str, str]:
    return {
        "comment": "dim",
        "string": "red",
        "quoted_identifier": "red",
        "number": "magenta",
        "keyword": "bold blue",
        "function": "cyan",
        "json_key": "bold cyan",
        "json_string": "red",
        "json_boolean": "yellow",
        "json_null": "dim",
        "json_number": "magenta",
    }


class HighlightTheme(BaseModel):
    """Rich style strings keyed by highlight style name."""

    styles: dict[str, str] = Field(default_factory=_default_styles)

    def with_styles(self, **updates: str) -> HighlightTheme:
        """Return a copy with the given styles overridden."""

        styles = dict(self.styles)
        styles.update(updates)
        return self.model_copy(update={"styles": styles})


class AppConfig(BaseModel):
    """Shape of the application configuration file."""

    editor: EditorSettings = Field(default_factory=EditorSettings)
    theme: HighlightTheme = Field(default_factory=HighlightTheme)
    streams: dict[str, tuple[SchemaField, ...]] = Field(default_factory=dict)

    def stream_names(self) -> tuple[str, ...]:
        return tuple(sorted(self.streams))

    def with_editor(self, **updates: object) -> AppConfig:
        """Return a copy with editor settings changes applied."""

        editor = self.editor.model_copy(update=updates)
        return self.model_copy(update={"editor": editor})


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from disk; fall back to defaults if missing or invalid."""

    target = path or CONFIG_FILE
    try:
        data = _read_config_file(target)
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, OSError) as exc:
        LOG.debug("Ignoring unreadable config file", extra={"path": str(target), "error": str(exc)})
        return AppConfig()

    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        LOG.debug("Ignoring invalid config file", extra={"path": str(target), "error": str(exc)})
        return AppConfig()


def save_config(config: AppConfig, path: Path | None = None) -> None:
    """Persist configuration to disk."""

    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    editor = config.editor
    lines: list[str] = [
        "[editor]",
        f"max_suggestions = {editor.max_suggestions}",
        f"debounce_delay = {editor.debounce_delay}",
        f"offload_threshold = {editor.offload_threshold}",
        f"dialect = {_toml_string(editor.dialect)}",
        "",
        "[theme.styles]",
    ]
    for name in sorted(config.theme.styles):
        lines.append(f"{_toml_string(name)} = {_toml_string(config.theme.styles[name])}")
    for stream in sorted(config.streams):
        key = _toml_string(stream)
        fields = config.streams[stream]
        lines.append("")
        if not fields:
            # Schema not fetched yet; keep the stream itself.
            lines.append(f"[streams.{key}]")
            lines.append("fields = []")
            continue
        for entry in fields:
            lines.append(f"[[streams.{key}]]")
            lines.append(f"name = {_toml_string(entry.name)}")
            lines.append(f"data_type = {_toml_string(entry.data_type)}")
    target.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = "".join(
        char if char >= " " and char != "\x7f" else f"\\u{ord(char):04x}" for char in escaped
    )
    return f'"{escaped}"'


def _read_config_file(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, Any] = {}
    editor = raw.get("editor")
    if isinstance(editor, dict):
        data["editor"] = editor
    theme = raw.get("theme")
    if isinstance(theme, dict) and isinstance(theme.get("styles"), dict):
        styles = _default_styles()
        styles.update({str(key): str(value) for key, value in theme["styles"].items()})
        data["theme"] = {"styles": styles}
    streams = raw.get("streams")
    if isinstance(streams, dict):
        parsed: dict[str, list[Any]] = {}
        for stream, fields in streams.items():
            if isinstance(fields, list):
                parsed[str(stream)] = [field for field in fields if isinstance(field, dict)]
            elif isinstance(fields, dict) and isinstance(fields.get("fields"), list):
                parsed[str(stream)] = fields["fields"]
        data["streams"] = parsed
    return data


__all__ = [
    "AppConfig",
    "CONFIG_FILE",
    "EditorSettings",
    "HighlightTheme",
    "load_config",
    "save_config",
]
