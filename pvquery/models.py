"""Stream schema models shared by the metadata provider and completion."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SchemaField(BaseModel):
    """One column of a log stream as reported by the server's schema endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    data_type: str = "Unknown"

    @field_validator("data_type", mode="before")
    @classmethod
    def _display_data_type(cls, value: Any) -> str:
        # Arrow types come back either as a plain name or as a JSON value. Only a
        # missing key falls back to "Unknown"; an explicit null renders as "null".
        return _display_string(value)


class StreamSchema(BaseModel):
    """Schema payload; the server sends either ``{"fields": [...]}`` or a bare list."""

    fields: tuple[SchemaField, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return {"fields": data}
        return data

    def field_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.fields)


def _display_string(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    if isinstance(value, Mapping):
        return f"{{{len(value)} fields}}"
    if isinstance(value, (list, tuple)):
        return f"[{len(value)} items]"
    return str(value)


__all__ = ["SchemaField", "StreamSchema"]
