"""Metadata adapters that feed stream and field names into completion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Protocol, Sequence

from pvquery.models import SchemaField


class MetadataProvider(Protocol):
    """Protocol for services that know which streams and fields exist."""

    async def stream_names(self) -> Sequence[str]:
        """Return every stream the user can query."""

    async def fields_for(self, streams: Iterable[str]) -> Sequence[SchemaField]:
        """Return schema fields for ``streams``, or for all streams when none match."""


@dataclass(frozen=True, slots=True)
class _StreamEntry:
    label: str
    fields: tuple[SchemaField, ...]


class StaticMetadataProvider:
    """Simple metadata provider backed by an in-memory catalog."""

    def __init__(self, streams: Mapping[str, Sequence[SchemaField]] | None = None) -> None:
        self._streams: dict[str, _StreamEntry] = {}
        self.update(streams or {})

    async def stream_names(self) -> Sequence[str]:
        return tuple(entry.label for entry in self._streams.values())

    async def fields_for(self, streams: Iterable[str]) -> Sequence[SchemaField]:
        targets: list[_StreamEntry] = []
        for stream in streams:
            entry = self._streams.get(_normalize(stream))
            if entry and entry not in targets:
                targets.append(entry)
        if not targets:
            targets = list(self._streams.values())

        fields: list[SchemaField] = []
        seen: set[str] = set()
        for entry in targets:
            for field in entry.fields:
                if field.name not in seen:
                    fields.append(field)
                    seen.add(field.name)
        return tuple(fields)

    def update(self, streams: Mapping[str, Sequence[SchemaField]]) -> None:
        """Replace the in-memory catalog used for identifier suggestions."""

        self._streams.clear()
        for name, fields in streams.items():
            self._streams[_normalize(name)] = _StreamEntry(label=name, fields=tuple(fields))


def _normalize(value: str) -> str:
    return value.replace('"', "").lower()


__all__ = ["MetadataProvider", "StaticMetadataProvider"]
