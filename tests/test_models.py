"""Tests for the stream schema wire models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pvquery.models import SchemaField, StreamSchema


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Utf8", "Utf8"),
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (64.0, "64"),
        (1.5, "1.5"),
        ({"Timestamp": ["Millisecond", None]}, "{1 fields}"),
        (["a", "b"], "[2 items]"),
    ],
)
def test_data_type_is_rendered_for_display(raw: object, expected: str) -> None:
    assert SchemaField(name="col", data_type=raw).data_type == expected


def test_data_type_defaults_to_unknown() -> None:
    assert SchemaField(name="col").data_type == "Unknown"


def test_schema_field_is_frozen() -> None:
    entry = SchemaField(name="col")

    with pytest.raises(ValidationError):
        entry.name = "other"


def test_stream_schema_accepts_wrapped_payload() -> None:
    schema = StreamSchema.model_validate(
        {"fields": [{"name": "p_timestamp", "data_type": "Utf8"}, {"name": "status"}]}
    )

    assert schema.field_names() == ("p_timestamp", "status")
    assert schema.fields[1].data_type == "Unknown"


def test_stream_schema_accepts_bare_list() -> None:
    schema = StreamSchema.model_validate([{"name": "level", "data_type": "Utf8"}])

    assert schema.field_names() == ("level",)


def test_stream_schema_rejects_nameless_fields() -> None:
    with pytest.raises(ValidationError):
        StreamSchema.model_validate([{"data_type": "Utf8"}])
