"""Tests for the in-memory metadata provider."""

from __future__ import annotations

import pytest

from pvquery.models import SchemaField
from pvquery.sqlintel import StaticMetadataProvider


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def provider() -> StaticMetadataProvider:
    return StaticMetadataProvider(
        {
            "Access_Logs": (SchemaField(name="host"), SchemaField(name="level")),
            "error_logs": (SchemaField(name="level"), SchemaField(name="message")),
        }
    )


@pytest.mark.anyio
async def test_stream_names_keep_original_labels(provider: StaticMetadataProvider) -> None:
    assert await provider.stream_names() == ("Access_Logs", "error_logs")


@pytest.mark.anyio
async def test_fields_for_matches_quoted_names_case_insensitively(
    provider: StaticMetadataProvider,
) -> None:
    fields = await provider.fields_for(['"access_logs"'])

    assert [entry.name for entry in fields] == ["host", "level"]


@pytest.mark.anyio
async def test_fields_for_several_streams_drops_duplicates(provider: StaticMetadataProvider) -> None:
    fields = await provider.fields_for(["access_logs", "ERROR_LOGS", "access_logs"])

    assert [entry.name for entry in fields] == ["host", "level", "message"]


@pytest.mark.anyio
async def test_fields_for_unknown_stream_returns_everything(provider: StaticMetadataProvider) -> None:
    fields = await provider.fields_for(["nope"])

    assert [entry.name for entry in fields] == ["host", "level", "message"]


@pytest.mark.anyio
async def test_update_replaces_catalog(provider: StaticMetadataProvider) -> None:
    provider.update({"metrics": [SchemaField(name="value", data_type="Float64")]})

    assert await provider.stream_names() == ("metrics",)
    assert (await provider.fields_for([]))[0].data_type == "Float64"


@pytest.mark.anyio
async def test_empty_provider() -> None:
    provider = StaticMetadataProvider()

    assert await provider.stream_names() == ()
    assert await provider.fields_for(["anything"]) == ()
