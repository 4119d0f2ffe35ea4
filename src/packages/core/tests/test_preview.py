"""End-to-end tests for the preview pipeline."""
import httpx
import pytest

from source_preview_core.http import get_client
from source_preview_core.preview import PreviewAccumulator, assemble, detect_source, preview_source
from streams import CountingStream, feature, feature_collection_chunks


def _no_network(request):
    raise AssertionError(f"unexpected request to {request.url}")


@pytest.mark.asyncio
async def test_unknown_source_makes_no_requests():
    async with get_client(transport=httpx.MockTransport(_no_network)) as client:
        result = await preview_source("https://host/readme.txt", client)

    assert result.to_response(include_diagnostics=False) == {
        "type": "UNKNOWN",
        "compression": None,
        "fields": None,
        "results": None,
    }
    assert result.status == "unsupported"
    assert result.completion is None


@pytest.mark.asyncio
async def test_geojson_points_end_to_end():
    features = [feature(i, kind="hydrant") for i in range(15)]
    features[9]["properties"] = {"id": 9, "kind": "valve"}

    def handler(request):
        return httpx.Response(200, stream=CountingStream(feature_collection_chunks(features)))

    async with get_client(transport=httpx.MockTransport(handler)) as client:
        result = await preview_source("https://host/data.geojson", client)

    body = result.to_response()
    assert body["type"] == "GEOJSON"
    assert body["compression"] is None
    assert body["fields"] == ["id", "kind"]
    assert body["results"] == [f["properties"] for f in features[:10]]
    assert body["status"] == "ok"
    assert body["errors"] == []


def test_assemble_without_extraction():
    source = detect_source("https://host/data.csv.zip")
    result = assemble(source, PreviewAccumulator())
    assert result.type == "CSV"
    assert result.compression == "zip"
    assert result.fields is None
    assert result.results is None
