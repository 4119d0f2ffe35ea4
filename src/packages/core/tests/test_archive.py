"""Tests for zip-wrapped sources."""
import json
import zipfile

import httpx
import pytest

from source_preview_core.http import get_client
from source_preview_core.preview import CompletionReason, preview_source
from streams import CountingStream, csv_chunks, feature, make_zip, split_bytes

HEADER = ["id", "species", "dbh"]


def _rows(n):
    return [[i, "Quercus rubra" if i % 2 else "Acer saccharum", 10 + i] for i in range(1, n + 1)]


def _serve(stream):
    def handler(request):
        return httpx.Response(200, stream=stream, headers={"Content-Type": "application/zip"})

    return get_client(timeout=5, transport=httpx.MockTransport(handler))


def _collection(features):
    return json.dumps({"type": "FeatureCollection", "features": features}).encode()


@pytest.mark.asyncio
async def test_zipped_csv_caps_like_plain_csv():
    rows = _rows(12)
    plain_body = b"".join(csv_chunks(HEADER, rows))
    zipped = make_zip({"trees.csv": plain_body})

    async with _serve(CountingStream(split_bytes(zipped, 64))) as client:
        zipped_result = await preview_source("https://host/trees.csv.zip", client)
    async with _serve(CountingStream([plain_body])) as client:
        plain_result = await preview_source("https://host/trees.csv", client)

    assert zipped_result.type == "CSV"
    assert zipped_result.compression == "zip"
    assert len(zipped_result.results) == 10
    assert zipped_result.results == plain_result.results
    assert zipped_result.fields == plain_result.fields == HEADER
    assert zipped_result.completion == CompletionReason.CAPPED.value


@pytest.mark.asyncio
async def test_zipped_geojson_short_entry():
    zipped = make_zip({"points.geojson": _collection([feature(i) for i in range(3)])})
    async with _serve(CountingStream([zipped])) as client:
        result = await preview_source("https://host/points.geojson.zip", client)

    assert result.type == "GEOJSON"
    assert result.compression == "zip"
    assert result.results == [feature(i)["properties"] for i in range(3)]
    assert result.completion == CompletionReason.EXHAUSTED.value
    assert result.status == "ok"


@pytest.mark.asyncio
async def test_entries_share_one_cap():
    zipped = make_zip(
        {
            "a.geojson": _collection([feature(i) for i in range(4)]),
            "b.geojson": _collection([feature(100 + i, zone="R1") for i in range(20)]),
        }
    )
    async with _serve(CountingStream([zipped])) as client:
        result = await preview_source("https://host/parts.geojson.zip", client)

    assert len(result.results) == 10
    assert [r["id"] for r in result.results[:5]] == [0, 1, 2, 3, 100]
    assert result.fields == ["id", "name", "zone"]


@pytest.mark.asyncio
async def test_stops_reading_archive_once_capped():
    big = _collection([feature(i, note="n" * 50) for i in range(3000)])
    zipped = make_zip({"big.geojson": big}, compression=zipfile.ZIP_STORED)
    stream = CountingStream(split_bytes(zipped, 4096))
    async with _serve(stream) as client:
        result = await preview_source("https://host/big.geojson.zip", client)

    assert len(result.results) == 10
    assert stream.yielded < len(stream.chunks) // 2
    assert stream.closed


@pytest.mark.asyncio
async def test_not_a_zip_archive():
    async with _serve(CountingStream([b"id,name\n1,foo\n"])) as client:
        result = await preview_source("https://host/fake.csv.zip", client)

    assert result.compression == "zip"
    assert result.results == []
    assert result.status == "failed"
    assert result.errors[0].startswith("csv_zip: ")
