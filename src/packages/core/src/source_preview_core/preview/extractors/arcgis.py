"""ArcGIS MapServer/FeatureServer layer extractor."""
import asyncio
from typing import Any

import httpx
import structlog

from source_preview_core.preview.accumulator import PreviewAccumulator
from source_preview_core.preview.detect import SourceDescriptor
from source_preview_core.preview.extractors.base import BaseExtractor
from source_preview_core.util.errors import RECOVERABLE_ERRORS, ExtractionError

logger = structlog.get_logger()

JSON_HEADERS = {"Accept": "application/json"}


def _service_error(payload: Any) -> str | None:
    """Message of an ArcGIS ``{"error": {...}}`` envelope, if present."""
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        err = payload["error"]
        return f"service error {err.get('code', '')}: {err.get('message', '')}".strip()
    return None


def _list_member(payload: Any, key: str) -> list[Any]:
    if isinstance(payload, dict) and isinstance(payload.get(key), list):
        return payload[key]
    raise ExtractionError(_service_error(payload) or f"response has no '{key}' list")


class ArcGISExtractor(BaseExtractor):
    """Extractor for ArcGIS service layers.

    Issues a schema call and a sample query concurrently. Each call is its own
    step: one failing does not affect the other.
    """

    name = "arcgis"

    async def extract(self, client, source, acc, max_bytes=None):
        await asyncio.gather(
            self._step("schema", self.lookup_fields(client, source, acc), source, acc),
            self._step("sample", self.lookup_sample(client, source, acc), source, acc),
        )

    async def _step(self, step: str, coro, source: SourceDescriptor, acc: PreviewAccumulator) -> None:
        try:
            await coro
        except RECOVERABLE_ERRORS as e:
            acc.record_failure(step, e)
            logger.warning("extraction_step_failed", url=source.url, step=step, error=str(e))
        else:
            acc.record_success(step)

    async def lookup_fields(
        self, client: httpx.AsyncClient, source: SourceDescriptor, acc: PreviewAccumulator
    ) -> None:
        """Read the layer's field definitions."""
        response = await client.get(source.url, params={"f": "json"}, headers=JSON_HEADERS)
        response.raise_for_status()
        fields = _list_member(response.json(), "fields")
        acc.set_fields([f["name"] for f in fields if isinstance(f, dict) and "name" in f])

    async def lookup_sample(
        self, client: httpx.AsyncClient, source: SourceDescriptor, acc: PreviewAccumulator
    ) -> None:
        """Query the first page of features and keep their attributes."""
        params = {
            "outFields": "*",
            "where": "1=1",
            "resultRecordCount": acc.cap,
            "resultOffset": 0,
            "f": "json",
        }
        response = await client.get(
            f"{source.url.rstrip('/')}/query", params=params, headers=JSON_HEADERS
        )
        response.raise_for_status()
        for feature in _list_member(response.json(), "features"):
            attributes = feature.get("attributes") if isinstance(feature, dict) else None
            if acc.add(attributes or {}, observe_fields=False):
                break
