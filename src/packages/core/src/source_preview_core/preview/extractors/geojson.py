"""GeoJSON feature collection extractor."""
from typing import Any

import ijson

from source_preview_core.preview.extractors.base import RecordParser, StreamExtractor

FEATURES_PREFIX = "features.item"


def feature_properties(feature: Any) -> dict[str, Any]:
    """Properties of a feature; null or missing properties read as empty."""
    if not isinstance(feature, dict):
        return {}
    props = feature.get("properties")
    return props if isinstance(props, dict) else {}


class FeatureParser(RecordParser):
    """Incremental parser yielding the properties of each top-level feature."""

    def __init__(self, prefix: str = FEATURES_PREFIX):
        self._events = ijson.sendable_list()
        self._coro = ijson.items_coro(self._events, prefix, use_float=True)

    def feed(self, chunk: bytes) -> list[dict[str, Any]]:
        self._coro.send(chunk)
        return self._drain()

    def close(self) -> list[dict[str, Any]]:
        self._coro.close()
        return self._drain()

    def _drain(self) -> list[dict[str, Any]]:
        features = [feature_properties(f) for f in self._events]
        del self._events[:]
        return features


class GeoJSONExtractor(StreamExtractor):
    """Extractor for GeoJSON feature collections."""

    name = "geojson"

    def open_parser(self) -> RecordParser:
        return FeatureParser()
