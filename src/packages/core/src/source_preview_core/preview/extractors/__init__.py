"""Per-format source extractors."""
from source_preview_core.preview.extractors.base import BaseExtractor, RecordParser, StreamExtractor
from source_preview_core.preview.extractors.arcgis import ArcGISExtractor
from source_preview_core.preview.extractors.geojson import GeoJSONExtractor, FeatureParser
from source_preview_core.preview.extractors.csv import CSVExtractor, CSVRecordParser
from source_preview_core.preview.extractors.archive import ZipExtractor

__all__ = [
    "BaseExtractor",
    "RecordParser",
    "StreamExtractor",
    "ArcGISExtractor",
    "GeoJSONExtractor",
    "FeatureParser",
    "CSVExtractor",
    "CSVRecordParser",
    "ZipExtractor",
]
