"""Routing from a detected source to its extractor."""
from source_preview_core.preview.detect import Compression, SourceDescriptor, SourceFormat
from source_preview_core.preview.extractors import (
    ArcGISExtractor,
    BaseExtractor,
    CSVExtractor,
    GeoJSONExtractor,
    ZipExtractor,
)

EXTRACTORS: dict[tuple[SourceFormat, Compression], BaseExtractor] = {
    (SourceFormat.ARCGIS, Compression.NONE): ArcGISExtractor(),
    (SourceFormat.GEOJSON, Compression.NONE): GeoJSONExtractor(),
    (SourceFormat.GEOJSON, Compression.ZIP): ZipExtractor(GeoJSONExtractor()),
    (SourceFormat.CSV, Compression.NONE): CSVExtractor(),
    (SourceFormat.CSV, Compression.ZIP): ZipExtractor(CSVExtractor()),
}


def get_extractor(source: SourceDescriptor) -> BaseExtractor | None:
    """Get the extractor for a source, or None if it cannot be previewed."""
    if source.compression is None:
        return None
    return EXTRACTORS.get((source.format, source.compression))
