"""Source format detection from a URL."""
import re
from dataclasses import dataclass
from enum import Enum

ARCGIS_LAYER = re.compile(r"(Map|Feature)Server/\d+/?$")


class SourceFormat(str, Enum):
    """Formats a source can be previewed as."""

    ARCGIS = "ARCGIS"
    GEOJSON = "GEOJSON"
    CSV = "CSV"
    UNKNOWN = "UNKNOWN"


class Compression(str, Enum):
    """Wrapping applied around the payload."""

    NONE = "none"
    ZIP = "zip"


@dataclass(frozen=True)
class SourceDescriptor:
    """A source URL and its detected format."""

    url: str
    format: SourceFormat
    compression: Compression | None


# Checked in order; the first matching suffix wins.
SUFFIX_RULES: list[tuple[str, SourceFormat, Compression]] = [
    (".geojson", SourceFormat.GEOJSON, Compression.NONE),
    (".geojson.zip", SourceFormat.GEOJSON, Compression.ZIP),
    (".csv", SourceFormat.CSV, Compression.NONE),
    (".csv.zip", SourceFormat.CSV, Compression.ZIP),
]


def detect_source(url: str) -> SourceDescriptor:
    """Classify a source URL by format and compression. No I/O."""
    url = url or ""
    if ARCGIS_LAYER.search(url):
        return SourceDescriptor(url, SourceFormat.ARCGIS, Compression.NONE)
    for suffix, fmt, compression in SUFFIX_RULES:
        if url.endswith(suffix):
            return SourceDescriptor(url, fmt, compression)
    return SourceDescriptor(url, SourceFormat.UNKNOWN, None)
