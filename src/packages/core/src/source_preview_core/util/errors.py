"""Error types shared by the extractors."""
import csv

import httpx
import ijson
from stream_unzip import UnzipError


class ExtractionError(Exception):
    """A source answered, but not with something we can preview."""


# Failures an extraction step absorbs into its outcome instead of raising.
RECOVERABLE_ERRORS = (
    httpx.HTTPError,
    httpx.InvalidURL,
    ijson.JSONError,
    UnzipError,
    csv.Error,
    ValueError,
    ExtractionError,
)
