"""Preview module for remote source detection and sampling."""
from source_preview_core.preview.accumulator import (
    SAMPLE_SIZE,
    CompletionReason,
    PreviewAccumulator,
    StepOutcome,
)
from source_preview_core.preview.detect import (
    Compression,
    SourceDescriptor,
    SourceFormat,
    detect_source,
)
from source_preview_core.preview.dispatch import get_extractor
from source_preview_core.preview.pipeline import preview_source
from source_preview_core.preview.result import PreviewResult, assemble

__all__ = [
    "SAMPLE_SIZE",
    "CompletionReason",
    "PreviewAccumulator",
    "StepOutcome",
    "Compression",
    "SourceDescriptor",
    "SourceFormat",
    "detect_source",
    "get_extractor",
    "preview_source",
    "PreviewResult",
    "assemble",
]
