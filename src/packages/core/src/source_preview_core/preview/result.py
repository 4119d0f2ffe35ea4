"""Preview response assembly."""
from typing import Any

from pydantic import BaseModel, Field

from source_preview_core.preview.accumulator import PreviewAccumulator
from source_preview_core.preview.detect import Compression, SourceDescriptor, SourceFormat


class PreviewResult(BaseModel):
    """Detected format, observed fields and sample records for a source."""

    type: str
    compression: str | None = None
    fields: list[str] | None = None
    results: list[dict[str, Any]] | None = None
    status: str = "ok"
    completion: str | None = None
    errors: list[str] = Field(default_factory=list)

    def to_response(self, include_diagnostics: bool = True) -> dict[str, Any]:
        """Response body; diagnostics can be left out for the bare contract."""
        body = {
            "type": self.type,
            "compression": self.compression,
            "fields": self.fields,
            "results": self.results,
        }
        if include_diagnostics:
            body["status"] = self.status
            body["completion"] = self.completion
            body["errors"] = self.errors
        return body


def _status(source: SourceDescriptor, acc: PreviewAccumulator) -> str:
    if source.format is SourceFormat.UNKNOWN:
        return "unsupported"
    if not acc.failed:
        return "ok"
    if acc.fields or acc.results:
        return "partial"
    return "failed"


def assemble(source: SourceDescriptor, acc: PreviewAccumulator) -> PreviewResult:
    """Package the accumulator into a result. No further transformation."""
    compression = source.compression
    return PreviewResult(
        type=source.format.value,
        compression=compression.value if compression and compression is not Compression.NONE else None,
        fields=acc.fields,
        results=acc.results,
        status=_status(source, acc),
        completion=acc.completion.value if acc.completion else None,
        errors=[f"{s.step}: {s.error}" for s in acc.steps if not s.ok],
    )
