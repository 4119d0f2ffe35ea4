"""Detect, extract and assemble a preview for one source URL."""
import httpx
import structlog

from source_preview_core.preview.accumulator import PreviewAccumulator
from source_preview_core.preview.detect import detect_source
from source_preview_core.preview.dispatch import get_extractor
from source_preview_core.preview.result import PreviewResult, assemble

logger = structlog.get_logger()


async def preview_source(
    url: str,
    client: httpx.AsyncClient,
    *,
    merge_fields: bool = False,
    max_bytes: int | None = None,
) -> PreviewResult:
    """Preview a remote source: its format, field names and up to 10 records."""
    source = detect_source(url)
    acc = PreviewAccumulator(merge_fields=merge_fields)

    extractor = get_extractor(source)
    if extractor is None:
        logger.info("source_format_unknown", url=source.url)
    else:
        await extractor.run(client, source, acc, max_bytes=max_bytes)

    result = assemble(source, acc)
    logger.info(
        "preview_completed",
        url=source.url,
        type=result.type,
        compression=result.compression,
        status=result.status,
        completion=result.completion,
        records=len(result.results or []),
    )
    return result
