"""Zip-wrapped source extractor."""
from contextlib import aclosing

import structlog
from stream_unzip import async_stream_unzip

from source_preview_core.preview.extractors.base import BaseExtractor, StreamExtractor, bounded

logger = structlog.get_logger()


class ZipExtractor(BaseExtractor):
    """Decompress a zip archive on the fly and preview each entry.

    Entries share one accumulator and one cap; the archive is read only as far
    as the entry that fills the preview.
    """

    def __init__(self, inner: StreamExtractor):
        self.inner = inner
        self.name = f"{inner.name}_zip"

    async def extract(self, client, source, acc, max_bytes=None):
        async with client.stream("GET", source.url) as response:
            response.raise_for_status()
            zipped = bounded(response.aiter_bytes(), max_bytes)
            async with aclosing(async_stream_unzip(zipped)) as entries:
                async for file_name, _size, chunks in entries:
                    entry = file_name.decode("utf-8", errors="replace")
                    if entry.endswith("/"):
                        await _drain(chunks)
                        continue
                    logger.debug("zip_entry", url=source.url, entry=entry)
                    if await self.inner.consume(chunks, acc):
                        break
        acc.record_success(self.name)


async def _drain(chunks) -> None:
    # the decoder only advances to the next entry once this one is read out
    async for _ in chunks:
        pass
