"""Base extractor interfaces."""
from abc import ABC, abstractmethod
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

import httpx
import structlog

from source_preview_core.preview.accumulator import CompletionReason, PreviewAccumulator
from source_preview_core.preview.detect import SourceDescriptor
from source_preview_core.util.errors import RECOVERABLE_ERRORS, ExtractionError

logger = structlog.get_logger()


class RecordParser(ABC):
    """Push parser: bytes in, complete records out."""

    @abstractmethod
    def feed(self, chunk: bytes) -> list[dict[str, Any]]:
        """Consume a chunk and return the records it completed."""
        pass

    @abstractmethod
    def close(self) -> list[dict[str, Any]]:
        """Signal end of input and return any trailing records."""
        pass


class BaseExtractor(ABC):
    """Abstract base class for source extractors."""

    name: str = ""

    @abstractmethod
    async def extract(
        self,
        client: httpx.AsyncClient,
        source: SourceDescriptor,
        acc: PreviewAccumulator,
        max_bytes: int | None = None,
    ) -> None:
        """Fetch the source and populate the accumulator."""
        pass

    async def run(
        self,
        client: httpx.AsyncClient,
        source: SourceDescriptor,
        acc: PreviewAccumulator,
        max_bytes: int | None = None,
    ) -> PreviewAccumulator:
        """Extract, absorbing recoverable failures into the accumulator."""
        acc.start()
        logger.info("requesting_source", url=source.url, extractor=self.name)
        try:
            await self.extract(client, source, acc, max_bytes=max_bytes)
        except RECOVERABLE_ERRORS as e:
            acc.record_failure(self.name, e)
            logger.warning(
                "extraction_step_failed",
                url=source.url,
                step=self.name,
                error=str(e),
                collected=len(acc.results),
            )
        acc.settle(CompletionReason.FAILED if acc.failed else CompletionReason.EXHAUSTED)
        return acc


async def bounded(chunks: AsyncIterable[bytes], max_bytes: int | None) -> AsyncIterator[bytes]:
    """Pass chunks through, failing once more than ``max_bytes`` have been read."""
    seen = 0
    async for chunk in chunks:
        seen += len(chunk)
        if max_bytes is not None and seen > max_bytes:
            raise ExtractionError(f"source exceeded {max_bytes} bytes before the preview filled")
        yield chunk


class StreamExtractor(BaseExtractor):
    """Extractor that parses a streamed body record by record."""

    @abstractmethod
    def open_parser(self) -> RecordParser:
        """Create a fresh parser for one stream."""
        pass

    async def extract(self, client, source, acc, max_bytes=None):
        async with client.stream("GET", source.url) as response:
            response.raise_for_status()
            await self.consume(bounded(response.aiter_bytes(), max_bytes), acc)
        acc.record_success(self.name)

    async def consume(self, chunks: AsyncIterable[bytes], acc: PreviewAccumulator) -> bool:
        """Feed chunks to a parser until the stream ends or the cap is hit.

        Returns True when capped. The caller tears the stream down on return,
        so nothing past the chunk carrying the last needed record is read.
        """
        parser = self.open_parser()
        async for chunk in chunks:
            if self._collect(parser.feed(chunk), acc):
                return True
        return self._collect(parser.close(), acc)

    def _collect(self, records: list[dict[str, Any]], acc: PreviewAccumulator) -> bool:
        for record in records:
            if acc.add(record):
                acc.settle(CompletionReason.CAPPED)
                logger.info("preview_capped", extractor=self.name, collected=len(acc.results))
                return True
        return False
