"""Request-scoped dependencies."""
from collections.abc import AsyncIterator

import httpx
from fastapi import Depends

from source_preview_api.settings import Settings, get_settings
from source_preview_core.http import get_client


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    """Outbound client for one request, closed when the response is sent."""
    async with get_client(
        timeout=settings.fetch_timeout_seconds, user_agent=settings.user_agent
    ) as client:
        yield client
