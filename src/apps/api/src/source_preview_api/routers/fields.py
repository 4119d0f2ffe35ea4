"""Source preview endpoint."""
import httpx
import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from source_preview_api.dependencies import get_http_client
from source_preview_api.settings import Settings, get_settings
from source_preview_core.preview import preview_source

router = APIRouter(tags=["fields"])
logger = structlog.get_logger()


@router.get("/fields")
async def fields(
    source: str = Query("", description="URL of the remote dataset"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Detect a source's format and return its field names and up to 10 records."""
    result = await preview_source(
        source,
        client,
        merge_fields=settings.merge_fields,
        max_bytes=settings.max_source_bytes,
    )
    body = result.to_response(include_diagnostics=settings.include_diagnostics)

    if settings.strict_status and result.status == "failed":
        logger.warning("preview_failed", source=source, errors=result.errors)
        return JSONResponse(status_code=502, content=body)
    return body
