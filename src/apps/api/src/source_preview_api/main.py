"""FastAPI application entrypoint."""
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from source_preview_api.logging import configure_logging
from source_preview_api.routers import fields, health
from source_preview_api.settings import get_settings

configure_logging(get_settings().log_level)
logger = structlog.get_logger()

app = FastAPI(title="Source Preview API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(fields.router)


@app.on_event("startup")
def startup():
    """Log effective settings on startup."""
    settings = get_settings()
    logger.info(
        "source_preview_api_started",
        fetch_timeout_seconds=settings.fetch_timeout_seconds,
        max_source_bytes=settings.max_source_bytes,
        merge_fields=settings.merge_fields,
        strict_status=settings.strict_status,
    )
