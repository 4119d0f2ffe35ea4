"""Health check endpoint."""
from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "source-preview"


@router.get("/health")
def health():
    """Liveness check; does not touch any remote source."""
    return {"status": "ok", "service": SERVICE_NAME}
