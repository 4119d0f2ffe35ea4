"""Outbound HTTP."""
from source_preview_core.http.client import get_client

__all__ = ["get_client"]
