"""Utility modules."""
from source_preview_core.util.errors import ExtractionError, RECOVERABLE_ERRORS

__all__ = ["ExtractionError", "RECOVERABLE_ERRORS"]
