"""HTTP API for source previews."""
