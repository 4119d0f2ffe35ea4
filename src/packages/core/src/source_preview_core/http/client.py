"""httpx client factory."""
import os

import httpx

DEFAULT_USER_AGENT = "source-preview/1.0"


def get_client(
    timeout: float | None = None,
    user_agent: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an async HTTP client, falling back to environment variables."""
    if timeout is None:
        timeout = float(os.environ.get("FETCH_TIMEOUT_SECONDS", "30"))
    headers = {"User-Agent": user_agent or os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)}

    kwargs = {
        "timeout": timeout,
        "headers": headers,
        "follow_redirects": True,
    }
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(**kwargs)
