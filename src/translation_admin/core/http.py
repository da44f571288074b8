"""HTTP client utilities with built-in timeout support.

Provides pre-configured HTTP clients so the API client shares one set
of timeout defaults.
"""

from typing import Any

import httpx

DEFAULT_TIMEOUT = httpx.Timeout(
    connect=5.0,  # Connection timeout
    read=30.0,  # Read timeout
    write=10.0,  # Write timeout
    pool=5.0,  # Pool timeout
)

# Uploads can carry a few MB of spreadsheet
UPLOAD_TIMEOUT = httpx.Timeout(
    connect=5.0,
    read=120.0,
    write=60.0,
    pool=5.0,
)


def create_http_client(
    timeout: httpx.Timeout | float | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create an async HTTP client with sensible defaults.

    Args:
        timeout: Custom timeout configuration. Defaults to DEFAULT_TIMEOUT.
        **kwargs: Additional arguments passed to AsyncClient (base_url, transport...).

    Returns:
        Configured AsyncClient instance.

    Usage:
        async with create_http_client(base_url="http://localhost:8000/api") as client:
            response = await client.get("/modules")
    """
    return httpx.AsyncClient(
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        follow_redirects=True,
        **kwargs,
    )
