"""HTTP client utilities."""

import httpx

from linkedin_mcp.config.loader import Settings, get_settings


def create_http_client(
    timeout: float | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    settings: Settings | None = None,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client with sensible defaults.

    Args:
        timeout: Request timeout in seconds. Uses the fetch timeout from settings if None.
        base_url: Optional base URL for all requests.
        transport: Optional transport override (tests pass httpx.MockTransport).
        settings: Settings to take defaults from. Uses the cached settings if None.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    if settings is None:
        settings = get_settings()

    if timeout is None:
        timeout = float(settings.fetch_timeout)

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        transport=transport,
        headers={
            "User-Agent": f"{settings.server_name}/{settings.server_version}",
        },
    )
