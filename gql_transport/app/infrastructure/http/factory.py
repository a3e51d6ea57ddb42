"""HTTP client factory: builds AbstractHttpClient from settings (no provider logic in composition)."""
from __future__ import annotations

import httpx

from gql_transport.app.config.settings import Settings
from gql_transport.app.ports.http_client import AbstractHttpClient
from gql_transport.app.infrastructure.http.httpx_client import HttpxHttpClient


def create_http_client(settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> AbstractHttpClient:
    """Build an HTTP client from settings. Session-level timeouts live on the httpx client."""
    headers: dict[str, str] = {}
    if settings.http_user_agent:
        headers["User-Agent"] = settings.http_user_agent

    async_client = httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.http_read_timeout_seconds,
            connect=settings.http_connect_timeout_seconds,
        ),
        headers=headers,
        transport=transport,
    )
    return HttpxHttpClient(async_client, follow_redirects=settings.http_follow_redirects)
