"""HTTP client port: contract for dispatching GraphQL POST requests.

Domain and application code depend on this port; infrastructure (e.g. httpx)
implements it. Keeps domain free of infrastructure imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable


class HttpClientError(Exception):
    """Transport-level failure: no HTTP response was obtained (network, DNS, TLS...)."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out at the transport."""


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of an HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...

    @property
    def text_encoding(self) -> str | None:
        """Charset declared by the response's Content-Type, if any."""
        ...

    @property
    def url(self) -> str: ...


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: perform POST requests. Implementations live in infrastructure."""

    async def post(
        self,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        timeout: RequestTimeout | None = None,
    ) -> HttpResponse:
        """Perform POST; raise HttpClientTimeoutError or HttpClientError when no response is obtained.

        Non-2xx statuses are returned, never raised.
        """
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
