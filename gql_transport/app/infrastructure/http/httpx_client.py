"""Concrete HTTP client implementation using httpx (injected where AbstractHttpClient is needed)."""
from __future__ import annotations

from typing import Mapping

import httpx

from gql_transport.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    HttpResponse,
    RequestTimeout,
)


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._response.headers)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text_encoding(self) -> str | None:
        return self._response.charset_encoding

    @property
    def url(self) -> str:
        return str(self._response.url)

    def __repr__(self) -> str:
        return f"<HttpResponse [{self.status_code} {self.reason_phrase}] {self.url}>"


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient, *, follow_redirects: bool = True) -> None:
        self._client = client
        self._follow_redirects = follow_redirects

    async def post(
        self,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        timeout: RequestTimeout | None = None,
    ) -> HttpResponse:
        extra: dict[str, httpx.Timeout] = {}
        if timeout is not None:
            extra["timeout"] = httpx.Timeout(
                connect=timeout.connect_seconds,
                read=timeout.read_seconds,
                write=timeout.read_seconds,
                pool=timeout.connect_seconds,
            )
        try:
            response = await self._client.post(
                url,
                content=content,
                headers=dict(headers),
                follow_redirects=self._follow_redirects,
                **extra,
            )
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise HttpClientTimeoutError(f"timeout while posting to {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HttpClientError(f"http post failed for {url}: {exc}") from exc

    async def close(self) -> None:
        await self._client.aclose()
