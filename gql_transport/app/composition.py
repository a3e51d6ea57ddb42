"""Composition root: build and lifecycle-manage concrete transport dependencies.

Composition may: import concrete classes, call factories, store interface types,
manage high-level lifecycle.
"""
from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from gql_transport.app.application.http_network_transport import HTTPNetworkTransport
from gql_transport.app.config.settings import Settings
from gql_transport.app.core import SERVICE_NAME
from gql_transport.app.infrastructure.http.factory import create_http_client
from gql_transport.app.infrastructure.serialization.json_format import JSONSerializationFormat
from gql_transport.app.ports.http_client import AbstractHttpClient


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class TransportDependencies:
    """Holds the wired transport and its HTTP client lifecycle."""

    def __init__(self, *, settings: Settings, http_transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._http_transport = http_transport
        self._http_client: AbstractHttpClient | None = None
        self._transport: HTTPNetworkTransport | None = None
        self._connected = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def transport(self) -> HTTPNetworkTransport:
        if self._transport is None:
            raise RuntimeError("transport is not initialized")
        return self._transport

    async def connect(self) -> None:
        if self._connected:
            return
        self._http_client = create_http_client(self._settings, transport=self._http_transport)
        self._transport = HTTPNetworkTransport(
            self._settings.graphql_url,
            self._http_client,
            serialization_format=JSONSerializationFormat(),
        )
        self._connected = True
        _log("transport_ready", url=self._settings.graphql_url)

    async def close(self) -> None:
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception as exc:
                logger.debug("transport close failed: {}", exc)
        self._transport = None
        self._http_client = None
        self._connected = False


def create_transport_dependencies(settings: Settings | None = None) -> TransportDependencies:
    return TransportDependencies(settings=settings or Settings())
