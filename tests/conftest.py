from __future__ import annotations

from typing import Callable

import pytest

from gql_transport.app.application.http_network_transport import HTTPNetworkTransport
from gql_transport.app.infrastructure.serialization.json_format import JSONSerializationFormat
from tests.fakes import GRAPHQL_URL, FakeHttpClient, RecordingCompletion


@pytest.fixture()
def serialization_format() -> JSONSerializationFormat:
    return JSONSerializationFormat()


@pytest.fixture()
def completion() -> RecordingCompletion:
    return RecordingCompletion()


@pytest.fixture()
def make_transport(serialization_format) -> Callable[[FakeHttpClient], HTTPNetworkTransport]:
    """Build an HTTPNetworkTransport over a FakeHttpClient."""

    def _make(client: FakeHttpClient, **kwargs) -> HTTPNetworkTransport:
        return HTTPNetworkTransport(
            GRAPHQL_URL,
            client,
            serialization_format=serialization_format,
            **kwargs,
        )

    return _make
