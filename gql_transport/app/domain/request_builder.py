"""Builds the HTTP request for a GraphQL operation. Pure transformation, no I/O."""
from __future__ import annotations

from typing import Any

from gql_transport.app.constants import CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON, HTTP_METHOD_POST
from gql_transport.app.domain.errors import PreconditionViolation
from gql_transport.app.domain.models import GraphQLHTTPRequest
from gql_transport.app.domain.operation import GraphQLOperation
from gql_transport.app.ports.serialization import SerializationFormat


def request_body(operation: GraphQLOperation[Any]) -> dict[str, Any]:
    body: dict[str, Any] = {
        "query": type(operation).query_document,
        "variables": dict(operation.variables),
    }
    if type(operation).operation_name:
        body["operationName"] = type(operation).operation_name
    return body


class RequestBuilder:
    def __init__(self, url: str, serialization_format: SerializationFormat) -> None:
        self._url = url
        self._serialization_format = serialization_format

    @property
    def url(self) -> str:
        return self._url

    def build(self, operation: GraphQLOperation[Any]) -> GraphQLHTTPRequest:
        try:
            payload = self._serialization_format.serialize(request_body(operation))
        except (TypeError, ValueError) as exc:
            # Variables are JSON-compatible by construction; anything else is a caller bug.
            raise PreconditionViolation(f"operation variables are not serializable: {exc}") from exc

        return GraphQLHTTPRequest(
            url=self._url,
            method=HTTP_METHOD_POST,
            headers={CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON},
            body=payload,
        )
