"""Error taxonomy of the GraphQL transport.

Transport failures come from the HTTP client port and are passed through as-is.
This module holds the errors the transport itself produces: response errors
(delivered to the completion handler) and precondition violations (raised,
never delivered).
"""
from __future__ import annotations

from enum import Enum

from gql_transport.app.constants import DEFAULT_TEXT_ENCODING
from gql_transport.app.ports.http_client import HttpResponse


class PreconditionViolation(AssertionError):
    """A caller or collaborator broke its contract. Not a runtime condition."""


class ResponseErrorKind(str, Enum):
    ERROR_RESPONSE = "errorResponse"
    INVALID_RESPONSE = "invalidResponse"

    @property
    def description(self) -> str:
        if self is ResponseErrorKind.ERROR_RESPONSE:
            return "Received error response"
        return "Received invalid response"


class GraphQLResponseError(Exception):
    """An HTTP response was received but could not be turned into a GraphQL response.

    Keeps the status metadata and raw body for diagnostics. The message has the
    fixed form ``<kind> (<status> <reason>): <body description>``.
    """

    def __init__(self, *, kind: ResponseErrorKind, response: HttpResponse, body: bytes | None = None) -> None:
        self._kind = kind
        self._response = response
        self._body = body
        super().__init__(self.error_description)

    @property
    def kind(self) -> ResponseErrorKind:
        return self._kind

    @property
    def response(self) -> HttpResponse:
        return self._response

    @property
    def body(self) -> bytes | None:
        return self._body

    @property
    def body_description(self) -> str:
        if self._body is None:
            return "Empty response body"
        encoding = self._response.text_encoding or DEFAULT_TEXT_ENCODING
        try:
            return self._body.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return "Unreadable response body"

    @property
    def error_description(self) -> str:
        return (
            f"{self._kind.description} "
            f"({self._response.status_code} {self._response.reason_phrase}): "
            f"{self.body_description}"
        )

    def __repr__(self) -> str:
        return f"GraphQLResponseError(kind={self._kind.value!r}, status_code={self._response.status_code})"
