"""Response handler: classifies a raw dispatch outcome and completes the request.

Classification order, first match wins:
  1. transport error            -> (None, error) passed through unchanged
  2. non-2xx status             -> (None, GraphQLResponseError(errorResponse, raw body))
  3. 2xx without body           -> (None, GraphQLResponseError(invalidResponse))
  4. body is not a JSON object  -> (None, GraphQLResponseError(invalidResponse, raw body))
  5. JSON object                -> decoder(operation, root) -> (response, None);
                                   decoder errors are passed through unchanged
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from gql_transport.app.domain.errors import GraphQLResponseError, PreconditionViolation, ResponseErrorKind
from gql_transport.app.domain.models import GraphQLResponse, RawOutcome
from gql_transport.app.domain.operation import GraphQLOperation
from gql_transport.app.ports.http_client import HttpResponse
from gql_transport.app.ports.serialization import SerializationFormat

ResponseDecoder = Callable[[GraphQLOperation[Any], Mapping[str, Any]], GraphQLResponse[Any, Any]]
Classification = tuple[Optional[GraphQLResponse[Any, Any]], Optional[BaseException]]


def is_successful(response: HttpResponse) -> bool:
    return 200 <= response.status_code < 300


class ResponseHandler:
    def __init__(
        self,
        serialization_format: SerializationFormat,
        *,
        decoder: ResponseDecoder = GraphQLResponse.decode,
    ) -> None:
        self._serialization_format = serialization_format
        self._decoder = decoder

    def handle(
        self,
        outcome: RawOutcome,
        operation: GraphQLOperation[Any],
        completion_handler: Callable[[Optional[GraphQLResponse[Any, Any]], Optional[BaseException]], None],
    ) -> None:
        response, error = self.classify(outcome, operation)
        completion_handler(response, error)

    def classify(self, outcome: RawOutcome, operation: GraphQLOperation[Any]) -> Classification:
        if outcome.error is not None:
            return None, outcome.error

        http_response = outcome.response
        if not isinstance(http_response, HttpResponse):
            raise PreconditionViolation("dispatch outcome must carry an HTTP response")

        if not is_successful(http_response):
            return None, GraphQLResponseError(
                kind=ResponseErrorKind.ERROR_RESPONSE,
                response=http_response,
                body=outcome.body,
            )

        if outcome.body is None:
            return None, GraphQLResponseError(kind=ResponseErrorKind.INVALID_RESPONSE, response=http_response)

        return self._decode(outcome.body, http_response, operation)

    def _decode(self, body: bytes, http_response: HttpResponse, operation: GraphQLOperation[Any]) -> Classification:
        try:
            root_object = self._serialization_format.deserialize(body)
        except (ValueError, RecursionError):
            root_object = None
        if not isinstance(root_object, dict):
            # Unparseable bodies are kept on the error, same as for error responses.
            return None, GraphQLResponseError(
                kind=ResponseErrorKind.INVALID_RESPONSE,
                response=http_response,
                body=body,
            )

        try:
            return self._decoder(operation, root_object), None
        except Exception as exc:
            return None, exc
