"""HTTP network transport: send GraphQL operations as JSON POST requests.

Flow per send():
  build_request (pure) -> dispatch task on the running loop -> RawOutcome ->
  DispatchHandle.deliver -> handle (classify) -> completion handler, exactly once.

The transport spawns one asyncio task per request and keeps a strong reference to
it until it finishes; callers hold only the returned handle. Its own state (URL,
serialization format, client) is fixed at construction and shared read-only by
concurrent requests.
"""
from __future__ import annotations

import asyncio
import uuid
from typing import Any, Optional

from loguru import logger

from gql_transport.app.core import SERVICE_NAME
from gql_transport.app.domain.dispatch_handle import DispatchHandle
from gql_transport.app.domain.errors import GraphQLResponseError
from gql_transport.app.domain.models import GraphQLHTTPRequest, GraphQLResponse, RawOutcome
from gql_transport.app.domain.operation import GraphQLOperation
from gql_transport.app.domain.request_builder import RequestBuilder
from gql_transport.app.domain.response_handler import ResponseDecoder, ResponseHandler
from gql_transport.app.ports.http_client import AbstractHttpClient, RequestTimeout
from gql_transport.app.ports.network_transport import CompletionHandler, NetworkTransport
from gql_transport.app.ports.serialization import SerializationFormat


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class HTTPNetworkTransport(NetworkTransport):
    """NetworkTransport over an AbstractHttpClient.

    Subclasses may override `build_request` to add headers, or `handle` to change
    how outcomes are classified. `send` must be called from a running event loop.
    """

    def __init__(
        self,
        url: str,
        client: AbstractHttpClient,
        *,
        serialization_format: SerializationFormat,
        decoder: ResponseDecoder = GraphQLResponse.decode,
        timeout: RequestTimeout | None = None,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout
        self._request_builder = RequestBuilder(url, serialization_format)
        self._response_handler = ResponseHandler(serialization_format, decoder=decoder)
        self._in_flight: dict[asyncio.Task[None], DispatchHandle] = {}

    @property
    def url(self) -> str:
        return self._url

    @property
    def in_flight_count(self) -> int:
        return len(self._in_flight)

    def build_request(self, operation: GraphQLOperation[Any]) -> GraphQLHTTPRequest:
        return self._request_builder.build(operation)

    def send(self, operation: GraphQLOperation[Any], completion_handler: CompletionHandler) -> DispatchHandle:
        request = self.build_request(operation)
        return self.send_request(request, operation, completion_handler)

    def send_request(
        self,
        request: GraphQLHTTPRequest,
        operation: GraphQLOperation[Any],
        completion_handler: CompletionHandler,
    ) -> DispatchHandle:
        loop = asyncio.get_running_loop()
        handle = DispatchHandle(request_id=uuid.uuid4().hex)
        task = loop.create_task(self._dispatch(request, operation, completion_handler, handle))
        self._in_flight[task] = handle
        task.add_done_callback(self._forget)
        handle.attach(task)
        _log(
            "request_dispatched",
            request_id=handle.request_id,
            url=request.url,
            operation=type(operation).operation_name or type(operation).__name__,
        )
        return handle

    def handle(
        self,
        outcome: RawOutcome,
        operation: GraphQLOperation[Any],
        completion_handler: CompletionHandler,
    ) -> None:
        response, error = self._response_handler.classify(outcome, operation)
        _log(
            "response_classified",
            status_code=outcome.response.status_code if outcome.response is not None else None,
            outcome=type(error).__name__ if error is not None else "success",
            kind=error.kind.value if isinstance(error, GraphQLResponseError) else None,
        )
        completion_handler(response, error)

    async def execute(self, operation: GraphQLOperation[Any]) -> GraphQLResponse[Any, Any]:
        """Send `operation` and wait for its response; errors are raised.

        Cancelling the awaiting task cancels the request.
        """
        future: asyncio.Future[GraphQLResponse[Any, Any]] = asyncio.get_running_loop().create_future()

        def complete(response: Optional[GraphQLResponse[Any, Any]], error: Optional[BaseException]) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(response)  # type: ignore[arg-type]

        handle = self.send(operation, complete)
        try:
            return await future
        except asyncio.CancelledError:
            handle.cancel()
            raise

    async def close(self) -> None:
        for handle in list(self._in_flight.values()):
            handle.cancel()
        await self._client.close()
        _log("transport_closed", url=self._url)

    async def _dispatch(
        self,
        request: GraphQLHTTPRequest,
        operation: GraphQLOperation[Any],
        completion_handler: CompletionHandler,
        handle: DispatchHandle,
    ) -> None:
        try:
            response = await self._client.post(
                request.url,
                content=request.body,
                headers=request.headers,
                timeout=self._timeout,
            )
        except Exception as exc:
            # Any failure before a response exists is a transport error for the caller.
            outcome = RawOutcome.from_error(exc)
        else:
            outcome = RawOutcome.from_response(response)

        handle.deliver(lambda: self.handle(outcome, operation, completion_handler))

    def _forget(self, task: asyncio.Task[None]) -> None:
        self._in_flight.pop(task, None)
