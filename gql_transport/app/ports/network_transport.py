"""Consumer-facing port: send a GraphQL operation, get a cancellable handle back."""
from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from gql_transport.app.domain.models import GraphQLResponse
from gql_transport.app.domain.operation import GraphQLOperation

# Receives exactly one of (response, None) or (None, error).
CompletionHandler = Callable[[Optional[GraphQLResponse[Any, Any]], Optional[BaseException]], None]


@runtime_checkable
class Cancellable(Protocol):
    def cancel(self) -> None:
        """Suppress the pending completion. No-op once completed or already cancelled."""
        ...


class NetworkTransport(Protocol):
    """Port: executes GraphQL operations. Implementations live in application."""

    def send(self, operation: GraphQLOperation[Any], completion_handler: CompletionHandler) -> Cancellable:
        ...
