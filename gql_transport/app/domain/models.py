"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from gql_transport.app.domain.errors import PreconditionViolation
from gql_transport.app.domain.operation import DataT, GraphQLOperation
from gql_transport.app.ports.http_client import HttpResponse

OperationT = TypeVar("OperationT", bound=GraphQLOperation[Any])


@dataclass(frozen=True)
class GraphQLHTTPRequest:
    """Fully formed HTTP request for one send. Built once, never reused."""

    url: str
    method: str
    headers: Mapping[str, str]
    body: bytes


@dataclass(frozen=True)
class RawOutcome:
    """What the dispatch layer produced: either a transport error or an HTTP response.

    `body` is None when no body bytes were received.
    """

    response: HttpResponse | None = None
    body: bytes | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.response is not None:
            raise PreconditionViolation("outcome must not carry both a transport error and a response")
        if self.error is None and self.response is None:
            raise PreconditionViolation("outcome must carry either a transport error or a response")

    @staticmethod
    def from_response(response: HttpResponse) -> "RawOutcome":
        return RawOutcome(response=response, body=response.content or None)

    @staticmethod
    def from_error(error: BaseException) -> "RawOutcome":
        return RawOutcome(error=error)


@dataclass(frozen=True)
class ErrorLocation:
    line: int
    column: int


@dataclass(frozen=True)
class GraphQLError:
    """Entry of the response `errors` array. Carried inside a successful response."""

    message: str
    locations: tuple[ErrorLocation, ...] = ()
    path: tuple[str | int, ...] | None = None
    extensions: Mapping[str, Any] | None = None

    @staticmethod
    def from_dict(entry: Mapping[str, Any]) -> "GraphQLError":
        if not isinstance(entry, Mapping):
            raise TypeError("graphql error entry must be an object")
        locations = tuple(
            ErrorLocation(line=int(loc["line"]), column=int(loc["column"]))
            for loc in entry.get("locations") or []
        )
        path = entry.get("path")
        return GraphQLError(
            message=str(entry.get("message", "")),
            locations=locations,
            path=tuple(path) if path is not None else None,
            extensions=entry.get("extensions"),
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class GraphQLResponse(Generic[OperationT, DataT]):
    """Response envelope: the originating operation paired with the decoded root object."""

    operation: OperationT
    body: Mapping[str, Any]
    data: DataT | None = None
    errors: tuple[GraphQLError, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @staticmethod
    def decode(operation: GraphQLOperation[DataT], root_object: Mapping[str, Any]) -> "GraphQLResponse[Any, DataT]":
        """Default operation-specific decoder. Errors raised by `parse_data` propagate."""
        raw_data = root_object.get("data")
        data = operation.parse_data(raw_data) if raw_data is not None else None

        raw_errors = root_object.get("errors")
        if raw_errors is None:
            raw_errors = []
        if not isinstance(raw_errors, list):
            raise TypeError("response errors must be a list")

        return GraphQLResponse(
            operation=operation,
            body=root_object,
            data=data,
            errors=tuple(GraphQLError.from_dict(entry) for entry in raw_errors),
        )
