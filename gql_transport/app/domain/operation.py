"""GraphQL operation contract.

An operation supplies static document text and a variable mapping, and knows how
to decode the `data` member of a response into its own typed result. The decoder
is resolved through the operation's type parameter, not by runtime inspection.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, TypeVar

DataT = TypeVar("DataT")


class GraphQLOperation(ABC, Generic[DataT]):
    """Base class for queries and mutations.

    Subclasses set `query_document` (and optionally `operation_name`) at class
    level and implement `parse_data`. Instances must not be mutated while a
    request for them is in flight.
    """

    query_document: ClassVar[str]
    operation_name: ClassVar[str | None] = None

    @property
    def variables(self) -> Mapping[str, Any]:
        return {}

    @abstractmethod
    def parse_data(self, data: Mapping[str, Any]) -> DataT:
        """Decode the response `data` object; raise on shape mismatch."""
        raise NotImplementedError
