"""Unit tests for RequestBuilder: method, header and JSON body of the POST."""
from __future__ import annotations

import json
import math
from typing import Any, Mapping

import pytest

from gql_transport.app.domain.errors import PreconditionViolation
from gql_transport.app.domain.operation import GraphQLOperation
from gql_transport.app.domain.request_builder import RequestBuilder, request_body
from tests.fakes import GRAPHQL_URL, AnonymousPingQuery, HeroNameQuery


class _VariablesQuery(GraphQLOperation[None]):
    query_document = "query Q($v: JSON) { echo(v: $v) }"

    def __init__(self, variables: Mapping[str, Any]) -> None:
        self._variables = variables

    @property
    def variables(self) -> Mapping[str, Any]:
        return self._variables

    def parse_data(self, data: Mapping[str, Any]) -> None:
        return None


def test_build_sets_post_method_url_and_json_content_type(serialization_format):
    request = RequestBuilder(GRAPHQL_URL, serialization_format).build(HeroNameQuery("JEDI"))

    assert request.method == "POST"
    assert request.url == GRAPHQL_URL
    assert dict(request.headers) == {"Content-Type": "application/json"}


def test_build_body_is_query_and_variables(serialization_format):
    request = RequestBuilder(GRAPHQL_URL, serialization_format).build(AnonymousPingQuery())

    assert json.loads(request.body) == {"query": "{ ping }", "variables": {}}
    assert request.body == serialization_format.serialize({"query": "{ ping }", "variables": {}})


@pytest.mark.parametrize(
    "variables",
    [
        {},
        {"episode": "EMPIRE"},
        {"id": 7, "first": 10, "after": None},
        {"filter": {"tags": ["a", "b"], "active": True, "score": 1.5}},
        {"name": "Łódź ☃"},
    ],
)
def test_build_body_round_trips_variables(serialization_format, variables):
    request = RequestBuilder(GRAPHQL_URL, serialization_format).build(_VariablesQuery(variables))

    body = json.loads(request.body)
    assert body["query"] == _VariablesQuery.query_document
    assert body["variables"] == variables
    assert "operationName" not in body


def test_named_operation_adds_operation_name():
    body = request_body(HeroNameQuery("JEDI"))

    assert body == {
        "query": HeroNameQuery.query_document,
        "variables": {"episode": "JEDI"},
        "operationName": "HeroName",
    }


@pytest.mark.parametrize("bad_value", [object(), {1, 2}, math.nan, b"raw"])
def test_unserializable_variables_are_a_precondition_violation(serialization_format, bad_value):
    builder = RequestBuilder(GRAPHQL_URL, serialization_format)

    with pytest.raises(PreconditionViolation, match="not serializable"):
        builder.build(_VariablesQuery({"v": bad_value}))


def test_each_build_returns_a_fresh_request(serialization_format):
    builder = RequestBuilder(GRAPHQL_URL, serialization_format)
    op = HeroNameQuery("JEDI")

    first = builder.build(op)
    second = builder.build(op)

    assert first == second
    assert first is not second
