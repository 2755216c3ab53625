"""Unit tests for the gateway failure taxonomy."""

from __future__ import annotations

import requests

from userdesk.core.errors import (
    GatewayError,
    MalformedPayload,
    NotFound,
    ServerFailure,
    TransportFailure,
)
from userdesk.core.logger import request_scope

from tests.helpers.assertions import assert_json_keys


def _response(status: int, body: bytes = b"", reason: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.reason = reason
    response.url = "http://users.test/users/9"
    return response


def test_from_response_maps_404_to_not_found() -> None:
    error = GatewayError.from_response(_response(404, b'{"error": "missing"}', "Not Found"))

    assert isinstance(error, NotFound)
    assert isinstance(error, ServerFailure)
    assert error.status_code == 404
    assert error.code == "not_found"
    assert error.details == {"error": "missing"}
    assert error.instance == "http://users.test/users/9"


def test_from_response_keeps_text_body_for_5xx() -> None:
    error = GatewayError.from_response(_response(500, b"boom"))

    assert type(error) is ServerFailure
    assert error.code == "internal_server_error"
    assert error.message == "Internal Server Error"
    assert error.details == {"body": "boom"}


def test_unknown_status_gets_generic_code() -> None:
    error = ServerFailure("odd", status_code=599)

    assert error.code == "error"
    assert error.to_problem()["title"] == "Error"


def test_transport_failure_keeps_original() -> None:
    cause = requests.ConnectionError("refused")

    failure = TransportFailure.wrap(cause, instance="http://users.test/users")

    assert failure.original is cause
    assert failure.status_code == 503
    assert failure.code == "service_unavailable"
    assert "refused" in str(failure)


def test_to_problem_contains_rfc7807_fields() -> None:
    error = MalformedPayload("bad", details={"errors": {"name": ["missing"]}})

    with request_scope("req-7"):
        problem = error.to_problem()

    assert_json_keys(problem, {"type", "title", "status", "detail", "instance", "code", "request_id"})
    assert problem["status"] == 502
    assert problem["title"] == "Bad Gateway"
    assert problem["details"] == {"errors": {"name": ["missing"]}}
    assert problem["request_id"] == "req-7"


def test_str_includes_status_and_code() -> None:
    assert str(NotFound()) == "404 not_found: User not found"
