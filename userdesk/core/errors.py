"""Failure taxonomy raised by the users gateway.

Every failure reaching the editor is a :class:`GatewayError`. Transport
problems and error statuses are told apart by subclass, but the editor treats
them identically: it logs and leaves its state untouched.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

import requests

from .logger import current_request_id


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        422: "unprocessable_entity",
        429: "too_many_requests",
        500: "internal_server_error",
        502: "bad_gateway",
        503: "service_unavailable",
        504: "gateway_timeout",
    }
    return mapping.get(status_code, "error")


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


class GatewayError(Exception):
    """
    Represent a failed exchange with the users backend.

    Parameters
    ----------
    message : str
        Human-readable description suitable for logs and CLI output.
    status_code : int, optional
        HTTP-style status. Defaults to ``500``.
    code : str, optional
        Machine-readable identifier, typically snake_case. Derived from
        ``status_code`` when omitted.
    details : dict[str, Any] | None, optional
        Optional structured context (e.g. the backend's error body).
    instance : str | None, optional
        URL of the request that failed.

    Attributes
    ----------
    original : BaseException | None
        Underlying transport exception, passed through untouched.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        instance: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code or _http_status_to_code(self.status_code)
        self.details = details or {}
        self.instance = instance
        self.original: BaseException | None = None
        self.request_id: str | None = None

    def __str__(self) -> str:
        return f"{self.status_code} {self.code}: {self.message}"

    def to_problem(self) -> dict[str, Any]:
        """
        Serialize error metadata into an RFC 7807 problem.

        :returns: Problem details dictionary.
        :rtype: dict
        """
        problem: dict[str, Any] = {
            "type": "about:blank",
            "title": _status_phrase(self.status_code),
            "status": self.status_code,
            "detail": self.message,
            "instance": self.instance,
            "code": self.code,
        }
        if self.details:
            problem["details"] = self.details
        problem["request_id"] = self.request_id or current_request_id()
        return problem

    @classmethod
    def from_response(cls, response: requests.Response) -> "ServerFailure":
        """
        Build the failure matching an error ``response``.

        :param response: Response whose status is 4xx/5xx.
        :returns: :class:`NotFound` for 404, :class:`ServerFailure` otherwise.
        """
        details: dict[str, Any] = {}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            details = body
        elif response.text:
            details = {"body": response.text}
        message = response.reason or _status_phrase(response.status_code)
        if response.status_code == HTTPStatus.NOT_FOUND:
            return NotFound(message, details=details, instance=response.url)
        return ServerFailure(
            message,
            status_code=response.status_code,
            details=details,
            instance=response.url,
        )


class TransportFailure(GatewayError):
    """Backend unreachable: connection refused, DNS failure, timeout."""

    def __init__(self, message: str = "Backend unreachable", instance: str | None = None) -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            code="service_unavailable",
            instance=instance,
        )

    @classmethod
    def wrap(cls, exc: requests.RequestException, instance: str | None = None) -> "TransportFailure":
        """Wrap a ``requests`` exception, keeping it as :attr:`original`."""
        failure = cls(str(exc) or exc.__class__.__name__, instance=instance)
        failure.original = exc
        return failure


class ServerFailure(GatewayError):
    """Backend answered with a 4xx/5xx status."""


class NotFound(ServerFailure):
    """404 when the targeted user does not exist."""

    def __init__(
        self,
        message: str = "User not found",
        details: dict[str, Any] | None = None,
        instance: str | None = None,
    ) -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.NOT_FOUND,
            code="not_found",
            details=details,
            instance=instance,
        )


class MalformedPayload(GatewayError):
    """Backend answered 2xx with a body that is not the user shape."""

    def __init__(
        self,
        message: str = "Malformed payload",
        details: dict[str, Any] | None = None,
        instance: str | None = None,
    ) -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.BAD_GATEWAY,
            code="bad_gateway",
            details=details,
            instance=instance,
        )


__all__ = [
    "GatewayError",
    "MalformedPayload",
    "NotFound",
    "ServerFailure",
    "TransportFailure",
]
