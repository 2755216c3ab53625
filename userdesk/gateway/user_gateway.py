"""HTTP gateway for the ``/users`` resource.

Each method performs exactly one request/response exchange with no retry.
Failures surface as :class:`~userdesk.core.errors.GatewayError` subclasses;
transport exceptions from ``requests`` are kept on the failure and chained.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import requests
from marshmallow import ValidationError

from userdesk.core.errors import GatewayError, MalformedPayload, TransportFailure
from userdesk.core.logger import REQUEST_ID_HEADER, request_scope
from userdesk.models import Draft, User
from userdesk.schemas import DraftSchema, UserSchema

log = logging.getLogger(__name__)

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)
draft_schema = DraftSchema()


class UserGateway:
    """
    Translate the five user operations into HTTP calls.

    Parameters
    ----------
    base_url : str
        Scheme and authority of the backend, e.g. ``http://localhost:3000``.
    path : str, optional
        Resource path prefixing every route. Defaults to ``/users``.
    timeout : float, optional
        Seconds handed to ``requests``; this layer enforces no other deadline.
    session : requests.Session | None, optional
        Shared session; a private one is created when omitted.
    """

    def __init__(
        self,
        base_url: str,
        *,
        path: str = "/users",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = "/" + path.strip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Any, *, session: requests.Session | None = None) -> "UserGateway":
        """Build a gateway from a config class or object (see :mod:`userdesk.core.config`)."""
        return cls(
            config.API_BASE_URL,
            path=config.USERS_PATH,
            timeout=float(config.REQUEST_TIMEOUT),
            session=session,
        )

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Close the underlying session when this gateway created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "UserGateway":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def list(self) -> list[User]:
        """Return every user in backend order. A null or empty body yields ``[]``."""
        response = self._send("GET", self._url())
        payload = self._json(response, allow_empty=True)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise MalformedPayload(
                "Expected a list of users",
                details={"received": type(payload).__name__},
                instance=response.url,
            )
        return self._load(user_list_schema, payload, response)

    def fetch_by_id(self, user_id: int) -> User:
        """Return the user with ``user_id``; raises ``NotFound`` on 404."""
        response = self._send("GET", self._url(user_id))
        return self._load(user_schema, self._json(response), response)

    def create(self, draft: Draft) -> User:
        """Create a user from ``draft`` and return it with its assigned id."""
        response = self._send("POST", self._url(), draft_schema.dump(draft))
        return self._load(user_schema, self._json(response), response)

    def update(self, user_id: int, draft: Draft) -> User:
        """Replace the name and email of ``user_id`` and return the stored user."""
        response = self._send("PUT", self._url(user_id), draft_schema.dump(draft))
        return self._load(user_schema, self._json(response), response)

    def delete_by_id(self, user_id: int) -> None:
        """Delete ``user_id``. Any response body is ignored."""
        self._send("DELETE", self._url(user_id))

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _url(self, user_id: int | None = None) -> str:
        url = f"{self.base_url}{self.path}"
        return url if user_id is None else f"{url}/{user_id}"

    def _send(self, method: str, url: str, payload: dict[str, Any] | None = None) -> requests.Response:
        with request_scope() as request_id:
            extra: dict[str, Any] = {"method": method, "path": url[len(self.base_url) :]}
            started = time.perf_counter()
            try:
                response = self.session.request(
                    method,
                    url,
                    json=payload,
                    headers={"Accept": "application/json", REQUEST_ID_HEADER: request_id},
                    timeout=self.timeout,
                )
            except requests.RequestException as exc:
                log.warning("Transport failure: %s", exc, extra=extra)
                failure = TransportFailure.wrap(exc, instance=url)
                failure.request_id = request_id
                raise failure from exc

            extra["status"] = response.status_code
            extra["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 2)
            if response.status_code >= 400:
                log.warning("%s %s failed", method, url, extra=extra)
                error = GatewayError.from_response(response)
                error.request_id = request_id
                raise error
            log.debug("%s %s", method, url, extra=extra)
            return response

    @staticmethod
    def _json(response: requests.Response, *, allow_empty: bool = False) -> Any:
        if not response.content:
            if allow_empty:
                return None
            raise MalformedPayload("Empty response body", instance=response.url)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedPayload(
                "Response body is not JSON",
                details={"body": response.text[:200]},
                instance=response.url,
            ) from exc

    @staticmethod
    def _load(schema: UserSchema, payload: Any, response: requests.Response) -> Any:
        if payload is None and not schema.many:
            raise MalformedPayload("Null user payload", instance=response.url)
        try:
            return schema.load(payload)
        except ValidationError as exc:
            raise MalformedPayload(
                "Response body does not match the user shape",
                details={"errors": exc.messages},
                instance=response.url,
            ) from exc


__all__ = ["UserGateway"]
