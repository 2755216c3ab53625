"""HTTP helper utilities for tests."""

from __future__ import annotations

import json
from typing import Any

import responses

from userdesk.models import User


def user_json(user: User) -> dict[str, Any]:
    """Return the backend's JSON shape for ``user``.

    Parameters
    ----------
    user:
        Value to serialize.

    Returns
    -------
    dict[str, Any]
        ``{"id", "name", "email"}`` mapping as the backend sends it.
    """

    return {"id": user.id, "name": user.name, "email": user.email}


def member_url(collection_url: str, user_id: int) -> str:
    """Build the URL of a single user under ``collection_url``."""

    return f"{collection_url}/{user_id}"


def request_body(call: responses.Call) -> dict[str, Any]:
    """Decode the JSON body sent in a recorded ``responses`` call."""

    body = call.request.body
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return json.loads(body) if body else {}
