"""User resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from userdesk.models import Draft, User


class UserSchema(Schema):
    """Wire representation of a user returned by the backend."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(allow_none=True, load_default=None)
    name = fields.String(required=True)
    email = fields.String(required=True)

    @post_load
    def make_user(self, data: dict[str, Any], **_: Any) -> User:
        return User(**data)


class DraftSchema(Schema):
    """Request body for create and update: ``{name, email}`` only."""

    name = fields.String(required=True)
    email = fields.String(required=True)

    @post_load
    def make_draft(self, data: dict[str, Any], **_: Any) -> Draft:
        return Draft(**data)
