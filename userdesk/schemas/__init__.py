"""Marshmallow schemas mapping the backend's JSON to domain values."""

from __future__ import annotations

from .user import DraftSchema, UserSchema

__all__ = ["DraftSchema", "UserSchema"]
