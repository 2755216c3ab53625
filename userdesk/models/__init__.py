"""Domain values exchanged between the gateway and the editor."""

from __future__ import annotations

from .user import Draft, User

__all__ = ["Draft", "User"]
