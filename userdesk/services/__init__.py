"""Screen-level orchestration on top of the gateway."""

from __future__ import annotations

from .list_editor import UserListEditor
from .presentation import get_avatar_icon, get_card_gradient

__all__ = ["UserListEditor", "get_avatar_icon", "get_card_gradient"]
