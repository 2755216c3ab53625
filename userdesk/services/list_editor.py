"""List editor orchestrating create, edit and delete over the users gateway."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import click

from userdesk.core.errors import GatewayError
from userdesk.models import Draft, User

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class UsersPort(Protocol):
    """Subset of :class:`~userdesk.gateway.UserGateway` the editor relies on."""

    def list(self) -> list[User]: ...

    def create(self, draft: Draft) -> User: ...

    def update(self, user_id: int, draft: Draft) -> User: ...

    def delete_by_id(self, user_id: int) -> None: ...

    def close(self) -> None: ...


def click_confirm(message: str) -> bool:
    """Ask on the terminal, defaulting to *no*."""
    return click.confirm(message, default=False)


class UserListEditor:
    """
    Hold the visible users and the single-item edit draft.

    State
    -----
    items : list[User]
        Users confirmed by the backend, in server order plus appended creations.
    draft : Draft
        Pending form values.
    editing_target : User | None
        Snapshot of the user being edited; ``None`` in create mode.

    Notes
    -----
    - Edit mode is derived from ``editing_target`` so the two can never disagree.
    - Mutations happen only after the gateway succeeded; a failure is logged
      and leaves every field exactly as it was.
    """

    def __init__(self, gateway: UsersPort, *, confirm: Confirm | None = None) -> None:
        self.gateway = gateway
        self.confirm: Confirm = confirm or click_confirm
        self.items: list[User] = []
        self.draft: Draft = Draft.blank()
        self.editing_target: User | None = None

    @property
    def is_edit_mode(self) -> bool:
        return self.editing_target is not None

    # ----------------------------- Loading ---------------------------------

    def initialize(self) -> bool:
        """Replace ``items`` with the backend's list. Returns ``False`` on failure."""
        try:
            users = self.gateway.list()
        except GatewayError as exc:
            logger.error("Error loading users: %s", exc)
            return False
        self.items = list(users or [])
        logger.info("Users loaded", extra={"count": len(self.items)})
        return True

    def find(self, user_id: int) -> User | None:
        """Return the first loaded user with ``user_id``."""
        return next((u for u in self.items if u.id == user_id), None)

    # ----------------------------- Draft / mode ----------------------------

    def set_draft(self, *, name: str | None = None, email: str | None = None) -> Draft:
        """Overwrite the given draft fields, keeping the others."""
        self.draft = Draft(
            name=self.draft.name if name is None else name,
            email=self.draft.email if email is None else email,
        )
        return self.draft

    def start_edit(self, user: User) -> None:
        """Enter edit mode for ``user`` and copy its fields into the draft."""
        self.editing_target = user
        self.draft = Draft.from_user(user)

    def cancel_edit(self) -> None:
        """Return to create mode with an empty draft. Safe to call repeatedly."""
        self.editing_target = None
        self.draft = Draft.blank()

    # ----------------------------- Commands --------------------------------

    def submit(self) -> bool:
        """
        Update the edited user, or create a new one in create mode.

        An edit target without an id is created instead; only the draft is
        cleared afterwards, so the editor stays in edit mode.

        :returns: ``True`` when the backend accepted the change.
        :rtype: bool
        """
        if not self.draft.is_complete:
            return False

        target = self.editing_target
        if target is not None and target.is_persisted:
            return self._update(target.id)
        return self._create()

    def _update(self, user_id: int) -> bool:
        try:
            updated = self.gateway.update(user_id, self.draft)
        except GatewayError as exc:
            logger.error("Error updating user: %s", exc, extra={"user_id": user_id})
            return False
        for index, current in enumerate(self.items):
            if current.id == user_id:
                self.items[index] = updated
                break
        logger.info("User updated", extra={"user_id": user_id})
        self.cancel_edit()
        return True

    def _create(self) -> bool:
        try:
            created = self.gateway.create(self.draft)
        except GatewayError as exc:
            logger.error("Error adding user: %s", exc)
            return False
        self.items.append(created)
        logger.info("User created", extra={"user_id": created.id})
        self.draft = Draft.blank()
        return True

    def remove(self, user: User) -> bool:
        """
        Delete ``user`` after confirmation.

        Users without an id are ignored without prompting. The edit session,
        if any, is left alone even when it targets another user.

        :returns: ``True`` when the backend deleted the user.
        :rtype: bool
        """
        if not user.is_persisted:
            return False
        if not self.confirm(f"Are you sure you want to delete {user.name}?"):
            return False

        try:
            self.gateway.delete_by_id(user.id)
        except GatewayError as exc:
            logger.error("Error deleting user: %s", exc, extra={"user_id": user.id})
            return False
        self.items[:] = [u for u in self.items if u.id != user.id]
        logger.info("User deleted", extra={"user_id": user.id})
        return True


__all__ = ["Confirm", "UserListEditor", "UsersPort", "click_confirm"]
