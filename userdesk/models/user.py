"""User entity and edit draft held by the list editor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """
    A user as confirmed by the backend.

    Fields
    ------
    name : str
        Display name.
    email : str
        Contact email. Not validated client-side.
    id : int | None
        Server-assigned identifier; ``None`` until the backend created it.
        A user without an id cannot be updated or deleted.
    """

    name: str
    email: str
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        """``True`` once the backend assigned an identifier."""
        return self.id is not None


@dataclass(frozen=True, slots=True)
class Draft:
    """
    Pending form values; becomes a :class:`User` only after submission.

    :param name: Name typed by the operator.
    :type name: str
    :param email: Email typed by the operator.
    :type email: str
    """

    name: str = ""
    email: str = ""

    @classmethod
    def blank(cls) -> "Draft":
        """Return the empty draft shown in create mode."""
        return cls("", "")

    @classmethod
    def from_user(cls, user: User) -> "Draft":
        """Copy the editable fields of ``user``."""
        return cls(name=user.name, email=user.email)

    @property
    def is_complete(self) -> bool:
        """Both fields are non-empty, the only check made before submitting."""
        return bool(self.name) and bool(self.email)
